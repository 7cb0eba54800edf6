"""Module structure rendering for the gleamx renderer.

Provides mixin for imports and parameter declarations. Neither emits a
statement; both feed the module header and the render function signature.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gleamx.environment.exceptions import DuplicateParamNameError, MisplacedNodeError

if TYPE_CHECKING:
    from gleamx.compiler.scope import ScopeAccumulator
    from gleamx.nodes import Import, ParamDeclaration


class TemplateStructureMixin:
    """Mixin for rendering imports and ``with`` declarations."""

    __slots__ = ()

    def _render_import(self, node: Import, scope: ScopeAccumulator) -> None:
        if not scope.kind.allows_declarations:
            raise MisplacedNodeError(node, scope.kind.value)
        scope.imports.append(node.path)

    def _render_param(self, node: ParamDeclaration, scope: ScopeAccumulator) -> None:
        """Record a parameter, rejecting a name already declared in this scope.

        The type is not part of the comparison: ``name: String`` and
        ``name: Int`` still collide.
        """
        if not scope.kind.allows_declarations:
            raise MisplacedNodeError(node, scope.kind.value)
        if scope.declares(node.name):
            raise DuplicateParamNameError(node.name, node.range)
        scope.params.append((node.name, node.type_name))
        scope.has_content = True
