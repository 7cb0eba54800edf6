"""Function definition rendering for the gleamx renderer.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gleamx.compiler.scope import ScopeKind, indent
from gleamx.nodes import Visibility
from gleamx.utils.constants import BUILDER_ALIAS, BUILDER_TYPE, BUILDER_VAR, INDENT

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gleamx.compiler.scope import ScopeAccumulator, ScopeResult
    from gleamx.nodes import FunctionDefinition, Node


def builder_function(head: str, statements: Sequence[str], *, public: bool) -> str:
    """Assemble a function that builds and returns a StringBuilder.

    Generates:
        [pub ]fn head -> StringBuilder {
            let builder = string_builder.from_string("")
            ... statements ...
            builder
        }
    """
    lines = [
        f"{'pub ' if public else ''}fn {head} -> {BUILDER_TYPE} {{",
        f'{INDENT}let {BUILDER_VAR} = {BUILDER_ALIAS}.from_string("")',
        *indent(tuple(statements)),
        f"{INDENT}{BUILDER_VAR}",
        "}",
    ]
    return "\n".join(lines)


class FunctionRenderingMixin:
    """Mixin for rendering {> fn blocks."""

    __slots__ = ()

    if TYPE_CHECKING:

        # From Renderer core
        def _render_scope(self, nodes: Sequence[Node], kind: ScopeKind) -> ScopeResult: ...

    def _render_function(self, node: FunctionDefinition, scope: ScopeAccumulator) -> None:
        """Render a function definition into the scope's function list.

        Gleam has no nested functions, so every definition becomes a
        module-level function wherever it sits in the tree. Functions defined
        inside the body follow the enclosing one. The body's parameters,
        imports and content flag stay inside the function; only loop usage
        propagates, since ``gleam/list`` is a module-level import.
        """
        body_scope = self._render_scope(node.body, ScopeKind.FUNCTION)
        scope.functions.append(
            builder_function(
                node.head,
                body_scope.statements,
                public=node.visibility is Visibility.PUBLIC,
            )
        )
        scope.functions.extend(body_scope.functions)
        scope.uses_loop = scope.uses_loop or body_scope.uses_loop
