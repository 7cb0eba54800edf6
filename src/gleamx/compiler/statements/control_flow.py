"""Control flow rendering for the gleamx renderer.

Provides mixin for rendering conditionals and loops.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gleamx.compiler.scope import ScopeKind, indent
from gleamx.utils.constants import BUILDER_VAR, COLLECTION_ALIAS, INDENT

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gleamx.compiler.scope import ScopeAccumulator, ScopeResult
    from gleamx.nodes import Conditional, Loop, Node


class ControlFlowMixin:
    """Mixin for rendering control flow nodes.

    Branches and loop bodies are rendered as independent scopes. Only their
    statements, generated functions and loop usage cross back into the
    enclosing scope.

    """

    __slots__ = ()

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:

        # From Renderer core
        def _render_scope(self, nodes: Sequence[Node], kind: ScopeKind) -> ScopeResult: ...

    def _render_conditional(self, node: Conditional, scope: ScopeAccumulator) -> None:
        """Render {% if %} as a two-armed case on a Bool.

        Generates:
            let builder = case cond {
                True -> {
                    ... then statements ...
                    builder
                }
                False -> {
                    ... else statements ...
                    builder
                }
            }

        Both arms are always present; an empty arm hands the builder back
        unchanged.
        """
        then_scope = self._render_scope(node.then_branch, ScopeKind.BRANCH)
        else_scope = self._render_scope(node.else_branch, ScopeKind.BRANCH)

        scope.statements.append(f"let {BUILDER_VAR} = case {node.condition} {{")
        for arm, arm_scope in (("True", then_scope), ("False", else_scope)):
            scope.statements.append(f"{INDENT}{arm} -> {{")
            scope.statements.extend(indent(arm_scope.statements, 2))
            scope.statements.append(f"{INDENT * 2}{BUILDER_VAR}")
            scope.statements.append(f"{INDENT}}}")
        scope.statements.append("}")

        scope.functions.extend(then_scope.functions)
        scope.functions.extend(else_scope.functions)
        scope.uses_loop = scope.uses_loop or then_scope.uses_loop or else_scope.uses_loop
        scope.has_content = True

    def _render_loop(self, node: Loop, scope: ScopeAccumulator) -> None:
        """Render {% for %} as a fold threading the builder through.

        Generates:
            let builder = list.fold(collection, builder, fn(builder, item: Type) {
                ... body statements ...
                builder
            })
        """
        body_scope = self._render_scope(node.body, ScopeKind.LOOP)
        item = f"{node.item_name}: {node.item_type}" if node.item_type else node.item_name

        scope.statements.append(
            f"let {BUILDER_VAR} = {COLLECTION_ALIAS}.fold({node.collection}, {BUILDER_VAR}, "
            f"fn({BUILDER_VAR}, {item}) {{"
        )
        scope.statements.extend(indent(body_scope.statements))
        scope.statements.append(f"{INDENT}{BUILDER_VAR}")
        scope.statements.append("})")

        scope.functions.extend(body_scope.functions)
        scope.uses_loop = True
        scope.has_content = True
