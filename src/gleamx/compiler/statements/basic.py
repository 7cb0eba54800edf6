"""Basic output rendering for the gleamx renderer.

Provides mixin for rendering text, expressions and builder expressions.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gleamx.utils.constants import BUILDER_ALIAS, BUILDER_VAR

if TYPE_CHECKING:
    from gleamx.compiler.scope import ScopeAccumulator
    from gleamx.nodes import BuilderExpression, Expression, Text


def escape_text(content: str) -> str:
    """Escape literal text for a Gleam string literal.

    Only double quotes are escaped. Backslashes, newlines and every other
    character are kept as they are; Gleam strings may span lines.
    """
    return content.replace('"', '\\"')


class BasicStatementMixin:
    """Mixin for rendering output nodes.

    Each node appends one ``let builder = ...`` statement.

    """

    __slots__ = ()

    def _render_text(self, node: Text, scope: ScopeAccumulator) -> None:
        """Render literal text.

        Only non-whitespace text counts as content, so a template holding
        nothing but functions and blank lines gets no render functions.
        """
        scope.statements.append(
            f'let {BUILDER_VAR} = {BUILDER_ALIAS}.append({BUILDER_VAR}, "{escape_text(node.content)}")'
        )
        scope.has_content = scope.has_content or bool(node.content.strip())

    def _render_expression(self, node: Expression, scope: ScopeAccumulator) -> None:
        """Render {{ code }}: the expression must evaluate to a String."""
        scope.statements.append(
            f"let {BUILDER_VAR} = {BUILDER_ALIAS}.append({BUILDER_VAR}, {node.code})"
        )
        scope.has_content = True

    def _render_builder_expression(self, node: BuilderExpression, scope: ScopeAccumulator) -> None:
        """Render {[ code ]}: the expression is a StringBuilder and is merged in."""
        scope.statements.append(
            f"let {BUILDER_VAR} = {BUILDER_ALIAS}.append_builder({BUILDER_VAR}, {node.code})"
        )
        scope.has_content = True
