"""Per-scope render state.

A scope is one sibling sequence: the document top level, a conditional
branch, a loop body or a function body. Each ``_render_scope`` call owns a
fresh ``ScopeAccumulator`` and hands back a frozen ``ScopeResult``; nothing
is shared between sibling or child calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from gleamx.utils.constants import INDENT


class ScopeKind(Enum):
    DOCUMENT = "the template top level"
    FUNCTION = "a function body"
    BRANCH = "an if/else branch"
    LOOP = "a for loop body"

    @property
    def allows_declarations(self) -> bool:
        """Whether imports and parameters may be declared in this scope."""
        return self in (ScopeKind.DOCUMENT, ScopeKind.FUNCTION)


@dataclass(frozen=True, slots=True)
class ScopeResult:
    """Everything rendering one sibling sequence produced.

    Attributes:
        statements: Gleam statements at relative indentation 0, in node order.
            A nested block contributes its head, its indented children and
            its closing lines as separate entries. Text literals may span
            physical lines inside one entry.
        imports: Import paths in order of appearance, duplicates kept.
        functions: Complete function definitions.
        params: (name, type) pairs in declaration order.
        uses_loop: A loop was rendered here or in a nested scope.
        has_content: Something here needs a render function.
    """

    statements: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    params: tuple[tuple[str, str], ...] = ()
    uses_loop: bool = False
    has_content: bool = False


@dataclass(slots=True)
class ScopeAccumulator:
    """Mutable state of a single in-progress scope."""

    kind: ScopeKind
    statements: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    functions: list[str] = field(default_factory=list)
    # A list, not a dict: template authors control the generated parameter order
    params: list[tuple[str, str]] = field(default_factory=list)
    uses_loop: bool = False
    has_content: bool = False

    def declares(self, name: str) -> bool:
        return any(existing == name for existing, _ in self.params)

    def freeze(self) -> ScopeResult:
        return ScopeResult(
            statements=tuple(self.statements),
            imports=tuple(self.imports),
            functions=tuple(self.functions),
            params=tuple(self.params),
            uses_loop=self.uses_loop,
            has_content=self.has_content,
        )


def indent(statements: tuple[str, ...] | list[str], depth: int = 1) -> list[str]:
    """Indent each statement entry by ``depth`` levels.

    Only the start of an entry is indented, so newlines inside text
    literals are left untouched.
    """
    prefix = INDENT * depth
    return [prefix + statement for statement in statements]
