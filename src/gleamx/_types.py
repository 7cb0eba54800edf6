"""Core types shared by the gleamx lexer, parser and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class SourceRange:
    """Half-open character range ``[start, end)`` into template source.

    Ranges are attached to tokens and to the nodes whose diagnostics need
    them (parameter declarations, function definitions).
    """

    start: int
    end: int

    def location(self, source: str) -> tuple[int, int]:
        """Return ``(lineno, col_offset)`` of ``start`` in ``source``.

        Line numbers are 1-based, columns 0-based.
        """
        start = min(self.start, len(source))
        lineno = source.count("\n", 0, start) + 1
        line_start = source.rfind("\n", 0, start) + 1
        return lineno, start - line_start


class TokenType(Enum):
    """Token kinds produced by the lexer."""

    TEXT = "text"
    EXPRESSION = "expression"  # {{ code }}
    BUILDER = "builder"  # {[ code ]}
    BLOCK = "block"  # {% keyword args %}
    STATEMENT = "statement"  # {> keyword args<newline>
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed token with its source position."""

    type: TokenType
    value: str
    lineno: int
    col_offset: int
    range: SourceRange

    @property
    def keyword(self) -> str:
        """First word of a BLOCK or STATEMENT token (``if``, ``fn``, ...)."""
        return self.value.split(None, 1)[0] if self.value else ""

    @property
    def argument(self) -> str:
        """Everything after the keyword, stripped."""
        parts = self.value.split(None, 1)
        return parts[1].strip() if len(parts) > 1 else ""
