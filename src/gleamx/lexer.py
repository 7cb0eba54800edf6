"""Lexer for gleamx templates.

Splits template source into a flat token stream:

    Hello {{ name }}       TEXT, EXPRESSION
    {[ header() ]}         BUILDER
    {% if is_admin %}      BLOCK          (closed by %})
    {> with name as String STATEMENT      (runs to end of line, newline consumed)

Everything outside a tag is TEXT, kept byte for byte.
"""

from __future__ import annotations

import bisect
import logging
import re

from gleamx._types import SourceRange, Token, TokenType
from gleamx.environment.exceptions import ErrorCode, TemplateSyntaxError

logger = logging.getLogger(__name__)

_TAG_START = re.compile(r"\{[{\[%>]")

# opener -> (token type, closer, display name)
_DELIMITED: dict[str, tuple[TokenType, str, str]] = {
    "{{": (TokenType.EXPRESSION, "}}", "expression"),
    "{[": (TokenType.BUILDER, "]}", "builder expression"),
    "{%": (TokenType.BLOCK, "%}", "block tag"),
}


class Lexer:
    """Tokenize one template source.

    Thread-safe: all state lives on the instance, one instance per source.
    """

    __slots__ = ("_filename", "_line_starts", "_source", "_tokens")

    def __init__(self, source: str, filename: str | None = None):
        self._source = source
        self._filename = filename
        self._tokens: list[Token] = []
        self._line_starts = [0] + [m.end() for m in re.finditer("\n", source)]

    def tokenize(self) -> list[Token]:
        source = self._source
        pos = 0
        while pos < len(source):
            match = _TAG_START.search(source, pos)
            if match is None:
                self._emit(TokenType.TEXT, source[pos:], pos, len(source))
                break
            if match.start() > pos:
                self._emit(TokenType.TEXT, source[pos : match.start()], pos, match.start())

            opener = match.group()
            if opener == "{>":
                pos = self._lex_statement(match.start(), match.end())
            else:
                pos = self._lex_delimited(opener, match.start(), match.end())

        self._emit(TokenType.EOF, "", len(source), len(source))
        logger.debug("Lexed %d tokens from %s", len(self._tokens), self._filename or "<template>")
        return self._tokens

    def _lex_statement(self, start: int, inner_start: int) -> int:
        newline = self._source.find("\n", inner_start)
        if newline == -1:
            inner_end = end = len(self._source)
        else:
            inner_end, end = newline, newline + 1

        value = self._source[inner_start:inner_end].strip()
        if not value:
            raise self._error("Empty statement after '{>'", start, ErrorCode.EMPTY_TAG)
        self._emit(TokenType.STATEMENT, value, start, end)
        return end

    def _lex_delimited(self, opener: str, start: int, inner_start: int) -> int:
        token_type, closer, what = _DELIMITED[opener]
        inner_end = self._source.find(closer, inner_start)
        if inner_end == -1:
            raise self._error(
                f"Unclosed {what}: expected '{closer}'", start, ErrorCode.UNCLOSED_TAG
            )

        value = self._source[inner_start:inner_end].strip()
        if not value:
            raise self._error(f"Empty {what}", start, ErrorCode.EMPTY_TAG)
        end = inner_end + len(closer)
        self._emit(token_type, value, start, end)
        return end

    def _position(self, offset: int) -> tuple[int, int]:
        index = bisect.bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index]

    def _emit(self, token_type: TokenType, value: str, start: int, end: int) -> None:
        lineno, col_offset = self._position(start)
        self._tokens.append(
            Token(token_type, value, lineno, col_offset, SourceRange(start, end))
        )

    def _error(self, message: str, offset: int, code: ErrorCode) -> TemplateSyntaxError:
        lineno, col_offset = self._position(offset)
        return TemplateSyntaxError(
            message,
            lineno=lineno,
            col_offset=col_offset,
            filename=self._filename,
            source=self._source,
            code=code,
        )


def tokenize(source: str, filename: str | None = None) -> list[Token]:
    """Tokenize template source. Raises TemplateSyntaxError on malformed tags."""
    return Lexer(source, filename).tokenize()
