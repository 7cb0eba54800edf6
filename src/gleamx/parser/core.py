"""Token navigation for the gleamx parser."""

from __future__ import annotations

from collections.abc import Sequence

from gleamx._types import Token, TokenType
from gleamx.environment.exceptions import ErrorCode, TemplateSyntaxError


class TokenNavigationMixin:
    """Cursor over the token stream plus error construction.

    Required Host Attributes:
        - _tokens: Sequence[Token], always terminated by an EOF token
        - _pos: int
        - _source: str | None
        - _filename: str | None
    """

    __slots__ = ()

    _tokens: Sequence[Token]
    _pos: int
    _source: str | None
    _filename: str | None

    @property
    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token. EOF is never consumed."""
        token = self._tokens[self._pos]
        if token.type is not TokenType.EOF:
            self._pos += 1
        return token

    def _at_keyword(self, keyword: str) -> bool:
        """Whether the current token is a tag or statement opening with ``keyword``."""
        token = self._current
        return token.type in (TokenType.BLOCK, TokenType.STATEMENT) and token.keyword == keyword

    def _error(
        self,
        message: str,
        token: Token | None = None,
        code: ErrorCode = ErrorCode.UNEXPECTED_TOKEN,
    ) -> TemplateSyntaxError:
        token = token or self._current
        return TemplateSyntaxError(
            message,
            lineno=token.lineno,
            col_offset=token.col_offset,
            filename=self._filename,
            source=self._source,
            code=code,
        )


def describe(token: Token) -> str:
    """Human-readable token description for error messages."""
    if token.type is TokenType.EOF:
        return "end of template"
    if token.type is TokenType.BLOCK:
        return f"'{{% {token.value} %}}'"
    if token.type is TokenType.STATEMENT:
        return f"'{{> {token.value}'"
    return token.type.value
