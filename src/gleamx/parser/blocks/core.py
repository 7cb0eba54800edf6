"""Block stack management for the gleamx parser.

Tracks which constructs are open so that end tags can be matched against
their opener and declarations can be rejected where the renderer cannot
place them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gleamx._types import Token, TokenType
from gleamx.environment.exceptions import ErrorCode
from gleamx.parser.core import TokenNavigationMixin, describe

if TYPE_CHECKING:
    from gleamx.environment.exceptions import TemplateSyntaxError

# block keyword -> (end keyword, token type the end must use)
_END_TAGS: dict[str, tuple[str, TokenType]] = {
    "if": ("endif", TokenType.BLOCK),
    "for": ("endfor", TokenType.BLOCK),
    "fn": ("endfn", TokenType.STATEMENT),
}


def _spell(keyword: str, token_type: TokenType) -> str:
    if token_type is TokenType.STATEMENT:
        return f"{{> {keyword}"
    return f"{{% {keyword} %}}"


class BlockStackMixin(TokenNavigationMixin):
    """Open-block stack shared by the block parsing mixins.

    Required Host Attributes:
        - _block_stack: list[tuple[str, Token]]
    """

    __slots__ = ()

    _block_stack: list[tuple[str, Token]]

    def _push_block(self, keyword: str, token: Token) -> None:
        self._block_stack.append((keyword, token))

    def _require_top_level(self, token: Token, *, allow_function: bool) -> None:
        """Reject a declaration that sits inside a scope that cannot hold it."""
        for keyword, _ in self._block_stack:
            if keyword == "fn" and allow_function:
                continue
            raise self._error(
                f"{describe(token)} is not allowed inside '{keyword}'",
                token,
                ErrorCode.MISPLACED_STATEMENT,
            )

    def _consume_end_tag(self, keyword: str) -> Token:
        """Consume the end tag closing the innermost ``keyword`` block."""
        end_keyword, end_type = _END_TAGS[keyword]
        _, opener = self._block_stack[-1]
        token = self._current

        if token.type is TokenType.EOF:
            raise self._unclosed(keyword, opener)
        if token.keyword != end_keyword or token.type is not end_type:
            raise self._error(
                f"Expected '{_spell(end_keyword, end_type)}' to close "
                f"'{keyword}' from line {opener.lineno}, found {describe(token)}",
                token,
            )
        if token.argument:
            raise self._error(f"'{end_keyword}' takes no arguments", token)

        self._block_stack.pop()
        return self._advance()

    def _unclosed(self, keyword: str, opener: Token) -> TemplateSyntaxError:
        end_keyword, end_type = _END_TAGS[keyword]
        return self._error(
            f"Unclosed '{keyword}' block: missing '{_spell(end_keyword, end_type)}'",
            opener,
            ErrorCode.UNCLOSED_BLOCK,
        )
