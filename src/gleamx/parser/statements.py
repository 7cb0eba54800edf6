"""Body parsing and keyword dispatch for the gleamx parser."""

from __future__ import annotations

from gleamx._types import TokenType
from gleamx.environment.exceptions import ErrorCode
from gleamx.nodes import BuilderExpression, Expression, Node, Text
from gleamx.parser.blocks.core import BlockStackMixin
from gleamx.parser.core import describe

# {% keyword %} -> parser method
_BLOCK_PARSERS: dict[str, str] = {
    "if": "_parse_if",
    "for": "_parse_for",
}

# {> keyword -> parser method
_STATEMENT_PARSERS: dict[str, str] = {
    "with": "_parse_with",
    "import": "_parse_import",
    "fn": "_parse_function",
    "pub": "_parse_function",
}

_CONTINUATION_KEYWORDS = frozenset({"else"})

_END_KEYWORDS = frozenset({"endif", "endfor", "endfn"})


class StatementParsingMixin(BlockStackMixin):
    """Parse sibling sequences and dispatch tags to block parsers."""

    __slots__ = ()

    def _parse_body(self) -> list[Node]:
        """Parse siblings until EOF, an end tag, or a continuation tag.

        The terminating token is left for the caller: the enclosing block
        decides whether it is the tag it expects.
        """
        nodes: list[Node] = []
        while True:
            token = self._current
            if token.type is TokenType.EOF:
                return nodes
            if token.type is TokenType.TEXT:
                nodes.append(Text(self._advance().value))
            elif token.type is TokenType.EXPRESSION:
                nodes.append(Expression(self._advance().value))
            elif token.type is TokenType.BUILDER:
                nodes.append(BuilderExpression(self._advance().value))
            elif token.keyword in _END_KEYWORDS or token.keyword in _CONTINUATION_KEYWORDS:
                return nodes
            else:
                nodes.append(self._parse_tag())

    def _parse_tag(self) -> Node:
        token = self._current
        table = _BLOCK_PARSERS if token.type is TokenType.BLOCK else _STATEMENT_PARSERS
        method_name = table.get(token.keyword)
        if method_name is None:
            raise self._error(
                f"Unknown tag {describe(token)}", token, ErrorCode.INVALID_STATEMENT
            )
        return getattr(self, method_name)()

    def _parse_document(self) -> list[Node]:
        nodes = self._parse_body()
        token = self._current
        if token.type is not TokenType.EOF:
            raise self._error(f"Unexpected {describe(token)}", token)
        return nodes
