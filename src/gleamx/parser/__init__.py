"""Parser for gleamx templates.

Builds the node tree from the lexer's token stream and enforces the
placement rules the renderer relies on: ``with``/``import`` only at the top
level or directly inside a function, ``fn`` only at the top level.

Example:
    >>> from gleamx.lexer import tokenize
    >>> from gleamx.parser import parse
    >>> parse(tokenize("Hello {{ name }}"))
    [Text(content='Hello '), Expression(code='name')]

"""

from __future__ import annotations

from collections.abc import Sequence

from gleamx._types import Token
from gleamx.nodes import Node
from gleamx.parser.blocks import (
    ControlFlowBlockParsingMixin,
    FunctionBlockParsingMixin,
    TemplateStructureParsingMixin,
)
from gleamx.parser.statements import StatementParsingMixin


class Parser(
    StatementParsingMixin,
    ControlFlowBlockParsingMixin,
    FunctionBlockParsingMixin,
    TemplateStructureParsingMixin,
):
    """Recursive descent parser over a gleamx token stream.

    ``source`` and ``filename`` are only used to build error snippets.
    """

    __slots__ = ("_block_stack", "_filename", "_pos", "_source", "_tokens")

    def __init__(
        self,
        tokens: Sequence[Token],
        source: str | None = None,
        filename: str | None = None,
    ):
        self._tokens = tokens
        self._pos = 0
        self._source = source
        self._filename = filename
        self._block_stack = []

    def parse(self) -> list[Node]:
        return self._parse_document()


def parse(
    tokens: Sequence[Token],
    source: str | None = None,
    filename: str | None = None,
) -> list[Node]:
    """Parse a token stream into a node list. Raises TemplateSyntaxError."""
    return Parser(tokens, source, filename).parse()
