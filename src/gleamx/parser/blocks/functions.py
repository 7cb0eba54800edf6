"""Function block parsing for the gleamx parser.

Provides mixin for parsing `{> fn` / `{> pub fn` ... `{> endfn` blocks.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from gleamx._types import SourceRange
from gleamx.environment.exceptions import ErrorCode
from gleamx.nodes import FunctionDefinition, Visibility
from gleamx.parser.blocks.core import BlockStackMixin

if TYPE_CHECKING:
    from gleamx.nodes import Node

# name(args), args kept verbatim for the Gleam compiler to check
_FUNCTION_HEAD = re.compile(r"[a-z_][A-Za-z0-9_]*\s*\(.*\)", re.DOTALL)


class FunctionBlockParsingMixin(BlockStackMixin):
    """Mixin for parsing function blocks.

    Required Host Attributes:
        - All from BlockStackMixin
        - _parse_body: method
    """

    __slots__ = ()

    if TYPE_CHECKING:

        def _parse_body(self) -> list[Node]: ...

    def _parse_function(self) -> FunctionDefinition:
        """Parse {> [pub ]fn name(args) ... {> endfn.

        Functions live at the top level only. The head is passed through
        untouched, so argument types are whatever Gleam accepts:

            {> pub fn item(name: String)
            <li>{{ name }}</li>
            {> endfn
        """
        start = self._current
        self._require_top_level(start, allow_function=False)

        visibility = Visibility.PRIVATE
        signature = start.value
        if start.keyword == "pub":
            visibility = Visibility.PUBLIC
            signature = start.argument

        keyword, _, head = signature.partition(" ")
        head = head.strip()
        if keyword != "fn" or _FUNCTION_HEAD.fullmatch(head) is None:
            raise self._error(
                f"Invalid function declaration '{start.value}': expected '{{> fn name(args)'",
                start,
                ErrorCode.INVALID_STATEMENT,
            )

        self._advance()
        self._push_block("fn", start)
        body = self._parse_body()
        end = self._consume_end_tag("fn")

        return FunctionDefinition(
            visibility=visibility,
            head=head,
            body=tuple(body),
            range=SourceRange(start.range.start, end.range.end),
        )
