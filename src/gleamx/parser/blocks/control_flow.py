"""Control flow block parsing for the gleamx parser.

Provides mixin for parsing {% if %} and {% for %} blocks.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from gleamx.environment.exceptions import ErrorCode
from gleamx.nodes import Conditional, Loop
from gleamx.parser.blocks.core import BlockStackMixin

if TYPE_CHECKING:
    from gleamx.nodes import Node

# item [as Type] in collection
_FOR_HEADER = re.compile(
    r"(?P<item>[a-z_][A-Za-z0-9_]*)(?:\s+as\s+(?P<type>.+?))?\s+in\s+(?P<collection>.+)",
    re.DOTALL,
)


class ControlFlowBlockParsingMixin(BlockStackMixin):
    """Mixin for parsing control flow blocks.

    Required Host Attributes:
        - All from BlockStackMixin
        - _parse_body: method
    """

    __slots__ = ()

    if TYPE_CHECKING:

        def _parse_body(self) -> list[Node]: ...

    def _parse_if(self) -> Conditional:
        """Parse {% if cond %}...[{% else %}...]{% endif %}."""
        start = self._advance()  # consume 'if'
        if not start.argument:
            raise self._error(
                "Expected a condition after 'if'", start, ErrorCode.INVALID_STATEMENT
            )
        self._push_block("if", start)

        then_branch = self._parse_body()
        else_branch: list[Node] = []
        if self._at_keyword("else"):
            else_token = self._advance()
            if else_token.argument:
                raise self._error(
                    "'else' takes no arguments", else_token, ErrorCode.INVALID_STATEMENT
                )
            else_branch = self._parse_body()

        self._consume_end_tag("if")
        return Conditional(
            condition=start.argument,
            then_branch=tuple(then_branch),
            else_branch=tuple(else_branch),
        )

    def _parse_for(self) -> Loop:
        """Parse {% for item [as Type] in collection %}...{% endfor %}.

        Example:
            {% for user as User in users %}{{ user.name }}{% endfor %}
        """
        start = self._advance()  # consume 'for'
        header = _FOR_HEADER.fullmatch(start.argument)
        if header is None:
            raise self._error(
                f"Invalid loop header '{start.argument}': "
                "expected '{% for item in collection %}' or '{% for item as Type in collection %}'",
                start,
                ErrorCode.INVALID_STATEMENT,
            )
        self._push_block("for", start)

        body = self._parse_body()
        self._consume_end_tag("for")
        return Loop(
            item_name=header["item"],
            item_type=header["type"],
            collection=header["collection"].strip(),
            body=tuple(body),
        )
