"""Template structure statement parsing for the gleamx parser.

Provides mixin for parsing `{> with` and `{> import` statements.
"""

from __future__ import annotations

import re

from gleamx.environment.exceptions import ErrorCode
from gleamx.nodes import Import, ParamDeclaration
from gleamx.parser.blocks.core import BlockStackMixin

# name as Type
_WITH_HEADER = re.compile(r"(?P<name>[a-z_][A-Za-z0-9_]*)\s+as\s+(?P<type>\S.*)")


class TemplateStructureParsingMixin(BlockStackMixin):
    """Mixin for parsing declarations that shape the generated module.

    Both statements are only valid at the top level of the template or
    directly inside a function body.
    """

    __slots__ = ()

    def _parse_with(self) -> ParamDeclaration:
        """Parse {> with name as Type."""
        token = self._current
        self._require_top_level(token, allow_function=True)

        header = _WITH_HEADER.fullmatch(token.argument)
        if header is None:
            raise self._error(
                f"Invalid parameter declaration '{token.value}': expected '{{> with name as Type'",
                token,
                ErrorCode.INVALID_STATEMENT,
            )
        self._advance()
        return ParamDeclaration(
            name=header["name"],
            range=token.range,
            type_name=header["type"].strip(),
        )

    def _parse_import(self) -> Import:
        """Parse {> import gleam/string."""
        token = self._current
        self._require_top_level(token, allow_function=True)

        if not token.argument:
            raise self._error(
                "Expected a module path after 'import'", token, ErrorCode.INVALID_STATEMENT
            )
        self._advance()
        return Import(path=token.argument)
