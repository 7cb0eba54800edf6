"""Block parsing mixins for the gleamx parser."""

from __future__ import annotations

from gleamx.parser.blocks.control_flow import ControlFlowBlockParsingMixin
from gleamx.parser.blocks.core import BlockStackMixin
from gleamx.parser.blocks.functions import FunctionBlockParsingMixin
from gleamx.parser.blocks.template_structure import TemplateStructureParsingMixin

__all__ = [
    "BlockStackMixin",
    "ControlFlowBlockParsingMixin",
    "FunctionBlockParsingMixin",
    "TemplateStructureParsingMixin",
]
