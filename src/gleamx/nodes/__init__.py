"""Template tree nodes for gleamx.

The node set is closed: every class listed in ``NODE_TYPES`` must have a
handler in the renderer dispatch table.

Node tree:
    Text, Expression, BuilderExpression    output
    Import, ParamDeclaration               module structure
    Conditional, Loop                      control flow
    FunctionDefinition                     named builder functions

"""

from __future__ import annotations

from gleamx.nodes.base import Node
from gleamx.nodes.control_flow import Conditional, Loop
from gleamx.nodes.functions import FunctionDefinition, Visibility
from gleamx.nodes.output import BuilderExpression, Expression, Text
from gleamx.nodes.structure import Import, ParamDeclaration

NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    Expression,
    BuilderExpression,
    Import,
    ParamDeclaration,
    Conditional,
    Loop,
    FunctionDefinition,
)

__all__ = [
    "NODE_TYPES",
    "BuilderExpression",
    "Conditional",
    "Expression",
    "FunctionDefinition",
    "Import",
    "Loop",
    "Node",
    "ParamDeclaration",
    "Text",
    "Visibility",
]
