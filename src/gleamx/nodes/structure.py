"""Template structure nodes for the gleamx template tree."""

from __future__ import annotations

from dataclasses import dataclass

from gleamx._types import SourceRange
from gleamx.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Import(Node):
    """Module import: {> import gleam/string"""

    path: str


@dataclass(frozen=True, slots=True)
class ParamDeclaration(Node):
    """Labelled render parameter: {> with name as String"""

    name: str
    range: SourceRange
    type_name: str
