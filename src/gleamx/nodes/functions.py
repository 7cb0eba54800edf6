"""Function definition nodes for the gleamx template tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from gleamx._types import SourceRange
from gleamx.nodes.base import Node


class Visibility(Enum):
    PRIVATE = "private"
    PUBLIC = "public"


@dataclass(frozen=True, slots=True)
class FunctionDefinition(Node):
    """Function definition: {> [pub ]fn head ... {> endfn

    ``head`` is the raw Gleam signature without ``fn`` or the return type,
    e.g. ``item(name: String)``.
    """

    visibility: Visibility
    head: str
    body: Sequence[Node]
    range: SourceRange
