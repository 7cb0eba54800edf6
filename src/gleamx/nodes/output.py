"""Output nodes for the gleamx template tree."""

from __future__ import annotations

from dataclasses import dataclass

from gleamx.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text between template constructs."""

    content: str


@dataclass(frozen=True, slots=True)
class Expression(Node):
    """String expression: {{ code }}"""

    code: str


@dataclass(frozen=True, slots=True)
class BuilderExpression(Node):
    """StringBuilder expression, merged rather than appended: {[ code ]}"""

    code: str
