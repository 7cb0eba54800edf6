"""Base node class for the gleamx template tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all template nodes.

    Nodes are immutable. Only nodes that need diagnostics carry a
    source range.

    """
