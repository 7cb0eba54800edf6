"""Control flow nodes for the gleamx template tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from gleamx.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Conditional(Node):
    """Conditional: {% if cond %}...{% else %}...{% endif %}"""

    condition: str
    then_branch: Sequence[Node]
    else_branch: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Loop(Node):
    """Loop: {% for item [as Type] in collection %}...{% endfor %}"""

    item_name: str
    item_type: str | None
    collection: str
    body: Sequence[Node]
