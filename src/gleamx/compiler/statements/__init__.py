"""Statement rendering for the gleamx renderer.

The statements package is organized into logical modules:
- basic: Text, expressions and builder expressions
- control_flow: Conditionals and loops
- functions: Function definitions
- template_structure: Imports and parameter declarations

Every handler takes ``(node, scope)`` and records its output on the
ScopeAccumulator of the scope being rendered.
"""

from __future__ import annotations

from gleamx.compiler.statements.basic import BasicStatementMixin
from gleamx.compiler.statements.control_flow import ControlFlowMixin
from gleamx.compiler.statements.functions import FunctionRenderingMixin
from gleamx.compiler.statements.template_structure import TemplateStructureMixin


class StatementRenderingMixin(
    BasicStatementMixin,
    ControlFlowMixin,
    FunctionRenderingMixin,
    TemplateStructureMixin,
):
    """Combined mixin for rendering all node kinds.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks in each individual mixin.

    """

    __slots__ = ()
