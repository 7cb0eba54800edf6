"""gleamx Renderer core: node tree to Gleam module source.

The Renderer walks the template tree one scope at a time. Each scope (the
document, a branch, a loop body, a function body) is rendered by a fresh
``_render_scope`` call that returns a frozen ScopeResult. The parent
merges only statements, loop usage and generated functions; everything
else stays behind at the scope boundary.

Generated module:

    ```gleam
    // DO NOT EDIT: Code generated by gleamx from page.gleamx

    import gleam/string_builder.{type StringBuilder}
    import gleam/list

    fn item(name: String) -> StringBuilder {
        ...
    }

    pub fn render_builder(names names: List(String)) -> StringBuilder {
        let builder = string_builder.from_string("")
        ...
        builder
    }

    pub fn render(names names: List(String)) -> String {
        string_builder.to_string(render_builder(names: names))
    }
    ```

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from gleamx.compiler.scope import ScopeAccumulator, ScopeKind, ScopeResult
from gleamx.compiler.statements import StatementRenderingMixin
from gleamx.compiler.statements.functions import builder_function
from gleamx.utils.constants import (
    BUILDER_ALIAS,
    BUILDER_MODULE,
    BUILDER_TYPE,
    COLLECTION_MODULE,
    INDENT,
    RENDER_BUILDER_FN,
    RENDER_FN,
)

if TYPE_CHECKING:
    from gleamx.nodes import Node

logger = logging.getLogger(__name__)


class Renderer(StatementRenderingMixin):
    """Render a gleamx node tree to Gleam source.

    Stateless apart from the cached dispatch table, so one instance can
    render any number of documents, from any number of threads.

    Node Dispatch:
        O(1) dict lookup from node class name to handler:
            ```python
            dispatch = {
                "Text": self._render_text,
                "Conditional": self._render_conditional,
                ...
            }
            ```
        An object whose class has no handler raises TypeError.

    Example:
            >>> from gleamx.nodes import Expression, ParamDeclaration, Text
            >>> from gleamx._types import SourceRange
            >>> nodes = [
            ...     ParamDeclaration("name", SourceRange(0, 22), "String"),
            ...     Text("Hello "),
            ...     Expression("name"),
            ... ]
            >>> print(Renderer().render(nodes, "gleamx", "hello.gleamx"))

    """

    __slots__ = ("_node_dispatch",)

    def render(
        self,
        nodes: Sequence[Node],
        generator_name: str,
        source_file_name: str,
    ) -> str:
        """Render a document to a complete Gleam module.

        Args:
            nodes: Top-level template nodes
            generator_name: Program named in the header comment
            source_file_name: Template file named in the header comment

        Returns:
            Gleam module source

        Raises:
            DuplicateParamNameError: A parameter name is declared twice in one scope
            MisplacedNodeError: A declaration sits in a scope that cannot hold it
        """
        result = self._render_scope(nodes, ScopeKind.DOCUMENT)
        return self._assemble(result, generator_name, source_file_name)

    def _render_scope(self, nodes: Sequence[Node], kind: ScopeKind) -> ScopeResult:
        """Render one sibling sequence, strictly in input order."""
        scope = ScopeAccumulator(kind)
        dispatch = self._get_node_dispatch()
        for node in nodes:
            handler = dispatch.get(type(node).__name__)
            if handler is None:
                raise TypeError(f"Cannot render {type(node).__name__!r}: not a gleamx node")
            handler(node, scope)

        result = scope.freeze()
        logger.debug(
            "Rendered %s: %d statements, %d params, %d imports, %d functions",
            kind.value,
            len(result.statements),
            len(result.params),
            len(result.imports),
            len(result.functions),
        )
        return result

    def _assemble(self, result: ScopeResult, generator_name: str, source_file_name: str) -> str:
        """Turn the document scope into the final module text.

        Sections, in order: header comment, builder import, list import
        (only when a loop was rendered), template imports verbatim, generated
        functions, then the render_builder/render pair (only when the
        document has renderable content).
        """
        params = ", ".join(f"{name} {name}: {type_name}" for name, type_name in result.params)
        args = ", ".join(f"{name}: {name}" for name, _ in result.params)

        sections = [
            f"// DO NOT EDIT: Code generated by {generator_name} from {source_file_name}\n",
            "\n",
            f"import {BUILDER_MODULE}.{{type {BUILDER_TYPE}}}\n",
        ]
        if result.uses_loop:
            sections.append(f"import {COLLECTION_MODULE}\n")
        sections.extend(f"import {path}\n" for path in result.imports)

        if result.functions:
            sections.append("\n" + "\n\n".join(result.functions) + "\n")

        if result.has_content:
            render_builder = builder_function(
                f"{RENDER_BUILDER_FN}({params})", result.statements, public=True
            )
            render_string = "\n".join(
                [
                    f"pub fn {RENDER_FN}({params}) -> String {{",
                    f"{INDENT}{BUILDER_ALIAS}.to_string({RENDER_BUILDER_FN}({args}))",
                    "}",
                ]
            )
            sections.append(f"\n{render_builder}\n\n{render_string}\n")

        return "".join(sections)

    def _get_node_dispatch(self) -> dict[str, Callable]:
        """Get node type dispatch table (cached on first call)."""
        try:
            return self._node_dispatch
        except AttributeError:
            self._node_dispatch = {
                "Text": self._render_text,
                "Expression": self._render_expression,
                "BuilderExpression": self._render_builder_expression,
                "Import": self._render_import,
                "ParamDeclaration": self._render_param,
                "Conditional": self._render_conditional,
                "Loop": self._render_loop,
                "FunctionDefinition": self._render_function,
            }
            return self._node_dispatch


def render(nodes: Sequence[Node], generator_name: str, source_file_name: str) -> str:
    """Render a node tree with a fresh Renderer. See ``Renderer.render``."""
    return Renderer().render(nodes, generator_name, source_file_name)
