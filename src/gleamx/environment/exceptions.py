"""Exceptions for the gleamx template compiler.

Exception Hierarchy:
GleamxError (base)
├── TemplateNotFoundError        # Template not found by loader
├── TemplateEncodingError        # Template file is not valid in its encoding
├── TemplateSyntaxError          # Lex/parse-time error in template source
└── RenderError                  # Code generation refused the node tree
    ├── DuplicateParamNameError  # Same `with` name declared twice in a scope
    └── MisplacedNodeError       # Declaration outside the scopes that allow it

Every error carries an ErrorCode, and ``format_compact()`` renders a
terminal diagnostic with a source snippet when the source is known:

    ```
    GX-REN-001: Duplicate parameter name 'name'
      --> page.gleamx:2:0
       |
      1 | {> with name as String
    > 2 | {> with name as Int
       | ^
       |
      Hint: Remove or rename one of the `with` declarations
    ```

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gleamx.environment import terminal

if TYPE_CHECKING:
    from gleamx._types import SourceRange
    from gleamx.nodes import Node


class ErrorCode(Enum):
    """Searchable error codes.

    Format: GX-{CATEGORY}-{NUMBER}
    Categories: LEX (lexer), PAR (parser), REN (renderer), TPL (template loading)
    """

    # Lexer errors (GX-LEX-xxx)
    UNCLOSED_TAG = "GX-LEX-001"
    EMPTY_TAG = "GX-LEX-002"

    # Parser errors (GX-PAR-xxx)
    UNEXPECTED_TOKEN = "GX-PAR-001"
    UNCLOSED_BLOCK = "GX-PAR-002"
    INVALID_STATEMENT = "GX-PAR-003"
    MISPLACED_STATEMENT = "GX-PAR-004"

    # Renderer errors (GX-REN-xxx)
    DUPLICATE_PARAM = "GX-REN-001"
    MISPLACED_NODE = "GX-REN-002"

    # Template loading errors (GX-TPL-xxx)
    TEMPLATE_NOT_FOUND = "GX-TPL-001"
    TEMPLATE_ENCODING = "GX-TPL-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'lexer', 'parser', 'renderer', 'template')."""
        prefix = self.value.split("-")[1]
        return {
            "LEX": "lexer",
            "PAR": "parser",
            "REN": "renderer",
            "TPL": "template",
        }.get(prefix, "unknown")


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source lines around an error.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for the caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        parts: list[str] = [terminal.dim_text("   |")]
        for lineno, content in self.lines:
            is_error = lineno == self.error_line
            parts.append(terminal.format_source_line(lineno, content, is_error=is_error))
            if is_error and self.column is not None:
                caret = " " * self.column + "^"
                parts.append(f"{terminal.dim_text('     |')} {terminal.error_line(caret)}")
        parts.append(terminal.dim_text("   |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 1,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet of ``context_lines`` either side of ``error_line``."""
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


def _location(filename: str | None, lineno: int | None, col_offset: int | None) -> str:
    loc = filename or "<template>"
    if lineno:
        loc += f":{lineno}"
        if col_offset is not None:
            loc += f":{col_offset}"
    return loc


class GleamxError(Exception):
    """Base exception for all gleamx errors.

    Attributes:
        code: ErrorCode identifying the failure.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format as ``CODE: message`` for terminal display."""
        return terminal.format_error_header(self.code.value if self.code else None, str(self))


class TemplateNotFoundError(GleamxError):
    """No loader search path contains the requested template."""

    code: ErrorCode | None = ErrorCode.TEMPLATE_NOT_FOUND


class TemplateEncodingError(GleamxError):
    """A template file could not be decoded with the loader encoding."""

    code: ErrorCode | None = ErrorCode.TEMPLATE_ENCODING


class TemplateSyntaxError(GleamxError):
    """Lex or parse error in template source.

    When ``source`` and ``lineno`` are provided the message includes the
    offending line, and a caret when ``col_offset`` is known too.
    """

    code: ErrorCode | None = ErrorCode.UNEXPECTED_TOKEN

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        filename: str | None = None,
        source: str | None = None,
        code: ErrorCode | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.filename = filename
        self.source = source
        if code is not None:
            self.code = code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        location = _location(self.filename, self.lineno, self.col_offset)
        header = f"Syntax Error: {self.message}\n  --> {location}"

        if self.source and self.lineno:
            lines = self.source.splitlines()
            if 0 < self.lineno <= len(lines):
                snippet = f"\n   |\n{self.lineno:>3} | {lines[self.lineno - 1]}"
                if self.col_offset is not None:
                    snippet += f"\n   | {' ' * self.col_offset}^"
                return header + snippet

        return header

    def format_compact(self) -> str:
        parts = [terminal.format_error_header(self.code.value if self.code else None, self.message)]
        parts.append(f"  --> {terminal.location(_location(self.filename, self.lineno, self.col_offset))}")
        if self.source and self.lineno:
            snippet = build_source_snippet(self.source, self.lineno, column=self.col_offset)
            parts.append(snippet.format())
        return "\n".join(parts)


class RenderError(GleamxError):
    """The renderer refused the node tree.

    Rendering is all-or-nothing: when this is raised no output exists.
    The renderer never sees template source, so the snippet is only
    produced when the caller passes ``source`` to ``format_compact``.

    Attributes:
        message: Error description
        range: Source range of the offending node, when it has one
        hint: Short fix suggestion
    """

    def __init__(
        self,
        message: str,
        range: SourceRange | None = None,
        hint: str | None = None,
    ):
        self.message = message
        self.range = range
        self.hint = hint
        super().__init__(message)

    def format_compact(self, source: str | None = None, filename: str | None = None) -> str:
        parts = [terminal.format_error_header(self.code.value if self.code else None, self.message)]

        if self.range is not None and source is not None:
            lineno, col_offset = self.range.location(source)
            parts.append(f"  --> {terminal.location(_location(filename, lineno, col_offset))}")
            parts.append(build_source_snippet(source, lineno, column=col_offset).format())
        elif filename:
            parts.append(f"  --> {terminal.location(filename)}")

        if self.hint:
            parts.append(f"  {terminal.hint('Hint:')} {self.hint}")
        return "\n".join(parts)


class DuplicateParamNameError(RenderError):
    """A parameter name was declared twice in the same scope.

    Example:
            {> with name as String
            {> with name as Int
        DuplicateParamNameError: Duplicate parameter name 'name'

    """

    code: ErrorCode | None = ErrorCode.DUPLICATE_PARAM

    def __init__(self, name: str, range: SourceRange):
        self.name = name
        super().__init__(
            f"Duplicate parameter name '{name}'",
            range=range,
            hint="Remove or rename one of the `with` declarations",
        )


class MisplacedNodeError(RenderError):
    """A declaration node appeared in a scope that cannot hold it.

    Imports and parameters belong to the document or a function body. The
    parser never builds such trees; this guards trees constructed by hand.
    """

    code: ErrorCode | None = ErrorCode.MISPLACED_NODE

    def __init__(self, node: Node, scope: str):
        self.node = node
        self.scope = scope
        super().__init__(
            f"{type(node).__name__} is not allowed inside {scope}",
            range=getattr(node, "range", None),
            hint="Move the declaration to the top level of the template or of a function",
        )
