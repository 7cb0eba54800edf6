"""Expected-output builders shared by the gleamx test modules."""

from __future__ import annotations

from gleamx import Environment

TEST_GENERATOR = "gleamx"
TEST_FILENAME = "-test-"


def compile_text(source: str) -> str:
    """Run the full pipeline on ``source`` with the test header names."""
    return Environment(generator_name=TEST_GENERATOR).compile_source(source, TEST_FILENAME)


def header(*imports: str) -> str:
    """Expected module header followed by the given import paths."""
    lines = [
        f"// DO NOT EDIT: Code generated by {TEST_GENERATOR} from {TEST_FILENAME}",
        "",
        "import gleam/string_builder.{type StringBuilder}",
        *(f"import {path}" for path in imports),
    ]
    return "\n".join(lines) + "\n"


def render_pair(statements: list[str], params: str = "", args: str = "") -> str:
    """Expected render_builder/render pair around top-level ``statements``."""
    body = "".join(f"    {statement}\n" for statement in statements)
    return (
        f"\npub fn render_builder({params}) -> StringBuilder {{\n"
        '    let builder = string_builder.from_string("")\n'
        f"{body}"
        "    builder\n"
        "}\n"
        "\n"
        f"pub fn render({params}) -> String {{\n"
        f"    string_builder.to_string(render_builder({args}))\n"
        "}\n"
    )


def append(literal: str) -> str:
    """Expected statement appending a text literal (already escaped)."""
    return f'let builder = string_builder.append(builder, "{literal}")'


def assert_contains(result: str, *expected_parts: str) -> None:
    """Assert generated source contains all expected parts."""
    for part in expected_parts:
        assert part in result, (
            f"Generated source missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {result!r}"
        )
