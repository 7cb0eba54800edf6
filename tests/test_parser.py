"""Tests for the gleamx parser: node trees and syntax errors."""

from __future__ import annotations

import pytest

from gleamx import ErrorCode, SourceRange, TemplateSyntaxError, parse, tokenize
from gleamx.nodes import (
    BuilderExpression,
    Conditional,
    Expression,
    FunctionDefinition,
    Import,
    Loop,
    ParamDeclaration,
    Text,
    Visibility,
)


def _parse(source: str):
    return parse(tokenize(source), source, "page.gleamx")


def _error(source: str) -> TemplateSyntaxError:
    with pytest.raises(TemplateSyntaxError) as exc_info:
        _parse(source)
    return exc_info.value


class TestOutput:
    def test_text_and_expressions(self) -> None:
        assert _parse("a {{ b }} c {[ d() ]}") == [
            Text("a "),
            Expression("b"),
            Text(" c "),
            BuilderExpression("d()"),
        ]

    def test_empty(self) -> None:
        assert _parse("") == []


class TestControlFlow:
    """{% if %} and {% for %} blocks."""

    def test_if(self) -> None:
        assert _parse("{% if is_user %}User{% endif %}") == [
            Conditional("is_user", (Text("User"),), ())
        ]

    def test_if_else(self) -> None:
        assert _parse("{% if a %}x{% else %}y{% endif %}") == [
            Conditional("a", (Text("x"),), (Text("y"),))
        ]

    def test_condition_is_kept_verbatim(self) -> None:
        [node] = _parse("{% if items != [] && user.is_admin %}{% endif %}")
        assert node.condition == "items != [] && user.is_admin"

    def test_for(self) -> None:
        assert _parse("{% for item in items %}{{ item }}{% endfor %}") == [
            Loop("item", None, "items", (Expression("item"),))
        ]

    def test_for_with_type(self) -> None:
        assert _parse("{% for user as User in list.take(users, 2) %}{% endfor %}") == [
            Loop("user", "User", "list.take(users, 2)", ())
        ]

    def test_for_with_generic_type(self) -> None:
        [node] = _parse("{% for pair as #(String, Int) in pairs %}{% endfor %}")
        assert node.item_type == "#(String, Int)"
        assert node.collection == "pairs"

    def test_nesting(self) -> None:
        source = "{% for row in rows %}{% if row.visible %}{{ row.name }}{% endif %}{% endfor %}"
        assert _parse(source) == [
            Loop(
                "row",
                None,
                "rows",
                (Conditional("row.visible", (Expression("row.name"),), ()),),
            )
        ]


class TestStatements:
    """{> with, {> import and {> fn."""

    def test_with(self) -> None:
        assert _parse("{> with name as List(String)\n") == [
            ParamDeclaration("name", SourceRange(0, 29), "List(String)")
        ]

    def test_import(self) -> None:
        assert _parse("{> import user.{User, Admin}\n") == [Import("user.{User, Admin}")]

    def test_private_function(self) -> None:
        source = "{> fn classes()\na b\n{> endfn\n"
        assert _parse(source) == [
            FunctionDefinition(
                Visibility.PRIVATE, "classes()", (Text("a b\n"),), SourceRange(0, len(source))
            )
        ]

    def test_public_function(self) -> None:
        source = "{> pub fn item(name: String)\n<li>{{ name }}</li>\n{> endfn\n"
        assert _parse(source) == [
            FunctionDefinition(
                Visibility.PUBLIC,
                "item(name: String)",
                (Text("<li>"), Expression("name"), Text("</li>\n")),
                SourceRange(0, len(source)),
            )
        ]

    def test_declarations_inside_function(self) -> None:
        [function] = _parse("{> fn f()\n{> import gleam/int\n{> with n as Int\n{> endfn")
        assert function.body == (
            Import("gleam/int"),
            ParamDeclaration("n", SourceRange(30, 47), "Int"),
        )


class TestSyntaxErrors:
    """Malformed templates raise TemplateSyntaxError with a parser code."""

    @pytest.mark.parametrize(
        ("source", "message"),
        [
            ("{% if %}{% endif %}", "Expected a condition after 'if'"),
            ("{% if a %}{% else x %}{% endif %}", "'else' takes no arguments"),
            ("{% for x of y %}{% endfor %}", "Invalid loop header 'x of y'"),
            ("{> with name\n", "Invalid parameter declaration 'with name'"),
            ("{> with Name as String\n", "Invalid parameter declaration 'with Name as String'"),
            ("{> import\n", "Expected a module path after 'import'"),
            ("{> fn f\n{> endfn", "Invalid function declaration 'fn f'"),
            ("{> pub f()\n{> endfn", "Invalid function declaration 'pub f()'"),
            ("{% bogus %}", "Unknown tag '{% bogus %}'"),
            ("{> bogus\n", "Unknown tag '{> bogus'"),
            ("{% with x as T %}", "Unknown tag '{% with x as T %}'"),
        ],
    )
    def test_invalid_statement(self, source: str, message: str) -> None:
        error = _error(source)
        assert error.message.startswith(message)
        assert error.code is ErrorCode.INVALID_STATEMENT

    def test_unclosed_if(self) -> None:
        error = _error("line\n{% if a %}x")
        assert error.message == "Unclosed 'if' block: missing '{% endif %}'"
        assert error.code is ErrorCode.UNCLOSED_BLOCK
        assert (error.lineno, error.col_offset) == (2, 0)

    def test_unclosed_function(self) -> None:
        error = _error("{> fn f()\nx")
        assert error.message == "Unclosed 'fn' block: missing '{> endfn'"

    def test_mismatched_end_tag(self) -> None:
        error = _error("{% if a %}x{% endfor %}")
        assert error.message == (
            "Expected '{% endif %}' to close 'if' from line 1, found '{% endfor %}'"
        )
        assert error.code is ErrorCode.UNEXPECTED_TOKEN

    def test_end_tag_of_wrong_kind(self) -> None:
        error = _error("{> fn f()\n{% endfn %}")
        assert error.message == (
            "Expected '{> endfn' to close 'fn' from line 1, found '{% endfn %}'"
        )

    def test_end_tag_with_arguments(self) -> None:
        assert _error("{% if a %}{% endif a %}").message == "'endif' takes no arguments"

    @pytest.mark.parametrize("tag", ["{% endif %}", "{% endfor %}", "{% else %}", "{> endfn"])
    def test_stray_tag(self, tag: str) -> None:
        error = _error(f"text {tag}")
        assert error.message.startswith("Unexpected '")
        assert error.code is ErrorCode.UNEXPECTED_TOKEN

    def test_snippet_in_message(self) -> None:
        error = _error("ok\n{% if a %}")
        assert "page.gleamx:2:0" in str(error)
        assert "{% if a %}" in str(error)


class TestPlacement:
    """Declarations the renderer cannot place are rejected while parsing."""

    @pytest.mark.parametrize(
        ("source", "message"),
        [
            (
                "{% if a %}{> with x as T\n{% endif %}",
                "'{> with x as T' is not allowed inside 'if'",
            ),
            (
                "{% for i in xs %}{> import gleam/int\n{% endfor %}",
                "'{> import gleam/int' is not allowed inside 'for'",
            ),
            (
                "{> fn f()\n{> fn g()\n{> endfn\n{> endfn\n",
                "'{> fn g()' is not allowed inside 'fn'",
            ),
            (
                "{% if a %}{> pub fn g()\n{> endfn\n{% endif %}",
                "'{> pub fn g()' is not allowed inside 'if'",
            ),
            (
                "{> fn f()\n{% if a %}{> with x as T\n{% endif %}{> endfn",
                "'{> with x as T' is not allowed inside 'if'",
            ),
        ],
    )
    def test_misplaced(self, source: str, message: str) -> None:
        error = _error(source)
        assert error.message == message
        assert error.code is ErrorCode.MISPLACED_STATEMENT
