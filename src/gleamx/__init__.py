"""gleamx: compile .gleamx templates to Gleam modules.

Templates mix literal text with Gleam code and compile to a Gleam module
whose functions build their output with a StringBuilder.

Quickstart:
    >>> from gleamx import Environment
    >>> env = Environment()
    >>> print(env.compile_source("{> with name as String\\nHello {{ name }}!", "hello.gleamx"))

Template syntax:
    {> with name as Type          labelled parameter of render/render_builder
    {> import gleam/int           import copied into the generated module
    {> [pub ]fn name(args)        named StringBuilder function ...
    {> endfn                      ... until here
    {{ expr }}                    append a String expression
    {[ expr ]}                    append a StringBuilder expression
    {% if cond %}..{% else %}..{% endif %}
    {% for item [as Type] in items %}..{% endfor %}

Architecture:
Template Source → Lexer → Parser → gleamx nodes → Renderer → Gleam source

Pipeline stages:
1. **Lexer**: Tokenizes template source into a token stream
2. **Parser**: Builds an immutable node tree and checks placement rules
3. **Renderer**: Renders each scope independently, then assembles the module

"""

from __future__ import annotations

from gleamx._types import SourceRange, Token, TokenType
from gleamx.compiler import Renderer, render
from gleamx.environment import (
    DictLoader,
    DuplicateParamNameError,
    Environment,
    ErrorCode,
    FileSystemLoader,
    GleamxError,
    MisplacedNodeError,
    RenderError,
    TemplateEncodingError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from gleamx.lexer import tokenize
from gleamx.parser import parse

__version__ = "0.1.0"

__all__ = [
    "DictLoader",
    "DuplicateParamNameError",
    "Environment",
    "ErrorCode",
    "FileSystemLoader",
    "GleamxError",
    "MisplacedNodeError",
    "RenderError",
    "Renderer",
    "SourceRange",
    "TemplateEncodingError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "Token",
    "TokenType",
    "__version__",
    "parse",
    "render",
    "tokenize",
]
