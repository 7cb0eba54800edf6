"""gleamx environment: configuration, loaders and errors."""

from __future__ import annotations

from gleamx.environment.core import Environment, Loader
from gleamx.environment.exceptions import (
    DuplicateParamNameError,
    ErrorCode,
    GleamxError,
    MisplacedNodeError,
    RenderError,
    SourceSnippet,
    TemplateEncodingError,
    TemplateNotFoundError,
    TemplateSyntaxError,
    build_source_snippet,
)
from gleamx.environment.loaders import DictLoader, FileSystemLoader

__all__ = [
    "DictLoader",
    "DuplicateParamNameError",
    "Environment",
    "ErrorCode",
    "FileSystemLoader",
    "GleamxError",
    "Loader",
    "MisplacedNodeError",
    "RenderError",
    "SourceSnippet",
    "TemplateEncodingError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "build_source_snippet",
]
