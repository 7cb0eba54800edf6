"""gleamx code generation: node tree to Gleam module source."""

from __future__ import annotations

from gleamx.compiler.core import Renderer, render
from gleamx.compiler.scope import ScopeKind, ScopeResult

__all__ = ["Renderer", "ScopeKind", "ScopeResult", "render"]
