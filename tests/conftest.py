"""Pytest configuration and fixtures for gleamx tests."""

from __future__ import annotations

import pytest

from gleamx import Environment, Renderer
from gleamx.environment import terminal


@pytest.fixture(autouse=True)
def _no_colors(monkeypatch):
    """Keep diagnostics free of ANSI codes unless a test turns colors on."""
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


@pytest.fixture
def env() -> Environment:
    """Create a basic gleamx Environment."""
    return Environment()


@pytest.fixture
def renderer() -> Renderer:
    return Renderer()
