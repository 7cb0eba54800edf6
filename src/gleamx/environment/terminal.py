"""Terminal colors for gleamx diagnostics.

ANSI colors with TTY detection, honouring NO_COLOR and FORCE_COLOR.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
}

ColorName = Literal["reset", "bold", "dim", "red", "green", "yellow", "cyan", "bright_red"]

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    """Decide whether diagnostics are colored.

    FORCE_COLOR wins over NO_COLOR (https://no-color.org/). Otherwise colors
    are used only when stderr is a TTY, since that is where errors go.
    """
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stderr.isatty()


_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap ``text`` in ANSI codes, or return it unchanged when colors are off.

    Example:
        >>> colorize("error", "red", "bold")
        '\033[31m\033[1merror\033[0m'  # colors on
        'error'  # colors off
    """
    if not _USE_COLORS or not colors:
        return text

    prefix = "".join(_COLORS.get(color, "") for color in colors)
    if not prefix:
        return text
    return f"{prefix}{text}{_COLORS['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_ESCAPE.sub("", text)


# Semantic helpers
def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def location(text: str) -> str:
    return colorize(text, "cyan")


def line_number(text: str) -> str:
    return colorize(text, "yellow")


def error_line(text: str) -> str:
    return colorize(text, "bright_red")


def hint(text: str) -> str:
    return colorize(text, "green")


def dim_text(text: str) -> str:
    return colorize(text, "dim")


def format_error_header(code: str | None, message: str) -> str:
    """Format ``CODE: message`` with the code highlighted."""
    if code:
        return f"{error_code(code)}: {message}"
    return message


def format_source_line(lineno: int, content: str, is_error: bool = False) -> str:
    """Format one numbered source line, marking the error line with ``>``."""
    marker = ">" if is_error else " "
    number = line_number(f"{marker}{lineno:>3}")
    text = error_line(content) if is_error else dim_text(content)
    return f"{number} | {text}"
