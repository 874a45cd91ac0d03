"""Terminal capability checks used to gate color output."""

from __future__ import annotations

import sys
from typing import TextIO

COLOR_MODES = ("auto", "always", "never")


def is_output_interactive(stream: TextIO | None = None) -> bool:
    """Return whether ``stream`` (default stdout) is attached to a TTY."""
    target = sys.stdout if stream is None else stream
    try:
        return bool(target.isatty())
    except (AttributeError, ValueError):
        return False


def color_enabled(mode: str, stream: TextIO | None = None) -> bool:
    """Resolve an ``auto``/``always``/``never`` color mode to a boolean."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    return is_output_interactive(stream)


__all__ = [
    "COLOR_MODES",
    "color_enabled",
    "is_output_interactive",
]
