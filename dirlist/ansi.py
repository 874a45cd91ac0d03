"""ANSI escape constants and escape-aware text measurement.

Only the fixed directory color sequence and the reset sequence are
recognized. Any other escape sequence counts toward visible length.
"""

from __future__ import annotations

ESCAPE_BLUE_BOLD = "\x1b[34;1m"
ESCAPE_RESET = "\x1b[0m"
KNOWN_ESCAPES = (ESCAPE_BLUE_BOLD, ESCAPE_RESET)


def blue_bold(text: str) -> str:
    """Wrap ``text`` in the directory color-start/reset pair."""
    return f"{ESCAPE_BLUE_BOLD}{text}{ESCAPE_RESET}"


def strip_known_escapes(text: str) -> str:
    """Remove every recognized escape sequence from ``text``."""
    for escape in KNOWN_ESCAPES:
        text = text.replace(escape, "")
    return text


def visible_length(text: str) -> int:
    """Return terminal-visible character count of ``text``.

    Unrecognized escape sequences are not stripped and count as visible.
    """
    return len(strip_known_escapes(text))


__all__ = [
    "ESCAPE_BLUE_BOLD",
    "ESCAPE_RESET",
    "KNOWN_ESCAPES",
    "blue_bold",
    "strip_known_escapes",
    "visible_length",
]
