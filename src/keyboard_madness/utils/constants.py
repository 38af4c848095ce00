"""Default values shared by the core and the CLI parser."""

from __future__ import annotations

DEFAULT_X_POSITION: int = 4
"""Starting column — the ``G`` key on the default layout."""

DEFAULT_Y_POSITION: int = 2
"""Starting row — the home row on the default layout."""

DEFAULT_INSTRUCTIONS: str = "R,S,U,L:3,S,D,R:6,S,S,U,S"
"""Instructions run when ``keyboard-madness run`` gets none (types HELLO)."""

DEFAULT_TEXT: str = "Hello"
"""Text used when ``keyboard-madness generate`` gets none."""

INSTRUCTION_SEPARATOR: str = ","
COUNT_SEPARATOR: str = ":"

MAX_COUNT_DIGITS: int = 4300
"""Longest count accepted; matches CPython's default int conversion limit."""
