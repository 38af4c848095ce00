"""Process exit codes returned by ``keyboard-madness``.

``run`` and ``generate`` always succeed for any instruction text or
start position, so the non-zero codes below only surface from the
error boundary in :func:`keyboard_madness.cli.app.cli` or from argparse.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command printed its result."""

GENERAL_ERROR: int = 1
"""A ``KeyboardMadnessError`` was rendered with its hint."""

USAGE_ERROR: int = 2
"""Bad command-line arguments; raised by argparse itself, never by us."""

UNEXPECTED_ERROR: int = 3
"""A crash outside the known error types.  Kept apart from argparse's 2."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C, following the shell's 128 + SIGINT convention."""
