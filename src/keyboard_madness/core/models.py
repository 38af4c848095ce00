"""Domain models for keyboard-madness.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access and rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Cursor position
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Position:
    """A cell address on a keyboard layout."""

    x: int
    """Column index, ``0`` is the leftmost key."""

    y: int
    """Row index, ``0`` is the top row."""


# ---------------------------------------------------------------------------
# Instructions
# ---------------------------------------------------------------------------

class Opcode(Enum):
    """Instruction kinds, valued by their single-letter token code."""

    RIGHT = "R"
    LEFT = "L"
    DOWN = "D"
    UP = "U"
    SPACE = "_"
    NEW_LINE = "N"
    SELECT = "S"
    UNKNOWN = ""

    @property
    def is_move(self) -> bool:
        return self in _MOVES


_MOVES: frozenset[Opcode] = frozenset(
    {Opcode.RIGHT, Opcode.LEFT, Opcode.DOWN, Opcode.UP}
)


@dataclass(frozen=True, slots=True)
class Instruction:
    """One parsed instruction token.

    ``count`` is only meaningful for movements; every other opcode
    carries the default of ``1``.
    """

    op: Opcode
    count: int = 1

    def __str__(self) -> str:
        """Render the token form, e.g. ``"R:3"`` or ``"S"``."""
        if self.op.is_move:
            return f"{self.op.value}:{self.count}"
        return self.op.value
