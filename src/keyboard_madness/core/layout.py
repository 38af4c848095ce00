"""The keyboard grid — an immutable character lookup table.

Rows are stored top to bottom and addressed as ``(x, y)`` where ``x``
is the column and ``y`` the row.  :meth:`KeyboardLayout.lookup` does
no bounds checking; callers keep coordinates in range via
:meth:`KeyboardLayout.normalize`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from keyboard_madness.core.models import Position
from keyboard_madness.exceptions import InvalidLayoutError


@dataclass(frozen=True, slots=True)
class KeyboardLayout:
    """Rectangular grid of single-character keys.

    Use :meth:`from_rows` to build one from any sequence of strings; the
    constructor expects the rows already as a tuple.

    Raises
    ------
    InvalidLayoutError
        If the grid is empty or its rows differ in length.
    """

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.rows or not self.rows[0]:
            raise InvalidLayoutError("Keyboard layout must have at least one key.")
        width = len(self.rows[0])
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise InvalidLayoutError(
                    f"Row {index} has {len(row)} keys, expected {width}.",
                    hint="Every row of a layout must have the same number of keys.",
                )

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> KeyboardLayout:
        return cls(rows=tuple(rows))

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def lookup(self, x: int, y: int) -> str:
        """Return the key at column *x*, row *y* (must be in range)."""
        return self.rows[y][x]

    def normalize(self, x: int, y: int) -> Position:
        """Wrap arbitrary coordinates onto the grid."""
        return Position(x % self.width, y % self.height)

    def find(self, key: str) -> Position | None:
        """Return the first position of *key* in row-major order, if any."""
        if len(key) != 1:
            return None
        for y, row in enumerate(self.rows):
            x = row.find(key)
            if x >= 0:
                return Position(x, y)
        return None


KEYS: KeyboardLayout = KeyboardLayout.from_rows(
    (
        "1234567890",
        "QWERTYUIOP",
        "ASDFGHJKL;",
        "ZXCVBNM,.?",
    )
)
"""The default 10x4 layout."""
