"""Cursor state machine — applies instructions to a keyboard layout.

:class:`Keyboard` holds the cursor position and the buffer of selected
keys.  Movements wrap around the grid edges using modulo arithmetic, so
a move of any size resolves in constant time.  Unknown instructions are
no-ops; nothing in here raises for malformed instruction text.
"""

from __future__ import annotations

import logging

from keyboard_madness.core.instructions import parse
from keyboard_madness.core.layout import KEYS, KeyboardLayout
from keyboard_madness.core.models import Instruction, Opcode, Position
from keyboard_madness.utils.constants import DEFAULT_X_POSITION, DEFAULT_Y_POSITION

logger = logging.getLogger(__name__)

_LITERALS: dict[Opcode, str] = {
    Opcode.SPACE: " ",
    Opcode.NEW_LINE: "\n",
}


class Keyboard:
    """A cursor over *layout* that types into an append-only buffer.

    Parameters
    ----------
    layout:
        The grid to move over.  Defaults to :data:`KEYS`.
    x, y:
        Starting coordinates.  Out-of-range values are wrapped onto the
        grid.
    """

    def __init__(
        self,
        layout: KeyboardLayout = KEYS,
        x: int = DEFAULT_X_POSITION,
        y: int = DEFAULT_Y_POSITION,
    ) -> None:
        self.layout: KeyboardLayout = layout
        self.position: Position = layout.normalize(x, y)
        self._selected: list[str] = []

    def __str__(self) -> str:
        return "".join(self._selected)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, instructions: str) -> str:
        """Execute every instruction in *instructions* and return the buffer.

        The buffer accumulates across calls; use :meth:`clear` between
        independent runs on the same instance.
        """
        for instruction in parse(instructions):
            self.execute(instruction)
        return str(self)

    def execute(self, instruction: Instruction) -> None:
        """Apply a single parsed instruction."""
        x, y = self.position.x, self.position.y
        op, count = instruction.op, instruction.count

        if op is Opcode.RIGHT:
            self.update_position(x + count, y)
        elif op is Opcode.LEFT:
            self.update_position(x - count, y)
        elif op is Opcode.DOWN:
            self.update_position(x, y + count)
        elif op is Opcode.UP:
            self.update_position(x, y - count)
        elif op is Opcode.SELECT:
            self._select(self.layout.lookup(x, y))
        elif op in _LITERALS:
            self._select(_LITERALS[op])
        else:
            logger.debug("Ignoring unknown instruction")
            return

        logger.debug("%s -> (%d, %d)", instruction, self.position.x, self.position.y)

    def update_position(self, x: int, y: int) -> None:
        """Move the cursor to ``(x, y)``, wrapping onto the grid."""
        self.position = self.layout.normalize(x, y)

    def clear(self) -> None:
        """Empty the selected-keys buffer; the cursor stays where it is."""
        self._selected.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _select(self, key: str) -> None:
        self._selected.append(key)


def run(
    start_x: int,
    start_y: int,
    instructions: str,
    layout: KeyboardLayout = KEYS,
) -> str:
    """Run *instructions* from ``(start_x, start_y)`` on a fresh keyboard."""
    return Keyboard(layout, start_x, start_y).run(instructions)
