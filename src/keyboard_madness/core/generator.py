"""Instruction generation — the inverse of the interpreter.

:func:`generate_instructions` walks the cursor from key to key with
straight horizontal then vertical moves (no wraparound shortcuts) and
emits the token string that types the given text.  Characters missing
from the layout are skipped with a warning.
"""

from __future__ import annotations

import logging

from keyboard_madness.core.layout import KEYS, KeyboardLayout
from keyboard_madness.core.models import Instruction, Opcode, Position
from keyboard_madness.utils.constants import (
    DEFAULT_X_POSITION,
    DEFAULT_Y_POSITION,
    INSTRUCTION_SEPARATOR,
)

logger = logging.getLogger(__name__)

_LITERALS: dict[str, Opcode] = {
    " ": Opcode.SPACE,
    "\n": Opcode.NEW_LINE,
}


def _axis_moves(delta: int, forward: Opcode, backward: Opcode) -> list[Instruction]:
    if delta > 0:
        return [Instruction(forward, delta)]
    if delta < 0:
        return [Instruction(backward, -delta)]
    return []


def plan_path(start: Position, target: Position) -> list[Instruction]:
    """Return the moves that take the cursor from *start* to *target*."""
    return _axis_moves(target.x - start.x, Opcode.RIGHT, Opcode.LEFT) + _axis_moves(
        target.y - start.y, Opcode.DOWN, Opcode.UP
    )


def generate_instructions(
    text: str,
    start_x: int = DEFAULT_X_POSITION,
    start_y: int = DEFAULT_Y_POSITION,
    layout: KeyboardLayout = KEYS,
) -> str:
    """Return an instruction string that types *text* from the given start.

    Lookup is case-sensitive.  Spaces and newlines map to ``_`` and
    ``N``; any other character not on *layout* is skipped.
    """
    position = layout.normalize(start_x, start_y)
    instructions: list[Instruction] = []
    targets: dict[str, Position | None] = {}

    for char in text:
        if char in _LITERALS:
            instructions.append(Instruction(_LITERALS[char]))
            continue

        if char not in targets:
            targets[char] = layout.find(char)
        target = targets[char]
        if target is None:
            logger.warning("Skipping %r: not on the keyboard layout", char)
            continue

        instructions.extend(plan_path(position, target))
        instructions.append(Instruction(Opcode.SELECT))
        logger.debug("%r at (%d, %d)", char, target.x, target.y)
        position = target

    return INSTRUCTION_SEPARATOR.join(str(i) for i in instructions)
