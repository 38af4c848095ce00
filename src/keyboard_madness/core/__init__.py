"""Core layer — pure instruction parsing, interpretation and generation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Malformed instruction text never raises.
"""

from keyboard_madness.core.generator import generate_instructions
from keyboard_madness.core.instructions import parse
from keyboard_madness.core.keyboard import Keyboard, run
from keyboard_madness.core.layout import KEYS, KeyboardLayout
from keyboard_madness.core.models import Instruction, Opcode, Position

__all__: list[str] = [
    "KEYS",
    "Instruction",
    "Keyboard",
    "KeyboardLayout",
    "Opcode",
    "Position",
    "generate_instructions",
    "parse",
    "run",
]
