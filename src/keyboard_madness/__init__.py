"""keyboard-madness — cursor-driven typing on a fixed keyboard grid.

Interprets comma-separated movement instructions over a 10x4 keyboard
layout and collects the selected keys into an output string.
"""

from keyboard_madness.core.generator import generate_instructions
from keyboard_madness.core.keyboard import Keyboard, run
from keyboard_madness.core.layout import KEYS, KeyboardLayout
from keyboard_madness.version import __version__

__all__: list[str] = [
    "KEYS",
    "Keyboard",
    "KeyboardLayout",
    "__version__",
    "generate_instructions",
    "run",
]
