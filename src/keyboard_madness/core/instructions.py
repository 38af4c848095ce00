"""Instruction parsing — raw comma-separated text to :class:`Instruction`.

Grammar
-------
Instructions are separated by ``,``; each token is ``CODE`` or
``CODE:COUNT``.  Tokens are taken literally (no whitespace trimming).

Parsing is permissive: an unrecognised code becomes
:attr:`Opcode.UNKNOWN` and a missing or malformed count becomes ``1``.
Nothing in this module raises for bad input.
"""

from __future__ import annotations

from collections.abc import Iterator

from keyboard_madness.core.models import Instruction, Opcode
from keyboard_madness.utils.constants import (
    COUNT_SEPARATOR,
    INSTRUCTION_SEPARATOR,
    MAX_COUNT_DIGITS,
)

_CODES: dict[str, Opcode] = {
    op.value: op for op in Opcode if op is not Opcode.UNKNOWN
}


def parse_count(raw: str | None) -> int:
    """Return *raw* as a positive integer, or ``1`` when it is not one.

    Only plain ASCII digits are accepted, so signs, spaces and
    non-numeric text all fall back to the default.  So do counts longer
    than :data:`MAX_COUNT_DIGITS` or past the interpreter's int
    conversion limit.
    """
    if raw is None or not (raw.isascii() and raw.isdigit()):
        return 1
    if len(raw) > MAX_COUNT_DIGITS:
        return 1
    try:
        count = int(raw)
    except ValueError:
        return 1
    return count if count > 0 else 1


def parse_token(token: str) -> Instruction:
    """Parse a single token such as ``"R"``, ``"L:3"`` or ``"S"``."""
    code, sep, raw_count = token.partition(COUNT_SEPARATOR)
    op = _CODES.get(code, Opcode.UNKNOWN)
    if not op.is_move:
        return Instruction(op)
    return Instruction(op, parse_count(raw_count if sep else None))


def parse(raw: str) -> Iterator[Instruction]:
    """Lazily yield one :class:`Instruction` per token of *raw*.

    The returned iterator is single-use; call :func:`parse` again to
    iterate a second time.
    """
    for token in raw.split(INSTRUCTION_SEPARATOR):
        yield parse_token(token)
