"""Shared pytest fixtures and configuration for the keyboard-madness suite.

Guidelines
----------
* Core tests must be pure — no side effects, no I/O.
* CLI tests call ``main(argv)`` directly and read output via ``capsys``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from keyboard_madness.core.keyboard import Keyboard


@pytest.fixture
def keyboard() -> Keyboard:
    """A fresh keyboard on the default layout, cursor on ``G``."""
    return Keyboard()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo handlers and level changes made by ``configure_logging``."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_keyboard_madness", False):
            root.removeHandler(handler)
    root.setLevel(level)
