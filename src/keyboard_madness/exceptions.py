"""Custom exception hierarchy for keyboard-madness.

The instruction interpreter itself never raises for malformed
instruction text; unknown tokens and bad counts are downgraded to
no-ops.  The exceptions below cover the remaining failure surfaces
(custom layouts, missing optional dependencies) and are rendered by the
CLI error boundary.

Hierarchy
---------
KeyboardMadnessError
├── InvalidLayoutError
└── EnvironmentError
"""

from __future__ import annotations


class KeyboardMadnessError(Exception):
    """Base exception for all keyboard-madness errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Layout ----------------------------------------------------------------

class InvalidLayoutError(KeyboardMadnessError):
    """Raised when a keyboard layout is empty or its rows are ragged."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(KeyboardMadnessError):
    """Raised when a required runtime dependency is not available."""
