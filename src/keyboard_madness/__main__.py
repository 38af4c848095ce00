"""Allow ``python -m keyboard_madness`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m keyboard_madness`` behaves identically to the
``keyboard-madness`` console script.
"""

from __future__ import annotations

from keyboard_madness.cli.app import cli

if __name__ == "__main__":
    cli()
