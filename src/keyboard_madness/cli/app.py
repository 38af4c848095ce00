"""CLI application entry point and command routing for keyboard-madness.

This module is the **sole error boundary** for the entire application.
It catches :class:`~keyboard_madness.exceptions.KeyboardMadnessError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core layer.
* Command results (typed text, generated instructions) go to stdout;
  diagnostics, logs and errors go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from keyboard_madness.cli import exit_codes
from keyboard_madness.cli.console import configure_logging, console
from keyboard_madness.exceptions import KeyboardMadnessError
from keyboard_madness.utils.constants import (
    DEFAULT_INSTRUCTIONS,
    DEFAULT_TEXT,
    DEFAULT_X_POSITION,
    DEFAULT_Y_POSITION,
)
from keyboard_madness.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_position_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-x",
        "--x-position",
        type=int,
        default=DEFAULT_X_POSITION,
        help=f"X starting position on the keyboard (default: {DEFAULT_X_POSITION}).",
    )
    parser.add_argument(
        "-y",
        "--y-position",
        type=int,
        default=DEFAULT_Y_POSITION,
        help=f"Y starting position on the keyboard (default: {DEFAULT_Y_POSITION}).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``keyboard-madness run [-x X] [-y Y] [INSTRUCTIONS]``
    * ``keyboard-madness generate [-x X] [-y Y] [TEXT]``
    * ``keyboard-madness layout [-x X] [-y Y]``
    * ``keyboard-madness --version``
    """
    parser = argparse.ArgumentParser(
        prog="keyboard-madness",
        description="Type text by steering a cursor over a keyboard grid.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every instruction as it is applied.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    run_parser = commands.add_parser("run", help="Run instructions on the keyboard.")
    _add_position_arguments(run_parser)
    run_parser.add_argument(
        "instructions",
        nargs="?",
        default=DEFAULT_INSTRUCTIONS,
        help="Comma-separated instructions, e.g. 'R,S,U,L:3,S'.",
    )

    generate_parser = commands.add_parser(
        "generate", help="Generate the instructions that type TEXT."
    )
    _add_position_arguments(generate_parser)
    generate_parser.add_argument(
        "text",
        nargs="?",
        default=DEFAULT_TEXT,
        help="Text to type; it is upper-cased first.",
    )

    layout_parser = commands.add_parser(
        "layout", help="Show the keyboard grid and its coordinates."
    )
    _add_position_arguments(layout_parser)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_run(instructions: str, x: int, y: int) -> int:
    """Run *instructions* from ``(x, y)`` and print the selected keys."""
    from keyboard_madness.core.keyboard import run

    logger.debug("Running %r from (%d, %d)", instructions, x, y)
    print(run(x, y, instructions))
    return exit_codes.SUCCESS


def _handle_generate(text: str, x: int, y: int) -> int:
    """Print the instructions that type the upper-cased *text*."""
    from keyboard_madness.core.generator import generate_instructions

    logger.debug("Generating instructions for %r from (%d, %d)", text, x, y)
    print(generate_instructions(text.upper(), x, y))
    return exit_codes.SUCCESS


def _handle_layout(x: int, y: int) -> int:
    """Render the default layout with the cursor cell highlighted."""
    from keyboard_madness.cli.layout_view import show_layout
    from keyboard_madness.core.layout import KEYS

    return show_layout(KEYS, KEYS.normalize(x, y))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the keyboard-madness CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)

    if args.command == "run":
        return _handle_run(args.instructions, args.x_position, args.y_position)
    if args.command == "generate":
        return _handle_generate(args.text, args.x_position, args.y_position)
    return _handle_layout(args.x_position, args.y_position)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except KeyboardMadnessError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
