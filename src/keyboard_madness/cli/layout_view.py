"""``keyboard-madness layout`` — render the keyboard grid.

Draws the layout as a Rich table with column and row indices so users
can work out coordinates for ``-x`` / ``-y``.  Falls back to a plain
text grid on stderr when Rich is not installed.
"""

from __future__ import annotations

import sys

from keyboard_madness.cli import exit_codes
from keyboard_madness.cli.console import console
from keyboard_madness.core.layout import KEYS, KeyboardLayout
from keyboard_madness.core.models import Position


def _cell_markup(key: str, highlighted: bool) -> str:
    if highlighted:
        return f"[bold reverse]{key}[/bold reverse]"
    return key


def _print_plain_layout(layout: KeyboardLayout, cursor: Position | None) -> None:
    """Render the grid without Rich."""
    header = " ".join(str(x) for x in range(layout.width))
    print(f"\n    {header}", file=sys.stderr)
    print("   " + "-" * (2 * layout.width), file=sys.stderr)
    for y, row in enumerate(layout.rows):
        cells = []
        for x, key in enumerate(row):
            cells.append(f"[{key}]" if cursor == Position(x, y) else key)
        print(f"{y} | " + " ".join(cells), file=sys.stderr)
    print(file=sys.stderr)


def show_layout(
    layout: KeyboardLayout = KEYS,
    cursor: Position | None = None,
) -> int:
    """Render *layout*, highlighting *cursor* when given.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`.
    """
    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_layout(layout, cursor)
        return exit_codes.SUCCESS

    table = Table(
        title="keyboard layout",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("y \\ x", style="dim", justify="right")
    for x in range(layout.width):
        table.add_column(str(x), justify="center")

    for y, row in enumerate(layout.rows):
        table.add_row(
            str(y),
            *(
                _cell_markup(escape(key), cursor == Position(x, y))
                for x, key in enumerate(row)
            ),
        )

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
