"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler, status messages and engine as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.searchengine import SearchEngine, StateSnapshot, StepOutcome, StepResult
from frontend.cli.input_handler import get_key
from frontend.cli.vanilla.app import describe, header

console = Console()

_STATUS_STYLE = {
    StepOutcome.ALREADY_SOLVED: "yellow",
    StepOutcome.ADVANCED: "cyan",
    StepOutcome.SOLVED: "bold green",
    StepOutcome.BACKTRACKED: "yellow",
    StepOutcome.EXHAUSTED: "bold red",
}


# -- board rendering ----------------------------------------------------------


def render_board(snapshot: StateSnapshot) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for row in range(3):
        cells: list[str] = []
        for col in range(3):
            i = row * 3 + col
            val = snapshot.tiles[i]
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == i + 1:
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _status(result: StepResult) -> Text:
    return Text(f"  {describe(result)}", style=_STATUS_STYLE[result.outcome])


# -- screens ------------------------------------------------------------------


def _draw(engine: SearchEngine, status: Text | None = None) -> None:
    console.clear()
    snapshot = engine.snapshot()

    stats = Text()
    stats.append("  Depth: ", style="dim")
    stats.append(str(snapshot.depth), style="bold yellow")
    stats.append("    Manhattan Distance: ", style="dim")
    stats.append(str(snapshot.manhattan_distance), style="bold yellow")

    controls = Text()
    controls.append("  1", style="bold cyan")
    controls.append("  continue   ", style="dim")
    controls.append("2", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("3", style="bold yellow")
    controls.append("  reset   ", style="dim")
    controls.append("4", style="bold cyan")
    controls.append("  exit", style="dim")

    colour = "green" if snapshot.is_done else "cyan"
    panel = Panel(
        Group(Align.center(render_board(snapshot)), Text(""), Align.center(stats)),
        title=f"[bold {colour}]{header(snapshot)}[/bold {colour}]",
        border_style=f"bold {colour}" if snapshot.is_done else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status is not None:
        console.print(Align.center(status))
    console.print(Align.center(controls))


# -- main loop ----------------------------------------------------------------


def _loop(engine: SearchEngine) -> None:
    status: Text | None = None
    while True:
        _draw(engine, status)
        status = None
        key = get_key()

        if key == "continue":
            status = _status(engine.step())
        elif key == "solve":
            with console.status("[cyan]Solving…[/cyan]"):
                result = engine.run_to_completion()
            status = _status(result)
        elif key == "reset":
            engine.reset()
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nExiting program.\n", style="bold cyan")))
            return
        else:
            status = Text(
                "  Invalid input. Please select one of the provided options.",
                style="yellow",
            )


# -- public entry point -------------------------------------------------------


def run(seed: int | None = None) -> None:
    """Launch the Rich CLI."""
    _loop(SearchEngine(rng=random.Random(seed)))
