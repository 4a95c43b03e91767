#!/usr/bin/env python3
"""8-Puzzle Solver.

Usage::

    python main.py                 # interactive menu
    python main.py -f rich         # Rich terminal
    python main.py --solve --seed 7  # solve one puzzle and print it
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.searchengine import SearchEngine, StepOutcome  # noqa: E402
from backend.models import PuzzleError, PuzzleState  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _parse_tiles(raw: str) -> PuzzleState:
    try:
        values = [int(v) for v in raw.replace(",", " ").split()]
    except ValueError:
        raise typer.BadParameter(f"Tiles must be integers, got {raw!r}.")
    try:
        return PuzzleState.from_tiles(values)
    except PuzzleError as exc:
        raise typer.BadParameter(str(exc))


def _solve(seed: Optional[int], tiles: Optional[str], max_steps: Optional[int]) -> None:
    from frontend.cli.vanilla.app import header, render_board

    root = _parse_tiles(tiles) if tiles else None
    try:
        engine = SearchEngine(rng=random.Random(seed), root=root)
    except PuzzleError as exc:
        raise typer.BadParameter(str(exc), param_hint="--tiles")

    print(f"{header(engine.snapshot())}:")
    print(render_board(engine.snapshot(), color=False))
    result = engine.run_to_completion(max_steps=max_steps)
    print()
    print(f"{header(result.snapshot)}:")
    print(render_board(result.snapshot, color=False))
    print(f"Steps: {result.steps}  History: {len(engine.history)}")

    if result.outcome is StepOutcome.EXHAUSTED or not result.snapshot.is_done:
        print("Search stopped before reaching the goal.")
        raise typer.Exit(code=1)


def _menu_loop(seed: Optional[int]) -> None:
    while True:
        print()
        print("  ====================================")
        print("         8 - P U Z Z L E              ")
        print("  ====================================")
        print()
        print("  1.  Vanilla Terminal")
        print("  2.  Rich Terminal")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            mod = importlib.import_module(
                {"1": _RUNNERS[Frontend.vanilla], "2": _RUNNERS[Frontend.rich]}[choice]
            )
            mod.run(seed=seed)
        else:
            print("  Invalid input entered. Please select one of the provided options.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the puzzle generator.",
    ),
    solve: bool = typer.Option(
        False, "--solve",
        help="Solve one puzzle non-interactively and exit.",
    ),
    tiles: Optional[str] = typer.Option(
        None, "--tiles",
        help="Start --solve from these 9 tiles, e.g. '1,2,3,4,5,6,7,0,8'.",
    ),
    max_steps: Optional[int] = typer.Option(
        None, "--max-steps",
        min=1,
        help="Stop --solve after this many steps.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every search decision.",
    ),
) -> None:
    """8-Puzzle Solver."""
    _configure_logging(verbose)

    if solve:
        _solve(seed, tiles, max_steps)
        return

    if frontend is None:
        _menu_loop(seed)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(seed=seed)


if __name__ == "__main__":
    app()
