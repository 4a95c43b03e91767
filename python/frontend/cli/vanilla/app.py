"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import random
import sys

from backend.engine.searchengine import SearchEngine, StateSnapshot, StepOutcome, StepResult
from frontend.cli.input_handler import get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def header(snapshot: StateSnapshot) -> str:
    if snapshot.is_done:
        return "Puzzle solved!"
    return "Initial State" if snapshot.depth == 1 else "Current State"


# -- board rendering ----------------------------------------------------------


def render_board(snapshot: StateSnapshot, color: bool = True) -> str:
    """Return a text representation of the board with depth and distance."""
    g, dim, y, r = (_G, _DIM, _Y, _R) if color else ("", "", "", "")
    sep = "+---+---+---+"

    lines: list[str] = [sep]
    for row in range(3):
        cells: list[str] = []
        for col in range(3):
            i = row * 3 + col
            val = snapshot.tiles[i]
            if val == 0:
                cells.append(f"{dim} · {r}")
            elif val == i + 1:
                cells.append(f"{g} {val} {r}")
            else:
                cells.append(f" {val} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    lines.append(
        f"Depth: {y}{snapshot.depth}{r}  |  "
        f"Manhattan Distance: {y}{snapshot.manhattan_distance}{r}"
    )
    return "\n".join(lines)


def describe(result: StepResult) -> str:
    """One-line status message for a step or solve result."""
    if result.outcome is StepOutcome.ALREADY_SOLVED:
        return "The puzzle is already solved. Reset to solve another or exit."
    if result.outcome is StepOutcome.BACKTRACKED:
        return "No valid moves found, reverting to the previous state."
    if result.outcome is StepOutcome.EXHAUSTED:
        return "No moves left to try from the initial state."
    moved = f"moved {result.move.value}" if result.move else ""
    if result.outcome is StepOutcome.SOLVED:
        return f"Solved after {result.steps} step(s); {moved}".rstrip("; ")
    return moved


# -- screens ------------------------------------------------------------------


def _show(engine: SearchEngine, status: str = "") -> None:
    _clear()
    snapshot = engine.snapshot()
    colour = _G if snapshot.is_done else _C
    print(f"  {colour}=== {header(snapshot)} ==={_R}")
    print()
    print(render_board(snapshot))
    print()
    if status:
        print(f"  {status}")
        print()
    print(
        f"  {_C}1{_R}: continue  |  "
        f"{_C}2{_R}: solve  |  "
        f"{_C}3{_R}: reset  |  "
        f"{_C}4{_R}: exit"
    )


# -- main loop ----------------------------------------------------------------


def _loop(engine: SearchEngine) -> None:
    status = ""
    while True:
        _show(engine, status)
        status = ""
        key = get_key()

        if key == "continue":
            status = describe(engine.step())
        elif key == "solve":
            status = describe(engine.run_to_completion())
        elif key == "reset":
            engine.reset()
        elif key == "quit":
            _clear()
            print("  Exiting program.\n")
            return
        else:
            status = f"{_Y}Invalid input. Please select one of the provided options.{_R}"


# -- public entry point -------------------------------------------------------


def run(seed: int | None = None) -> None:
    """Launch the vanilla CLI."""
    _loop(SearchEngine(rng=random.Random(seed)))
