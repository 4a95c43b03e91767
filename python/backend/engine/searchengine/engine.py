"""Greedy heuristic search that walks an 8-puzzle toward the goal."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.searchstate import SearchHistory
from backend.engine.stategenerator import StateGenerator
from backend.models.errors import UnsolvablePuzzleError
from backend.models.puzzle_state import Direction, PuzzleState

logger = logging.getLogger(__name__)


class StepOutcome(StrEnum):
    ALREADY_SOLVED = "already_solved"
    ADVANCED = "advanced"
    SOLVED = "solved"
    BACKTRACKED = "backtracked"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class StateSnapshot:
    """Read-only view of the engine's current state."""

    tiles: tuple[int, ...]
    depth: int
    manhattan_distance: int
    is_done: bool


@dataclass(frozen=True)
class StepResult:
    outcome: StepOutcome
    snapshot: StateSnapshot
    move: Direction | None = None
    steps: int = 1


def successors(state: PuzzleState) -> list[PuzzleState]:
    """Return one child per legal blank move, in adjacency-table order."""
    children: list[PuzzleState] = []
    for index in state.neighbors():
        child = PuzzleState.from_parent(state)
        child.swap(index, child.blank_index)
        children.append(child)
    return children


class SearchEngine:
    """Owns the current puzzle and its search history.

    Each :meth:`step` generates the successors of the current state, drops
    the unsolvable or already visited ones, ranks the rest and commits to the
    best.  When nothing survives the engine steps back along its path.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        root: PuzzleState | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        if root is not None and not root.is_solvable:
            raise UnsolvablePuzzleError(
                f"Root {root.tiles} has {root.inversion_count} inversions."
            )
        self.history = SearchHistory(root or StateGenerator.generate(self._rng))

    # -- queries --------------------------------------------------------------

    @property
    def current(self) -> PuzzleState:
        return self.history.last

    @property
    def is_done(self) -> bool:
        return self.current.is_goal

    def snapshot(self) -> StateSnapshot:
        state = self.current
        return StateSnapshot(
            tiles=state.key(),
            depth=state.depth,
            manhattan_distance=state.manhattan_distance,
            is_done=self.is_done,
        )

    # -- search ---------------------------------------------------------------

    def rank(self, candidate: PuzzleState) -> int:
        """Candidate's distance plus the *current* (parent) depth."""
        return candidate.manhattan_distance + self.current.depth

    def candidates(self) -> list[PuzzleState]:
        """Solvable, unvisited successors of the current state, best first.

        Ordered by :meth:`rank`.  The sort is stable so ties keep
        adjacency-table order.
        """
        parent = self.current
        survivors = [
            child
            for child in successors(parent)
            if child.is_solvable and not self.history.is_visited(child)
        ]
        return sorted(survivors, key=self.rank)

    def step(self) -> StepResult:
        """Advance the search by one decision."""
        if self.is_done:
            return StepResult(StepOutcome.ALREADY_SOLVED, self.snapshot(), steps=0)

        parent = self.current
        ranked = self.candidates()

        if not ranked:
            if len(self.history) < 2:
                logger.warning(
                    "Search exhausted at root %s with no move left", parent.tiles
                )
                return StepResult(StepOutcome.EXHAUSTED, self.snapshot())
            self.history.backtrack()
            logger.debug(
                "Dead end at %s, back to depth %d", parent.tiles, self.current.depth
            )
            return StepResult(StepOutcome.BACKTRACKED, self.snapshot())

        chosen = next((c for c in ranked if c.is_goal), ranked[0])
        chosen_rank = self.rank(chosen)
        self.history.push(chosen)
        move = Direction.of_slide(chosen.blank_index, parent.blank_index)

        if chosen.is_goal:
            logger.info("Solved at depth %d", chosen.depth)
            return StepResult(StepOutcome.SOLVED, self.snapshot(), move=move)

        logger.debug("Advanced to %s (rank %d)", chosen.tiles, chosen_rank)
        return StepResult(StepOutcome.ADVANCED, self.snapshot(), move=move)

    def run_to_completion(self, max_steps: int | None = None) -> StepResult:
        """Step until solved or exhausted, or until *max_steps* calls are made."""
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {max_steps}.")
        if self.is_done:
            return StepResult(StepOutcome.ALREADY_SOLVED, self.snapshot(), steps=0)

        result = self.step()
        steps = 1
        while not self.is_done and result.outcome is not StepOutcome.EXHAUSTED:
            if max_steps is not None and steps >= max_steps:
                break
            result = self.step()
            steps += 1

        return StepResult(result.outcome, result.snapshot, result.move, steps)

    def reset(self) -> None:
        """Discard the search and start over from a fresh solvable root."""
        self.history = SearchHistory(StateGenerator.generate(self._rng))
        logger.info("Engine reset")
