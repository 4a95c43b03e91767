"""Tracks the path of states the search has committed to."""

from __future__ import annotations

from collections.abc import Iterator

from backend.models.puzzle_state import PuzzleState


class SearchHistory:
    """Holds the committed path plus every arrangement backed out of.

    The last entry of the path is always the engine's current state.
    """

    def __init__(self, root: PuzzleState) -> None:
        self._path: list[PuzzleState] = [root]
        self._on_path: set[tuple[int, ...]] = {root.key()}
        self._dead_ends: set[tuple[int, ...]] = set()

    def __len__(self) -> int:
        return len(self._path)

    def __iter__(self) -> Iterator[PuzzleState]:
        return iter(self._path)

    # -- queries --------------------------------------------------------------

    @property
    def last(self) -> PuzzleState:
        return self._path[-1]

    @property
    def dead_ends(self) -> frozenset[tuple[int, ...]]:
        return frozenset(self._dead_ends)

    def is_visited(self, state: PuzzleState) -> bool:
        """True if *state*'s arrangement is on the path or was backed out of."""
        key = state.key()
        return key in self._on_path or key in self._dead_ends

    # -- updates --------------------------------------------------------------

    def push(self, state: PuzzleState) -> None:
        key = state.key()
        if key in self._on_path:
            raise ValueError(f"Arrangement {state.tiles} is already on the path.")
        self._path.append(state)
        self._on_path.add(key)

    def backtrack(self) -> PuzzleState:
        """Drop the last entry, remember it as a dead end, return the new last."""
        if len(self._path) < 2:
            raise IndexError("Cannot backtrack past the root.")
        dropped = self._path.pop()
        self._on_path.discard(dropped.key())
        self._dead_ends.add(dropped.key())
        return self._path[-1]
