"""Puzzle state model for the 8-puzzle solver."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import InvalidArrangementError

SIZE = 3
GOAL_TILES: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)

# Cells reachable from each cell by one orthogonal step.  Order matters: it
# decides which successor wins a ranking tie.
TILE_NEIGHBORS: dict[int, tuple[int, ...]] = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def of_slide(cls, tile_from: int, tile_to: int) -> Direction:
        """Direction a tile travels when it slides from *tile_from* to *tile_to*."""
        return {
            -SIZE: cls.UP,
            SIZE: cls.DOWN,
            -1: cls.LEFT,
            1: cls.RIGHT,
        }[tile_to - tile_from]


@dataclass
class PuzzleState:
    """A snapshot of the 3×3 board at some depth of the search.

    Tiles are stored as a flat row-major list of ints. 0 represents the blank.
    All metrics are derived from ``tiles`` on access so a swap is always
    reflected.
    """

    tiles: list[int]
    depth: int = 1

    # -- construction helpers -------------------------------------------------

    @classmethod
    def random(cls, rng: random.Random | None = None) -> PuzzleState:
        """Return a depth-1 state with uniformly shuffled tiles (maybe unsolvable)."""
        rng = rng or random.Random()
        tiles = list(range(SIZE * SIZE))
        rng.shuffle(tiles)
        return cls(tiles=tiles)

    @classmethod
    def from_parent(cls, parent: PuzzleState) -> PuzzleState:
        """Copy *parent*'s tiles one level deeper.  The caller applies the move."""
        return cls(tiles=parent.tiles[:], depth=parent.depth + 1)

    @classmethod
    def from_tiles(cls, tiles: list[int] | tuple[int, ...], depth: int = 1) -> PuzzleState:
        """Create a state from a flat row-major tile list.

        Example::

            PuzzleState.from_tiles([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = list(tiles)
        if len(tiles) != SIZE * SIZE:
            raise InvalidArrangementError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(SIZE * SIZE)):
            raise InvalidArrangementError(
                f"Tiles must be a permutation of 0..{SIZE * SIZE - 1}, got {tiles}."
            )
        if depth < 1:
            raise InvalidArrangementError(f"Depth must be at least 1, got {depth}.")
        return cls(tiles=tiles, depth=depth)

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def manhattan_distance(self) -> int:
        """Sum of grid distances from each non-blank tile to its goal cell."""
        distance = 0
        for i, val in enumerate(self.tiles):
            if val == 0:
                continue
            row, col = divmod(i, SIZE)
            goal_row, goal_col = divmod(val - 1, SIZE)
            distance += abs(row - goal_row) + abs(col - goal_col)
        return distance

    @property
    def inversion_count(self) -> int:
        """Number of out-of-order pairs of non-blank tiles."""
        flat = [v for v in self.tiles if v != 0]
        return sum(
            1
            for i in range(len(flat))
            for j in range(i + 1, len(flat))
            if flat[i] > flat[j]
        )

    @property
    def is_solvable(self) -> bool:
        return self.inversion_count % 2 == 0

    @property
    def is_goal(self) -> bool:
        return self.matches(GOAL_TILES)

    def neighbors(self) -> tuple[int, ...]:
        """Cells the blank can swap with."""
        return TILE_NEIGHBORS[self.blank_index]

    def matches(self, tiles: list[int] | tuple[int, ...]) -> bool:
        """Element-wise comparison against another arrangement."""
        return tuple(self.tiles) == tuple(tiles)

    def key(self) -> tuple[int, ...]:
        """Hashable form of the arrangement."""
        return tuple(self.tiles)

    # -- mutation -------------------------------------------------------------

    def swap(self, a: int, b: int) -> None:
        """Exchange the tiles at cells *a* and *b* in place.

        Only a swap involving the blank is a legal puzzle move; that is left
        to the caller.
        """
        self.tiles[a], self.tiles[b] = self.tiles[b], self.tiles[a]
