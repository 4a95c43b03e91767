from backend.models.errors import (
    InvalidArrangementError,
    PuzzleError,
    UnsolvablePuzzleError,
)
from backend.models.puzzle_state import GOAL_TILES, TILE_NEIGHBORS, Direction, PuzzleState

__all__ = [
    "GOAL_TILES",
    "TILE_NEIGHBORS",
    "Direction",
    "InvalidArrangementError",
    "PuzzleError",
    "PuzzleState",
    "UnsolvablePuzzleError",
]
