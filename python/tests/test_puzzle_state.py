"""PuzzleState tests — heuristic, parity, construction and moves."""

from __future__ import annotations

import itertools
import random

import pytest

from backend.engine.searchengine import successors
from backend.models import (
    GOAL_TILES,
    TILE_NEIGHBORS,
    Direction,
    InvalidArrangementError,
    PuzzleState,
)


# -- helpers ------------------------------------------------------------------


def _inversions(tiles: tuple[int, ...]) -> int:
    """Count inversions by insertion, independently of the model."""
    seen: list[int] = []
    count = 0
    for v in tiles:
        if v == 0:
            continue
        count += sum(1 for s in seen if s > v)
        seen.append(v)
    return count


def _sample_permutations() -> list[tuple[int, ...]]:
    rng = random.Random(1234)
    head = list(itertools.islice(itertools.permutations(range(9)), 500))
    tail = [tuple(rng.sample(range(9), 9)) for _ in range(1500)]
    return head + tail


_PERMUTATIONS = _sample_permutations()


# -- solvability --------------------------------------------------------------


def test_solvability_matches_inversion_parity() -> None:
    solvable = 0
    for tiles in itertools.permutations(range(9)):
        state = PuzzleState(tiles=list(tiles))
        expected = _inversions(tiles) % 2 == 0
        assert state.is_solvable == expected, tiles
        solvable += expected

    # Exactly half of all 9! arrangements are solvable.
    assert solvable == 181_440


def test_swapped_last_pair_is_unsolvable() -> None:
    state = PuzzleState.from_tiles([1, 2, 3, 4, 5, 6, 8, 7, 0])
    assert state.inversion_count == 1
    assert not state.is_solvable


def test_solvability_is_recomputed_after_swap() -> None:
    state = PuzzleState.from_tiles(GOAL_TILES)
    assert state.is_solvable
    state.swap(0, 1)  # not a legal move, flips parity
    assert not state.is_solvable


# -- heuristic ----------------------------------------------------------------


def test_goal_has_zero_distance() -> None:
    state = PuzzleState.from_tiles(GOAL_TILES)
    assert state.manhattan_distance == 0
    assert state.is_goal


def test_non_goal_has_positive_distance() -> None:
    for tiles in _PERMUTATIONS:
        if tiles == GOAL_TILES:
            continue
        assert PuzzleState.from_tiles(tiles).manhattan_distance > 0, tiles


@pytest.mark.parametrize(
    ("tiles", "expected"),
    [
        ([1, 2, 3, 4, 5, 6, 7, 0, 8], 1),
        ([1, 2, 3, 4, 5, 6, 0, 7, 8], 2),
        ([0, 1, 2, 3, 4, 5, 6, 7, 8], 12),
        ([8, 6, 7, 2, 5, 4, 3, 0, 1], 21),
    ],
    ids=["one-move", "two-moves", "shifted-row", "hardest"],
)
def test_manhattan_distance(tiles: list[int], expected: int) -> None:
    assert PuzzleState.from_tiles(tiles).manhattan_distance == expected


# -- construction -------------------------------------------------------------


def test_random_is_a_depth_one_permutation() -> None:
    rng = random.Random(7)
    for _ in range(50):
        state = PuzzleState.random(rng)
        assert state.depth == 1
        assert sorted(state.tiles) == list(range(9))


def test_random_is_reproducible_with_seed() -> None:
    a = PuzzleState.random(random.Random(99))
    b = PuzzleState.random(random.Random(99))
    assert a.tiles == b.tiles


def test_from_parent_copies_tiles_one_level_deeper() -> None:
    parent = PuzzleState.from_tiles([1, 2, 3, 4, 5, 6, 7, 0, 8], depth=4)
    child = PuzzleState.from_parent(parent)

    assert child.depth == parent.depth + 1
    assert child.tiles == parent.tiles
    assert child.tiles is not parent.tiles

    child.swap(8, child.blank_index)
    assert parent.tiles == [1, 2, 3, 4, 5, 6, 7, 0, 8]


@pytest.mark.parametrize(
    "tiles",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
    ids=["short", "long", "duplicate", "out-of-range"],
)
def test_from_tiles_rejects_bad_arrangements(tiles: list[int]) -> None:
    with pytest.raises(InvalidArrangementError):
        PuzzleState.from_tiles(tiles)


def test_from_tiles_rejects_zero_depth() -> None:
    with pytest.raises(InvalidArrangementError):
        PuzzleState.from_tiles(GOAL_TILES, depth=0)


# -- successors ---------------------------------------------------------------


_EXPECTED_MOVE_COUNTS = {0: 2, 1: 3, 2: 2, 3: 3, 4: 4, 5: 3, 6: 2, 7: 3, 8: 2}


@pytest.mark.parametrize("blank", range(9))
def test_successor_count_per_blank_position(blank: int) -> None:
    tiles = [1, 2, 3, 4, 5, 6, 7, 8]
    tiles.insert(blank, 0)
    parent = PuzzleState.from_tiles(tiles)

    children = successors(parent)

    assert parent.blank_index == blank
    assert len(children) == _EXPECTED_MOVE_COUNTS[blank] == len(TILE_NEIGHBORS[blank])
    for neighbor, child in zip(TILE_NEIGHBORS[blank], children):
        changed = {i for i in range(9) if child.tiles[i] != parent.tiles[i]}
        assert changed == {blank, neighbor}
        assert child.blank_index == neighbor
        assert child.depth == parent.depth + 1


def test_successors_with_blank_on_bottom_edge() -> None:
    parent = PuzzleState.from_tiles([1, 2, 3, 4, 5, 6, 7, 0, 8])

    children = successors(parent)

    assert parent.neighbors() == (4, 6, 8)
    assert [c.tiles for c in children] == [
        [1, 2, 3, 4, 0, 6, 7, 5, 8],
        [1, 2, 3, 4, 5, 6, 0, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0],
    ]
    assert children[2].is_goal


# -- directions ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("tile_from", "tile_to", "expected"),
    [
        (8, 7, Direction.LEFT),
        (7, 8, Direction.RIGHT),
        (4, 1, Direction.UP),
        (1, 4, Direction.DOWN),
    ],
)
def test_direction_of_slide(tile_from: int, tile_to: int, expected: Direction) -> None:
    assert Direction.of_slide(tile_from, tile_to) is expected
