"""Exceptions raised for invalid puzzle input."""

from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for rejected puzzle input."""


class InvalidArrangementError(PuzzleError):
    """Tiles are not a permutation of 0..8 or the depth is out of range."""


class UnsolvablePuzzleError(PuzzleError):
    """A root arrangement has an odd inversion count."""
