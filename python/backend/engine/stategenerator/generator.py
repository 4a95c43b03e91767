"""Generates random solvable 8-puzzle roots."""

from __future__ import annotations

import logging
import random

from backend.models.puzzle_state import PuzzleState

logger = logging.getLogger(__name__)


class StateGenerator:
    """Creates solvable roots by shuffling until the parity is even."""

    @staticmethod
    def generate(rng: random.Random | None = None) -> PuzzleState:
        """Return a random *solvable* depth-1 state.

        Half of all shuffles are solvable, so this settles in a couple of
        draws.
        """
        rng = rng or random.Random()
        attempts = 1
        state = PuzzleState.random(rng)
        while not state.is_solvable:
            attempts += 1
            state = PuzzleState.random(rng)

        logger.info("Generated root %s after %d draw(s)", state.tiles, attempts)
        return state
