"""Random scrambles built from quarter, half and three-quarter face turns."""

from __future__ import annotations

import logging

import numpy as np

from .moves import DEFAULT_CATALOG, FACE_KEYS, MoveCatalog
from .notation import Move, format_moves
from .permutation import apply_sequence

logger = logging.getLogger(__name__)

DEFAULT_SCRAMBLE_STEPS = 40


def scramble_moves(
    rng: np.random.Generator,
    steps: int = DEFAULT_SCRAMBLE_STEPS,
    catalog: MoveCatalog = DEFAULT_CATALOG,
) -> list[Move]:
    if not isinstance(steps, int) or isinstance(steps, bool) or steps < 0:
        raise ValueError("Scramble steps must be a non-negative integer")

    faces = [catalog[key] for key in FACE_KEYS]
    moves: list[Move] = []
    for _ in range(steps):
        face = faces[int(rng.integers(len(faces)))]
        moves.append(Move(face, repeat=int(rng.integers(1, 4))))
    return moves


def scramble(
    state: np.ndarray,
    rng: np.random.Generator,
    steps: int = DEFAULT_SCRAMBLE_STEPS,
    catalog: MoveCatalog = DEFAULT_CATALOG,
) -> np.ndarray:
    moves = scramble_moves(rng, steps, catalog)
    logger.debug("scramble steps=%d moves=%s", steps, format_moves(moves))
    return apply_sequence(state, moves)
