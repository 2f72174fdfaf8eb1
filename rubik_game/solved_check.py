"""Solved-state checks for the cube."""

from __future__ import annotations

import numpy as np

from .layout import STATE_SIZE, solved_state
from .moves import DEFAULT_CATALOG, ROTATION_KEYS, ConfigurationError
from .notation import Move
from .permutation import move_permutation
from .state_codec import validate_state

_CANONICAL_SOLVED = solved_state()
N_ORIENTATIONS = 24


def _whole_cube_orientations() -> tuple[np.ndarray, ...]:
    """Every gather permutation reachable by combining the x, y and z rotations."""
    generators = [move_permutation(Move(DEFAULT_CATALOG[key])) for key in ROTATION_KEYS]
    identity = np.arange(STATE_SIZE, dtype=np.intp)
    seen = {tuple(identity.tolist()): identity}
    frontier = [identity]
    while frontier:
        next_frontier = []
        for perm in frontier:
            for gen in generators:
                composed = perm[gen]
                key = tuple(composed.tolist())
                if key not in seen:
                    seen[key] = composed
                    next_frontier.append(composed)
        frontier = next_frontier

    if len(seen) != N_ORIENTATIONS:
        raise ConfigurationError(f"Rotations generate {len(seen)} orientations, expected {N_ORIENTATIONS}")
    return tuple(seen.values())


_ORIENTATIONS = _whole_cube_orientations()


def is_solved(state: list[int] | np.ndarray) -> bool:
    """True only for the canonical solved state (face k entirely color k)."""
    return bool(np.array_equal(validate_state(state), _CANONICAL_SOLVED))


def is_solved_orientation_invariant(state: list[int] | np.ndarray) -> bool:
    """True when some whole-cube rotation turns ``state`` into the canonical solved state.

    Uniform faces alone are not enough: the colors must also sit in an arrangement
    a physical cube can have, so swapping two solved faces is rejected.
    """
    arr = validate_state(state)
    return any(np.array_equal(arr[perm], _CANONICAL_SOLVED) for perm in _ORIENTATIONS)
