"""Application of moves to flat sticker states."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

import numpy as np

from .layout import STATE_SIZE
from .notation import Move


@lru_cache(maxsize=4096)
def move_permutation(move: Move) -> np.ndarray:
    """Gather indices for ``move``: ``new_state = old_state[perm]``.

    Position ``cycle[i]`` takes the old value at ``cycle[(i + shift) % len(cycle)]``;
    positions outside every cycle keep their own value.
    """
    perm = np.arange(STATE_SIZE, dtype=np.intp)
    shift = move.shift
    for cycle in move.definition.cycles:
        n = len(cycle)
        for i, index in enumerate(cycle):
            perm[index] = cycle[(i + shift) % n]
    perm.flags.writeable = False
    return perm


def apply_move(state: np.ndarray, move: Move) -> np.ndarray:
    """Return a new read-only state with ``move`` applied; ``state`` is left as is."""
    new_state = np.asarray(state)[move_permutation(move)]
    new_state.flags.writeable = False
    return new_state


def apply_sequence(state: np.ndarray, moves: Iterable[Move]) -> np.ndarray:
    for move in moves:
        state = apply_move(state, move)
    return state
