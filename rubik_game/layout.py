"""Sticker colors and face layout of the 3x3 cube state."""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class Sticker(IntEnum):
    """A sticker color on the cube. The value is the digit used in the raw string."""

    GREEN = 0
    WHITE = 1
    RED = 2
    ORANGE = 3
    YELLOW = 4
    BLUE = 5


# Faces in state order; each face is a row-major 3x3 block of the flat state.
FACE_ORDER = ("F", "U", "R", "L", "D", "B")
FACE_INDEX = {face: i for i, face in enumerate(FACE_ORDER)}
N_FACES = 6
FACE_SIZE = 3
STICKERS_PER_FACE = FACE_SIZE * FACE_SIZE
STATE_SIZE = N_FACES * STICKERS_PER_FACE

# Starting index of each face in the state array.
FRONT = FACE_INDEX["F"] * STICKERS_PER_FACE
UP = FACE_INDEX["U"] * STICKERS_PER_FACE
RIGHT = FACE_INDEX["R"] * STICKERS_PER_FACE
LEFT = FACE_INDEX["L"] * STICKERS_PER_FACE
DOWN = FACE_INDEX["D"] * STICKERS_PER_FACE
BACK = FACE_INDEX["B"] * STICKERS_PER_FACE

SOLVED_CUBE = "".join(str(face) * STICKERS_PER_FACE for face in range(N_FACES))


def solved_state() -> np.ndarray:
    """Return the canonical solved flat state of length 54 (read-only)."""
    state = np.repeat(np.arange(N_FACES, dtype=np.int8), STICKERS_PER_FACE)
    state.flags.writeable = False
    return state
