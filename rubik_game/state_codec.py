"""State validation and codec helpers."""

from __future__ import annotations

import numpy as np

from .layout import FACE_SIZE, N_FACES, STATE_SIZE, Sticker

_DIGITS = frozenset(str(color) for color in range(N_FACES))


class FormatError(ValueError):
    """Raised when a stored or submitted cube state is malformed."""


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def validate_state(state: list[int] | np.ndarray) -> np.ndarray:
    """Validate color IDs and return a read-only flat int8 state of length 54."""
    try:
        arr = np.asarray(state).reshape(-1)
    except (TypeError, ValueError, OverflowError) as exc:
        raise FormatError(f"State must be a sequence of color IDs: {exc}") from exc

    if arr.dtype.kind not in "iu":
        raise FormatError(f"State must contain integer color IDs, got dtype {arr.dtype}")

    if arr.size != STATE_SIZE:
        raise FormatError(f"State must have {STATE_SIZE} stickers, got {arr.size}")

    if np.any(arr < 0) or np.any(arr >= N_FACES):
        raise FormatError(f"State contains invalid color IDs; allowed values are 0..{N_FACES - 1}")

    return _freeze(arr.astype(np.int8, copy=True))


def encode_state(state: list[int] | np.ndarray) -> str:
    """Return the raw cube string: one digit per sticker, in index order."""
    arr = validate_state(state)
    return "".join(str(int(v)) for v in arr)


def decode_state(raw: str) -> np.ndarray:
    if not isinstance(raw, str):
        raise FormatError(f"Raw cube must be a string, got {type(raw).__name__}")
    if len(raw) != STATE_SIZE:
        raise FormatError(f"Raw cube must have {STATE_SIZE} characters, got {len(raw)}")

    bad = sorted({ch for ch in raw if ch not in _DIGITS})
    if bad:
        raise FormatError(f"Raw cube contains invalid characters: {''.join(bad)!r}")

    return _freeze(np.fromiter((int(ch) for ch in raw), dtype=np.int8, count=STATE_SIZE))


def to_stickers(state: list[int] | np.ndarray) -> list[Sticker]:
    return [Sticker(int(v)) for v in validate_state(state)]


def flat_to_faces(state: list[int] | np.ndarray) -> np.ndarray:
    """Reshape to (face, row, col) in F, U, R, L, D, B order."""
    arr = validate_state(state)
    return arr.reshape(N_FACES, FACE_SIZE, FACE_SIZE)


def faces_to_flat(faces: np.ndarray) -> np.ndarray:
    arr = np.asarray(faces)
    if arr.shape != (N_FACES, FACE_SIZE, FACE_SIZE):
        raise FormatError(
            f"Faces array must have shape ({N_FACES}, {FACE_SIZE}, {FACE_SIZE}), got {arr.shape}"
        )
    return validate_state(arr.reshape(-1))
