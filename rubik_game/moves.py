"""Built-in cube transformations expressed as cycles of sticker indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .layout import BACK, DOWN, FRONT, LEFT, RIGHT, STATE_SIZE, UP

Cycle = tuple[int, ...]


class ConfigurationError(RuntimeError):
    """Raised when move definitions violate the cycle invariants."""


@dataclass(frozen=True)
class MoveDefinition:
    """A named transformation.

    Each sticker in a cycle is replaced by its neighbour in the cycle when the
    move is applied; the direction depends on the move's shift (see ``Move``).
    """

    key: str
    cycles: tuple[Cycle, ...]

    def __post_init__(self):
        object.__setattr__(self, "cycles", tuple(tuple(int(i) for i in cycle) for cycle in self.cycles))

    @property
    def lookup_key(self) -> str:
        return self.key.upper()

    def indices(self) -> set[int]:
        return {index for cycle in self.cycles for index in cycle}


def validate_cycles(key: str, cycles: Iterable[Iterable[int]]) -> list[str]:
    """Return every structural problem in ``cycles``; an empty list means valid."""
    problems: list[str] = []
    seen: set[int] = set()

    for n, cycle in enumerate(cycles):
        cycle = tuple(cycle)
        if len(cycle) < 2:
            problems.append(f"{key}: cycle {n} has fewer than 2 indices")
        out_of_range = [i for i in cycle if not 0 <= i < STATE_SIZE]
        if out_of_range:
            problems.append(f"{key}: cycle {n} has indices outside 0..{STATE_SIZE - 1}: {out_of_range}")
        if len(set(cycle)) != len(cycle):
            problems.append(f"{key}: cycle {n} repeats an index")
        shared = sorted(seen.intersection(cycle))
        if shared:
            problems.append(f"{key}: cycle {n} reuses indices from earlier cycles: {shared}")
        seen.update(cycle)

    return problems


class MoveCatalog:
    """Read-only registry of move definitions, looked up case-insensitively."""

    def __init__(self, definitions: Iterable[MoveDefinition]):
        by_key: dict[str, MoveDefinition] = {}
        problems: list[str] = []

        for definition in definitions:
            problems.extend(validate_cycles(definition.key, definition.cycles))
            if definition.lookup_key in by_key:
                problems.append(f"{definition.key}: duplicate move key")
                continue
            by_key[definition.lookup_key] = definition

        if problems:
            raise ConfigurationError("Invalid move definitions:\n" + "\n".join(problems))

        self._by_key = by_key

    def get(self, key: str) -> MoveDefinition | None:
        return self._by_key.get(key.upper())

    def __getitem__(self, key: str) -> MoveDefinition:
        definition = self.get(key)
        if definition is None:
            raise KeyError(key)
        return definition

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self._by_key

    def __iter__(self) -> Iterator[MoveDefinition]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def keys(self) -> list[str]:
        return [definition.key for definition in self._by_key.values()]


def _reversed(cycles: tuple[Cycle, ...]) -> tuple[Cycle, ...]:
    return tuple(cycle[::-1] for cycle in cycles)


def _define(key: str, *groups: tuple[Cycle, ...]) -> MoveDefinition:
    return MoveDefinition(key, tuple(cycle for group in groups for cycle in group))


# Face turns: two cycles around the face itself, three across the neighbouring strips.
CYCLES_F = (
    (FRONT + 0, FRONT + 2, FRONT + 8, FRONT + 6),
    (FRONT + 1, FRONT + 5, FRONT + 7, FRONT + 3),
    (DOWN + 2, LEFT + 8, UP + 6, RIGHT + 0),
    (DOWN + 1, LEFT + 5, UP + 7, RIGHT + 3),
    (DOWN + 0, LEFT + 2, UP + 8, RIGHT + 6),
)

CYCLES_B = (
    (BACK + 0, BACK + 2, BACK + 8, BACK + 6),
    (BACK + 1, BACK + 5, BACK + 7, BACK + 3),
    (DOWN + 8, RIGHT + 2, UP + 0, LEFT + 6),
    (DOWN + 7, RIGHT + 5, UP + 1, LEFT + 3),
    (DOWN + 6, RIGHT + 8, UP + 2, LEFT + 0),
)

CYCLES_U = (
    (UP + 0, UP + 2, UP + 8, UP + 6),
    (UP + 1, UP + 5, UP + 7, UP + 3),
    (FRONT + 0, LEFT + 0, BACK + 0, RIGHT + 0),
    (FRONT + 1, LEFT + 1, BACK + 1, RIGHT + 1),
    (FRONT + 2, LEFT + 2, BACK + 2, RIGHT + 2),
)

CYCLES_D = (
    (DOWN + 0, DOWN + 2, DOWN + 8, DOWN + 6),
    (DOWN + 1, DOWN + 5, DOWN + 7, DOWN + 3),
    (FRONT + 6, RIGHT + 6, BACK + 6, LEFT + 6),
    (FRONT + 7, RIGHT + 7, BACK + 7, LEFT + 7),
    (FRONT + 8, RIGHT + 8, BACK + 8, LEFT + 8),
)

CYCLES_R = (
    (RIGHT + 0, RIGHT + 2, RIGHT + 8, RIGHT + 6),
    (RIGHT + 1, RIGHT + 5, RIGHT + 7, RIGHT + 3),
    (FRONT + 2, UP + 2, BACK + 6, DOWN + 2),
    (FRONT + 5, UP + 5, BACK + 3, DOWN + 5),
    (FRONT + 8, UP + 8, BACK + 0, DOWN + 8),
)

CYCLES_L = (
    (LEFT + 0, LEFT + 2, LEFT + 8, LEFT + 6),
    (LEFT + 1, LEFT + 5, LEFT + 7, LEFT + 3),
    (FRONT + 0, DOWN + 0, BACK + 8, UP + 0),
    (FRONT + 3, DOWN + 3, BACK + 5, UP + 3),
    (FRONT + 6, DOWN + 6, BACK + 2, UP + 6),
)

# Slice turns: middle layers only, including the centers they pass through.
CYCLES_S = (
    (DOWN + 5, LEFT + 7, UP + 3, RIGHT + 1),
    (DOWN + 4, LEFT + 4, UP + 4, RIGHT + 4),
    (DOWN + 3, LEFT + 1, UP + 5, RIGHT + 7),
)

CYCLES_E = (
    (FRONT + 3, RIGHT + 3, BACK + 3, LEFT + 3),
    (FRONT + 4, RIGHT + 4, BACK + 4, LEFT + 4),
    (FRONT + 5, RIGHT + 5, BACK + 5, LEFT + 5),
)

CYCLES_M = (
    (FRONT + 1, DOWN + 1, BACK + 7, UP + 1),
    (FRONT + 4, DOWN + 4, BACK + 4, UP + 4),
    (FRONT + 7, DOWN + 7, BACK + 1, UP + 7),
)

FACE_KEYS = ("F", "U", "R", "L", "D", "B")
SLICE_KEYS = ("M", "S", "E")
WIDE_KEYS = ("Bw", "Uw", "Rw", "Lw", "Dw", "Fw")
ROTATION_KEYS = ("x", "y", "z")
ALGORITHM_KEYS = ("Tperm", "sexy", "lsexy", "superflip")


def _face_moves() -> list[MoveDefinition]:
    return [
        MoveDefinition("F", CYCLES_F),
        MoveDefinition("U", CYCLES_U),
        MoveDefinition("R", CYCLES_R),
        MoveDefinition("L", CYCLES_L),
        MoveDefinition("D", CYCLES_D),
        MoveDefinition("B", CYCLES_B),
    ]


def _slice_moves() -> list[MoveDefinition]:
    return [
        MoveDefinition("M", CYCLES_M),
        MoveDefinition("S", CYCLES_S),
        MoveDefinition("E", CYCLES_E),
    ]


def _wide_moves() -> list[MoveDefinition]:
    # Slice orientation in standard notation is inconsistent: M follows L, E follows D
    # and S follows F, so Bw, Uw and Rw take their slice backwards.
    return [
        _define("Bw", CYCLES_B, _reversed(CYCLES_S)),
        _define("Uw", CYCLES_U, _reversed(CYCLES_E)),
        _define("Rw", CYCLES_R, _reversed(CYCLES_M)),
        _define("Lw", CYCLES_L, CYCLES_M),
        _define("Dw", CYCLES_D, CYCLES_E),
        _define("Fw", CYCLES_F, CYCLES_S),
    ]


def _rotations() -> list[MoveDefinition]:
    return [
        _define("x", CYCLES_R, _reversed(CYCLES_M), _reversed(CYCLES_L)),
        _define("y", CYCLES_U, _reversed(CYCLES_E), _reversed(CYCLES_D)),
        _define("z", CYCLES_F, CYCLES_S, _reversed(CYCLES_B)),
    ]


def _algorithms() -> list[MoveDefinition]:
    return [
        MoveDefinition(
            "Tperm",
            (
                # edges
                (LEFT + 1, RIGHT + 1),
                (UP + 3, UP + 5),
                # corners
                (FRONT + 2, RIGHT + 2),
                (BACK + 0, RIGHT + 0),
                (UP + 2, UP + 8),
            ),
        ),
        MoveDefinition(
            "sexy",  # R U R' U'
            (
                (DOWN + 2, FRONT + 2, FRONT + 8, UP + 8, RIGHT + 6, RIGHT + 0),
                (RIGHT + 2, BACK + 2, BACK + 0, LEFT + 0, UP + 2, UP + 0),
                (FRONT + 5, UP + 5, UP + 1),
                (RIGHT + 3, RIGHT + 1, BACK + 1),
            ),
        ),
        MoveDefinition(
            "lsexy",  # L' U' L U
            (
                (DOWN + 0, FRONT + 0, FRONT + 6, UP + 6, LEFT + 8, LEFT + 2),
                (LEFT + 0, BACK + 0, BACK + 2, RIGHT + 2, UP + 0, UP + 2),
                (FRONT + 3, UP + 3, UP + 1),
                (LEFT + 5, LEFT + 1, BACK + 1),
            ),
        ),
        MoveDefinition(
            "superflip",
            (
                (FRONT + 1, UP + 7), (FRONT + 5, RIGHT + 3), (FRONT + 7, DOWN + 1), (FRONT + 3, LEFT + 5),
                (BACK + 1, UP + 1), (BACK + 5, LEFT + 3), (BACK + 7, DOWN + 7), (BACK + 3, RIGHT + 5),
                (RIGHT + 1, UP + 5), (RIGHT + 7, DOWN + 5),
                (LEFT + 1, UP + 3), (LEFT + 7, DOWN + 3),
            ),
        ),
    ]


def build_default_catalog() -> MoveCatalog:
    return MoveCatalog(_face_moves() + _slice_moves() + _wide_moves() + _rotations() + _algorithms())


DEFAULT_CATALOG = build_default_catalog()
