"""Per-player Rubik's cube game state."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable

import numpy as np

from .layout import Sticker, solved_state
from .moves import DEFAULT_CATALOG, MoveCatalog
from .notation import Move, MoveParser, format_moves
from .permutation import apply_sequence
from .scramble import DEFAULT_SCRAMBLE_STEPS, scramble_moves
from .solved_check import is_solved_orientation_invariant
from .state_codec import decode_state, encode_state, to_stickers, validate_state

logger = logging.getLogger(__name__)


class RubikGame:
    """A personal cube that only ever changes by whole-state replacement.

    Every mutation builds the next state on a private copy and then rebinds
    ``self._state`` in a single assignment, so a concurrent reader sees either
    the old or the new cube and invalid input never changes anything.
    ``time``, ``last_played``, ``owner_id``, ``channel_id`` and ``message_id``
    belong to the surrounding bot and are stored as given.
    """

    def __init__(
        self,
        owner_id: int | None = None,
        channel_id: int | None = None,
        catalog: MoveCatalog = DEFAULT_CATALOG,
        initial_state: list[int] | np.ndarray | None = None,
    ):
        self.catalog = catalog
        self.parser = MoveParser(catalog)
        self._rng = np.random.default_rng()
        self._state = solved_state() if initial_state is None else validate_state(initial_state)

        self.owner_id = owner_id
        self.channel_id = channel_id
        self.message_id: int | None = None
        self.time = 0
        self.last_played: datetime | None = None
        self.show_help = True

    @property
    def state(self) -> np.ndarray:
        """Current read-only flat state (length 54)."""
        return self._state

    @property
    def raw_cube(self) -> str:
        return encode_state(self._state)

    @raw_cube.setter
    def raw_cube(self, value: str):
        self._state = decode_state(value)

    def stickers(self) -> list[Sticker]:
        return to_stickers(self._state)

    def is_solved(self) -> bool:
        return is_solved_orientation_invariant(self._state)

    def reset(self) -> np.ndarray:
        self._state = solved_state()
        return self._state

    def apply_moves(self, moves: Iterable[Move]) -> np.ndarray:
        moves = list(moves)
        new_state = apply_sequence(self._state, moves)
        self._state = new_state
        logger.debug("owner=%s applied %s", self.owner_id, format_moves(moves))
        return new_state

    def do_moves(self, text: str) -> list[Move]:
        """Parse and apply a whitespace-separated move sequence.

        Raises ``ParseError`` before touching the cube if any token is invalid.
        """
        moves = self.parser.parse_sequence(text)
        self.apply_moves(moves)
        return moves

    def scramble(
        self,
        steps: int = DEFAULT_SCRAMBLE_STEPS,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> tuple[np.ndarray, list[Move]]:
        if rng is None:
            rng = np.random.default_rng(seed) if seed is not None else self._rng
        moves = scramble_moves(rng, steps, self.catalog)
        return self.apply_moves(moves), moves

    def to_record(self) -> dict[str, Any]:
        return {
            "raw_cube": self.raw_cube,
            "time": self.time,
            "last_played": self.last_played.isoformat() if self.last_played else None,
            "owner_id": self.owner_id,
            "channel_id": self.channel_id,
            "message_id": self.message_id,
            "show_help": self.show_help,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any], catalog: MoveCatalog = DEFAULT_CATALOG) -> "RubikGame":
        state = decode_state(record["raw_cube"])
        game = cls(
            owner_id=record.get("owner_id"),
            channel_id=record.get("channel_id"),
            catalog=catalog,
            initial_state=state,
        )
        game.time = record.get("time", 0)
        last_played = record.get("last_played")
        game.last_played = datetime.fromisoformat(last_played) if last_played else None
        game.message_id = record.get("message_id")
        game.show_help = bool(record.get("show_help", True))
        return game

    def state_payload(self) -> dict[str, Any]:
        state = self._state
        return {
            "state": encode_state(state),
            "stickers": [int(v) for v in state],
            "solved": is_solved_orientation_invariant(state),
            "show_help": self.show_help,
        }
