"""Parsing of cube move notation such as ``R U2 Rw' x``."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from .moves import DEFAULT_CATALOG, MoveCatalog, MoveDefinition

# key, optional repeat count, optional apostrophes (only their parity matters)
TOKEN_PATTERN = re.compile(r"([a-zA-Z]+)([0-9]{0,3})('{0,10})")


class ParseError(ValueError):
    """Raised when a move token is malformed or names an unknown move."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


@dataclass(frozen=True)
class Move:
    """A catalog transformation applied ``repeat`` times, optionally reversed."""

    definition: MoveDefinition
    repeat: int = 1
    reverse: bool = False

    def __post_init__(self):
        if not isinstance(self.repeat, int) or self.repeat < 1:
            raise ValueError(f"repeat must be a positive integer, got {self.repeat!r}")

    @property
    def key(self) -> str:
        return self.definition.key

    @property
    def shift(self) -> int:
        """Offset within each cycle of the sticker a position takes its value from."""
        return self.repeat if self.reverse else -self.repeat

    def inverse(self) -> "Move":
        return replace(self, reverse=not self.reverse)

    def __str__(self) -> str:
        repeat = str(self.repeat) if self.repeat != 1 else ""
        tick = "'" if self.reverse else ""
        return f"{self.key}{repeat}{tick}"


class MoveParser:
    def __init__(self, catalog: MoveCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def parse(self, token: str) -> Move:
        match = TOKEN_PATTERN.fullmatch(token)
        if match is None:
            raise ParseError(f"Invalid move notation: {token!r}", token)

        key, repeat_digits, ticks = match.groups()
        definition = self.catalog.get(key)
        if definition is None:
            raise ParseError(f"Unknown move: {key!r}", token)

        repeat = int(repeat_digits) if repeat_digits else 1
        if repeat == 0:
            raise ParseError(f"Repeat count must be at least 1: {token!r}", token)

        return Move(definition, repeat=repeat, reverse=len(ticks) % 2 == 1)

    def parse_sequence(self, text: str) -> list[Move]:
        """Parse whitespace-separated tokens; the first bad token rejects the whole input."""
        return [self.parse(token) for token in text.split()]


_DEFAULT_PARSER = MoveParser()


def parse_move(token: str) -> Move:
    return _DEFAULT_PARSER.parse(token)


def parse_moves(text: str) -> list[Move]:
    return _DEFAULT_PARSER.parse_sequence(text)


def format_moves(moves: list[Move]) -> str:
    return " ".join(str(move) for move in moves)
