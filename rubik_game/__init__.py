"""Rubik's cube game: sticker state, move notation and scrambling."""

from .engine import RubikGame
from .moves import DEFAULT_CATALOG, ConfigurationError, MoveCatalog, MoveDefinition
from .notation import Move, MoveParser, ParseError, parse_move, parse_moves
from .permutation import apply_move, apply_sequence
from .scramble import scramble, scramble_moves
from .state_codec import FormatError, decode_state, encode_state

__all__ = [
    "RubikGame",
    "DEFAULT_CATALOG",
    "ConfigurationError",
    "MoveCatalog",
    "MoveDefinition",
    "Move",
    "MoveParser",
    "ParseError",
    "parse_move",
    "parse_moves",
    "apply_move",
    "apply_sequence",
    "scramble",
    "scramble_moves",
    "FormatError",
    "decode_state",
    "encode_state",
]
