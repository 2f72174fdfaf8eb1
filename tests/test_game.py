import threading
import unittest
from datetime import datetime

import numpy as np

from rubik_game.engine import RubikGame
from rubik_game.layout import SOLVED_CUBE, Sticker, solved_state
from rubik_game.moves import MoveCatalog, MoveDefinition
from rubik_game.notation import ParseError
from rubik_game.scramble import scramble
from rubik_game.state_codec import FormatError


class TestRubikGame(unittest.TestCase):
    def test_new_game_is_solved(self):
        game = RubikGame(owner_id=1)
        self.assertEqual(game.raw_cube, SOLVED_CUBE)
        self.assertTrue(game.is_solved())
        self.assertEqual(game.stickers()[:9], [Sticker.GREEN] * 9)

    def test_do_moves_replaces_state(self):
        game = RubikGame()
        before = game.state
        moves = game.do_moves("R U R' U'")
        self.assertEqual([str(m) for m in moves], ["R", "U", "R'", "U'"])
        self.assertIsNot(game.state, before)
        self.assertEqual("".join(str(int(v)) for v in before), SOLVED_CUBE)
        self.assertFalse(game.is_solved())

    def test_sequence_repeated_six_times_returns_to_solved(self):
        game = RubikGame()
        for _ in range(6):
            game.do_moves("R U R' U'")
        self.assertEqual(game.raw_cube, SOLVED_CUBE)

    def test_invalid_sequence_leaves_state_untouched(self):
        game = RubikGame()
        game.do_moves("F")
        before = game.state
        with self.assertRaises(ParseError):
            game.do_moves("R U Q")
        self.assertIs(game.state, before)

    def test_empty_input_is_no_op(self):
        game = RubikGame()
        before = game.state
        self.assertEqual(game.do_moves(""), [])
        self.assertTrue(np.array_equal(game.state, before))

    def test_state_cannot_be_edited_in_place(self):
        game = RubikGame()
        with self.assertRaises(ValueError):
            game.state[0] = 5

    def test_scramble_with_seed_matches_scrambler(self):
        game = RubikGame()
        state, moves = game.scramble(seed=42)
        self.assertEqual(len(moves), 40)
        expected = scramble(solved_state(), np.random.default_rng(42), 40)
        self.assertTrue(np.array_equal(state, expected))
        self.assertIs(game.state, state)

    def test_scramble_with_caller_rng(self):
        g1, g2 = RubikGame(), RubikGame()
        g1.scramble(10, rng=np.random.default_rng(3))
        g2.scramble(10, rng=np.random.default_rng(3))
        self.assertEqual(g1.raw_cube, g2.raw_cube)

    def test_reset(self):
        game = RubikGame()
        game.do_moves("superflip")
        game.reset()
        self.assertEqual(game.raw_cube, SOLVED_CUBE)

    def test_raw_cube_setter_validates(self):
        game = RubikGame()
        game.do_moves("x")
        before = game.state
        with self.assertRaises(FormatError):
            game.raw_cube = "0" * 53
        self.assertIs(game.state, before)
        game.raw_cube = "5" * 54
        self.assertEqual(game.raw_cube, "5" * 54)

    def test_record_roundtrip_keeps_opaque_fields(self):
        game = RubikGame(owner_id=123, channel_id=456)
        game.do_moves("Rw2 M' Tperm")
        game.time = 77
        game.message_id = 789
        game.last_played = datetime(2024, 5, 1, 12, 30)
        game.show_help = False

        record = game.to_record()
        self.assertEqual(len(record["raw_cube"]), 54)
        restored = RubikGame.from_record(record)

        self.assertEqual(restored.to_record(), record)
        self.assertEqual(restored.last_played, game.last_played)

    def test_from_record_requires_valid_cube(self):
        with self.assertRaises(KeyError):
            RubikGame.from_record({"owner_id": 1})
        with self.assertRaises(FormatError):
            RubikGame.from_record({"raw_cube": "bad"})

    def test_custom_catalog(self):
        catalog = MoveCatalog([MoveDefinition("swap", ((0, 53),))])
        game = RubikGame(catalog=catalog)
        game.do_moves("swap")
        self.assertEqual(game.raw_cube, "5" + SOLVED_CUBE[1:53] + "0")
        with self.assertRaises(ParseError):
            game.do_moves("R")

    def test_concurrent_readers_never_see_partial_state(self):
        game = RubikGame()
        seen: set[str] = set()
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                seen.add(game.raw_cube)

        thread = threading.Thread(target=reader)
        thread.start()
        try:
            for _ in range(50):
                game.do_moves("superflip")
        finally:
            stop.set()
            thread.join(timeout=5.0)

        flipped = RubikGame()
        flipped.do_moves("superflip")
        self.assertTrue(seen <= {SOLVED_CUBE, flipped.raw_cube})


if __name__ == "__main__":
    unittest.main()
