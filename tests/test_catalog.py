import unittest

import numpy as np

from rubik_game.layout import FRONT, RIGHT, STATE_SIZE, UP
from rubik_game.moves import (
    ALGORITHM_KEYS,
    CYCLES_E,
    CYCLES_L,
    CYCLES_M,
    CYCLES_R,
    DEFAULT_CATALOG,
    FACE_KEYS,
    ROTATION_KEYS,
    SLICE_KEYS,
    WIDE_KEYS,
    ConfigurationError,
    MoveCatalog,
    MoveDefinition,
    build_default_catalog,
    validate_cycles,
)
from rubik_game.notation import MoveParser
from rubik_game.permutation import apply_move


class TestCatalogContents(unittest.TestCase):
    def test_all_builtin_keys_registered(self):
        expected = FACE_KEYS + SLICE_KEYS + WIDE_KEYS + ROTATION_KEYS + ALGORITHM_KEYS
        self.assertEqual(sorted(DEFAULT_CATALOG.keys()), sorted(expected))
        self.assertEqual(len(DEFAULT_CATALOG), len(expected))

    def test_lookup_ignores_case(self):
        self.assertIs(DEFAULT_CATALOG.get("rw"), DEFAULT_CATALOG.get("RW"))
        self.assertEqual(DEFAULT_CATALOG["tPeRm"].key, "Tperm")
        self.assertIn("SEXY", DEFAULT_CATALOG)
        self.assertIn("X", DEFAULT_CATALOG)

    def test_unknown_key(self):
        self.assertIsNone(DEFAULT_CATALOG.get("Q"))
        self.assertNotIn("Q", DEFAULT_CATALOG)
        with self.assertRaises(KeyError):
            DEFAULT_CATALOG["Q"]

    def test_moved_sticker_counts(self):
        expected = {key: 20 for key in FACE_KEYS}
        expected.update({key: 12 for key in SLICE_KEYS})
        expected.update({key: 32 for key in WIDE_KEYS})
        expected.update({key: 52 for key in ROTATION_KEYS})
        expected.update({"Tperm": 10, "sexy": 18, "lsexy": 18, "superflip": 24})
        for definition in DEFAULT_CATALOG:
            self.assertEqual(len(definition.indices()), expected[definition.key], msg=definition.key)

    def test_face_turn_keeps_center_and_moves_side_strips(self):
        r = DEFAULT_CATALOG["R"]
        self.assertNotIn(RIGHT + 4, r.indices())
        self.assertTrue({FRONT + 2, FRONT + 5, FRONT + 8, UP + 2, UP + 5, UP + 8} <= r.indices())

    def test_wide_moves_keep_slice_orientation_asymmetry(self):
        self.assertEqual(DEFAULT_CATALOG["Rw"].cycles, CYCLES_R + tuple(c[::-1] for c in CYCLES_M))
        self.assertEqual(DEFAULT_CATALOG["Lw"].cycles, CYCLES_L + CYCLES_M)
        self.assertEqual(DEFAULT_CATALOG["Dw"].cycles[-3:], CYCLES_E)
        self.assertEqual(DEFAULT_CATALOG["Uw"].cycles[-3:], tuple(c[::-1] for c in CYCLES_E))

    def test_catalog_is_rebuildable(self):
        rebuilt = build_default_catalog()
        self.assertEqual(rebuilt.keys(), DEFAULT_CATALOG.keys())
        self.assertEqual(rebuilt["x"], DEFAULT_CATALOG["x"])


class TestCatalogValidation(unittest.TestCase):
    def test_list_cycles_are_stored_as_tuples(self):
        definition = MoveDefinition("swap", [[0, 1]])
        self.assertEqual(definition.cycles, ((0, 1),))
        hash(definition)

    def test_catalog_built_from_list_cycles_applies_moves(self):
        catalog = MoveCatalog([MoveDefinition("swap", [[FRONT + 0, UP + 0]])])
        move = MoveParser(catalog).parse("swap")
        state = apply_move(np.arange(STATE_SIZE), move)
        self.assertEqual(int(state[FRONT + 0]), UP + 0)
        self.assertEqual(int(state[UP + 0]), FRONT + 0)
        self.assertEqual(int(state[RIGHT]), RIGHT)

    def test_valid_cycles_have_no_problems(self):
        self.assertEqual(validate_cycles("ok", [(0, 1, 2), (3, 4)]), [])

    def test_overlapping_cycles_rejected(self):
        with self.assertRaises(ConfigurationError) as ctx:
            MoveCatalog([MoveDefinition("bad", ((0, 1, 2, 3), (3, 4, 5, 6)))])
        self.assertIn("bad", str(ctx.exception))

    def test_duplicate_index_in_cycle_rejected(self):
        problems = validate_cycles("dup", [(0, 1, 0)])
        self.assertEqual(len(problems), 1)
        with self.assertRaises(ConfigurationError):
            MoveCatalog([MoveDefinition("dup", ((0, 1, 0),))])

    def test_short_and_out_of_range_cycles_rejected(self):
        self.assertTrue(validate_cycles("short", [(5,)]))
        self.assertTrue(validate_cycles("range", [(0, STATE_SIZE)]))
        self.assertTrue(validate_cycles("negative", [(-1, 2)]))

    def test_duplicate_keys_rejected(self):
        with self.assertRaises(ConfigurationError):
            MoveCatalog([MoveDefinition("a", ((0, 1),)), MoveDefinition("A", ((2, 3),))])

    def test_all_problems_reported_together(self):
        with self.assertRaises(ConfigurationError) as ctx:
            MoveCatalog(
                [
                    MoveDefinition("first", ((0, 1), (1, 2))),
                    MoveDefinition("second", ((7, 7),)),
                ]
            )
        message = str(ctx.exception)
        self.assertIn("first", message)
        self.assertIn("second", message)


if __name__ == "__main__":
    unittest.main()
