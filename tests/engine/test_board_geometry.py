import unittest

from ludo_party.engine import board
from ludo_party.engine.config import Config, config
from ludo_party.engine.types import Color


class TestBoardGeometry(unittest.TestCase):
    def test_start_cells_and_home_entries(self):
        self.assertEqual([board.start_square(c) for c in Color], [0, 13, 26, 39])
        self.assertEqual([board.home_entry(c) for c in Color], [50, 11, 24, 37])
        self.assertEqual(config.HOME_ENTRY_DISTANCE, 50)

    def test_seven_safe_cells(self):
        self.assertEqual(len(config.SAFE_SQUARES), 7)
        for cell in (8, 13, 21, 26, 34, 39, 47):
            self.assertTrue(board.is_safe(cell))
        self.assertFalse(board.is_safe(10))
        self.assertFalse(board.is_safe(0))

    def test_track_distance_wraps(self):
        self.assertEqual(board.track_distance(50, 2), 4)
        self.assertEqual(board.track_distance(2, 50), 48)
        self.assertEqual(board.travelled(Color.BLUE, 10), 49)

    def test_destination_from_home(self):
        self.assertEqual(board.destination(Color.GREEN, -1, 6), 26)
        self.assertIsNone(board.destination(Color.GREEN, -1, 5))

    def test_destination_wraps_around_track(self):
        self.assertEqual(board.destination(Color.GREEN, 50, 4), 2)
        self.assertEqual(board.destination(Color.YELLOW, 51, 3), 2)

    def test_destination_turns_into_home_stretch(self):
        self.assertEqual(board.destination(Color.RED, 48, 4), 54)
        self.assertEqual(board.destination(Color.RED, 48, 2), 52)
        self.assertEqual(board.destination(Color.BLUE, 10, 1), 52)
        self.assertEqual(board.destination(Color.BLUE, 9, 6), 56)

    def test_blue_pieces_leaving_start_stay_on_track(self):
        # 13 is past blue's threshold cell 11 numerically but only 0 steps travelled
        self.assertEqual(board.destination(Color.BLUE, 13, 5), 18)

    def test_destination_cannot_overshoot_finish(self):
        self.assertEqual(board.destination(Color.RED, 49, 6), 57)
        self.assertIsNone(board.destination(Color.RED, 51, 6))
        self.assertIsNone(board.destination(Color.RED, 54, 4))
        self.assertIsNone(board.destination(Color.RED, 57, 1))

    def test_config_rejects_inconsistent_geometry(self):
        with self.assertRaises(ValueError):
            Config(HOME_ENTRY=[50, 11, 24, 30])
        with self.assertRaises(ValueError):
            Config(SAFE_SQUARES=[8, 13])


if __name__ == "__main__":
    unittest.main()
