import unittest

from ludo_party.engine.rules import create_initial_state
from ludo_party.engine.types import Color, GameStatus
from ludo_party.errors import InvalidPlayerCount


class TestInitialState(unittest.TestCase):
    def test_fresh_state_for_every_supported_player_count(self):
        for n in range(2, 5):
            names = [f"P{i}" for i in range(n)]
            state = create_initial_state(names)
            self.assertEqual(len(state.players), n)
            self.assertEqual(state.current_player, 0)
            self.assertEqual(state.dice_value, 0)
            self.assertEqual(state.game_status, GameStatus.PLAYING)
            self.assertTrue(state.move_completed)
            self.assertFalse(state.can_roll_again)
            self.assertIsNone(state.winner)
            for player in state.players:
                self.assertEqual(player.pieces, [-1, -1, -1, -1])
                self.assertTrue(player.is_active)

    def test_colors_follow_join_order(self):
        state = create_initial_state(["a", "b", "c", "d"])
        self.assertEqual(
            [p.color for p in state.players],
            [Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW],
        )
        self.assertEqual([p.id for p in state.players], ["player_0", "player_1", "player_2", "player_3"])
        self.assertEqual([p.name for p in state.players], ["a", "b", "c", "d"])

    def test_invalid_player_counts(self):
        with self.assertRaises(InvalidPlayerCount):
            create_initial_state(["solo"])
        with self.assertRaises(InvalidPlayerCount):
            create_initial_state(["a", "b", "c", "d", "e"])
        with self.assertRaises(InvalidPlayerCount):
            create_initial_state([])

    def test_players_do_not_share_piece_lists(self):
        state = create_initial_state(["a", "b"])
        state.players[0].pieces[0] = 5
        self.assertEqual(state.players[1].pieces[0], -1)


if __name__ == "__main__":
    unittest.main()
