import random
import unittest

from ludo_party.agent import OpponentAgent, available, get_profile, select_move
from ludo_party.agent.types import MoveOption
from tests.helpers import FixedRandom, make_state

HOME = [-1, -1, -1, -1]


def _options(*priorities):
    return [
        MoveOption(piece_index=i, current_pos=0, new_pos=0, dice_roll=3, priority=p)
        for i, p in enumerate(priorities)
    ]


class TestDifficultyProfiles(unittest.TestCase):
    def test_registry(self):
        self.assertEqual(sorted(available()), ["easy", "hard", "medium"])
        self.assertEqual(get_profile("HARD").name, "hard")
        with self.assertRaises(KeyError):
            get_profile("insane")
        with self.assertRaises(KeyError):
            OpponentAgent("bot", "insane")

    def test_easy_plays_best_or_anything(self):
        options = _options(50, 40, 30, 20)
        easy = get_profile("easy")
        self.assertIs(select_move(options, easy, FixedRandom(randoms=[0.1])), options[0])
        rng = FixedRandom(randoms=[0.5], choices=[3])
        self.assertIs(select_move(options, easy, rng), options[3])
        self.assertEqual(len(rng.pools[0]), 4)

    def test_medium_falls_back_to_top_three(self):
        options = _options(50, 40, 30, 20, 10)
        medium = get_profile("medium")
        self.assertIs(select_move(options, medium, FixedRandom(randoms=[0.5])), options[0])
        rng = FixedRandom(randoms=[0.9], choices=[2])
        self.assertIs(select_move(options, medium, rng), options[2])
        self.assertEqual(rng.pools[0], options[:3])

    def test_medium_with_fewer_than_three_moves(self):
        options = _options(50, 40)
        rng = FixedRandom(randoms=[0.95], choices=[1])
        self.assertIs(select_move(options, get_profile("medium"), rng), options[1])
        self.assertEqual(len(rng.pools[0]), 2)

    def test_hard_stays_within_tolerance(self):
        options = _options(100, 97, 94, 50)
        rng = FixedRandom(choices=[1])
        self.assertIs(select_move(options, get_profile("hard"), rng), options[1])
        self.assertEqual(rng.pools[0], options[:2])

    def test_empty_options(self):
        with self.assertRaises(ValueError):
            select_move([], get_profile("easy"))


class TestOpponentAgent(unittest.TestCase):
    def test_no_move(self):
        state = make_state([HOME, HOME], dice=3)
        agent = OpponentAgent("bot", "hard")
        self.assertIsNone(agent.decide_move(state, 0))
        self.assertIsNone(agent.decide_piece(state, 0))

    def test_single_legal_move_for_every_difficulty(self):
        state = make_state([[-1, -1, -1, 20], HOME], dice=3)
        for level in available():
            agent = OpponentAgent("bot", level, FixedRandom(randoms=[0.99], choices=[0]))
            move = agent.decide_move(state, 0)
            self.assertEqual(move.piece_index, 3)
            self.assertEqual(move.new_pos, 23)
            self.assertEqual(move.reason, "Only valid move")

    def test_all_pieces_home_with_six(self):
        state = make_state([HOME, HOME], dice=6)
        agent = OpponentAgent("bot", "medium", FixedRandom(randoms=[0.1]))
        self.assertEqual(agent.decide_piece(state, 0), 0)

    def test_hard_choice_is_near_optimal(self):
        gen = random.Random(1234)
        positions = [-1] + list(range(0, 58))
        checked = 0
        for i in range(300):
            n = gen.randint(2, 4)
            pieces = [[gen.choice(positions) for _ in range(4)] for _ in range(n)]
            state = make_state(pieces, dice=gen.randint(1, 6))
            agent = OpponentAgent("bot", "hard", random.Random(i))
            options = agent.analyze_moves(state, 0)
            if len(options) < 2:
                continue
            chosen = agent.decide_move(state, 0)
            best = max(m.priority for m in options)
            self.assertGreaterEqual(chosen.priority, best - 5)
            checked += 1
        self.assertGreater(checked, 50)

    def test_does_not_modify_state(self):
        state = make_state([[20, 40, -1, -1], [17, -1, -1, -1]], dice=2)
        before = [list(p.pieces) for p in state.players]
        OpponentAgent("bot", "easy", random.Random(0)).decide_move(state, 0)
        self.assertEqual([p.pieces for p in state.players], before)

    def test_thinking_time_ranges(self):
        for level, (low, high) in (("easy", (1.0, 2.0)), ("medium", (1.5, 3.0)), ("hard", (2.0, 4.0))):
            agent = OpponentAgent("bot", level, random.Random(7))
            for _ in range(20):
                self.assertTrue(low <= agent.thinking_time() <= high)


if __name__ == "__main__":
    unittest.main()
