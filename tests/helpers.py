from __future__ import annotations

from typing import Iterable, Sequence

from ludo_party.engine.rules import create_initial_state
from ludo_party.engine.types import GameState


class FixedRandom:
    """Deterministic stand-in for ``random.Random``.

    ``rolls`` feed ``randint``, ``randoms`` feed ``random`` and ``choices``
    are indices used by ``choice``. ``choice`` records every pool it sees.
    """

    def __init__(
        self,
        rolls: Iterable[int] = (),
        randoms: Iterable[float] = (),
        choices: Iterable[int] = (),
    ):
        self._rolls = list(rolls)
        self._randoms = list(randoms)
        self._choices = list(choices)
        self.pools: list[list] = []

    def randint(self, a: int, b: int) -> int:
        value = self._rolls.pop(0)
        assert a <= value <= b
        return value

    def random(self) -> float:
        return self._randoms.pop(0) if self._randoms else 0.0

    def choice(self, seq: Sequence):
        pool = list(seq)
        self.pools.append(pool)
        idx = self._choices.pop(0) if self._choices else 0
        return pool[idx]

    def uniform(self, a: float, b: float) -> float:
        return a


def make_state(
    pieces: Sequence[Sequence[int]],
    *,
    current: int = 0,
    dice: int = 0,
    names: Sequence[str] | None = None,
) -> GameState:
    """Build a playing state with explicit piece positions and an optional live roll."""
    names = list(names) if names is not None else [f"P{i}" for i in range(len(pieces))]
    state = create_initial_state(names)
    for player, positions in zip(state.players, pieces):
        player.pieces = list(positions)
    state.current_player = current
    state.dice_value = dice
    state.move_completed = dice == 0
    return state
