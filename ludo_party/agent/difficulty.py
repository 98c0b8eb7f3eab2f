from __future__ import annotations

import random
from typing import Dict, Sequence

from ludo_party.engine.config import DifficultyProfile, agent_config

from .types import MoveOption


def available() -> Dict[str, DifficultyProfile]:
    return dict(agent_config.profiles)


def get_profile(name: str) -> DifficultyProfile:
    profile = agent_config.profiles.get(name.lower())
    if profile is None:
        raise KeyError(f"Unknown difficulty '{name}'.")
    return profile


def select_move(
    options: Sequence[MoveOption],
    profile: DifficultyProfile,
    rng: random.Random | None = None,
) -> MoveOption:
    """Pick from priority-sorted ``options`` according to ``profile``.

    easy/medium play the best move with ``best_move_prob`` and otherwise pick
    uniformly from the first ``random_pool`` options (all when None). A
    ``tolerance`` picks uniformly among moves within that many points of the
    best one.
    """
    if not options:
        raise ValueError("select_move needs at least one option")
    rng = rng or random
    if profile.tolerance is not None:
        top = options[0].priority
        pool = [m for m in options if m.priority >= top - profile.tolerance]
        return rng.choice(pool)
    if rng.random() < profile.best_move_prob:
        return options[0]
    pool = options if profile.random_pool is None else options[: profile.random_pool]
    return rng.choice(list(pool))
