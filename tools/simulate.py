import argparse
import os
import random
import sys
import time
from typing import Optional

import numpy as np
from loguru import logger

from ludo_party.agent import OpponentAgent
from ludo_party.agent.difficulty import available
from ludo_party.engine.types import GameStatus
from ludo_party.session import GameSession


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play computer-vs-computer Ludo games and report win rates"
    )
    parser.add_argument("--games", type=int, default=100, help="Number of games to play")
    parser.add_argument(
        "--players",
        type=int,
        default=int(os.getenv("NUM_PLAYERS", 4)),
        help="Players per game (2-4)",
    )
    parser.add_argument(
        "--difficulty",
        nargs="+",
        default=["medium"],
        choices=sorted(available()),
        help="Difficulty per seat; a single value applies to every seat",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--max-turns", type=int, default=2000, help="Abort a game after this many turns")
    parser.add_argument("--log-level", type=str, default="INFO", help="loguru log level")
    return parser.parse_args(argv)


def play_game(
    session: GameSession, room_id: str, agents: list[OpponentAgent], max_turns: int
) -> tuple[Optional[int], int]:
    """Play one game to the end. Returns (winning seat or None, turns played)."""
    names = [agent.player_id for agent in agents]
    session.start(room_id, names)
    turns = 0
    try:
        while turns < max_turns:
            state = session.state(room_id)
            if state.game_status == GameStatus.FINISHED:
                return names.index(state.winner), turns
            seat = state.current_player
            session.play_agent_turn(room_id, agents[seat], seat)
            turns += 1
        logger.warning(f"Game {room_id} hit the {max_turns} turn limit")
        return None, turns
    finally:
        session.end(room_id)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    rng = random.Random(args.seed)
    difficulties = args.difficulty
    if len(difficulties) == 1:
        difficulties = difficulties * args.players
    if len(difficulties) != args.players:
        raise SystemExit(f"Expected 1 or {args.players} difficulties, got {len(difficulties)}")

    session = GameSession(rng=random.Random(rng.random()))
    agents = [
        OpponentAgent(f"{level}_{seat}", level, random.Random(rng.random()))
        for seat, level in enumerate(difficulties)
    ]

    logger.info(f"Playing {args.games} games with seats {difficulties}")
    start_time = time.time()
    winners: list[int] = []
    turns: list[int] = []
    unfinished = 0
    for game_idx in range(args.games):
        winner, played = play_game(session, f"SIM{game_idx}", agents, args.max_turns)
        turns.append(played)
        if winner is None:
            unfinished += 1
        else:
            winners.append(winner)

    wins = np.bincount(np.asarray(winners, dtype=np.int64), minlength=args.players)
    turn_arr = np.asarray(turns, dtype=np.float64)

    print("\n--- SIMULATION COMPLETE ---")
    for seat, agent in enumerate(agents):
        rate = wins[seat] / max(args.games, 1)
        print(f"Seat {seat} ({agent.difficulty}): {wins[seat]} wins ({rate:.1%})")
    print(f"Unfinished games: {unfinished}")
    if turn_arr.size:
        print(f"Turns per game: mean {turn_arr.mean():.1f}, max {int(turn_arr.max())}")
    print(f"Simulation Time: {time.time() - start_time:.2f} seconds")


if __name__ == "__main__":
    main()
