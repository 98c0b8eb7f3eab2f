from __future__ import annotations

from typing import List

from ludo_party.engine import board
from ludo_party.engine.config import agent_config, config
from ludo_party.engine.rules import get_valid_moves
from ludo_party.engine.types import GameState

from .types import MoveOption


def capture_value(state: GameState, player_index: int, cell: int) -> tuple[float, list[str]]:
    """Priority for landing on ``cell`` and the colours that would be sent home."""
    if not board.is_on_track(cell) or board.is_safe(cell):
        return 0.0, []
    victims = board.occupants(state, cell, exclude_player=player_index)
    if not victims:
        return 0.0, []
    value = agent_config.capture
    colors: list[str] = []
    for victim, _ in victims:
        opponent = state.players[victim]
        # Prefer knocking back the piece that travelled furthest
        progress = board.travelled(opponent.color, cell) / float(config.HOME_ENTRY_DISTANCE)
        value += agent_config.capture_progress * progress
        colors.append(opponent.color.label)
    return value, colors


def danger_level(state: GameState, player_index: int, cell: int) -> float:
    """How exposed a piece on ``cell`` is to the opponents' next roll."""
    if not board.is_on_track(cell) or board.is_safe(cell):
        return 0.0
    danger = sum(
        (config.DICE_FACES + 1 - dist) * agent_config.danger_per_pip
        for dist in board.threats_behind(state, cell, player_index)
    )
    return min(danger, agent_config.danger_cap)


def block_value(state: GameState, player_index: int, cell: int) -> float:
    if not board.is_on_track(cell):
        return 0.0
    reach = len(board.threats_behind(state, cell, player_index))
    return min(reach * agent_config.block_per_threat, agent_config.block_cap)


def spread_bonus(state: GameState, player_index: int, current_pos: int) -> float:
    player = state.players[player_index]
    if not board.is_on_track(current_pos):
        return 0.0
    if player.pieces_at_home() >= agent_config.spread_min_at_home:
        return agent_config.spread
    return 0.0


def score_move(state: GameState, player_index: int, piece_index: int) -> MoveOption:
    player = state.players[player_index]
    dice = state.dice_value
    current = player.pieces[piece_index]
    new_pos = board.destination(player.color, current, dice)
    move = MoveOption(
        piece_index=piece_index, current_pos=current, new_pos=new_pos, dice_roll=dice
    )

    # 1) Leaving home dominates everything else
    if current == config.HOME:
        move.priority += agent_config.leave_home
        move.reasons.append("Getting piece out of home")
        return move

    # 2) / 3) Finishing or running up the home stretch
    if new_pos == config.FINISH:
        move.priority += agent_config.finish_piece
        move.reasons.append("Finishing a piece")
    elif board.is_in_home_stretch(new_pos):
        move.priority += agent_config.home_stretch_advance
        move.reasons.append("Moving closer to finish")

    if not board.is_on_track(current):
        return move

    # 4) Captures
    value, colors = capture_value(state, player_index, new_pos)
    if value:
        move.priority += value
        move.reasons.append(f"Capturing {'/'.join(colors)} piece")

    # 5) Safe squares
    if board.is_on_track(new_pos) and board.is_safe(new_pos):
        move.priority += agent_config.safe_square
        move.reasons.append("Moving to safe position")

    # 6) Escaping a threatened square
    danger = danger_level(state, player_index, current)
    if danger > 0:
        move.priority += danger
        move.reasons.append("Escaping danger")

    # 7) Spread pieces out
    spread = spread_bonus(state, player_index, current)
    if spread:
        move.priority += spread
        move.reasons.append("spreading pieces")

    # 8) Blocking opponents
    block = block_value(state, player_index, new_pos)
    if block:
        move.priority += block
        move.reasons.append("blocking opponent")

    return move


def build_move_options(state: GameState, player_index: int) -> List[MoveOption]:
    """Score every legal move, highest priority first (stable on ties)."""
    options = [
        score_move(state, player_index, piece_index)
        for piece_index in get_valid_moves(state, player_index)
    ]
    options.sort(key=lambda m: m.priority, reverse=True)
    return options
