"""Rule engine: pure transitions over :class:`GameState`.

Every transition validates first and then works on a fresh copy, so the
input snapshot is never modified and a rejected command leaves it untouched.
"""

from __future__ import annotations

import random
from typing import List, Sequence

from loguru import logger

from ..errors import (
    InvalidMove,
    InvalidPlayerCount,
    NoLegalMoves,
    NotYourTurn,
    RollNotAllowed,
)
from . import board
from .config import config
from .types import Color, GameState, GameStatus, MoveEvents, MoveResult, Player


def create_initial_state(player_names: Sequence[str]) -> GameState:
    names = list(player_names)
    if not config.MIN_PLAYERS <= len(names) <= config.MAX_PLAYERS:
        raise InvalidPlayerCount(
            f"A game needs {config.MIN_PLAYERS}-{config.MAX_PLAYERS} players, got {len(names)}"
        )
    players = [
        Player(id=f"player_{idx}", name=name, color=Color(idx))
        for idx, name in enumerate(names)
    ]
    logger.info(f"New game for {', '.join(names)}")
    return GameState(players=players)


# --- Dice ---
def roll_dice(rng: random.Random | None = None) -> int:
    return (rng or random).randint(1, config.DICE_FACES)


def can_player_roll(state: GameState, player_index: int) -> bool:
    return (
        player_index == state.current_player
        and state.dice_value == 0
        and state.move_completed
        and state.game_status == GameStatus.PLAYING
    )


def validate_roll(state: GameState, player_index: int) -> None:
    """Raise the reason ``can_player_roll`` is False, if it is."""
    if can_player_roll(state, player_index):
        return
    if state.game_status == GameStatus.PLAYING and player_index != state.current_player:
        raise NotYourTurn(
            f"Player {player_index} cannot roll, it is player {state.current_player}'s turn"
        )
    raise RollNotAllowed(
        f"Roll not allowed (status={state.game_status.value}, dice={state.dice_value}, "
        f"move_completed={state.move_completed})"
    )


def apply_roll(state: GameState, player_index: int, dice: int) -> GameState:
    """Write a rolled value into a new snapshot; the roll is now live."""
    validate_roll(state, player_index)
    if not 1 <= dice <= config.DICE_FACES:
        raise ValueError(f"Dice value must be 1..{config.DICE_FACES}, got {dice}")
    new_state = state.copy()
    new_state.dice_value = dice
    new_state.last_roll = dice
    new_state.move_completed = False
    new_state.can_roll_again = False
    logger.debug(f"Player {player_index} rolled {dice}")
    return new_state


# --- Legality ---
def can_move_piece(
    state: GameState, player_index: int, piece_index: int, dice_value: int
) -> bool:
    if not 1 <= dice_value <= config.DICE_FACES:
        return False
    player = state.players[player_index]
    if not 0 <= piece_index < len(player.pieces):
        return False
    return board.destination(player.color, player.pieces[piece_index], dice_value) is not None


def get_valid_moves(state: GameState, player_index: int) -> List[int]:
    if state.dice_value == 0:
        return []
    player = state.players[player_index]
    return [
        idx
        for idx in range(len(player.pieces))
        if can_move_piece(state, player_index, idx, state.dice_value)
    ]


def has_valid_moves(state: GameState, player_index: int) -> bool:
    return bool(get_valid_moves(state, player_index))


# --- Applying a move ---
def resolve_captures(state: GameState, player_index: int, cell: int) -> List[dict]:
    """Send every opponent piece on ``cell`` home unless the cell is safe.

    Works in place on ``state``; callers pass the copy they are building.
    """
    if board.is_safe(cell):
        return []
    captures: List[dict] = []
    for victim, piece_idx in board.occupants(state, cell, exclude_player=player_index):
        state.players[victim].pieces[piece_idx] = config.HOME
        captures.append({"player": victim, "piece": piece_idx, "cell": cell})
        logger.debug(f"Captured piece {piece_idx} of player {victim} at cell {cell}")
    return captures


def _finish_turn(state: GameState, dice: int) -> None:
    """Consume the live roll: bonus roll after a 6, otherwise pass the turn."""
    if dice == config.DICE_FACES:
        state.can_roll_again = True
        logger.debug(f"Player {state.current_player} rolled 6, rolls again")
    else:
        state.current_player = (state.current_player + 1) % len(state.players)
        state.can_roll_again = False
        logger.debug(f"Turn passes to player {state.current_player}")
    state.move_completed = True
    state.dice_value = 0


def _validate_move(state: GameState, player_index: int, piece_index: int) -> None:
    if state.game_status != GameStatus.PLAYING:
        raise InvalidMove(f"Game is {state.game_status.value}, no moves accepted")
    if player_index != state.current_player:
        raise NotYourTurn(
            f"Player {player_index} cannot move, it is player {state.current_player}'s turn"
        )
    if state.dice_value == 0:
        raise InvalidMove("No dice has been rolled")
    if not has_valid_moves(state, player_index):
        raise NoLegalMoves(f"Roll of {state.dice_value} has no legal move")
    if not can_move_piece(state, player_index, piece_index, state.dice_value):
        raise InvalidMove(f"Piece {piece_index} cannot move {state.dice_value}")


def apply_move(state: GameState, player_index: int, piece_index: int) -> MoveResult:
    _validate_move(state, player_index, piece_index)

    new_state = state.copy()
    player = new_state.players[player_index]
    dice = new_state.dice_value
    old = player.pieces[piece_index]
    new = board.destination(player.color, old, dice)

    events = MoveEvents()
    player.pieces[piece_index] = new
    if old == config.HOME:
        events.exited_home = True
    elif board.is_on_track(old) and not board.is_on_track(new):
        events.entered_home_stretch = True
    if new == config.FINISH:
        events.finished = True
    logger.debug(f"Player {player_index} moved piece {piece_index} from {old} to {new} with {dice}")

    if board.is_on_track(new):
        events.captures = resolve_captures(new_state, player_index, new)

    if player.has_won():
        new_state.game_status = GameStatus.FINISHED
        new_state.winner = player.name
        new_state.dice_value = 0
        new_state.move_completed = True
        new_state.can_roll_again = False
        events.won = True
        logger.info(f"Player {player.name} wins!")
    else:
        _finish_turn(new_state, dice)

    return MoveResult(
        state=new_state,
        player_index=player_index,
        piece_index=piece_index,
        dice_value=dice,
        old_position=old,
        new_position=new,
        events=events,
        extra_turn=new_state.can_roll_again,
    )


def move_piece(state: GameState, player_index: int, piece_index: int) -> GameState:
    return apply_move(state, player_index, piece_index).state


def resolve_no_legal_moves(state: GameState) -> GameState:
    """Consume a live roll that has no legal move, with the same turn rule as a move."""
    if state.game_status != GameStatus.PLAYING or state.dice_value == 0:
        raise InvalidMove("No live roll to resolve")
    if has_valid_moves(state, state.current_player):
        raise InvalidMove(f"Roll of {state.dice_value} still has legal moves")
    new_state = state.copy()
    logger.debug(f"Player {state.current_player} has no move for {state.dice_value}")
    _finish_turn(new_state, state.dice_value)
    return new_state
