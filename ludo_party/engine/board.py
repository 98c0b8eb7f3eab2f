"""Board geometry: start cells, home-entry thresholds, safe cells and paths.

Track cells 0..51 are shared by every colour, so a cell index means the same
square whoever stands on it. Home-stretch positions 52..56 are private to the
colour that owns the piece.
"""

from __future__ import annotations

from typing import List, Tuple

from .config import config
from .types import Color, GameState


def start_square(color: Color | int) -> int:
    return config.START_SQUARES[int(color)]


def home_entry(color: Color | int) -> int:
    return config.HOME_ENTRY[int(color)]


def is_safe(cell: int) -> bool:
    return cell in config.SAFE_SQUARES


def is_on_track(position: int) -> bool:
    return 0 <= position <= config.MAIN_TRACK_END


def is_in_home_stretch(position: int) -> bool:
    return config.HOME_STRETCH_START <= position < config.FINISH


def is_valid_position(position: int) -> bool:
    return position == config.HOME or 0 <= position <= config.FINISH


def track_distance(from_cell: int, to_cell: int) -> int:
    """Forward distance along the circular track, 0..51."""
    return (to_cell - from_cell) % config.TRACK_LENGTH


def travelled(color: Color | int, cell: int) -> int:
    """Steps a piece of ``color`` has covered to stand on ``cell``."""
    return track_distance(start_square(color), cell)


def destination(color: Color | int, position: int, dice: int) -> int | None:
    """Where a piece lands with ``dice``, or None when the move is illegal."""
    if position == config.HOME:
        return start_square(color) if dice == config.DICE_FACES else None
    if position == config.FINISH:
        return None
    if is_in_home_stretch(position):
        cand = position + dice
        return cand if cand <= config.FINISH else None
    if is_on_track(position):
        steps = travelled(color, position) + dice
        if steps >= config.HOME_ENTRY_DISTANCE:
            cand = config.HOME_STRETCH_START + steps - config.HOME_ENTRY_DISTANCE
            # cannot overshoot the finish, even from the main track
            return cand if cand <= config.FINISH else None
        return (position + dice) % config.TRACK_LENGTH
    return None


def occupants(
    state: GameState, cell: int, *, exclude_player: int | None = None
) -> List[Tuple[int, int]]:
    """(player_index, piece_index) pairs standing on track ``cell``."""
    out: List[Tuple[int, int]] = []
    if not is_on_track(cell):
        return out
    for pi, player in enumerate(state.players):
        if pi == exclude_player:
            continue
        for idx, pos in enumerate(player.pieces):
            if pos == cell:
                out.append((pi, idx))
    return out


def threats_behind(
    state: GameState, cell: int, player_index: int, reach: int = 6
) -> List[int]:
    """Distances (1..reach) of opponent track pieces that can land on ``cell``.

    A piece that would turn into its home stretch before reaching ``cell`` is
    not a threat.
    """
    out: List[int] = []
    if not is_on_track(cell):
        return out
    for pi, player in enumerate(state.players):
        if pi == player_index:
            continue
        for pos in player.pieces:
            if not is_on_track(pos):
                continue
            dist = track_distance(pos, cell)
            if 1 <= dist <= reach and destination(player.color, pos, dist) == cell:
                out.append(dist)
    return out
