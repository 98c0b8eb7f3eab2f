import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    HOME: int = -1  # -1=home, 0-51=track, 52-56=home stretch, 57=finished
    TRACK_LENGTH: int = 52
    HOME_STRETCH_START: int = 52
    FINISH: int = 57
    PIECES_PER_PLAYER: int = 4
    MIN_PLAYERS: int = 2
    MAX_PLAYERS: int = 4
    DICE_FACES: int = 6

    # Track cells, track-relative
    START_SQUARES: list[int] = field(
        default_factory=lambda: [0, 13, 26, 39]
    )  # Red, Blue, Green, Yellow
    HOME_ENTRY: list[int] = field(
        default_factory=lambda: [50, 11, 24, 37]
    )  # Red, Blue, Green, Yellow
    SAFE_SQUARES: list[int] = field(
        default_factory=lambda: [8, 13, 21, 26, 34, 39, 47]
    )

    # Derived (populated in __post_init__ due to slots)
    MAIN_TRACK_END: int = 0
    HOME_ENTRY_DISTANCE: int = 0

    def __post_init__(self):
        self.MAIN_TRACK_END = self.TRACK_LENGTH - 1
        if len(self.START_SQUARES) != self.MAX_PLAYERS or len(self.HOME_ENTRY) != self.MAX_PLAYERS:
            raise ValueError("START_SQUARES and HOME_ENTRY need one entry per colour")
        # Steps from a colour's start cell to its home-entry threshold
        distances = {
            (entry - start) % self.TRACK_LENGTH
            for start, entry in zip(self.START_SQUARES, self.HOME_ENTRY)
        }
        if len(distances) != 1:
            raise ValueError("Every colour must reach its home entry after the same distance")
        if len(set(self.SAFE_SQUARES)) != 7:
            raise ValueError("SAFE_SQUARES must hold 7 distinct cells")
        self.HOME_ENTRY_DISTANCE = distances.pop()


@dataclass(slots=True)
class DifficultyProfile:
    name: str
    best_move_prob: float  # chance to play the top-priority move outright
    random_pool: int | None  # size of the fallback pool (None = all moves)
    tolerance: float | None  # near-optimal window; overrides the two above
    thinking_time: tuple[float, float]  # seconds


@dataclass(slots=True)
class AgentConfig:
    default_difficulty: str = os.getenv("LUDO_DEFAULT_DIFFICULTY", "medium")

    # --- Move priorities ---
    leave_home: float = 100.0
    finish_piece: float = 90.0
    home_stretch_advance: float = 70.0
    capture: float = 80.0
    capture_progress: float = 10.0  # scaled by how far the victim travelled
    safe_square: float = 30.0
    danger_per_pip: float = 5.0  # threat at distance d adds (7 - d) * danger_per_pip
    danger_cap: float = 50.0
    spread: float = 10.0
    spread_min_at_home: int = 2
    block_per_threat: float = 5.0
    block_cap: float = 20.0

    # --- Difficulty ---
    hard_tolerance: float = float(os.getenv("LUDO_HARD_TOLERANCE", 5))
    easy_best_prob: float = float(os.getenv("LUDO_EASY_BEST_PROB", 0.3))
    medium_best_prob: float = float(os.getenv("LUDO_MEDIUM_BEST_PROB", 0.8))
    medium_pool: int = int(os.getenv("LUDO_MEDIUM_POOL", 3))

    profiles: dict[str, DifficultyProfile] = field(init=False)

    def __post_init__(self):
        self.profiles = {
            "easy": DifficultyProfile("easy", self.easy_best_prob, None, None, (1.0, 2.0)),
            "medium": DifficultyProfile(
                "medium", self.medium_best_prob, self.medium_pool, None, (1.5, 3.0)
            ),
            "hard": DifficultyProfile("hard", 1.0, None, self.hard_tolerance, (2.0, 4.0)),
        }


config = Config()
agent_config = AgentConfig()
