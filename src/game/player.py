"""
Player data structure and statistics.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from src.core import DartThrow, DARTS_PER_TURN


@dataclass
class PlayerStats:
    """Cumulative statistics, kept across leg resets."""
    total_points: int = 0  # Points credited (busts excluded)
    total_darts: int = 0  # Every dart thrown, busts included
    history: List[float] = field(default_factory=list)  # 3-dart average after each turn
    wins: int = 0

    @property
    def average(self) -> float:
        """Current 3-dart average (0.0 before the first dart)."""
        if self.total_darts == 0:
            return 0.0
        return (self.total_points / self.total_darts) * 3

    def record_dart(self, points: int) -> None:
        """Count one dart worth `points` (0 for a bust)."""
        self.total_points += points
        self.total_darts += 1

    def close_turn(self) -> float:
        """Append the current average to the history and return it."""
        avg = self.average
        self.history.append(avg)
        return avg

    def clear(self) -> None:
        """Forget points, darts and history. Wins are kept."""
        self.total_points = 0
        self.total_darts = 0
        self.history.clear()


@dataclass
class Player:
    """Represents one of the two players in a match."""
    id: int
    name: str
    starting_score: int = 501

    # Current state
    score: int = field(init=False)
    current_turn: List[DartThrow] = field(default_factory=list)

    stats: PlayerStats = field(default_factory=PlayerStats)

    def __post_init__(self):
        """Initialize remaining score."""
        self.score = self.starting_score

    @property
    def last_throw(self) -> Optional[DartThrow]:
        """Most recent dart of the current turn."""
        return self.current_turn[-1] if self.current_turn else None

    @property
    def turn_full(self) -> bool:
        return len(self.current_turn) >= DARTS_PER_TURN

    @property
    def turn_score(self) -> int:
        """Points credited so far this turn."""
        return sum(dart.score for dart in self.current_turn)

    def add_throw(self, dart: DartThrow) -> None:
        """
        Record a dart in the current turn.

        Raises:
            ValueError: If the turn already holds three darts
        """
        if self.turn_full:
            raise ValueError(f"{self.name} already threw {DARTS_PER_TURN} darts this turn")
        self.current_turn.append(dart)

    def clear_turn(self) -> None:
        self.current_turn.clear()

    def reset(self, clear_stats: bool = False) -> None:
        """
        Reset player for a new leg.

        Args:
            clear_stats: Also forget averages and history (wins are kept)
        """
        self.score = self.starting_score
        self.current_turn.clear()
        if clear_stats:
            self.stats.clear()


def average_for(player: Player) -> float:
    """3-dart average of a player, 0.0 when no darts were thrown."""
    return player.stats.average
