"""
Match state and the immutable snapshots handed to collaborators.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from src.core import DartThrow
from .checkout import checkout_suggestion
from .player import Player


@dataclass(frozen=True)
class PlayerSnapshot:
    """Read-only copy of a player at one point in time."""
    id: int
    name: str
    score: int
    current_turn: Tuple[DartThrow, ...]
    total_points: int
    total_darts: int
    history: Tuple[float, ...]
    wins: int

    @property
    def average(self) -> float:
        if self.total_darts == 0:
            return 0.0
        return (self.total_points / self.total_darts) * 3

    @classmethod
    def from_player(cls, player: Player) -> "PlayerSnapshot":
        stats = player.stats
        return cls(
            id=player.id,
            name=player.name,
            score=player.score,
            current_turn=tuple(player.current_turn),
            total_points=stats.total_points,
            total_darts=stats.total_darts,
            history=tuple(stats.history),
            wins=stats.wins,
        )


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only copy of the whole match, returned after every command."""
    mode: int
    double_out: bool
    players: Tuple[PlayerSnapshot, PlayerSnapshot]
    current_player_idx: int
    winner: Optional[int]
    round: int
    is_turn_over: bool

    @property
    def current_player(self) -> PlayerSnapshot:
        return self.players[self.current_player_idx]

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    @property
    def checkout_hint(self) -> str:
        """Finish suggestion for the player on turn ("" once the match is won)."""
        if self.is_finished:
            return ""
        return checkout_suggestion(self.current_player.score)


@dataclass
class Match:
    """
    Authoritative, mutable match state.

    Owned by MatchEngine; everything outside the engine works on snapshots.
    """
    mode: int
    double_out: bool
    players: List[Player] = field(default_factory=list)

    current_player_idx: int = 0
    winner: Optional[int] = None
    round: int = 1

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_idx]

    def is_turn_over(self) -> bool:
        """
        Whether the player on turn may not throw again.

        True after three darts, after a bust, or once the match is won.
        """
        if self.winner is not None:
            return True
        player = self.current_player
        last = player.last_throw
        return player.turn_full or (last is not None and last.is_bust)

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            mode=self.mode,
            double_out=self.double_out,
            players=tuple(PlayerSnapshot.from_player(p) for p in self.players),
            current_player_idx=self.current_player_idx,
            winner=self.winner,
            round=self.round,
            is_turn_over=self.is_turn_over(),
        )
