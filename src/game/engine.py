"""
Match engine: the scoring and turn state machine for a two-player countdown match.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from src.core import DartThrow, ThrowOutcome, BUST_LABEL, format_label
from .config_loader import MatchSettings
from .game_modes import CountdownMode
from .game_state import Match, MatchSnapshot
from .player import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThrowResult:
    """
    Outcome of register_throw.

    `outcome` is None when the throw was rejected (match won or turn over);
    the snapshot is then unchanged.
    """
    outcome: Optional[ThrowOutcome]
    snapshot: MatchSnapshot

    @property
    def accepted(self) -> bool:
        return self.outcome is not None


class MatchEngine:
    """
    Owns one match and applies start / throw / advance / reset to it.

    States: Setup (no match yet) -> InProgress -> Won. reset() returns a
    won match to InProgress; start() is always available as a hard restart.
    Commands whose preconditions are not met are logged and ignored.
    """

    def __init__(self, settings: Optional[MatchSettings] = None):
        """
        Args:
            settings: Defaults for start() and reset policy (default: MatchSettings())
        """
        self.settings = settings or MatchSettings()
        self.match: Optional[Match] = None
        self._rules: Optional[CountdownMode] = None

    def start(
            self,
            mode: Optional[int] = None,
            double_out: Optional[bool] = None,
            player1_name: str = "",
            player2_name: str = ""
    ) -> MatchSnapshot:
        """
        Start a fresh match, discarding any current one.

        Args:
            mode: 301 or 501 (default from settings)
            double_out: Require a double to finish (default from settings)
            player1_name: Name of the first thrower (blank = placeholder)
            player2_name: Name of the second thrower (blank = placeholder)

        Returns:
            Snapshot of the new match

        Raises:
            ValueError: If mode is not 301 or 501
        """
        mode = self.settings.mode if mode is None else mode
        double_out = self.settings.double_out if double_out is None else double_out
        rules = CountdownMode(starting_score=mode, double_out=double_out)

        names = [
            (name or "").strip() or default
            for name, default in zip((player1_name, player2_name), self.settings.player_names)
        ]
        players = [
            Player(id=idx + 1, name=name, starting_score=mode)
            for idx, name in enumerate(names)
        ]

        self._rules = rules
        self.match = Match(mode=mode, double_out=double_out, players=players)

        logger.info(f"Match started: {rules.get_name()} - {names[0]} vs {names[1]}")
        return self.match.snapshot()

    def snapshot(self) -> Optional[MatchSnapshot]:
        """Current snapshot, or None before start()."""
        if self.match is None:
            return None
        return self.match.snapshot()

    def is_turn_over(self) -> bool:
        """Whether advance_turn() would be accepted or the match is finished."""
        if self.match is None:
            return False
        return self.match.is_turn_over()

    def register_throw(
            self,
            base: int,
            multiplier: int,
            label: Optional[str] = None,
            x: Optional[float] = None,
            y: Optional[float] = None
    ) -> Optional[ThrowResult]:
        """
        Register one dart for the player on turn.

        Args:
            base: Segment value (0 miss, 1-20, 25 bull)
            multiplier: 1, 2 or 3 (double bull = 25 x 2)
            label: Display label (default: derived from segment)
            x: Optional normalized board x coordinate
            y: Optional normalized board y coordinate

        Returns:
            ThrowResult with outcome and new snapshot, or None before start()

        Raises:
            ValueError: If the segment does not exist on a dartboard
        """
        match = self.match
        if match is None:
            logger.warning("Throw ignored: no match started")
            return None

        label = label or format_label(base, multiplier)
        dart = DartThrow(base=base, multiplier=multiplier, label=label, x=x, y=y)

        if match.winner is not None:
            logger.warning(f"Throw ignored: match already won by {match.players[match.winner].name}")
            return ThrowResult(None, match.snapshot())

        if match.is_turn_over():
            logger.warning(f"Throw ignored: {match.current_player.name}'s turn is over")
            return ThrowResult(None, match.snapshot())

        player = match.current_player
        outcome = self._rules.resolve(player.score, dart.value, dart.multiplier)

        if outcome is ThrowOutcome.BUST:
            self._apply_bust(player, dart)
        elif outcome is ThrowOutcome.WIN:
            self._apply_win(match, player, dart)
        else:
            self._apply_hit(player, dart)

        return ThrowResult(outcome, match.snapshot())

    def _apply_bust(self, player: Player, dart: DartThrow) -> None:
        # Remaining score is left untouched; a bust never subtracts.
        bust = DartThrow(
            base=dart.base,
            multiplier=dart.multiplier,
            label=BUST_LABEL,
            is_bust=True,
            x=dart.x,
            y=dart.y,
        )
        player.add_throw(bust)
        player.stats.record_dart(0)
        avg = player.stats.close_turn()
        logger.info(f"{player.name} busted with {dart.label} (score stays {player.score}, avg {avg:.1f})")

    def _apply_win(self, match: Match, player: Player, dart: DartThrow) -> None:
        player.add_throw(dart)
        player.score = 0
        player.stats.record_dart(dart.score)
        player.stats.wins += 1
        player.stats.close_turn()
        match.winner = match.current_player_idx
        logger.info(f"Match finished! Winner: {player.name} with {dart.label}")

    def _apply_hit(self, player: Player, dart: DartThrow) -> None:
        player.add_throw(dart)
        player.score -= dart.score
        player.stats.record_dart(dart.score)

        logger.debug(
            f"{player.name} hit: {dart.label} ({dart.score} points, "
            f"turn {player.turn_score}, remaining {player.score})"
        )

        if player.turn_full:
            avg = player.stats.close_turn()
            logger.debug(f"{player.name} turn complete, average {avg:.1f}")

    def advance_turn(self) -> Optional[MatchSnapshot]:
        """
        Pass play to the other player.

        Only accepted once the current turn is over and nobody has won.
        The round counter increases when play returns to the first player.

        Returns:
            New snapshot (unchanged if rejected), or None before start()
        """
        match = self.match
        if match is None:
            logger.warning("Advance ignored: no match started")
            return None

        if match.winner is not None:
            logger.warning("Advance ignored: match is finished")
            return match.snapshot()

        if not match.is_turn_over():
            logger.warning(f"Advance ignored: {match.current_player.name}'s turn is still open")
            return match.snapshot()

        match.current_player.clear_turn()
        match.current_player_idx = 1 - match.current_player_idx
        if match.current_player_idx == 0:
            match.round += 1

        logger.debug(f"Next player: {match.current_player.name} (round {match.round})")
        return match.snapshot()

    def reset(self) -> Optional[MatchSnapshot]:
        """
        Start a new leg with the same players and rules.

        Scores go back to the starting value, throws and winner are cleared,
        round and turn restart. Statistics survive unless the settings say
        otherwise.

        Returns:
            New snapshot, or None before start()
        """
        match = self.match
        if match is None:
            logger.warning("Reset ignored: no match started")
            return None

        clear_stats = not self.settings.retain_stats_on_reset
        for player in match.players:
            player.reset(clear_stats=clear_stats)

        match.winner = None
        match.round = 1
        match.current_player_idx = 0

        logger.info("Match reset" + (" (statistics cleared)" if clear_stats else ""))
        return match.snapshot()
