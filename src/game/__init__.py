"""
Game module - match engine, player statistics, rules, and scoreboard.
"""
from .player import Player, PlayerStats, average_for
from .game_modes import CountdownMode
from .checkout import CHECKOUTS, checkout_suggestion
from .game_state import Match, MatchSnapshot, PlayerSnapshot
from .config_loader import (
    MatchSettings,
    build_match_settings,
    load_match_config,
    load_match_settings,
)
from .engine import MatchEngine, ThrowResult
from .feedback import (
    OutcomeListener,
    LoggingFeedback,
    CallbackFeedback,
    FeedbackDispatcher,
)
from .scoreboard import (
    PlayerPanel,
    ScoreboardView,
    build_scoreboard,
    format_scoreboard,
)

__all__ = [
    "Player",
    "PlayerStats",
    "average_for",
    "CountdownMode",
    "CHECKOUTS",
    "checkout_suggestion",
    "Match",
    "MatchSnapshot",
    "PlayerSnapshot",
    "MatchSettings",
    "build_match_settings",
    "load_match_config",
    "load_match_settings",
    "MatchEngine",
    "ThrowResult",
    "OutcomeListener",
    "LoggingFeedback",
    "CallbackFeedback",
    "FeedbackDispatcher",
    "PlayerPanel",
    "ScoreboardView",
    "build_scoreboard",
    "format_scoreboard",
]
