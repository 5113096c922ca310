"""
Outcome feedback ports (sounds, lights, log lines).

The engine only reports a ThrowOutcome; callers pass it to a
FeedbackDispatcher after each throw to trigger whatever effects are wired up.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional
import logging

from src.core import ThrowOutcome
from .game_state import MatchSnapshot

logger = logging.getLogger(__name__)


class OutcomeListener(ABC):
    """Receives the outcome of every accepted throw."""

    @abstractmethod
    def on_outcome(self, outcome: ThrowOutcome, snapshot: MatchSnapshot) -> None:
        """
        Handle a throw outcome.

        Args:
            outcome: HIT, BUST or WIN
            snapshot: Match state after the throw
        """
        pass


class LoggingFeedback(OutcomeListener):
    """Writes one log line per outcome."""

    MESSAGES = {
        ThrowOutcome.HIT: "{name}: {label} ({score} left)",
        ThrowOutcome.BUST: "{name}: BUST! ({score} left)",
        ThrowOutcome.WIN: "{name}: GAME SHOT!",
    }

    def on_outcome(self, outcome: ThrowOutcome, snapshot: MatchSnapshot) -> None:
        player = snapshot.current_player
        last = player.current_turn[-1] if player.current_turn else None
        message = self.MESSAGES[outcome].format(
            name=player.name,
            label=last.label if last else "",
            score=player.score,
        )
        logger.info(message)


class CallbackFeedback(OutcomeListener):
    """
    Maps each outcome to a plain callable, e.g. a sound player.

    Outcomes without a callback are ignored.
    """

    def __init__(self, callbacks: Dict[ThrowOutcome, Callable[[], None]]):
        self.callbacks = dict(callbacks)

    def on_outcome(self, outcome: ThrowOutcome, snapshot: MatchSnapshot) -> None:
        callback = self.callbacks.get(outcome)
        if callback is not None:
            callback()


class FeedbackDispatcher:
    """Fans a throw outcome out to all registered listeners."""

    def __init__(self, listeners: Optional[List[OutcomeListener]] = None):
        self.listeners: List[OutcomeListener] = list(listeners or [])

    def add_listener(self, listener: OutcomeListener) -> None:
        self.listeners.append(listener)

    def dispatch(self, outcome: Optional[ThrowOutcome], snapshot: MatchSnapshot) -> None:
        """
        Notify listeners. Rejected throws (outcome None) notify nobody.

        Raises:
            Exception: Whatever a listener raises, after logging it
        """
        if outcome is None:
            return

        for listener in self.listeners:
            try:
                listener.on_outcome(outcome, snapshot)
            except Exception as e:
                logger.error(f"Feedback listener {type(listener).__name__} failed: {e}")
                raise
