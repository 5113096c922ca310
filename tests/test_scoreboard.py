"""
Tests for the scoreboard view model and outcome feedback.
"""
import pytest

from src.core import ThrowOutcome
from src.game import (
    CallbackFeedback,
    FeedbackDispatcher,
    LoggingFeedback,
    MatchEngine,
    OutcomeListener,
    build_scoreboard,
    format_scoreboard,
)
from src.game.scoreboard import EMPTY_SLOT, merge_history, pad_throws


def started() -> MatchEngine:
    engine = MatchEngine()
    engine.start(501, True, "Alice", "Bob")
    return engine


def test_pad_throws():
    """Throw slots are always three wide."""
    assert pad_throws([]) == (EMPTY_SLOT, EMPTY_SLOT, EMPTY_SLOT)
    assert pad_throws(["T20"]) == ("T20", "--", "--")
    assert pad_throws(["1", "2", "3"]) == ("1", "2", "3")


def test_merge_history():
    """Histories of different length are padded with None."""
    rows = merge_history((60.0, 45.0), (30.0,))
    assert rows == ((1, 60.0, 30.0), (2, 45.0, None))
    assert merge_history((), ()) == ()


def test_scoreboard_during_turn():
    """The active player shows throws, average and checkout hint."""
    engine = started()
    engine.register_throw(20, 3)
    view = build_scoreboard(engine.snapshot())

    assert view.title == "501 (DO)"
    assert view.round == 1
    assert view.banner == ""
    assert not view.can_advance

    alice, bob = view.panels
    assert alice.is_active and not bob.is_active
    assert alice.score == 441
    assert alice.average == "180.0"
    assert alice.throws == ("T20", "--", "--")
    assert bob.throws == ("--", "--", "--")
    assert bob.average == "0.0"


def test_scoreboard_checkout_hint_and_advance():
    """Hints follow the active player's score; a bust lets play advance."""
    engine = started()
    engine.match.current_player.score = 100

    engine.register_throw(20, 3)
    assert build_scoreboard(engine.snapshot()).panels[0].checkout_hint == "D20"

    engine.register_throw(20, 1)
    assert build_scoreboard(engine.snapshot()).panels[0].checkout_hint == "D10"

    engine.register_throw(20, 3)
    view = build_scoreboard(engine.snapshot())
    assert view.panels[0].score == 20
    assert view.panels[0].throws == ("T20", "20", "BUST")
    assert view.can_advance


def test_scoreboard_hint_for_active_player_only():
    """Only the player on turn gets a checkout hint."""
    engine = started()
    engine.match.players[0].score = 40
    engine.match.players[1].score = 32
    view = build_scoreboard(engine.snapshot())

    assert view.panels[0].checkout_hint == "D20"
    assert view.panels[1].checkout_hint == ""


def test_scoreboard_after_win():
    """Banner, winner flag and no hints once the match is won."""
    engine = started()
    engine.match.current_player.score = 40
    engine.register_throw(20, 2)
    view = build_scoreboard(engine.snapshot())

    assert view.banner == "Alice WINS!"
    assert view.panels[0].is_winner
    assert not view.panels[0].is_active
    assert view.panels[0].checkout_hint == ""
    assert view.panels[0].wins == 1
    assert not view.can_advance
    assert view.history == ((1, pytest.approx(120.0), None),)

    text = format_scoreboard(view)
    assert "Alice WINS!" in text
    assert "D20" in text


def test_straight_out_title():
    """Title omits the double-out marker when it is off."""
    engine = MatchEngine()
    view = build_scoreboard(engine.start(301, False, "A", "B"))
    assert view.title == "301"


class RecordingListener(OutcomeListener):
    def __init__(self):
        self.outcomes = []

    def on_outcome(self, outcome, snapshot):
        self.outcomes.append((outcome, snapshot.current_player.score))


class FailingListener(OutcomeListener):
    def on_outcome(self, outcome, snapshot):
        raise RuntimeError("speaker unplugged")


def test_dispatcher_fans_out():
    """Every listener sees accepted outcomes; rejected throws notify nobody."""
    engine = started()
    recorder = RecordingListener()
    sounds = []
    dispatcher = FeedbackDispatcher([recorder, LoggingFeedback()])
    dispatcher.add_listener(CallbackFeedback({ThrowOutcome.BUST: lambda: sounds.append("buzz")}))

    engine.match.current_player.score = 30
    result = engine.register_throw(20, 1)
    dispatcher.dispatch(result.outcome, result.snapshot)
    result = engine.register_throw(20, 1)
    dispatcher.dispatch(result.outcome, result.snapshot)
    result = engine.register_throw(5, 1)
    dispatcher.dispatch(result.outcome, result.snapshot)

    assert recorder.outcomes == [(ThrowOutcome.HIT, 10), (ThrowOutcome.BUST, 10)]
    assert sounds == ["buzz"]


def test_dispatcher_propagates_listener_errors():
    """Listener failures are not swallowed."""
    engine = started()
    result = engine.register_throw(1, 1)
    dispatcher = FeedbackDispatcher([FailingListener()])

    with pytest.raises(RuntimeError):
        dispatcher.dispatch(result.outcome, result.snapshot)
