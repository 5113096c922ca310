"""
Interactive terminal scorer for a two-player 301/501 match.

Enter darts as labels ("T20", "D16", "5", "25", "BULL", "MISS") or as
normalized board coordinates ("0.5,0.2"). Commands:
    n   next player (once the turn is over)
    r   reset the leg after a win
    q   quit

Usage:
    python scripts/play_match.py
    python scripts/play_match.py --mode 301 --no-double-out Alice Bob
    python scripts/play_match.py --config config/default_config.yaml --window
"""
import cv2
import sys
import argparse
from pathlib import Path
import logging

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core import Config, ThrowOutcome, parse_label
from src.board import DartboardMapper, ScoreboardConfig, ScoreboardVisualizer
from src.game import (
    CallbackFeedback,
    FeedbackDispatcher,
    LoggingFeedback,
    MatchEngine,
    build_match_settings,
    build_scoreboard,
    format_scoreboard,
)

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class TerminalScorer:
    """Reads darts from stdin and drives a MatchEngine."""

    def __init__(
            self,
            engine: MatchEngine,
            feedback: FeedbackDispatcher,
            visualizer: ScoreboardVisualizer = None
    ):
        self.engine = engine
        self.feedback = feedback
        self.visualizer = visualizer
        self.mapper = DartboardMapper()

    def show(self, snapshot) -> None:
        view = build_scoreboard(snapshot)
        print(format_scoreboard(view))

        if self.visualizer is not None:
            cv2.imshow("Scoreboard", self.visualizer.render(view))
            cv2.waitKey(1)

    def handle(self, text: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False when the user asked to quit
        """
        command = text.strip().lower()

        if command == "q":
            return False
        if command == "n":
            snapshot = self.engine.advance_turn()
        elif command == "r":
            snapshot = self.engine.reset()
        elif "," in command:
            x, y = (float(v) for v in command.split(",", 1))
            dart = self.mapper.to_throw(x, y)
            result = self.engine.register_throw(dart.base, dart.multiplier, dart.label, x=x, y=y)
            self.feedback.dispatch(result.outcome, result.snapshot)
            snapshot = result.snapshot
        else:
            base, multiplier = parse_label(command)
            result = self.engine.register_throw(base, multiplier)
            self.feedback.dispatch(result.outcome, result.snapshot)
            snapshot = result.snapshot

        self.show(snapshot)
        return True

    def run(self) -> None:
        self.show(self.engine.snapshot())

        for line in sys.stdin:
            if not line.strip():
                continue
            try:
                if not self.handle(line):
                    break
            except ValueError as e:
                logger.warning(f"Invalid input {line.strip()!r}: {e}")


def main():
    parser = argparse.ArgumentParser(description="Score a two-player darts match")
    parser.add_argument("players", nargs="*", help="Player names (default from config)")
    parser.add_argument("--config", type=str, default="config/default_config.yaml",
                        help="Path to config YAML")
    parser.add_argument("--mode", type=int, choices=[301, 501], help="Starting score")
    parser.add_argument("--no-double-out", action="store_true", help="Allow any dart to finish")
    parser.add_argument("--window", action="store_true", help="Show OpenCV scoreboard window")
    parser.add_argument("--bell", action="store_true", help="Ring terminal bell on bust and win")
    parser.add_argument("--save-config", type=str, help="Write the effective setup to this YAML file")
    args = parser.parse_args()

    config = Config(Path(args.config))
    if args.mode is not None:
        config.set("match", "mode", args.mode)
    if args.no_double_out:
        config.set("match", "double_out", False)

    settings = build_match_settings(config.data)

    if args.save_config:
        config.save(Path(args.save_config))

    names = (args.players + ["", ""])[:2]
    engine = MatchEngine(settings)
    engine.start(player1_name=names[0], player2_name=names[1])

    feedback = FeedbackDispatcher([LoggingFeedback()])
    if args.bell:
        def ring():
            print("\a", end="", flush=True)

        feedback.add_listener(CallbackFeedback({ThrowOutcome.BUST: ring, ThrowOutcome.WIN: ring}))

    visualizer = None
    if args.window:
        visualizer = ScoreboardVisualizer(ScoreboardConfig.from_dict(config.get_section("scoreboard")))

    scorer = TerminalScorer(engine, feedback, visualizer)
    try:
        scorer.run()
    except KeyboardInterrupt:
        pass

    logger.info("Bye")


if __name__ == "__main__":
    main()
