"""
Countdown game rules (301 / 501) with optional double-out.
"""
from src.core import STARTING_SCORES, ThrowOutcome


class CountdownMode:
    """
    301/501 countdown rules, evaluated one dart at a time.

    Rules (first match wins):
    - Dart would take the score below 0 -> bust
    - Dart reaches exactly 0 -> win, unless double-out is required
      and the dart is not a double (double bull counts) -> bust
    - Dart leaves exactly 1 under double-out -> bust (no double finishes 1)
    - Anything else -> hit, turn continues
    """

    def __init__(self, starting_score: int = 501, double_out: bool = True):
        """
        Initialize countdown rules.

        Args:
            starting_score: 301 or 501
            double_out: Require a double to finish

        Raises:
            ValueError: If starting_score is not supported
        """
        if starting_score not in STARTING_SCORES:
            raise ValueError(
                f"Unsupported mode {starting_score}, expected one of {STARTING_SCORES}"
            )
        self.starting_score = starting_score
        self.double_out = double_out

    def get_name(self) -> str:
        """Get game mode name, e.g. "501 (DO)"."""
        suffix = " (DO)" if self.double_out else ""
        return f"{self.starting_score}{suffix}"

    def resolve(self, current_score: int, dart_score: int, multiplier: int) -> ThrowOutcome:
        """
        Classify a single dart against the player's remaining score.

        Args:
            current_score: Remaining score before the dart
            dart_score: Points of the dart (base * multiplier)
            multiplier: Multiplier of the dart

        Returns:
            ThrowOutcome.BUST, ThrowOutcome.WIN or ThrowOutcome.HIT
        """
        candidate = current_score - dart_score

        if candidate < 0:
            return ThrowOutcome.BUST

        if candidate == 0:
            if self.double_out and multiplier != 2:
                return ThrowOutcome.BUST
            return ThrowOutcome.WIN

        if candidate == 1 and self.double_out:
            return ThrowOutcome.BUST

        return ThrowOutcome.HIT
