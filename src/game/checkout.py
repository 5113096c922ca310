"""
Checkout suggestions for double-out finishes.
"""
from typing import Dict

# Canonical three-dart-or-less finishes, keyed by remaining score.
# Scores without an entry get no hint.
CHECKOUTS: Dict[int, str] = {
    170: "T20 T20 BULL", 167: "T20 T19 BULL", 164: "T20 T18 BULL", 161: "T20 T17 BULL",
    160: "T20 T20 D20", 158: "T20 T20 D19", 156: "T20 T20 D18", 150: "T20 T18 D18",
    140: "T20 T16 D16", 130: "T20 T18 D8", 121: "T20 T11 D14", 120: "T20 20 D20",
    110: "T20 10 D20", 100: "T20 D20", 90: "T18 D18", 80: "T16 D16",
    70: "T18 D8", 60: "20 D20", 50: "10 D20", 40: "D20", 36: "D18", 32: "D16",
    20: "D10", 10: "D5", 4: "D2", 2: "D1",
}


def checkout_suggestion(score: int) -> str:
    """Suggested finish for `score`, or "" when none is listed."""
    return CHECKOUTS.get(score, "")
