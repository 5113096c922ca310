"""
Dartboard segment validation and label conversion.

Labels follow scoreboard convention: "T20" (triple), "D5" (double),
"20" (single), "25" (single bull), "BULL" (double bull), "MISS".
"""
from typing import Tuple

BULL = 25
MISS = 0
BUST_LABEL = "BUST"
BULL_LABEL = "BULL"
MISS_LABEL = "MISS"

_PREFIXES = {1: "", 2: "D", 3: "T"}
_MULTIPLIERS = {"S": 1, "D": 2, "T": 3}

# Accepted spellings for bull and miss segments
_ALIASES = {
    "BULL": (BULL, 2),
    "DB": (BULL, 2),
    "DBULL": (BULL, 2),
    "50": (BULL, 2),
    "SB": (BULL, 1),
    "25": (BULL, 1),
    "MISS": (MISS, 1),
    "M": (MISS, 1),
    "0": (MISS, 1),
}


def validate_segment(base: int, multiplier: int) -> None:
    """
    Check that a base value / multiplier pair exists on a dartboard.

    Raises:
        ValueError: If the combination cannot be hit
    """
    if multiplier not in _PREFIXES:
        raise ValueError(f"Invalid multiplier: {multiplier}")

    if base == MISS:
        if multiplier != 1:
            raise ValueError("A miss cannot carry a multiplier")
    elif base == BULL:
        if multiplier == 3:
            raise ValueError("There is no triple bull")
    elif not 1 <= base <= 20:
        raise ValueError(f"Invalid segment: {base}")


def format_label(base: int, multiplier: int) -> str:
    """
    Build the scoreboard label for a segment.

    Args:
        base: Segment value (0, 1-20, 25)
        multiplier: 1, 2 or 3

    Returns:
        Label such as "T20", "D5", "20", "25", "BULL" or "MISS"
    """
    validate_segment(base, multiplier)

    if base == MISS:
        return MISS_LABEL
    if base == BULL:
        return BULL_LABEL if multiplier == 2 else str(BULL)
    return f"{_PREFIXES[multiplier]}{base}"


def parse_label(text: str) -> Tuple[int, int]:
    """
    Parse a scoreboard label into (base, multiplier).

    Accepts the output of format_label plus a few common spellings
    ("S20", "DB", "SB", "50", "M"). Case and surrounding whitespace
    are ignored.

    Raises:
        ValueError: If the label does not name a valid segment
    """
    label = text.strip().upper()
    if not label:
        raise ValueError("Empty label")

    if label in _ALIASES:
        return _ALIASES[label]

    multiplier = 1
    if label[0] in _MULTIPLIERS:
        multiplier = _MULTIPLIERS[label[0]]
        label = label[1:]

    if label in ("B", "BULL", "25"):
        base = BULL
    elif label.isdigit():
        base = int(label)
    else:
        raise ValueError(f"Cannot parse dart label: {text!r}")

    validate_segment(base, multiplier)
    return base, multiplier
