"""
Core data types for the dart match scorer.
Defines contracts between modules to ensure stable interfaces.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .segments import validate_segment, BUST_LABEL

# Supported countdown starting scores
STARTING_SCORES = (301, 501)

# Darts allowed per turn
DARTS_PER_TURN = 3


class ThrowOutcome(Enum):
    """Result of a single registered dart, used to trigger feedback."""
    HIT = "hit"
    BUST = "bust"
    WIN = "win"


@dataclass(frozen=True)
class DartThrow:
    """
    A single recorded dart.

    Immutable once recorded. A bust dart keeps its segment for reference
    but scores nothing.
    """
    base: int  # Segment value: 0 (miss), 1-20, or 25 (bull)
    multiplier: int  # 1=Single, 2=Double, 3=Triple (bull: 1 or 2)
    label: str  # "T20", "D5", "20", "25", "BULL", "MISS" or "BUST"
    is_bust: bool = False

    # Normalized board coordinates (0.0 - 1.0), if known
    x: Optional[float] = None
    y: Optional[float] = None

    def __post_init__(self):
        validate_segment(self.base, self.multiplier)
        if self.is_bust and self.label != BUST_LABEL:
            raise ValueError(f"Bust dart must be labelled {BUST_LABEL!r}")

    @property
    def value(self) -> int:
        """Points of the segment hit, regardless of bust."""
        return self.base * self.multiplier

    @property
    def score(self) -> int:
        """Points credited to the player (0 on bust)."""
        return 0 if self.is_bust else self.value

    @property
    def is_double(self) -> bool:
        return self.multiplier == 2
