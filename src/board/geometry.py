"""
Dartboard geometry and mapping of board positions to scored segments.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
import logging

import numpy as np

from src.core import DartThrow, BULL, MISS, format_label

logger = logging.getLogger(__name__)


@dataclass
class BoardGeometry:
    """
    Dartboard geometric parameters (official dimensions).
    All measurements in millimeters unless specified.
    """
    # Radii (from center)
    inner_bull_radius: float = 6.35  # Double bull (50 points)
    outer_bull_radius: float = 15.9  # Single bull (25 points)
    triple_inner_radius: float = 99.0  # Inner edge of triple ring
    triple_outer_radius: float = 107.0  # Outer edge of triple ring
    double_inner_radius: float = 162.0  # Inner edge of double ring
    double_outer_radius: float = 170.0  # Outer edge of double ring (board edge)

    sector_angle: float = 18.0  # Degrees per sector


class DartboardMapper:
    """
    Maps board positions to segments.

    Positions are normalized: (0.5, 0.5) is the bull and the outer edge
    of the double ring lies at distance `board_radius` (0.5 by default),
    so a square image of the board maps onto the unit square.
    """

    # Official sector sequence (clockwise from top)
    SECTOR_SEQUENCE = (20, 1, 18, 4, 13, 6, 10, 15, 2, 17,
                       3, 19, 7, 16, 8, 11, 14, 9, 12, 5)

    def __init__(
            self,
            board_geometry: Optional[BoardGeometry] = None,
            board_center: Tuple[float, float] = (0.5, 0.5),
            board_radius: float = 0.5
    ):
        """
        Initialize dartboard mapper.

        Args:
            board_geometry: Board dimensions (default: BoardGeometry())
            board_center: Bull position in normalized coordinates (x, y)
            board_radius: Normalized distance from bull to board edge
        """
        if board_radius <= 0:
            raise ValueError("board_radius must be positive")

        self.geometry = board_geometry or BoardGeometry()
        self.center = board_center
        self.board_radius = board_radius

        # Normalized units per millimeter
        scale = board_radius / self.geometry.double_outer_radius
        self.inner_bull_radius = self.geometry.inner_bull_radius * scale
        self.outer_bull_radius = self.geometry.outer_bull_radius * scale
        self.triple_inner_radius = self.geometry.triple_inner_radius * scale
        self.triple_outer_radius = self.geometry.triple_outer_radius * scale
        self.double_inner_radius = self.geometry.double_inner_radius * scale
        self.double_outer_radius = self.geometry.double_outer_radius * scale

    def to_polar(self, x: float, y: float) -> Tuple[float, float]:
        """
        Convert board coordinates to polar coordinates.

        Returns:
            (radius, angle) where angle is in degrees, 0° = top, clockwise
        """
        dx = x - self.center[0]
        dy = y - self.center[1]

        radius = float(np.hypot(dx, dy))

        # Image y grows downwards; atan2(dx, -dy) gives 0° at top, clockwise
        angle = float(np.degrees(np.arctan2(dx, -dy))) % 360.0

        return radius, angle

    def angle_to_sector(self, angle: float) -> int:
        """
        Convert angle to sector number.

        Sector 20 is centered at 0° (top), spanning [-9°, 9°).
        """
        adjusted_angle = (angle + self.geometry.sector_angle / 2) % 360
        sector_idx = int(adjusted_angle // self.geometry.sector_angle) % len(self.SECTOR_SEQUENCE)
        return self.SECTOR_SEQUENCE[sector_idx]

    def radius_to_ring(self, radius: float) -> Tuple[str, int]:
        """
        Convert radius to ring name and multiplier.

        Returns:
            (ring_name, multiplier) where ring_name is one of
            "double_bull", "single_bull", "triple", "double", "single", "miss".
            Bull rings report the multiplier applied to 25.
        """
        if radius <= self.inner_bull_radius:
            return "double_bull", 2
        if radius <= self.outer_bull_radius:
            return "single_bull", 1
        if self.triple_inner_radius <= radius <= self.triple_outer_radius:
            return "triple", 3
        if self.double_inner_radius <= radius <= self.double_outer_radius:
            return "double", 2
        if radius < self.double_inner_radius:
            return "single", 1
        return "miss", 1

    def to_throw(self, x: float, y: float) -> DartThrow:
        """
        Convert a board position to an unscored dart.

        Args:
            x: Normalized x coordinate
            y: Normalized y coordinate

        Returns:
            DartThrow with segment, multiplier, label and coordinates
        """
        radius, angle = self.to_polar(x, y)
        ring_name, multiplier = self.radius_to_ring(radius)

        if ring_name in ("double_bull", "single_bull"):
            base = BULL
        elif ring_name == "miss":
            base = MISS
        else:
            base = self.angle_to_sector(angle)

        dart = DartThrow(
            base=base,
            multiplier=multiplier,
            label=format_label(base, multiplier),
            x=x,
            y=y,
        )

        logger.debug(
            f"({x:.3f}, {y:.3f}) -> r={radius:.3f}, θ={angle:.1f}° -> {ring_name} = {dart.label}"
        )
        return dart

    def is_on_board(self, x: float, y: float) -> bool:
        """Check if a position lies within the scoring area."""
        radius, _ = self.to_polar(x, y)
        return radius <= self.double_outer_radius

    def get_ring_boundaries(self) -> Dict[str, float]:
        """Get all ring boundaries in normalized units."""
        return {
            "inner_bull": self.inner_bull_radius,
            "outer_bull": self.outer_bull_radius,
            "triple_inner": self.triple_inner_radius,
            "triple_outer": self.triple_outer_radius,
            "double_inner": self.double_inner_radius,
            "double_outer": self.double_outer_radius,
        }

