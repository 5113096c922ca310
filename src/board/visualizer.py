"""
Scoreboard rendering with OpenCV.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import logging

import cv2
import numpy as np

from src.game import PlayerPanel, ScoreboardView

logger = logging.getLogger(__name__)


@dataclass
class ScoreboardConfig:
    """Scoreboard canvas settings."""
    width: int = 960
    height: int = 540
    show_history: bool = True
    font_scale: float = 1.0

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None) -> "ScoreboardConfig":
        """Build from a config section, ignoring unknown keys."""
        values = values or {}
        known = {k: v for k, v in values.items() if k in cls.__dataclass_fields__}
        return cls(**known)


class ScoreboardVisualizer:
    """
    Draws a ScoreboardView onto an image.

    Layout: title bar, one panel per player (name, remaining score,
    average, throw slots, checkout hint), winner banner, and an
    average-history chart along the bottom.
    """

    # Color scheme (BGR)
    COLORS = {
        "background": (30, 24, 18),
        "panel": (45, 38, 30),
        "player1": (255, 229, 0),  # Cyan
        "player2": (129, 64, 255),  # Pink
        "text": (255, 255, 255),
        "muted": (130, 130, 130),
        "checkout": (0, 215, 255),  # Gold
        "banner": (80, 200, 0),  # Green
    }

    def __init__(self, config: Optional[ScoreboardConfig] = None):
        self.config = config or ScoreboardConfig()

    def render(self, view: ScoreboardView, image: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Render the scoreboard.

        Args:
            view: Scoreboard to draw
            image: Optional BGR canvas to draw on (copied, not modified)

        Returns:
            New BGR image
        """
        if image is None:
            result = np.full(
                (self.config.height, self.config.width, 3),
                self.COLORS["background"],
                dtype=np.uint8
            )
        else:
            result = image.copy()

        h, w = result.shape[:2]
        scale = self.config.font_scale

        cv2.putText(
            result,
            f"{view.title}   ROUND {view.round}",
            (20, int(40 * scale)),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.9 * scale,
            self.COLORS["text"],
            2
        )

        panel_top = int(60 * scale)
        panel_height = h // 2 - panel_top if self.config.show_history else h - panel_top - 20
        panel_width = (w - 60) // 2

        for idx, panel in enumerate(view.panels):
            origin = (20 + idx * (panel_width + 20), panel_top)
            accent = self.COLORS["player1"] if idx == 0 else self.COLORS["player2"]
            self._draw_panel(result, panel, origin, (panel_width, panel_height), accent)

        if view.banner:
            self._draw_banner(result, view.banner)

        if self.config.show_history and view.history:
            top = panel_top + panel_height + 20
            self._draw_history(result, view, (20, top, w - 40, h - top - 20))

        return result

    def _draw_panel(
            self,
            image: np.ndarray,
            panel: PlayerPanel,
            origin: Tuple[int, int],
            size: Tuple[int, int],
            accent: Tuple[int, int, int]
    ) -> None:
        x, y = origin
        width, height = size
        scale = self.config.font_scale

        cv2.rectangle(image, (x, y), (x + width, y + height), self.COLORS["panel"], -1)
        border = accent if panel.is_active else self.COLORS["muted"]
        cv2.rectangle(image, (x, y), (x + width, y + height), border, 3 if panel.is_active else 1)

        name_color = self.COLORS["text"] if panel.is_active else self.COLORS["muted"]
        cv2.putText(image, panel.name, (x + 12, y + int(32 * scale)),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8 * scale, name_color, 2)
        cv2.putText(image, f"AVG {panel.average}  W {panel.wins}",
                    (x + width - int(190 * scale), y + int(32 * scale)),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6 * scale, self.COLORS["muted"], 1)

        cv2.putText(image, str(panel.score), (x + 12, y + int(100 * scale)),
                    cv2.FONT_HERSHEY_DUPLEX, 2.2 * scale, self.COLORS["text"], 3)

        if panel.is_winner:
            cv2.putText(image, "WINNER!", (x + width - int(160 * scale), y + int(100 * scale)),
                        cv2.FONT_HERSHEY_SIMPLEX, 1.0 * scale, self.COLORS["checkout"], 2)
        elif panel.checkout_hint:
            cv2.putText(image, panel.checkout_hint, (x + width - int(200 * scale), y + int(70 * scale)),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7 * scale, self.COLORS["checkout"], 2)

        # Throw slots
        slot_w = (width - 40) // len(panel.throws)
        slot_y = y + height - int(50 * scale)
        for i, label in enumerate(panel.throws):
            sx = x + 12 + i * (slot_w + 8)
            cv2.rectangle(image, (sx, slot_y), (sx + slot_w, slot_y + int(38 * scale)), border, 1)
            cv2.putText(image, label, (sx + 10, slot_y + int(28 * scale)),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7 * scale, self.COLORS["text"], 2)

    def _draw_banner(self, image: np.ndarray, text: str) -> None:
        h, w = image.shape[:2]
        (text_w, text_h), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, 1.4, 3)
        x = max(0, (w - text_w) // 2)
        y = h // 2
        cv2.rectangle(image, (x - 20, y - text_h - 20), (x + text_w + 20, y + 20),
                      self.COLORS["banner"], -1)
        cv2.putText(image, text, (x, y), cv2.FONT_HERSHEY_DUPLEX, 1.4, self.COLORS["text"], 3)

    def _draw_history(
            self,
            image: np.ndarray,
            view: ScoreboardView,
            area: Tuple[int, int, int, int]
    ) -> None:
        """Draw both players' average history as polylines."""
        x, y, width, height = area
        if width <= 0 or height <= 0:
            return

        cv2.rectangle(image, (x, y), (x + width, y + height), self.COLORS["muted"], 1)

        values = [v for _, a, b in view.history for v in (a, b) if v is not None]
        top = max(max(values), 1.0)
        steps = max(len(view.history) - 1, 1)

        for column, color in ((1, self.COLORS["player1"]), (2, self.COLORS["player2"])):
            points = []
            for i, row in enumerate(view.history):
                value = row[column]
                if value is None:
                    continue
                px = x + int(i * width / steps)
                py = y + height - int(value / top * height)
                points.append((px, py))

            if len(points) == 1:
                cv2.circle(image, points[0], 4, color, -1)
            elif points:
                cv2.polylines(image, [np.array(points, dtype=np.int32)], False, color, 2)
