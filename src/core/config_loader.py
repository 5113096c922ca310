"""
Match and scoreboard settings, read from YAML over built-in defaults.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .io_utils import load_yaml, atomic_write_yaml

logger = logging.getLogger(__name__)


class Config:
    """
    Settings for the match setup and the scoreboard display.

    Sections known here (`match`, `scoreboard`) always stay mappings:
    a YAML key left empty or set to a scalar keeps the built-in values.
    Extra sections from the file are carried along untouched.
    """

    DEFAULTS = {
        # Pre-filled values for a new match
        "match": {
            "mode": 501,
            "double_out": True,
            "player_names": ["Player 1", "Player 2"],
            "retain_stats_on_reset": True,
        },

        # Canvas and chart options for ScoreboardVisualizer
        "scoreboard": {
            "width": 960,
            "height": 540,
            "show_history": True,
            "font_scale": 1.0,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Read match settings from a YAML file.

        Args:
            config_path: Path to config YAML (None or missing file = defaults only)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                self._merge_config(load_yaml(config_path))
                logger.info(f"Match settings loaded from {config_path}")
            except Exception as e:
                logger.warning(f"Failed to load match settings: {e}, using defaults")
        else:
            logger.info("Using default match settings")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Overlay file values on the defaults, key by key."""
        for section, values in user_config.items():
            if section not in self.data:
                self.data[section] = values
            elif isinstance(values, dict):
                self.data[section].update(values)
            else:
                logger.warning(
                    f"Section '{section}' should be a mapping, got {values!r}; keeping defaults"
                )

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get one setting, e.g. get("match", "mode")."""
        return self.get_section(section).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get all settings of a section ({} if absent or not a mapping)."""
        values = self.data.get(section)
        return values if isinstance(values, dict) else {}

    def set(self, section: str, key: str, value: Any) -> None:
        """Override one setting, e.g. from a command-line flag."""
        if not isinstance(self.data.get(section), dict):
            self.data[section] = {}
        self.data[section][key] = value

    def save(self, config_path: Path) -> None:
        """Write the effective settings back to YAML."""
        atomic_write_yaml(Path(config_path), self.data)
        logger.info(f"Match settings saved to {config_path}")
