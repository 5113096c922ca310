"""
Utilities to load match settings from YAML files.

Match defaults live in `config/default_config.yaml` under the `match`
section. Unknown keys are ignored to keep the loader backwards compatible.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import logging

from src.core import load_yaml, STARTING_SCORES

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


@dataclass
class MatchSettings:
    """Defaults used by MatchEngine.start() and reset()."""
    mode: int = 501
    double_out: bool = True
    player_names: Tuple[str, str] = ("Player 1", "Player 2")
    retain_stats_on_reset: bool = True

    def __post_init__(self):
        if self.mode not in STARTING_SCORES:
            raise ValueError(f"Unsupported mode {self.mode}, expected one of {STARTING_SCORES}")
        names = tuple(self.player_names)
        if len(names) != 2:
            raise ValueError("Exactly two player names are required")
        self.player_names = names


def load_match_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load raw configuration dictionary from YAML.

    Args:
        config_path: Optional path to YAML file (defaults to DEFAULT_CONFIG_PATH)

    Returns:
        Dictionary with configuration values (empty dict on failure)
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.info("Match config not found at %s, using defaults", path)
        return {}

    try:
        return load_yaml(path) or {}
    except Exception as exc:  # YAML/IO errors fall back to safe defaults
        logger.warning("Failed to load match config from %s: %s", path, exc)
        return {}


def build_match_settings(settings: Optional[Dict[str, Any]] = None) -> MatchSettings:
    """
    Construct MatchSettings from a raw settings dictionary.

    Args:
        settings: Raw settings (e.g. from load_match_config); the
            `match` section is used

    Returns:
        Populated MatchSettings instance

    Raises:
        ValueError: If the configured mode or names are invalid
    """
    settings = settings or {}
    overrides = settings.get("match") or {}

    values = {}
    for key, value in overrides.items():
        if key in MatchSettings.__dataclass_fields__:
            values[key] = value
        else:
            logger.debug("Ignoring unknown config key: %s", key)

    if "mode" in values:
        values["mode"] = int(values["mode"])

    return MatchSettings(**values)


def load_match_settings(config_path: Optional[Path] = None) -> MatchSettings:
    """
    Convenience wrapper to load and build match settings in one call.
    """
    return build_match_settings(load_match_config(config_path))
