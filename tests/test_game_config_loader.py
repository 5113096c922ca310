import textwrap
from pathlib import Path

import pytest

from src.game import (
    MatchEngine,
    MatchSettings,
    build_match_settings,
    load_match_config,
    load_match_settings,
)


def test_load_match_settings_missing_file(tmp_path: Path):
    """Missing YAML should fall back to defaults without error."""
    loaded = load_match_settings(tmp_path / "no_config.yaml")

    assert loaded == MatchSettings()
    assert loaded.mode == 501
    assert loaded.double_out is True
    assert loaded.player_names == ("Player 1", "Player 2")
    assert loaded.retain_stats_on_reset is True


def test_build_match_settings_applies_overrides(tmp_path: Path):
    """Overrides from YAML populate the settings; unknown keys are ignored."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent("""
        match:
          mode: "301"
          double_out: false
          player_names: [Home, Away]
          retain_stats_on_reset: false
          legs_to_win: 3
        scoreboard:
          width: 640
    """).strip())

    settings = build_match_settings(load_match_config(config_path))

    assert settings.mode == 301
    assert settings.double_out is False
    assert settings.player_names == ("Home", "Away")
    assert settings.retain_stats_on_reset is False

    snapshot = MatchEngine(settings).start()
    assert snapshot.mode == 301
    assert [p.name for p in snapshot.players] == ["Home", "Away"]


def test_malformed_yaml_falls_back(tmp_path: Path):
    """Unreadable YAML yields an empty settings dict."""
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("match: {mode: [")

    assert load_match_config(config_path) == {}
    assert load_match_settings(config_path) == MatchSettings()


def test_invalid_settings_raise():
    """Bad modes or name lists are rejected."""
    with pytest.raises(ValueError):
        build_match_settings({"match": {"mode": 401}})
    with pytest.raises(ValueError):
        MatchSettings(player_names=("Solo",))
