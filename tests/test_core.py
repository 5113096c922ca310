"""
Unit tests for core module.
"""
from pathlib import Path
import dataclasses
import tempfile
import pytest

from src.core import (
    DartThrow, ThrowOutcome, Config,
    validate_segment, format_label, parse_label,
    atomic_write_yaml, load_yaml
)


def test_dart_throw_scores():
    """Test DartThrow derived values."""
    dart = DartThrow(base=20, multiplier=3, label="T20")
    assert dart.value == 60
    assert dart.score == 60
    assert not dart.is_double
    assert dart.x is None

    bull = DartThrow(base=25, multiplier=2, label="BULL")
    assert bull.score == 50
    assert bull.is_double


def test_bust_throw_scores_nothing():
    """A bust keeps its segment but credits zero points."""
    dart = DartThrow(base=19, multiplier=3, label="BUST", is_bust=True)
    assert dart.value == 57
    assert dart.score == 0

    with pytest.raises(ValueError):
        DartThrow(base=19, multiplier=3, label="T19", is_bust=True)


def test_dart_throw_is_immutable():
    """Recorded darts cannot be changed."""
    dart = DartThrow(base=5, multiplier=1, label="5")
    with pytest.raises(dataclasses.FrozenInstanceError):
        dart.base = 20


def test_invalid_segments():
    """Test segment validation."""
    for base, multiplier in [(25, 3), (21, 1), (20, 4), (0, 2), (-1, 1), (20, 0)]:
        with pytest.raises(ValueError):
            validate_segment(base, multiplier)

    with pytest.raises(ValueError):
        DartThrow(base=25, multiplier=3, label="T25")

    # Valid edge cases do not raise
    validate_segment(0, 1)
    validate_segment(25, 2)
    validate_segment(1, 3)


def test_format_label():
    """Test scoreboard labels."""
    assert format_label(20, 3) == "T20"
    assert format_label(5, 2) == "D5"
    assert format_label(17, 1) == "17"
    assert format_label(25, 1) == "25"
    assert format_label(25, 2) == "BULL"
    assert format_label(0, 1) == "MISS"


def test_parse_label():
    """Test label parsing including common spellings."""
    assert parse_label("T20") == (20, 3)
    assert parse_label("d16") == (16, 2)
    assert parse_label(" 7 ") == (7, 1)
    assert parse_label("S19") == (19, 1)
    assert parse_label("BULL") == (25, 2)
    assert parse_label("db") == (25, 2)
    assert parse_label("50") == (25, 2)
    assert parse_label("25") == (25, 1)
    assert parse_label("SB") == (25, 1)
    assert parse_label("D25") == (25, 2)
    assert parse_label("miss") == (0, 1)

    for text in ["", "T25", "X20", "21", "D", "T0", "twenty"]:
        with pytest.raises(ValueError):
            parse_label(text)


def test_parse_label_inverts_format_label():
    """Every valid segment survives a format/parse cycle."""
    segments = [(b, m) for b in range(1, 21) for m in (1, 2, 3)]
    segments += [(25, 1), (25, 2), (0, 1)]
    for base, multiplier in segments:
        assert parse_label(format_label(base, multiplier)) == (base, multiplier)


def test_throw_outcome_values():
    """Outcome tags are the strings collaborators switch on."""
    assert ThrowOutcome.HIT.value == "hit"
    assert ThrowOutcome.BUST.value == "bust"
    assert ThrowOutcome.WIN.value == "win"


def test_atomic_write_yaml():
    """Test atomic YAML writing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        filepath = Path(tmpdir) / "test_config.yaml"

        data = {
            "match": {"mode": 301, "double_out": False},
        }

        atomic_write_yaml(filepath, data)
        assert filepath.exists()

        loaded = load_yaml(filepath)
        assert loaded["match"]["mode"] == 301
        assert loaded["match"]["double_out"] is False


def test_load_nonexistent_yaml():
    """Test loading non-existent file."""
    with pytest.raises(FileNotFoundError):
        load_yaml(Path("nonexistent_file.yaml"))


def test_load_yaml_requires_mapping(tmp_path: Path):
    """A YAML list at top level is rejected, an empty file is an empty dict."""
    list_file = tmp_path / "list.yaml"
    list_file.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_yaml(list_file)

    empty_file = tmp_path / "empty.yaml"
    empty_file.write_text("")
    assert load_yaml(empty_file) == {}


def test_config_defaults_and_merge(tmp_path: Path):
    """User YAML overrides single keys without dropping defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("match:\n  mode: 301\nscoreboard:\n  width: 640\n")

    config = Config(path)
    assert config.get("match", "mode") == 301
    assert config.get("match", "double_out") is True
    assert config.get("scoreboard", "width") == 640
    assert config.get("scoreboard", "height") == 540
    assert config.get("missing", "key", "fallback") == "fallback"

    # Defaults are not shared between instances
    assert Config().get("match", "mode") == 501


def test_config_broken_file_uses_defaults(tmp_path: Path):
    """Malformed YAML falls back to defaults."""
    path = tmp_path / "broken.yaml"
    path.write_text("match: [unclosed\n")

    config = Config(path)
    assert config.get("match", "mode") == 501


def test_config_save_roundtrip(tmp_path: Path):
    """Saved configuration loads back with the same values."""
    config = Config()
    config.set("match", "player_names", ["Ann", "Ben"])
    path = tmp_path / "saved" / "config.yaml"
    config.save(path)

    reloaded = Config(path)
    assert reloaded.get("match", "player_names") == ["Ann", "Ben"]


def test_config_empty_section_keeps_defaults(tmp_path: Path):
    """An empty or scalar known section leaves the defaults in place."""
    path = tmp_path / "config.yaml"
    path.write_text("match:\nscoreboard: 3\nextra: true\n")

    config = Config(path)
    assert config.get("match", "mode") == 501
    assert config.get("scoreboard", "width") == 960
    assert config.get_section("extra") == {}
    assert config.get("extra", "key", "fallback") == "fallback"

    # Command-line style overrides still work
    config.set("match", "mode", 301)
    config.set("match", "double_out", False)
    assert config.get("match", "mode") == 301
    assert config.get("match", "double_out") is False
    assert config.get("match", "player_names") == ["Player 1", "Player 2"]

    config.set("extra", "key", 1)
    assert config.get("extra", "key") == 1
