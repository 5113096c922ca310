"""
Core module - shared data types, segment labels, and configuration.
"""
from .types import (
    DartThrow,
    ThrowOutcome,
    STARTING_SCORES,
    DARTS_PER_TURN,
)
from .segments import (
    BULL,
    MISS,
    BUST_LABEL,
    validate_segment,
    format_label,
    parse_label,
)
from .io_utils import (
    atomic_write_yaml,
    load_yaml,
)
from .config_loader import Config

__all__ = [
    # Types
    "DartThrow",
    "ThrowOutcome",
    "STARTING_SCORES",
    "DARTS_PER_TURN",
    # Segments
    "BULL",
    "MISS",
    "BUST_LABEL",
    "validate_segment",
    "format_label",
    "parse_label",
    # I/O
    "atomic_write_yaml",
    "load_yaml",
    # Config
    "Config",
]
