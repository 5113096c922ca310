"""
Board module - dartboard geometry and scoreboard visualization.
"""
from .geometry import BoardGeometry, DartboardMapper
from .visualizer import ScoreboardConfig, ScoreboardVisualizer

__all__ = [
    "BoardGeometry",
    "DartboardMapper",
    "ScoreboardConfig",
    "ScoreboardVisualizer",
]
