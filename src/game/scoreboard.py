"""
Scoreboard view model: everything a display needs, derived from a snapshot.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.core import DARTS_PER_TURN
from .game_state import MatchSnapshot

EMPTY_SLOT = "--"


@dataclass(frozen=True)
class PlayerPanel:
    """Display data for one player."""
    name: str
    score: int
    average: str  # One decimal, e.g. "60.0"
    throws: Tuple[str, ...]  # Always DARTS_PER_TURN slots
    is_active: bool
    is_winner: bool
    checkout_hint: str
    wins: int


@dataclass(frozen=True)
class ScoreboardView:
    """Complete scoreboard for one snapshot."""
    title: str  # e.g. "501 (DO)"
    round: int
    panels: Tuple[PlayerPanel, PlayerPanel]
    banner: str  # "" while the match is running
    can_advance: bool
    history: Tuple[Tuple[int, Optional[float], Optional[float]], ...]


def pad_throws(labels: List[str], slots: int = DARTS_PER_TURN) -> Tuple[str, ...]:
    """Pad throw labels with EMPTY_SLOT up to `slots` entries."""
    padded = list(labels[:slots])
    padded += [EMPTY_SLOT] * (slots - len(padded))
    return tuple(padded)


def merge_history(
        first: Tuple[float, ...],
        second: Tuple[float, ...]
) -> Tuple[Tuple[int, Optional[float], Optional[float]], ...]:
    """
    Combine two average histories into (turn, first, second) rows.

    The shorter history is padded with None.
    """
    length = max(len(first), len(second))
    rows = []
    for i in range(length):
        rows.append((
            i + 1,
            first[i] if i < len(first) else None,
            second[i] if i < len(second) else None,
        ))
    return tuple(rows)


def build_scoreboard(snapshot: MatchSnapshot) -> ScoreboardView:
    """
    Build the scoreboard for a snapshot.

    Only the player on turn shows throw labels and a checkout hint; the
    hint disappears once somebody has won.
    """
    panels = []
    for idx, player in enumerate(snapshot.players):
        is_active = idx == snapshot.current_player_idx and not snapshot.is_finished
        labels = [dart.label for dart in player.current_turn] if idx == snapshot.current_player_idx else []
        panels.append(PlayerPanel(
            name=player.name,
            score=player.score,
            average=f"{player.average:.1f}",
            throws=pad_throws(labels),
            is_active=is_active,
            is_winner=snapshot.winner == idx,
            checkout_hint=snapshot.checkout_hint if is_active else "",
            wins=player.wins,
        ))

    banner = ""
    if snapshot.is_finished:
        banner = f"{snapshot.players[snapshot.winner].name} WINS!"

    title = f"{snapshot.mode} (DO)" if snapshot.double_out else str(snapshot.mode)

    return ScoreboardView(
        title=title,
        round=snapshot.round,
        panels=tuple(panels),
        banner=banner,
        can_advance=snapshot.is_turn_over and not snapshot.is_finished,
        history=merge_history(snapshot.players[0].history, snapshot.players[1].history),
    )


def format_scoreboard(view: ScoreboardView) -> str:
    """Plain-text rendering, used by the terminal scorer."""
    lines = [f"{view.title}  Round {view.round}"]
    for panel in view.panels:
        marker = ">" if panel.is_active else " "
        line = (
            f"{marker} {panel.name:<12} {panel.score:>4}  "
            f"avg {panel.average:>5}  [{' '.join(panel.throws)}]"
        )
        if panel.checkout_hint:
            line += f"  checkout: {panel.checkout_hint}"
        lines.append(line)
    if view.banner:
        lines.append(view.banner)
    return "\n".join(lines)
