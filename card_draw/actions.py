"""Tournament-flow actions on a finished Drawing.

The draw engine returns a Drawing with empty action lists. During a match
players ban, protect, pocket-pick and win charts; each helper here returns
an updated copy and never mutates the Drawing it was given.

A chart is either banned or protected, never both: recording one clears
the other. Only one winner and one pocket pick are kept per chart.
"""

from __future__ import annotations

import logging
from typing import Literal

from card_draw.eligibility import pocket_pick_charts
from card_draw.models import (
    ConfigState,
    Drawing,
    EligibleChart,
    GameData,
    PlayerActionOnChart,
    PocketPick,
)

logger = logging.getLogger(__name__)

Player = Literal[1, 2]
ActionType = Literal["ban", "protect", "winner", "pocket_pick", "clear"]


def ban_chart(drawing: Drawing, player: Player, chart_id: str) -> Drawing:
    _require_chart(drawing, chart_id)
    return drawing.model_copy(update={
        "bans": _without(drawing.bans, chart_id)
        + [PlayerActionOnChart(player=player, chart_id=chart_id)],
        "protects": _without(drawing.protects, chart_id),
    })


def protect_chart(drawing: Drawing, player: Player, chart_id: str) -> Drawing:
    _require_chart(drawing, chart_id)
    return drawing.model_copy(update={
        "protects": _without(drawing.protects, chart_id)
        + [PlayerActionOnChart(player=player, chart_id=chart_id)],
        "bans": _without(drawing.bans, chart_id),
    })


def set_winner(drawing: Drawing, player: Player, chart_id: str) -> Drawing:
    _require_chart(drawing, chart_id)
    return drawing.model_copy(update={
        "winners": _without(drawing.winners, chart_id)
        + [PlayerActionOnChart(player=player, chart_id=chart_id)],
    })


def pocket_pick(
    drawing: Drawing, player: Player, chart_id: str, pick: EligibleChart
) -> Drawing:
    """Replace a drawn chart with a player's chosen chart."""
    _require_chart(drawing, chart_id)
    return drawing.model_copy(update={
        "pocket_picks": _without(drawing.pocket_picks, chart_id)
        + [PocketPick(player=player, chart_id=chart_id, pick=pick)],
    })


def clear_chart_actions(drawing: Drawing, chart_id: str) -> Drawing:
    """Remove every ban, protect, pocket pick and winner recorded for a chart."""
    _require_chart(drawing, chart_id)
    return drawing.model_copy(update={
        "bans": _without(drawing.bans, chart_id),
        "protects": _without(drawing.protects, chart_id),
        "pocket_picks": _without(drawing.pocket_picks, chart_id),
        "winners": _without(drawing.winners, chart_id),
    })


def apply_action(
    drawing: Drawing,
    action: ActionType,
    chart_id: str,
    player: Player = 1,
    pick: EligibleChart | None = None,
) -> Drawing:
    """Dispatch one action by name."""
    logger.debug("drawing %s: %s on %s by player %d", drawing.id, action, chart_id, player)
    if action == "ban":
        return ban_chart(drawing, player, chart_id)
    if action == "protect":
        return protect_chart(drawing, player, chart_id)
    if action == "winner":
        return set_winner(drawing, player, chart_id)
    if action == "pocket_pick":
        if pick is None:
            raise DrawingActionError("pocket_pick requires a pick")
        return pocket_pick(drawing, player, chart_id, pick)
    if action == "clear":
        return clear_chart_actions(drawing, chart_id)
    raise DrawingActionError(f"Unknown action {action!r}")


def pocket_pick_candidates(config: ConfigState, game_data: GameData) -> list[EligibleChart]:
    """Every chart a player may pick; unconstrained picks only need the right style."""
    return list(pocket_pick_charts(config, game_data))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_chart(drawing: Drawing, chart_id: str) -> None:
    if not any(chart.id == chart_id for chart in drawing.charts):
        raise DrawingActionError(f"Chart {chart_id!r} is not part of drawing {drawing.id!r}")


def _without(actions: list, chart_id: str) -> list:
    return [a for a in actions if a.chart_id != chart_id]


# ---------------------------------------------------------------------------
# DrawingActionError: raised for actions that do not fit the drawing
# ---------------------------------------------------------------------------

class DrawingActionError(ValueError):
    """Raised when an action names an unknown chart or is missing its pick."""
