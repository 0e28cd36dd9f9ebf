"""Weight preview: what share of the draw each weighted level gets.

Without forced distribution the share is the level's percentage of the
total weight. With forced distribution it is the range of cards the level
will end up with: the cap minus one (guaranteed) up to the cap.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

from card_draw.engine import max_draw_for
from card_draw.models import ConfigState


class WeightRow(BaseModel):
    level: int
    label: str
    weight: int
    share: str


def weight_levels(low: int, high: int, group_songs_at: int | None = None) -> list[int]:
    """Levels shown for weighting; nothing above the grouping threshold."""
    levels = list(range(low, high + 1))
    if group_songs_at:
        levels = [level for level in levels if level <= group_songs_at]
    return levels


def level_label(level: int, uses_tiers: bool = False, group_songs_at: int | None = None) -> str:
    """Display label: 7, T07 for tiered catalogs, >=12 on the grouping threshold."""
    label = f"T{level:02d}" if uses_tiers else str(level)
    if group_songs_at == level:
        label = ">=" + label
    return label


def preview_weights(config: ConfigState, uses_tiers: bool = False) -> list[WeightRow]:
    levels = weight_levels(config.lower_bound, config.upper_bound, config.group_songs_at)
    total = sum(config.weights.get(level, 0) for level in levels)

    rows: list[WeightRow] = []
    for level in levels:
        weight = config.weights.get(level, 0)
        if config.force_distribution:
            share = _forced_share(config.chart_count, weight, total)
        else:
            pct = weight / total if total else 0.0
            share = f"{math.floor(pct * 100 + 0.5)}%"
        rows.append(WeightRow(
            level=level,
            label=level_label(level, uses_tiers, config.group_songs_at),
            weight=weight,
            share=share,
        ))
    return rows


def _forced_share(chart_count: int, weight: int, total: int) -> str:
    if total and weight == total:
        return str(chart_count)
    cap = max_draw_for(chart_count, weight, total)
    if not cap:
        return "0"
    return f"{cap - 1}-{cap}"
