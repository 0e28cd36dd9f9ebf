"""Draw engine: produces a Drawing from a catalog and a config snapshot.

Draw flow:
  1. Bucket every eligible chart by level metric (draw group, else level).
     With weights on and a grouping threshold set, charts above the
     threshold share the threshold's bucket.
  2. Plan the distribution: a flat list holding each level in
     [lower_bound, upper_bound] once per unit of weight. Weight is the
     bucket size, or the configured weight when weights are on.
     Forced distribution adds a per-level cap of
     ceil(chart_count * weight / total_weight) and a queue of levels that
     must be drawn first so every weighted level reaches its share.
  3. Sample: pick a level (required queue first, then uniformly from the
     distribution), pick and remove a chart from its bucket, and drop the
     level from the distribution once its bucket is empty or its cap is hit.
  4. Shuffle the drawn charts and wrap them in a Drawing.

Running out of charts is not an error: the Drawing simply holds fewer charts
than requested. All state is local to one call.
"""

from __future__ import annotations

import logging
import random
import uuid
from collections import Counter, deque
from typing import TypeVar

from pydantic import BaseModel, Field

from card_draw.eligibility import eligible_charts
from card_draw.models import ConfigState, Drawing, DrawnChart, EligibleChart, GameData
from card_draw.rng import RandomSource, pick_index

logger = logging.getLogger(__name__)

T = TypeVar("T")

Buckets = dict[int, list[EligibleChart]]


class DistributionPlan(BaseModel):
    distribution: list[int] = Field(default_factory=list)
    total_weight: int = 0
    max_draw_per_level: dict[int, int] = Field(default_factory=dict)
    required_levels: list[int] = Field(default_factory=list)


def draw(game_data: GameData, config: ConfigState, rng: RandomSource = random) -> Drawing:
    """Draw up to config.chart_count charts and return them as a new Drawing."""
    buckets = build_buckets(game_data, config)
    plan = plan_distribution(config, buckets)
    drawn = sample_charts(config, buckets, plan, rng)
    if len(drawn) < config.chart_count:
        logger.info(
            "short draw: %d of %d requested charts available",
            len(drawn), config.chart_count,
        )
    return Drawing(id=new_id("drawing"), charts=shuffle(drawn, rng))


def new_id(prefix: str) -> str:
    return f"{prefix}:{uuid.uuid4().hex[:12]}"


def grouping_threshold(config: ConfigState) -> int | None:
    """The level charts above it are merged into, or None when grouping is off."""
    if config.use_weights and config.group_songs_at:
        return config.group_songs_at
    return None


def effective_level(level: int, threshold: int | None) -> int:
    if threshold and threshold < level:
        return threshold
    return level


# ---------------------------------------------------------------------------
# Buckets
# ---------------------------------------------------------------------------

def build_buckets(game_data: GameData, config: ConfigState) -> Buckets:
    """Group eligible charts by level metric, one bucket per level 1..lvl_max."""
    buckets: Buckets = {level: [] for level in range(1, game_data.meta.lvl_max + 1)}
    threshold = grouping_threshold(config)
    for chart in eligible_charts(config, game_data):
        level = effective_level(chart.level_metric, threshold)
        bucket = buckets.get(level)
        if bucket is None:
            logger.debug("no bucket for level %d, skipping %s", level, chart.name)
            continue
        bucket.append(chart)
    return buckets


# ---------------------------------------------------------------------------
# Distribution
# ---------------------------------------------------------------------------

def plan_distribution(config: ConfigState, buckets: Buckets) -> DistributionPlan:
    plan = DistributionPlan()
    levels = range(config.lower_bound, config.upper_bound + 1)

    for level in levels:
        if config.use_weights:
            weight = config.weights.get(level, 0)
            plan.total_weight += weight
        else:
            weight = len(buckets.get(level, []))
        plan.distribution.extend([level] * weight)

    if config.use_weights and config.force_distribution:
        for level in levels:
            cap = max_draw_for(config.chart_count, config.weights.get(level, 0), plan.total_weight)
            plan.max_draw_per_level[level] = cap
            # minimum draws: everything below the cap is guaranteed
            plan.required_levels.extend([level] * max(cap - 1, 0))

    return plan


def max_draw_for(chart_count: int, weight: int, total_weight: int) -> int:
    """ceil(chart_count * weight / total_weight), or 0 when nothing is weighted."""
    if total_weight <= 0:
        return 0
    return -(-chart_count * weight // total_weight)


# ---------------------------------------------------------------------------
# Sampling
# ---------------------------------------------------------------------------

def sample_charts(
    config: ConfigState,
    buckets: Buckets,
    plan: DistributionPlan,
    rng: RandomSource,
) -> list[DrawnChart]:
    """Draw charts without replacement until the count is met or nothing is left.

    buckets are consumed in place.
    """
    threshold = grouping_threshold(config)
    distribution = list(plan.distribution)
    required = deque(plan.required_levels)
    counts: Counter[int] = Counter()
    drawn: list[DrawnChart] = []

    while len(drawn) < config.chart_count:
        if not distribution:
            # nothing left to pick in the requested range
            break

        if required:
            level = required.popleft()
        else:
            level = distribution[pick_index(rng, len(distribution))]
        level = effective_level(level, threshold)

        selectable = buckets.get(level, [])
        if selectable:
            chart = selectable.pop(pick_index(rng, len(selectable)))
            drawn.append(DrawnChart(**dict(chart), id=new_id("drawn_chart")))
            counts[level] += 1

        cap = plan.max_draw_per_level.get(level)
        reached_cap = config.force_distribution and cap is not None and counts[level] >= cap
        if not selectable or reached_cap:
            logger.debug(
                "level %d exhausted (drawn=%d, remaining=%d)",
                level, counts[level], len(selectable),
            )
            distribution = [
                n for n in distribution if effective_level(n, threshold) != level
            ]

    return drawn


def shuffle(items: list[T], rng: RandomSource = random) -> list[T]:
    """Return a shuffled copy: swap each position with a random later one."""
    result = list(items)
    for i in range(len(result)):
        j = i + pick_index(rng, len(result) - i)
        result[i], result[j] = result[j], result[i]
    return result
