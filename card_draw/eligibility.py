"""Eligibility filtering and chart projection.

songs → song_is_valid → charts of the configured style → chart_is_valid
      → project_chart → EligibleChart

The pocket-pick variants relax everything but the style match when the
organizer has turned constrain_pocket_picks off.
"""

from __future__ import annotations

from collections.abc import Iterator

from card_draw.models import (
    UNCOLORED,
    UNCOLORED_ABBR,
    Chart,
    ConfigState,
    EligibleChart,
    GameData,
    Song,
)


def song_is_valid(config: ConfigState, song: Song, for_pocket_pick: bool = False) -> bool:
    """Return True if every flag on the song is accepted."""
    if for_pocket_pick and not config.constrain_pocket_picks:
        return True
    return not song.flags or all(f in config.flags for f in song.flags)


def chart_is_valid(config: ConfigState, chart: Chart, for_pocket_pick: bool = False) -> bool:
    """Return True if the chart matches style, difficulty, color, level and flags."""
    if for_pocket_pick and not config.constrain_pocket_picks:
        return chart.style == config.style
    level_metric = chart.level_metric
    return (
        chart.style == config.style
        and chart.diff_class in config.difficulties
        and (chart.mtg_color if chart.mtg_color is not None else UNCOLORED) in config.mtg_color
        and config.lower_bound <= level_metric <= config.upper_bound
        and (not chart.flags or all(f in config.flags for f in chart.flags))
    )


def eligible_charts(config: ConfigState, game_data: GameData) -> Iterator[EligibleChart]:
    """Yield every chart in the catalog that the config allows, in catalog order."""
    for song in game_data.songs:
        if not song_is_valid(config, song):
            continue
        for chart in song.charts:
            if chart.style != config.style:
                continue
            if not chart_is_valid(config, chart):
                continue
            yield project_chart(game_data, song, chart)


def pocket_pick_charts(config: ConfigState, game_data: GameData) -> Iterator[EligibleChart]:
    """Yield every chart a player may choose as a pocket pick."""
    for song in game_data.songs:
        if not song_is_valid(config, song, for_pocket_pick=True):
            continue
        for chart in song.charts:
            if chart_is_valid(config, chart, for_pocket_pick=True):
                yield project_chart(game_data, song, chart)


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

def project_chart(game_data: GameData, song: Song, chart: Chart) -> EligibleChart:
    """Resolve a (song, chart) pair against the catalog's lookup tables."""
    color_key = chart.mtg_color
    return EligibleChart(
        name=song.name,
        name_translation=song.name_translation,
        artist=song.artist,
        artist_translation=song.artist_translation,
        jacket=chart.jacket or song.jacket,
        bpm=song.bpm,
        level=chart.lvl,
        draw_group=chart.draw_group,
        flags=(chart.flags or []) + (song.flags or []),
        diff_class=chart.diff_class,
        diff_abbr=diff_abbr(game_data, chart.diff_class),
        diff_color=diff_color(game_data, chart.diff_class),
        mtg_color_abbr=mtg_color_abbr(
            game_data, color_key if color_key is not None else UNCOLORED_ABBR
        ),
        mtg_color_color=mtg_color_color(
            game_data, color_key if color_key is not None else UNCOLORED
        ),
        song=song,
    )


def _en_table(game_data: GameData, name: str) -> dict | None:
    table = game_data.i18n.get("en", {}).get(name)
    return table if isinstance(table, dict) else None


def diff_abbr(game_data: GameData, diff_class: str) -> str:
    table = _en_table(game_data, "$abbr") or {}
    return str(table.get(diff_class, ""))


def diff_color(game_data: GameData, diff_class: str) -> str:
    for difficulty in game_data.meta.difficulties:
        if difficulty.key == diff_class:
            return difficulty.color
    return ""


def mtg_color_abbr(game_data: GameData, mtg_color: str = UNCOLORED) -> str | None:
    """Abbreviation for a color tag, or None for catalogs without colors."""
    table = _en_table(game_data, "$mtgAbbr")
    if table is None:
        return None
    return str(table.get(mtg_color, ""))


def mtg_color_color(game_data: GameData, mtg_color: str) -> str | None:
    if game_data.meta.mtg_color is None:
        return None
    for color in game_data.meta.mtg_color:
        if color.key == mtg_color:
            return color.color
    return ""
