"""Core domain models.

Catalog records (GameData and its parts) and ConfigState mirror the JSON
formats produced by the song-data importer and the settings UI, so they
accept camelCase keys as well as the Python field names. Engine output
(EligibleChart, DrawnChart, Drawing) is plain snake_case.

Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

UNCOLORED = "uncolored"
UNCOLORED_ABBR = "UNC"
MAX_WEIGHT = 1000


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Chart(_CamelModel):
    """One playable chart of a song."""

    lvl: int = Field(ge=1)
    style: str
    diff_class: str
    draw_group: int | None = None  # tier number; overrides lvl for bucketing
    flags: list[str] | None = None
    mtg_color: str | None = None
    jacket: str | None = None

    @property
    def level_metric(self) -> int:
        # a draw group of 0 counts as absent
        return self.draw_group or self.lvl


class Song(BaseModel):
    name: str
    name_translation: str = ""
    artist: str = ""
    artist_translation: str = ""
    jacket: str = ""
    bpm: str = ""
    flags: list[str] | None = None
    charts: list[Chart] = Field(default_factory=list)

    @field_validator("bpm", mode="before")
    @classmethod
    def _bpm_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ColorKey(BaseModel):
    """A difficulty class or color tag together with its display color."""

    key: str
    color: str = ""


class GameMeta(_CamelModel):
    styles: list[str] = Field(default_factory=list)
    difficulties: list[ColorKey] = Field(default_factory=list)
    mtg_color: list[ColorKey] | None = None
    flags: list[str] = Field(default_factory=list)
    lvl_max: int = Field(default=0, ge=0)
    uses_draw_groups: bool = False
    menu_parent: str | None = None
    last_updated: int | None = None


class GameDefaults(_CamelModel):
    style: str | None = None
    difficulties: list[str] = Field(default_factory=list)
    flags: list[str] = Field(default_factory=list)
    lower_lvl_bound: int | None = None
    upper_lvl_bound: int | None = None
    mtg_color: list[str] | None = None


class GameData(BaseModel):
    """A complete song catalog for one game or pack."""

    meta: GameMeta
    defaults: GameDefaults = Field(default_factory=GameDefaults)
    i18n: dict[str, dict[str, Any]] = Field(default_factory=dict)
    songs: list[Song] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Configuration snapshot
# ---------------------------------------------------------------------------

class ConfigState(_CamelModel):
    """Everything the organizer has configured for one draw."""

    style: str = ""
    difficulties: set[str] = Field(default_factory=set)
    mtg_color: set[str] = Field(default_factory=lambda: {UNCOLORED})
    flags: set[str] = Field(default_factory=set)
    lower_bound: int = 1
    upper_bound: int = 1
    chart_count: int = Field(default=5, ge=0)
    use_weights: bool = False
    weights: dict[int, int] = Field(default_factory=dict)
    force_distribution: bool = False
    group_songs_at: int | None = None
    constrain_pocket_picks: bool = True

    @field_validator("weights", mode="before")
    @classmethod
    def _weights_from_list(cls, value: Any) -> Any:
        # The settings UI stores weights as a sparse array indexed by level
        if isinstance(value, list):
            return {level: w for level, w in enumerate(value) if w is not None}
        return value

    @field_validator("weights")
    @classmethod
    def _weights_in_range(cls, value: dict[int, int]) -> dict[int, int]:
        for level, weight in value.items():
            if weight < 0:
                raise ValueError(f"weight for level {level} must not be negative")
            if weight > MAX_WEIGHT:
                raise ValueError(f"weight for level {level} must be at most {MAX_WEIGHT}")
        return value


# ---------------------------------------------------------------------------
# Draw results
# ---------------------------------------------------------------------------

class EligibleChart(BaseModel):
    """A chart resolved against catalog metadata, ready for display."""

    name: str
    name_translation: str = ""
    artist: str = ""
    artist_translation: str = ""
    jacket: str = ""
    bpm: str = ""
    level: int
    draw_group: int | None = None
    flags: list[str] = Field(default_factory=list)
    diff_class: str
    diff_abbr: str = ""
    diff_color: str = ""
    mtg_color_abbr: str | None = None
    mtg_color_color: str | None = None
    song: Song

    @property
    def level_metric(self) -> int:
        return self.draw_group or self.level


class DrawnChart(EligibleChart):
    """One physical card in a drawing."""

    id: str


class PlayerActionOnChart(BaseModel):
    player: Literal[1, 2]
    chart_id: str


class PocketPick(PlayerActionOnChart):
    pick: EligibleChart


class Drawing(BaseModel):
    """The engine's output; action lists are filled in by tournament flow."""

    id: str
    title: str | None = None
    player1: str | None = None
    player2: str | None = None
    charts: list[DrawnChart] = Field(default_factory=list)
    bans: list[PlayerActionOnChart] = Field(default_factory=list)
    protects: list[PlayerActionOnChart] = Field(default_factory=list)
    pocket_picks: list[PocketPick] = Field(default_factory=list)
    winners: list[PlayerActionOnChart] = Field(default_factory=list)
