from pathlib import Path

import pytest

from card_draw.models import ConfigState, GameData


def build_game(songs: list[dict], lvl_max: int = 10, **meta) -> GameData:
    """Catalog with the usual difficulty tables around the given songs."""
    return GameData.model_validate({
        "meta": {
            "styles": ["single", "double"],
            "difficulties": [
                {"key": "basic", "color": "#2BC856"},
                {"key": "expert", "color": "#F64D8B"},
            ],
            "lvlMax": lvl_max,
            **meta,
        },
        "defaults": {
            "style": "single",
            "difficulties": ["basic", "expert"],
            "lowerLvlBound": 1,
            "upperLvlBound": lvl_max,
        },
        "i18n": {"en": {"$abbr": {"basic": "Bas", "expert": "Exp"}}},
        "songs": songs,
    })


def build_config(**fields) -> ConfigState:
    values = {
        "style": "single",
        "difficulties": {"basic", "expert"},
        "lower_bound": 1,
        "upper_bound": 10,
        "chart_count": 5,
    }
    values.update(fields)
    return ConfigState(**values)


def ladder_songs(levels: dict[int, int], style: str = "single") -> list[dict]:
    """One song per chart: {level: how many charts at that level}."""
    songs = []
    for level, count in levels.items():
        for n in range(count):
            songs.append({
                "name": f"Song {level}-{n}",
                "artist": "Artist",
                "bpm": "150",
                "charts": [{"lvl": level, "style": style, "diffClass": "expert"}],
            })
    return songs


@pytest.fixture
def songs_dir(tmp_path: Path) -> Path:
    path = tmp_path / "songs"
    path.mkdir()
    return path
