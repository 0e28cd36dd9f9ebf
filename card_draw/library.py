"""Game library: song catalogs stored as JSON files.

Each game or pack is one file produced by the song-data importer:

    {songs_dir}/
      {stub}.json     ← GameData (meta, defaults, i18n, songs)

Catalogs are read-only once built; parsed GameData is cached per stub.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from card_draw.models import UNCOLORED, ConfigState, GameData

logger = logging.getLogger(__name__)

DEFAULT_CHART_COUNT = 5


class GameLibrary:
    def __init__(self, songs_dir: Path) -> None:
        self._root = songs_dir
        self._cache: dict[str, GameData] = {}

    # ------------------------------------------------------------------
    # Internal path helpers
    # ------------------------------------------------------------------

    def _game_file(self, stub: str) -> Path:
        return self._root / f"{stub}.json"

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def list_games(self) -> list[str]:
        if not self._root.is_dir():
            return []
        return sorted(path.stem for path in self._root.glob("*.json"))

    def get_game(self, stub: str) -> GameData | None:
        """Load and validate a catalog. Returns None if no such game exists."""
        if stub in self._cache:
            return self._cache[stub]
        path = self._game_file(stub)
        if not path.is_file():
            return None
        try:
            game = GameData.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning("Game data %s failed to load: %s", path, e)
            raise GameDataError(f"Cannot load game data {stub!r}: {e}") from e
        logger.debug("loaded game %s (%d songs)", stub, len(game.songs))
        self._cache[stub] = game
        return game

    def save_game(self, stub: str, game: GameData) -> Path:
        """Write a catalog to disk, replacing any existing file for the stub."""
        self._root.mkdir(parents=True, exist_ok=True)
        path = self._game_file(stub)
        path.write_text(
            game.model_dump_json(indent=2, by_alias=True, exclude_none=True),
            encoding="utf-8",
        )
        self._cache.pop(stub, None)
        return path


def default_config(game: GameData) -> ConfigState:
    """Initial configuration for a catalog, taken from its defaults block."""
    defaults = game.defaults
    meta = game.meta
    style = defaults.style or (meta.styles[0] if meta.styles else "")

    if defaults.mtg_color is not None:
        colors = set(defaults.mtg_color)
    else:
        colors = {c.key for c in meta.mtg_color or []}
        colors.add(UNCOLORED)

    lower = defaults.lower_lvl_bound or 1
    upper = defaults.upper_lvl_bound or meta.lvl_max or lower
    return ConfigState(
        style=style,
        difficulties=set(defaults.difficulties),
        mtg_color=colors,
        flags=set(defaults.flags),
        lower_bound=lower,
        upper_bound=upper,
        chart_count=DEFAULT_CHART_COUNT,
    )


# ---------------------------------------------------------------------------
# GameDataError: raised for unreadable or invalid catalog files
# ---------------------------------------------------------------------------

class GameDataError(RuntimeError):
    """Raised when a catalog file cannot be read or fails validation."""
