"""Process-wide game library, configured once at startup."""

from pathlib import Path

from card_draw.library import GameLibrary

_library: GameLibrary | None = None


def init_library(songs_dir: Path) -> GameLibrary:
    global _library
    _library = GameLibrary(songs_dir)
    return _library


def library() -> GameLibrary:
    assert _library is not None, "Call init_library() before using the game library"
    return _library
