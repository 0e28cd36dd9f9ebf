"""Random chart draws for rhythm-game tournaments.

    from card_draw import draw, default_config, GameLibrary

    game = GameLibrary(Path("songs")).get_game("a20plus")
    drawing = draw(game, default_config(game))
"""

from .engine import draw, shuffle  # noqa: F401
from .library import GameDataError, GameLibrary, default_config  # noqa: F401
from .models import (  # noqa: F401
    Chart,
    ConfigState,
    Drawing,
    DrawnChart,
    EligibleChart,
    GameData,
    Song,
)
