"""Game catalog, default config, draw, weights and pocket-pick endpoints.

Config bodies are partial: posted keys (camelCase or snake_case) are merged
over the game's default config before validation.
"""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from backend.library import library
from card_draw.actions import pocket_pick_candidates
from card_draw.engine import draw
from card_draw.library import GameDataError, default_config
from card_draw.models import ConfigState, GameData
from card_draw.weights import preview_weights

router = APIRouter()


def _game_or_404(stub: str) -> GameData:
    try:
        game = library().get_game(stub)
    except GameDataError as e:
        raise HTTPException(500, str(e))
    if game is None:
        raise HTTPException(404, "Game not found")
    return game


def _config_for(game: GameData, body: dict[str, Any]) -> ConfigState:
    merged = default_config(game).model_dump(by_alias=True)
    for key, value in body.items():
        field = ConfigState.model_fields.get(key)
        merged[field.alias if field and field.alias else key] = value
    try:
        return ConfigState.model_validate(merged)
    except ValidationError as e:
        raise HTTPException(422, str(e))


@router.get("/games")
async def list_games():
    """List available game stubs."""
    return library().list_games()


@router.get("/games/{stub}")
async def get_game(stub: str):
    """Get a game's metadata and display strings (without the song list)."""
    game = _game_or_404(stub)
    return {
        "meta": game.meta.model_dump(by_alias=True, exclude_none=True),
        "i18n": game.i18n,
        "song_count": len(game.songs),
    }


@router.get("/games/{stub}/defaults")
async def get_defaults(stub: str):
    """Get the initial draw config for a game."""
    return default_config(_game_or_404(stub))


@router.post("/games/{stub}/draw")
def draw_charts(stub: str, body: dict):
    """Draw a new set of charts. May return fewer than chartCount charts."""
    game = _game_or_404(stub)
    return draw(game, _config_for(game, body))


@router.post("/games/{stub}/weights")
def weights_preview(stub: str, body: dict):
    """Per-level share of the draw for the posted weights."""
    game = _game_or_404(stub)
    return preview_weights(_config_for(game, body), uses_tiers=game.meta.uses_draw_groups)


@router.post("/games/{stub}/pocket-picks")
def pocket_picks(stub: str, body: dict):
    """Charts a player may choose as a pocket pick."""
    game = _game_or_404(stub)
    return pocket_pick_candidates(_config_for(game, body), game)
