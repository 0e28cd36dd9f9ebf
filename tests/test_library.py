"""Tests for card_draw.library: catalog files and default configs."""

import json

import pytest

from backend.demo import create_demo_data
from card_draw.engine import draw
from card_draw.library import GameDataError, GameLibrary, default_config
from conftest import build_game, ladder_songs


class TestGameLibrary:
    def test_list_games_sorted(self, songs_dir) -> None:
        (songs_dir / "zeta.json").write_text("{}")
        (songs_dir / "alpha.json").write_text("{}")
        (songs_dir / "notes.txt").write_text("")
        assert GameLibrary(songs_dir).list_games() == ["alpha", "zeta"]

    def test_list_games_missing_dir(self, tmp_path) -> None:
        assert GameLibrary(tmp_path / "nope").list_games() == []

    def test_get_missing_game(self, songs_dir) -> None:
        assert GameLibrary(songs_dir).get_game("nope") is None

    def test_save_and_load(self, songs_dir) -> None:
        lib = GameLibrary(songs_dir)
        game = build_game(ladder_songs({3: 2}))
        lib.save_game("ladder", game)
        assert lib.list_games() == ["ladder"]
        assert GameLibrary(songs_dir).get_game("ladder") == game

    def test_saved_file_uses_importer_keys(self, songs_dir) -> None:
        path = GameLibrary(songs_dir).save_game("ladder", build_game(ladder_songs({3: 1})))
        raw = json.loads(path.read_text())
        assert raw["meta"]["lvlMax"] == 10
        assert raw["songs"][0]["charts"][0]["diffClass"] == "expert"

    def test_get_game_is_cached(self, songs_dir) -> None:
        lib = GameLibrary(songs_dir)
        lib.save_game("ladder", build_game(ladder_songs({3: 1})))
        assert lib.get_game("ladder") is lib.get_game("ladder")

    def test_save_invalidates_cache(self, songs_dir) -> None:
        lib = GameLibrary(songs_dir)
        lib.save_game("ladder", build_game(ladder_songs({3: 1})))
        lib.get_game("ladder")
        lib.save_game("ladder", build_game(ladder_songs({3: 4})))
        assert len(lib.get_game("ladder").songs) == 4

    def test_invalid_file_raises(self, songs_dir) -> None:
        (songs_dir / "broken.json").write_text('{"meta": {"lvlMax": "lots"}}')
        with pytest.raises(GameDataError, match="broken"):
            GameLibrary(songs_dir).get_game("broken")

    def test_not_json_raises(self, songs_dir) -> None:
        (songs_dir / "broken.json").write_text("not json")
        with pytest.raises(GameDataError):
            GameLibrary(songs_dir).get_game("broken")


class TestDefaultConfig:
    def test_from_defaults_block(self) -> None:
        config = default_config(build_game([], lvl_max=14))
        assert config.style == "single"
        assert config.difficulties == {"basic", "expert"}
        assert config.lower_bound == 1
        assert config.upper_bound == 14
        assert config.chart_count == 5
        assert config.mtg_color == {"uncolored"}
        assert config.use_weights is False

    def test_style_falls_back_to_first_meta_style(self) -> None:
        game = build_game([])
        game.defaults.style = None
        assert default_config(game).style == "single"

    def test_bounds_fall_back_to_level_range(self) -> None:
        game = build_game([], lvl_max=12)
        game.defaults.lower_lvl_bound = None
        game.defaults.upper_lvl_bound = None
        config = default_config(game)
        assert (config.lower_bound, config.upper_bound) == (1, 12)

    def test_all_colors_accepted(self) -> None:
        game = build_game([], mtgColor=[{"key": "red"}, {"key": "blue"}])
        assert default_config(game).mtg_color == {"red", "blue", "uncolored"}

    def test_explicit_default_colors(self) -> None:
        game = build_game([], mtgColor=[{"key": "red"}, {"key": "blue"}])
        game.defaults.mtg_color = ["red"]
        assert default_config(game).mtg_color == {"red"}


class TestDemoData:
    def test_demo_games_load_and_draw(self, songs_dir) -> None:
        lib = GameLibrary(songs_dir)
        create_demo_data(lib)
        assert lib.list_games() == ["demo", "demo-tiers"]
        for stub in lib.list_games():
            game = lib.get_game(stub)
            drawing = draw(game, default_config(game))
            assert len(drawing.charts) == 5

    def test_tiered_demo_uses_draw_groups(self, songs_dir) -> None:
        lib = GameLibrary(songs_dir)
        create_demo_data(lib)
        game = lib.get_game("demo-tiers")
        assert game.meta.uses_draw_groups
        assert game.meta.lvl_max == 4
        drawing = draw(game, default_config(game))
        assert all(c.mtg_color_abbr in {"W", "U", "R"} for c in drawing.charts)
