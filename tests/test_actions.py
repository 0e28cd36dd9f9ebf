"""Tests for card_draw.actions: bans, protects, pocket picks and winners."""

import pytest

from card_draw.actions import (
    DrawingActionError,
    apply_action,
    ban_chart,
    clear_chart_actions,
    pocket_pick,
    pocket_pick_candidates,
    protect_chart,
    set_winner,
)
from card_draw.engine import draw
from card_draw.rng import ScriptedRandom
from conftest import build_config, build_game, ladder_songs


@pytest.fixture
def game():
    return build_game(ladder_songs({4: 3, 5: 3}))


@pytest.fixture
def drawing(game):
    return draw(game, build_config(chart_count=3), rng=ScriptedRandom([0.0]))


def _ids(actions) -> list[tuple[int, str]]:
    return [(a.player, a.chart_id) for a in actions]


class TestBanProtect:
    def test_ban(self, drawing) -> None:
        chart_id = drawing.charts[0].id
        updated = ban_chart(drawing, 1, chart_id)
        assert _ids(updated.bans) == [(1, chart_id)]

    def test_original_untouched(self, drawing) -> None:
        ban_chart(drawing, 1, drawing.charts[0].id)
        assert drawing.bans == []

    def test_protect_replaces_ban(self, drawing) -> None:
        chart_id = drawing.charts[1].id
        updated = protect_chart(ban_chart(drawing, 1, chart_id), 2, chart_id)
        assert updated.bans == []
        assert _ids(updated.protects) == [(2, chart_id)]

    def test_ban_replaces_protect(self, drawing) -> None:
        chart_id = drawing.charts[1].id
        updated = ban_chart(protect_chart(drawing, 2, chart_id), 1, chart_id)
        assert updated.protects == []
        assert _ids(updated.bans) == [(1, chart_id)]

    def test_actions_on_different_charts_accumulate(self, drawing) -> None:
        first, second = drawing.charts[0].id, drawing.charts[1].id
        updated = ban_chart(ban_chart(drawing, 1, first), 2, second)
        assert _ids(updated.bans) == [(1, first), (2, second)]

    def test_unknown_chart(self, drawing) -> None:
        with pytest.raises(DrawingActionError):
            ban_chart(drawing, 1, "drawn_chart:missing")


class TestWinnerAndPocketPick:
    def test_winner_replaced(self, drawing) -> None:
        chart_id = drawing.charts[2].id
        updated = set_winner(set_winner(drawing, 1, chart_id), 2, chart_id)
        assert _ids(updated.winners) == [(2, chart_id)]

    def test_pocket_pick(self, game, drawing) -> None:
        chart_id = drawing.charts[0].id
        pick = pocket_pick_candidates(build_config(), game)[-1]
        updated = pocket_pick(drawing, 2, chart_id, pick)
        assert len(updated.pocket_picks) == 1
        assert updated.pocket_picks[0].pick == pick
        assert updated.pocket_picks[0].player == 2

    def test_clear(self, game, drawing) -> None:
        chart_id = drawing.charts[0].id
        pick = pocket_pick_candidates(build_config(), game)[0]
        updated = set_winner(pocket_pick(ban_chart(drawing, 1, chart_id), 1, chart_id, pick), 1, chart_id)
        cleared = clear_chart_actions(updated, chart_id)
        assert cleared.bans == []
        assert cleared.pocket_picks == []
        assert cleared.winners == []


class TestApplyAction:
    def test_dispatch(self, drawing) -> None:
        chart_id = drawing.charts[0].id
        assert apply_action(drawing, "ban", chart_id, player=2).bans[0].player == 2
        assert apply_action(drawing, "protect", chart_id).protects[0].chart_id == chart_id
        assert apply_action(drawing, "winner", chart_id).winners[0].chart_id == chart_id

    def test_pocket_pick_requires_pick(self, drawing) -> None:
        with pytest.raises(DrawingActionError, match="requires a pick"):
            apply_action(drawing, "pocket_pick", drawing.charts[0].id)

    def test_unknown_action(self, drawing) -> None:
        with pytest.raises(DrawingActionError):
            apply_action(drawing, "steal", drawing.charts[0].id)


class TestPocketPickCandidates:
    def test_constrained_uses_draw_filters(self, game) -> None:
        config = build_config(lower_bound=5, upper_bound=5)
        assert {c.level for c in pocket_pick_candidates(config, game)} == {5}

    def test_unconstrained_ignores_level_bounds(self, game) -> None:
        config = build_config(lower_bound=5, upper_bound=5, constrain_pocket_picks=False)
        assert len(pocket_pick_candidates(config, game)) == 6
