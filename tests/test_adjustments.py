"""Tests for the multiway and SPR adjustment layers."""

import pytest

from postflop_advisor.solver.adjustments import adjust_for_multiway, adjust_for_spr
from postflop_advisor.solver.data_structures import PostflopAction
from postflop_advisor.solver.strategy_table import default_table, lookup_strategy
from postflop_advisor.utils.constants import (
    ActionKind,
    BoardTexture,
    HandStrength,
    PlayerCount,
    SPRCategory,
)

BET = ActionKind.BET
CHECK = ActionKind.CHECK
CALL = ActionKind.CALL
FOLD = ActionKind.FOLD
RAISE = ActionKind.RAISE
ALL_IN = ActionKind.ALL_IN


def _kinds(actions) -> list[ActionKind]:
    return [a.kind for a in actions]


class TestAdjustForMultiway:
    def test_heads_up_is_identity(self) -> None:
        actions = [PostflopAction(BET, 85, 33, 2.5), PostflopAction(CHECK, 15, None, 1.8)]
        result = adjust_for_multiway(actions, PlayerCount.HEADS_UP)
        assert result == actions
        assert result is not actions

    def test_three_way_scales_aggression(self) -> None:
        actions = [PostflopAction(BET, 80, 33, 2.0), PostflopAction(CHECK, 20, None, 1.0)]
        bet, check = adjust_for_multiway(actions, PlayerCount.THREE_WAY)
        assert bet.frequency == pytest.approx(56)
        assert bet.ev == pytest.approx(1.4)
        assert bet.size == 33
        assert check == actions[1]

    def test_multi_way_keeps_fractions(self) -> None:
        actions = [PostflopAction(RAISE, 85, 300, 3.0), PostflopAction(CALL, 15)]
        raise_, call = adjust_for_multiway(actions, PlayerCount.MULTI_WAY)
        assert raise_.frequency == 42.5
        assert call.frequency == 15

    def test_fold_grows(self) -> None:
        actions = [PostflopAction(FOLD, 40), PostflopAction(RAISE, 60, 250)]
        fold, raise_ = adjust_for_multiway(actions, PlayerCount.THREE_WAY)
        assert fold.frequency == pytest.approx(52)
        assert raise_.frequency == pytest.approx(42)

    def test_fold_capped_at_100(self) -> None:
        actions = [PostflopAction(FOLD, 80), PostflopAction(RAISE, 20, 300)]
        fold, _ = adjust_for_multiway(actions, PlayerCount.MULTI_WAY)
        assert fold.frequency == 100

    def test_aggression_never_grows(self) -> None:
        actions = [PostflopAction(BET, f, 50) for f in (1, 10, 33, 50, 99, 100)]
        for count in (PlayerCount.THREE_WAY, PlayerCount.MULTI_WAY):
            result = adjust_for_multiway(actions, count)
            assert _kinds(result) == _kinds(actions)
            for before, after in zip(actions, result):
                assert after.frequency <= before.frequency

    @pytest.mark.parametrize("frequency", [1, 2, 3, 10, 50, 100])
    def test_aggression_falls_strictly_with_players(self, frequency) -> None:
        actions = [PostflopAction(BET, frequency, 33), PostflopAction(CHECK, 100 - frequency)]
        heads_up = adjust_for_multiway(actions, PlayerCount.HEADS_UP)[0].frequency
        three_way = adjust_for_multiway(actions, PlayerCount.THREE_WAY)[0].frequency
        multi_way = adjust_for_multiway(actions, PlayerCount.MULTI_WAY)[0].frequency
        assert multi_way < three_way < heads_up

    def test_packaged_entries_fall_strictly(self) -> None:
        # Includes donk bets with marginal hands, where the bet is only 2-3%
        table = default_table()
        for scenario in table.scenarios:
            for texture in BoardTexture:
                for strength in HandStrength:
                    entry = table.lookup("flop", scenario, texture, strength)
                    three_way = adjust_for_multiway(entry, PlayerCount.THREE_WAY)
                    multi_way = adjust_for_multiway(entry, PlayerCount.MULTI_WAY)
                    for hu, tw, mw in zip(entry, three_way, multi_way):
                        if hu.is_aggressive and hu.frequency > 0:
                            assert mw.frequency < tw.frequency < hu.frequency

    def test_small_donk_bet_keeps_ordering(self) -> None:
        entry = lookup_strategy("flop", "donk_bet", BoardTexture.DRY, HandStrength.MARGINAL)
        bet = [a for a in entry if a.kind == BET][0]
        assert bet.frequency == 2
        three_way = [a for a in adjust_for_multiway(entry, PlayerCount.THREE_WAY) if a.kind == BET]
        multi_way = [a for a in adjust_for_multiway(entry, PlayerCount.MULTI_WAY) if a.kind == BET]
        assert multi_way[0].frequency == pytest.approx(1.0)
        assert three_way[0].frequency == pytest.approx(1.4)

    def test_input_not_mutated(self) -> None:
        actions = [PostflopAction(BET, 80, 33)]
        adjust_for_multiway(actions, PlayerCount.MULTI_WAY)
        assert actions == [PostflopAction(BET, 80, 33)]


class TestAdjustForSPR:
    def test_micro(self) -> None:
        actions = [
            PostflopAction(CHECK, 40),
            PostflopAction(ALL_IN, 30),
            PostflopAction(BET, 30, 66),
        ]
        check, shove, bet = adjust_for_spr(actions, SPRCategory.MICRO)
        assert check.frequency == 20
        assert shove.frequency == 45
        assert bet == actions[2]

    def test_small_converts_big_bets(self) -> None:
        actions = [
            PostflopAction(BET, 70, 75, 1.0),
            PostflopAction(BET, 20, 66),
            PostflopAction(CHECK, 10),
        ]
        result = adjust_for_spr(actions, SPRCategory.SMALL)
        assert result[0] == PostflopAction(ALL_IN, 70, None, 1.0)
        assert result[1:] == actions[1:]

    def test_small_ignores_unsized_bets_and_raises(self) -> None:
        actions = [PostflopAction(BET, 50), PostflopAction(RAISE, 50, 300)]
        assert adjust_for_spr(actions, SPRCategory.SMALL) == actions

    def test_deep_shrinks_sizes(self) -> None:
        actions = [PostflopAction(BET, 60, 75), PostflopAction(CHECK, 40)]
        bet, check = adjust_for_spr(actions, SPRCategory.DEEP)
        assert bet.size == 60
        assert bet.frequency == 60
        assert check == actions[1]

    def test_deep_floor(self) -> None:
        bet, = adjust_for_spr([PostflopAction(BET, 100, 33)], SPRCategory.DEEP)
        assert bet.size == 25

    @pytest.mark.parametrize("spr", [SPRCategory.MEDIUM, SPRCategory.LARGE])
    def test_medium_and_large_unchanged(self, spr) -> None:
        actions = [PostflopAction(BET, 60, 75), PostflopAction(CHECK, 40)]
        assert adjust_for_spr(actions, spr) == actions

    @pytest.mark.parametrize("spr", list(SPRCategory))
    def test_length_preserved(self, spr) -> None:
        actions = [
            PostflopAction(BET, 40, 100),
            PostflopAction(CHECK, 30),
            PostflopAction(FOLD, 30),
        ]
        assert len(adjust_for_spr(actions, spr)) == len(actions)

    def test_frequencies_are_floats(self) -> None:
        actions = [PostflopAction(CHECK, 40.0), PostflopAction(ALL_IN, 30.0)]
        for a in adjust_for_spr(actions, SPRCategory.MICRO):
            assert isinstance(a.frequency, float)
