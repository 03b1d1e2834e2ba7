"""Tests for recommendation explanations."""

from postflop_advisor.solver.engine import PostflopAdvisor
from postflop_advisor.strategy.explainer import Impact, explain
from postflop_advisor.utils.card import Card


def _cards(s: str) -> list[Card]:
    """Helper: parse space-separated card strings like 'Ah Kh'."""
    return [Card.from_str(c) for c in s.split()]


def _analyze(hand: str, board: str, scenario: str, stack=100, pot=10):
    return PostflopAdvisor().analyze(_cards(hand), _cards(board), stack, pot, scenario)


class TestExplain:
    def test_pure_strategy_summary(self) -> None:
        e = explain(_analyze("Ah Kh", "9h 5h 2d", "cbet_ip"))
        assert e.summary == "BET 75% POT with draw hand on wet board"
        assert e.ev == 0.5
        assert e.alternatives == ["check (30%)"]

    def test_semi_bluff_reasoning(self) -> None:
        e = explain(_analyze("Ah Kh", "9h 5h 2d", "cbet_ip"))
        assert e.reasoning[0].startswith("Continuation betting in position")
        assert "Semi-bluffing with a 75% pot bet." in e.reasoning
        assert e.reasoning[-1] == "This action has positive expected value (+0.50 BB)."
        assert "On draw-heavy boards, bet larger to charge draws." in e.tips

    def test_factors(self) -> None:
        e = explain(_analyze("Ah Kh", "9h 5h 2d", "cbet_ip"))
        by_name = {f.factor: f for f in e.factors}
        assert by_name["Position"].impact == Impact.POSITIVE
        assert by_name["Draw Potential"].impact == Impact.POSITIVE
        assert by_name["Hand Strength"].weight == 10

    def test_mixed_strategy_summary(self) -> None:
        # Top pair, queen kicker on a dry king-high board
        e = explain(_analyze("Kh Qd", "Kc 7s 2d", "cbet_oop"))
        assert e.summary == "Mixed strategy: check 55% of the time"
        assert e.alternatives == ["bet 33% pot (45%)"]
        assert "Checking for pot control with medium strength." in e.reasoning
        assert any(t.startswith("Out of position") for t in e.tips)
        assert "Draw Potential" not in {f.factor for f in e.factors}

    def test_position_override(self) -> None:
        e = explain(_analyze("Kh Qd", "Kc 7s 2d", "facing_cbet"), in_position=True)
        position = [f for f in e.factors if f.factor == "Position"]
        assert position[0].impact == Impact.POSITIVE

    def test_unknown_position_has_no_factor(self) -> None:
        e = explain(_analyze("Kh Qd", "Kc 7s 2d", "facing_cbet"))
        assert "Position" not in {f.factor for f in e.factors}

    def test_no_recommendation(self) -> None:
        e = explain(_analyze("Kh Qd", "Kc 7s 2d 4h", "facing_turn_bet"))
        assert e.summary.startswith("No strategy data for facing_turn_bet")
        assert e.reasoning == []
        assert e.ev is None
        assert e.factors

    def test_zero_ev_fold(self) -> None:
        # Paired board gives an unimproved hand a weak pair
        e = explain(_analyze("4h 3d", "Kc Ks 9h", "facing_cbet"))
        assert e.summary == "FOLD with weak hand on paired board"
        assert "Folding is the correct play with insufficient equity." in e.reasoning
        assert e.reasoning[-1] == "This action has positive expected value (+0.00 BB)."

    def test_negative_ev(self) -> None:
        e = explain(_analyze("4c 3d", "Ah 9h 5h", "cbet_ip"))
        assert e.summary == "CHECK with air hand on monotone board"
        assert e.reasoning[-1] == "This action minimizes losses (-0.30 BB EV)."

    def test_draw_factor_counts_outs(self) -> None:
        e = explain(_analyze("Ah Kh", "9h 5h 2d", "cbet_ip"))
        draw = [f for f in e.factors if f.factor == "Draw Potential"][0]
        assert draw.description.endswith("About 9 outs.")

    def test_gutshot_is_not_a_strong_draw(self) -> None:
        e = explain(_analyze("9h 8d", "6c 5s Kh", "facing_cbet"))
        draw = [f for f in e.factors if f.factor == "Draw Potential"][0]
        assert draw.impact == Impact.NEUTRAL
        assert "About 4 outs." in draw.description

    def test_straight_draw_call_tip(self) -> None:
        e = explain(_analyze("Jh Td", "9c 8s 2h", "facing_cbet"))
        assert e.summary == "CALL with draw hand on dry board"
        assert any(t.startswith("Straight draws are well disguised") for t in e.tips)
