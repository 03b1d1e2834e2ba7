"""Recommendation selection and the end-to-end spot pipeline.

recommend() picks the best action for a (street, scenario, texture,
strength) key. PostflopAdvisor runs the whole flow for raw cards:

    hand + board + stack + pot
      -> texture, draw, hand strength, SPR, player count
      -> strategy table lookup
      -> multiway adjustment -> SPR adjustment
      -> Recommendation
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from postflop_advisor.core.draw_analyzer import analyze_draw
from postflop_advisor.core.hand_strength import evaluate_hand_strength
from postflop_advisor.solver.adjustments import adjust_for_multiway, adjust_for_spr
from postflop_advisor.solver.board_bucketing import (
    classify_board_texture,
    classify_player_count,
    classify_spr,
    detect_street,
)
from postflop_advisor.solver.data_structures import (
    PostflopAction,
    Recommendation,
    SpotAnalysis,
    SpotKey,
    StrategySource,
)
from postflop_advisor.solver.strategy_table import (
    StrategyTable,
    default_table,
    normalize_scenario,
)
from postflop_advisor.utils.card import Card
from postflop_advisor.utils.constants import (
    BoardTexture,
    HandStrength,
    Scenario,
    Street,
)

logger = logging.getLogger("postflop_advisor.solver")


def select_recommendation(actions: Sequence[PostflopAction]) -> Recommendation | None:
    """Rank actions by frequency, highest first.

    The sort is stable, so equal frequencies keep table order.
    """
    if not actions:
        return None
    ranked = sorted(actions, key=lambda a: a.frequency, reverse=True)
    return Recommendation(action=ranked[0], alternatives=tuple(ranked[1:]))


def recommend(
    street: Street | str,
    scenario: Scenario | str,
    texture: BoardTexture,
    strength: HandStrength,
    table: StrategySource | None = None,
) -> Recommendation | None:
    """Best action for a spot plus ranked alternatives.

    Args:
        street: Current street.
        scenario: Scenario name (legacy aliases accepted).
        texture: Board texture bucket.
        strength: Hand strength bucket.
        table: Strategy source; defaults to the packaged table.

    Returns:
        Recommendation, or None exactly when the table has no entry.
    """
    source = table if table is not None else default_table()
    return select_recommendation(source.lookup(street, scenario, texture, strength))


class PostflopAdvisor:
    """End-to-end postflop advisor for raw card data.

    Usage:
        advisor = PostflopAdvisor()
        analysis = advisor.analyze(
            parse_cards("Ah Kh"), parse_cards("9h 5h 2d"),
            stack=100, pot=10, scenario="cbet_ip",
        )
        analysis.recommendation.action  # PostflopAction(kind='bet', ...)
    """

    def __init__(
        self,
        table: StrategySource | None = None,
        data_path: Path | str | None = None,
    ) -> None:
        if table is not None:
            self._table = table
        elif data_path is not None:
            self._table = StrategyTable.from_json(data_path)
        else:
            self._table = default_table()

    @property
    def table(self) -> StrategySource:
        return self._table

    def analyze(
        self,
        hand: Sequence[Card],
        board: Sequence[Card],
        stack: float,
        pot: float,
        scenario: Scenario | str,
        num_players: int = 2,
    ) -> SpotAnalysis:
        """Classify a spot and produce an adjusted recommendation.

        Args:
            hand: Hero's two hole cards.
            board: Community cards (3-5 postflop).
            stack: Hero's remaining effective stack.
            pot: Current pot size, same unit as stack.
            scenario: Scenario name (legacy aliases accepted).
            num_players: Players in the pot, hero included.

        Returns:
            SpotAnalysis with every category, the raw and adjusted
            strategy, and the recommendation (None if no data).
        """
        t_start = time.perf_counter()

        street = detect_street(board)
        texture = classify_board_texture(board)
        strength = evaluate_hand_strength(hand, board)
        draw = analyze_draw(hand, board)
        spr = classify_spr(stack, pot)
        player_count = classify_player_count(num_players)
        logger.debug(
            "Classified %s: texture=%s strength=%s draw=%s spr=%s players=%s",
            street, texture, strength, draw, spr, player_count,
        )

        normalized = normalize_scenario(scenario)
        spot_key = None
        if normalized is not None:
            spot_key = SpotKey(street, normalized, texture, strength)

        base = self._table.lookup(street, scenario, texture, strength)
        if not base:
            logger.debug("No strategy entry for %s/%s/%s", scenario, texture, strength)

        actions = adjust_for_spr(adjust_for_multiway(base, player_count), spr)
        rec = select_recommendation(actions)

        elapsed_ms = (time.perf_counter() - t_start) * 1000
        logger.info(
            "%s %s [%s, %s] -> %s (spr=%s, players=%s, %.1fms)",
            street,
            normalized or scenario,
            texture,
            strength,
            f"{rec.action.describe()} {rec.action.frequency:g}%" if rec else "none",
            spr,
            player_count,
            elapsed_ms,
        )

        return SpotAnalysis(
            street=street,
            scenario=str(normalized or scenario),
            texture=texture,
            strength=strength,
            draw=draw,
            spr=spr,
            player_count=player_count,
            spot_key=spot_key,
            base_actions=base,
            actions=actions,
            recommendation=rec,
        )
