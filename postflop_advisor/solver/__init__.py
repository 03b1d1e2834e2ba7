"""Postflop situation classification and strategy recommendation.

Turns hole cards, board, stack and pot into discrete categories and maps
them through a static strategy table to weighted actions, adjusted for
multiway pots and stack depth.

Key public API:
    classify_board_texture -- Board texture bucket
    classify_spr           -- Stack-to-pot ratio bucket
    analyze_draw           -- Drawing potential of hand plus board
    evaluate_hand_strength -- Coarse made-hand strength bucket
    lookup_strategy        -- Raw strategy table entry
    recommend              -- Best action plus ranked alternatives
    adjust_for_multiway    -- Tighten a strategy for 3+ players
    adjust_for_spr         -- Adapt a strategy to stack depth
    PostflopAdvisor        -- Full pipeline from raw cards
"""

from postflop_advisor.core.draw_analyzer import analyze_draw
from postflop_advisor.core.hand_strength import evaluate_hand_strength
from postflop_advisor.solver.adjustments import adjust_for_multiway, adjust_for_spr
from postflop_advisor.solver.board_bucketing import classify_board_texture, classify_spr
from postflop_advisor.solver.data_structures import (
    PostflopAction,
    Recommendation,
    SpotAnalysis,
)
from postflop_advisor.solver.engine import PostflopAdvisor, recommend
from postflop_advisor.solver.strategy_table import (
    StrategyTable,
    StrategyTableError,
    lookup_strategy,
)

__all__ = [
    "analyze_draw",
    "evaluate_hand_strength",
    "adjust_for_multiway",
    "adjust_for_spr",
    "classify_board_texture",
    "classify_spr",
    "PostflopAction",
    "Recommendation",
    "SpotAnalysis",
    "PostflopAdvisor",
    "recommend",
    "StrategyTable",
    "StrategyTableError",
    "lookup_strategy",
]
