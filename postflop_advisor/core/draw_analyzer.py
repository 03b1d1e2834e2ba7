"""Drawing-potential classification for hole cards plus board.

A heuristic, not an enumeration of every draw: flush potential comes from
the suit histogram, straight potential from sliding windows over the
distinct ranks, and the two are combined by a fixed priority order.
Aces only play high.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from postflop_advisor.utils.card import Card, suit_counts, unique_values
from postflop_advisor.utils.constants import DrawType


@dataclass(frozen=True)
class DrawFeatures:
    """Raw draw flags found in a set of cards, before prioritisation."""

    flush_draw: bool = False  # exactly 4 of a suit
    backdoor_flush: bool = False  # exactly 3 of a suit
    oesd: bool = False
    gutshot: bool = False
    backdoor_straight: bool = False  # 3 ranks within a 5-rank span


def find_draw_features(cards: Sequence[Card]) -> DrawFeatures:
    """Scan the combined cards for flush and straight potential."""
    suits = suit_counts(cards).values()
    values = unique_values(cards)

    oesd = False
    gutshot = False
    for i in range(len(values) - 3):
        window = values[i:i + 4]
        span = window[3] - window[0]
        if span == 3:
            oesd = True
        elif span == 4:
            # One rank missing inside the window: a skip at either end
            # still leaves four to an open-ended run.
            gaps = [j for j in range(3) if window[j + 1] - window[j] == 2]
            if len(gaps) == 1 and gaps[0] in (0, 2):
                oesd = True
            else:
                gutshot = True

    backdoor_straight = any(
        values[i + 2] - values[i] <= 4 for i in range(len(values) - 2)
    )

    return DrawFeatures(
        flush_draw=any(n == 4 for n in suits),
        backdoor_flush=any(n == 3 for n in suits),
        oesd=oesd,
        gutshot=gutshot,
        backdoor_straight=backdoor_straight,
    )


def analyze_draw(hand: Sequence[Card], board: Sequence[Card]) -> DrawType:
    """Classify the best draw available to hand plus board.

    Priority (first match wins):
      1. flush draw and OESD      -> combo_draw
      2. flush draw               -> flush_draw
      3. OESD                     -> oesd
      4. gutshot                  -> gutshot
      5. flush draw and backdoor straight -> combo_draw
      6. backdoor flush           -> backdoor_flush
      7. backdoor straight        -> backdoor_straight
      8. otherwise                -> no_draw

    Rule 5 can never fire after rule 2; the order is kept so results stay
    identical to the calibrated tables.

    Args:
        hand: The two hole cards.
        board: Community cards (0-5).

    Returns:
        The draw category.
    """
    f = find_draw_features([*hand, *board])

    if f.flush_draw and f.oesd:
        return DrawType.COMBO_DRAW
    if f.flush_draw:
        return DrawType.FLUSH_DRAW
    if f.oesd:
        return DrawType.OESD
    if f.gutshot:
        return DrawType.GUTSHOT
    if f.flush_draw and f.backdoor_straight:
        return DrawType.COMBO_DRAW
    if f.backdoor_flush:
        return DrawType.BACKDOOR_FLUSH
    if f.backdoor_straight:
        return DrawType.BACKDOOR_STRAIGHT
    return DrawType.NO_DRAW
