"""Coarse hand-strength bucketing for a hand against a board.

This is deliberately not a full 7-card ranking. Made-hand strength is read
off the rank and suit histograms of hole cards plus board, and the pair
logic only looks at the single highest board card: board pairing,
counterfeited kickers and multiple pair interactions are not considered.
The strategy tables are calibrated against exactly this behaviour.
"""

from __future__ import annotations

from collections.abc import Sequence

from postflop_advisor.utils.card import Card, rank_counts, suit_counts, unique_values
from postflop_advisor.utils.constants import HandStrength

# Kicker thresholds on the 0-indexed rank scale (deuce = 0, ace = 12)
_GOOD_KICKER_INDEX = 10  # Q, K, A
_FAIR_KICKER_INDEX = 7  # 9, T, J


def _rank_index(value: int) -> int:
    return value - 2


def evaluate_hand_strength(
    hand: Sequence[Card],
    board: Sequence[Card],
) -> HandStrength:
    """Bucket a hand's strength on the current board.

    Buckets, checked in order:
      - nuts:     any flush, quads, or a full house
      - strong:   trips or two pair
      - medium:   top pair with a Q+ kicker (flop onwards)
      - marginal: top pair with a 9-J kicker
      - weak:     any other pair once the flop is out
      - draw:     four to a flush, or four distinct ranks within a 5-rank span
      - air:      everything else

    Args:
        hand: The two hole cards.
        board: Community cards (0-5).

    Returns:
        The hand strength bucket.
    """
    cards = [*hand, *board]
    suits = suit_counts(cards)
    counts = sorted(rank_counts(cards).values(), reverse=True)
    top = counts[0] if counts else 0
    second = counts[1] if len(counts) > 1 else 0

    if max(suits.values(), default=0) >= 5 or top >= 4 or (top >= 3 and second >= 2):
        return HandStrength.NUTS

    if top >= 3 or (top >= 2 and second >= 2):
        return HandStrength.STRONG

    if len(board) >= 3:
        top_board = max(c.value for c in board)
        hand_values = [c.value for c in hand]
        if top_board in hand_values:
            kicker = next((v for v in hand_values if v != top_board), hand_values[0])
            if _rank_index(kicker) >= _GOOD_KICKER_INDEX:
                return HandStrength.MEDIUM
            if _rank_index(kicker) >= _FAIR_KICKER_INDEX:
                return HandStrength.MARGINAL

        # Any remaining pair, including one that lives on the board
        if top >= 2:
            return HandStrength.WEAK

    if max(suits.values(), default=0) >= 4:
        return HandStrength.DRAW

    values = unique_values(cards)
    for i in range(len(values) - 3):
        if values[i + 3] - values[i] <= 4:
            return HandStrength.DRAW

    return HandStrength.AIR
