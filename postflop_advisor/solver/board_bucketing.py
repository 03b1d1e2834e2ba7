"""Board texture classification and spot bucketing.

Reduces the board, the stack-to-pot ratio and the number of players in
the pot to the small discrete categories the strategy table is keyed by.
"""

from __future__ import annotations

from collections.abc import Sequence

from postflop_advisor.utils.card import Card, rank_counts, suit_counts
from postflop_advisor.utils.constants import (
    BoardTexture,
    PlayerCount,
    SPRCategory,
    Street,
)

# Rank values on the 2..14 scale
_ACE = 14
_HIGH_AVERAGE = 9
_LOW_AVERAGE = 5
_CONNECTED_SPREAD = 4

# Upper bounds (exclusive) of each SPR bucket, in ascending order
_SPR_THRESHOLDS: list[tuple[float, SPRCategory]] = [
    (2.0, SPRCategory.MICRO),
    (4.0, SPRCategory.SMALL),
    (8.0, SPRCategory.MEDIUM),
    (13.0, SPRCategory.LARGE),
]


def classify_board_texture(board: Sequence[Card]) -> BoardTexture:
    """Classify the community cards into a single texture bucket.

    Rules are applied in a fixed precedence order and the first match
    wins, so a paired high board is "paired", never "high":
      - monotone:  three or more cards of one suit
      - paired:    any rank appears twice
      - connected: highest minus lowest rank is at most 4
      - wet:       two cards of one suit
      - ace_high:  the highest card is an Ace
      - high:      average rank >= 9
      - low:       average rank <= 5
      - dry:       none of the above

    Boards with fewer than three cards are "dry".

    Args:
        board: Community cards.

    Returns:
        The board's texture bucket.
    """
    if len(board) < 3:
        return BoardTexture.DRY

    suits = suit_counts(board)
    if max(suits.values()) >= 3:
        return BoardTexture.MONOTONE

    if max(rank_counts(board).values()) >= 2:
        return BoardTexture.PAIRED

    values = sorted(c.value for c in board)
    if values[-1] - values[0] <= _CONNECTED_SPREAD:
        return BoardTexture.CONNECTED

    if any(n == 2 for n in suits.values()):
        return BoardTexture.WET

    if values[-1] == _ACE:
        return BoardTexture.ACE_HIGH

    average = sum(values) / len(values)
    if average >= _HIGH_AVERAGE:
        return BoardTexture.HIGH
    if average <= _LOW_AVERAGE:
        return BoardTexture.LOW

    return BoardTexture.DRY


def classify_spr(stack: float, pot: float) -> SPRCategory:
    """Classify the stack-to-pot ratio into a bucket.

    Five tiers:
      - micro:  SPR < 2 (commit or fold)
      - small:  2 <= SPR < 4 (one street of betting)
      - medium: 4 <= SPR < 8 (two streets)
      - large:  8 <= SPR < 13 (standard)
      - deep:   SPR >= 13 (multiple streets)

    An empty (or non-positive) pot is treated as maximal flexibility and
    classified "deep".

    Args:
        stack: Remaining effective stack.
        pot: Current pot size.

    Returns:
        The SPR bucket.
    """
    if pot <= 0:
        return SPRCategory.DEEP
    spr = stack / pot
    for upper, category in _SPR_THRESHOLDS:
        if spr < upper:
            return category
    return SPRCategory.DEEP


def classify_player_count(num_players: int) -> PlayerCount:
    """Bucket the number of players still in the pot (hero included)."""
    if num_players <= 2:
        return PlayerCount.HEADS_UP
    if num_players == 3:
        return PlayerCount.THREE_WAY
    return PlayerCount.MULTI_WAY


def detect_street(board: Sequence[Card]) -> Street:
    """Infer the street from the number of community cards."""
    n = len(board)
    if n >= 5:
        return Street.RIVER
    if n == 4:
        return Street.TURN
    if n == 3:
        return Street.FLOP
    return Street.PREFLOP
