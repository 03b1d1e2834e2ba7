"""Multiway and stack-to-pot adjustment layers.

Both transforms take a strategy entry and return a new list of the same
length, in the same order, without mutating the input. Apply multiway
first, then SPR. Only the small-SPR rule changes an action's kind
(large bets become all-ins).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import replace

from postflop_advisor.solver.data_structures import PostflopAction
from postflop_advisor.utils.constants import ActionKind, PlayerCount, SPRCategory

# Bet/raise frequency and EV scale per player-count bucket
MULTIWAY_MULTIPLIERS: dict[PlayerCount, float] = {
    PlayerCount.HEADS_UP: 1.0,
    PlayerCount.THREE_WAY: 0.7,
    PlayerCount.MULTI_WAY: 0.5,
}

MICRO_CHECK_SCALE = 0.5
MICRO_ALL_IN_SCALE = 1.5
SMALL_ALL_IN_MIN_SIZE = 75.0  # % pot at which a bet becomes a shove
DEEP_SIZE_REDUCTION = 15.0  # % pot points
DEEP_MIN_SIZE = 25.0


def _round_half_up(x: float) -> float:
    """Round to the nearest whole percent, halves away from zero for x >= 0."""
    return float(math.floor(x + 0.5))


def adjust_for_multiway(
    actions: Sequence[PostflopAction],
    player_count: PlayerCount,
) -> list[PostflopAction]:
    """Tighten a heads-up strategy for pots with more players.

    Bet and raise frequencies (and their EV) are scaled by 0.7 three-way and
    0.5 four-or-more-way. Fold frequency grows by the same proportion the
    aggression shrank, capped at 100. Check and call are unchanged.
    Frequencies are left unrounded so that small ones (1-3%) still fall
    strictly with each extra player.

    Args:
        actions: The heads-up strategy entry.
        player_count: Number-of-players bucket.

    Returns:
        Adjusted actions. Heads-up returns an equal copy.
    """
    multiplier = MULTIWAY_MULTIPLIERS[player_count]
    if player_count == PlayerCount.HEADS_UP:
        return list(actions)

    adjusted = []
    for a in actions:
        if a.is_aggressive:
            adjusted.append(replace(
                a,
                frequency=a.frequency * multiplier,
                ev=a.ev * multiplier,
            ))
        elif a.kind == ActionKind.FOLD:
            fold_freq = a.frequency * (1 + (1 - multiplier))
            adjusted.append(a.with_frequency(min(100.0, fold_freq)))
        else:
            adjusted.append(a)
    return adjusted


def adjust_for_spr(
    actions: Sequence[PostflopAction],
    spr: SPRCategory,
) -> list[PostflopAction]:
    """Adapt a strategy to the stack-to-pot ratio.

    - micro: check frequency halved, all-in frequency x1.5 (rounded)
    - small: bets of 75% pot or more become all-ins with no size
    - deep:  every sized bet shrinks by 15% pot, floored at 25% pot
    - medium, large: unchanged

    Args:
        actions: Strategy entry (typically already multiway-adjusted).
        spr: Stack-to-pot ratio bucket.

    Returns:
        Adjusted actions, same length and order as the input.
    """
    if spr == SPRCategory.MICRO:
        adjusted = []
        for a in actions:
            if a.kind == ActionKind.CHECK:
                a = a.with_frequency(_round_half_up(a.frequency * MICRO_CHECK_SCALE))
            elif a.kind == ActionKind.ALL_IN:
                a = a.with_frequency(_round_half_up(a.frequency * MICRO_ALL_IN_SCALE))
            adjusted.append(a)
        return adjusted

    if spr == SPRCategory.SMALL:
        return [
            replace(a, kind=ActionKind.ALL_IN, size=None)
            if a.kind == ActionKind.BET and a.size and a.size >= SMALL_ALL_IN_MIN_SIZE
            else a
            for a in actions
        ]

    if spr == SPRCategory.DEEP:
        return [
            replace(a, size=max(DEEP_MIN_SIZE, a.size - DEEP_SIZE_REDUCTION))
            if a.kind == ActionKind.BET and a.size
            else a
            for a in actions
        ]

    return list(actions)
