"""Core data structures for the postflop strategy engine.

PostflopAction: A single action with its frequency, optional size, and EV.
Recommendation: The best action for a spot plus ranked alternatives.
SpotKey: Hashable identifier for a strategy table entry.
SpotAnalysis: Everything the advisor derived for one spot.
StrategySource: Interface that any strategy table backend must implement.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from postflop_advisor.utils.constants import (
    ActionKind,
    BoardTexture,
    DrawType,
    HandStrength,
    PlayerCount,
    Scenario,
    SPRCategory,
    Street,
)


@dataclass(frozen=True)
class PostflopAction:
    """A single action in a mixed strategy.

    Attributes:
        kind: Action kind (fold, check, call, bet, raise, allin).
        frequency: How often to take this action, in percent [0, 100].
        size: Bet or raise size as a percentage of the pot, if any.
        ev: Expected value of this action in big blinds.
    """

    kind: ActionKind
    frequency: float
    size: float | None = None
    ev: float = 0.0

    @property
    def is_aggressive(self) -> bool:
        return self.kind in (ActionKind.BET, ActionKind.RAISE)

    def with_frequency(self, frequency: float) -> PostflopAction:
        return replace(self, frequency=frequency)

    def describe(self) -> str:
        """Short human-readable form, e.g. 'bet 33% pot'."""
        if self.is_aggressive and self.size is not None:
            return f"{self.kind.value} {self.size:g}% pot"
        return self.kind.value


@dataclass(frozen=True)
class Recommendation:
    """Highest-frequency action for a spot, with the rest ranked behind it."""

    action: PostflopAction
    alternatives: tuple[PostflopAction, ...] = ()

    @property
    def actions(self) -> tuple[PostflopAction, ...]:
        return (self.action, *self.alternatives)


@dataclass(frozen=True)
class SpotKey:
    """Hashable identifier for a strategy table entry."""

    street: Street
    scenario: Scenario
    texture: BoardTexture
    strength: HandStrength


@dataclass
class SpotAnalysis:
    """Complete output of the advisor pipeline for one spot.

    Attributes:
        spot_key: Table key the strategy was looked up with, or None when
                  the scenario name is not recognised.
        draw: Drawing potential of hand plus board.
        spr: Stack-to-pot ratio bucket.
        player_count: Number-of-players bucket.
        base_actions: Strategy entry exactly as stored in the table.
        actions: Entry after multiway and SPR adjustments.
        recommendation: Best adjusted action, or None if no data.
    """

    street: Street
    scenario: str
    texture: BoardTexture
    strength: HandStrength
    draw: DrawType
    spr: SPRCategory
    player_count: PlayerCount
    spot_key: SpotKey | None = None
    base_actions: list[PostflopAction] = field(default_factory=list)
    actions: list[PostflopAction] = field(default_factory=list)
    recommendation: Recommendation | None = None

    @property
    def has_recommendation(self) -> bool:
        return self.recommendation is not None


@runtime_checkable
class StrategySource(Protocol):
    """Interface that any strategy table backend must implement.

    The built-in implementation is StrategyTable (packaged JSON data);
    tests and callers may substitute their own.
    """

    def lookup(
        self,
        street: Street | str,
        scenario: Scenario | str,
        texture: BoardTexture,
        strength: HandStrength,
    ) -> list[PostflopAction]: ...
