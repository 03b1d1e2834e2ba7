"""Human-readable explanations for postflop recommendations.

Builds a short summary, reasoning bullets, weighted factors and tips from
a SpotAnalysis. All text is fixed per category; nothing here changes the
recommendation itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from postflop_advisor.solver.data_structures import PostflopAction, SpotAnalysis
from postflop_advisor.utils.constants import (
    ActionKind,
    BoardTexture,
    DrawType,
    HandStrength,
    Scenario,
    SPRCategory,
)


class Impact(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class StrategyFactor:
    """One input that shaped the recommendation, weighted 0-10."""

    factor: str
    impact: Impact
    weight: int
    description: str


@dataclass
class Explanation:
    summary: str
    reasoning: list[str] = field(default_factory=list)
    factors: list[StrategyFactor] = field(default_factory=list)
    tips: list[str] = field(default_factory=list)
    ev: float | None = None
    alternatives: list[str] = field(default_factory=list)


HAND_STRENGTH_TEXT: dict[HandStrength, str] = {
    HandStrength.NUTS: "You have the best possible hand or close to it. This is a value betting opportunity.",
    HandStrength.STRONG: "Your hand is very strong (two pair+, strong overpair). Build the pot for value.",
    HandStrength.MEDIUM: "Medium strength hand (top pair good kicker). Balance protection and pot control.",
    HandStrength.MARGINAL: "Marginal hand (top pair weak kicker). Exercise caution and pot control.",
    HandStrength.WEAK: "Weak made hand. Usually best to check and minimize losses.",
    HandStrength.DRAW: "Drawing hand with good potential. Consider pot odds and implied odds.",
    HandStrength.AIR: "No made hand or draw. Bluff selectively or give up.",
}

TEXTURE_TEXT: dict[BoardTexture, str] = {
    BoardTexture.DRY: "Dry board with few draws. Ranges are more defined, small bets are effective.",
    BoardTexture.WET: "Wet board with many draws. Bet larger to charge draws and protect your hand.",
    BoardTexture.MONOTONE: "Three cards of one suit. Flush draws are live; play cautiously without a flush.",
    BoardTexture.PAIRED: "Paired board reduces possible hand combinations. Bluffs can be more effective.",
    BoardTexture.CONNECTED: "Connected board with straight possibilities. Many draws are present.",
    BoardTexture.HIGH: "High card board that favors the preflop aggressor's range.",
    BoardTexture.LOW: "Low card board that favors the caller's range with more small pairs.",
    BoardTexture.ACE_HIGH: "Ace-high board heavily favors the preflop aggressor's range.",
}

SPR_TEXT: dict[SPRCategory, str] = {
    SPRCategory.MICRO: "Very low SPR (<2). Commit with good hands or fold; no room for maneuver.",
    SPRCategory.SMALL: "Small SPR (2-4). One bet can commit stacks. Play straightforwardly.",
    SPRCategory.MEDIUM: "Medium SPR (4-8). Two streets of betting available. Balance value and bluffs.",
    SPRCategory.LARGE: "Large SPR (8-13). Standard cash game situation. Play ranges normally.",
    SPRCategory.DEEP: "Deep SPR (>13). Multiple streets of betting. Pot control becomes important.",
}

DRAW_TEXT: dict[DrawType, str] = {
    DrawType.COMBO_DRAW: "Combo draw (flush + straight draw) has high equity and two ways to improve.",
    DrawType.FLUSH_DRAW: "Flush draw gives ~35% equity on the flop, worth betting or calling.",
    DrawType.OESD: "Open-ended straight draw has ~32% equity and 8 outs twice.",
    DrawType.GUTSHOT: "Gutshot straight draw has only 4 outs (~16% equity). Be selective.",
    DrawType.BACKDOOR_FLUSH: "Backdoor flush draw adds ~4% equity, a bonus rather than a primary draw.",
    DrawType.BACKDOOR_STRAIGHT: "Backdoor straight draw adds some equity for turns that improve.",
    DrawType.NO_DRAW: "No significant draw present.",
}

SCENARIO_TEXT: dict[Scenario, str] = {
    Scenario.CBET_IP: "Continuation betting in position. Leverage position and initiative.",
    Scenario.CBET_OOP: "Continuation betting out of position. Be more selective and polarized.",
    Scenario.FACING_CBET: "Defending against a continuation bet. Consider equity and position.",
    Scenario.CHECK_RAISE: "Check-raising as the out-of-position defender. Balance value hands and bluffs.",
    Scenario.PROBE_BET: "Probe betting after the in-position player checks back. Attack capped ranges.",
    Scenario.DONK_BET: "Donk betting into the preflop aggressor. Use sparingly on specific boards.",
    Scenario.TURN_BARREL: "Second barrel on the turn. Continue value and semi-bluffs.",
    Scenario.RIVER_VALUE: "River value betting. Maximize with strong hands.",
    Scenario.FACING_TURN_BET: "Facing a turn bet. Narrow your range and consider odds.",
    Scenario.FACING_RIVER_BET: "Facing a river bet. Make decisions based on sizing.",
}

# Scenarios that imply hero's position; the rest leave it unknown
_IN_POSITION: dict[Scenario, bool] = {
    Scenario.CBET_IP: True,
    Scenario.CBET_OOP: False,
    Scenario.CHECK_RAISE: False,
    Scenario.DONK_BET: False,
}

_VALUE_STRENGTHS = (HandStrength.NUTS, HandStrength.STRONG)
# Draws with at least this many outs count in favour of aggression
STRONG_DRAW_OUTS = 8

# Frequency at or above which an action is presented as a pure play
PURE_STRATEGY_FREQUENCY = 70


def _strength_impact(strength: HandStrength) -> Impact:
    if strength in _VALUE_STRENGTHS:
        return Impact.POSITIVE
    if strength in (HandStrength.WEAK, HandStrength.AIR):
        return Impact.NEGATIVE
    return Impact.NEUTRAL


def _factors(analysis: SpotAnalysis, in_position: bool | None) -> list[StrategyFactor]:
    factors = [
        StrategyFactor(
            "Hand Strength",
            _strength_impact(analysis.strength),
            10,
            HAND_STRENGTH_TEXT[analysis.strength],
        ),
        StrategyFactor(
            "Board Texture", Impact.NEUTRAL, 7, TEXTURE_TEXT[analysis.texture],
        ),
    ]
    if in_position is not None:
        factors.append(StrategyFactor(
            "Position",
            Impact.POSITIVE if in_position else Impact.NEGATIVE,
            8,
            "Acting last gives you information and lets you control the pot."
            if in_position
            else "Acting first puts you at an information disadvantage. Play more straightforwardly.",
        ))
    factors.append(StrategyFactor(
        "Stack-to-Pot Ratio",
        Impact.NEGATIVE if analysis.spr == SPRCategory.MICRO else Impact.NEUTRAL,
        6,
        SPR_TEXT[analysis.spr],
    ))
    if analysis.draw != DrawType.NO_DRAW:
        factors.append(StrategyFactor(
            "Draw Potential",
            Impact.POSITIVE if analysis.draw.outs >= STRONG_DRAW_OUTS else Impact.NEUTRAL,
            5,
            f"{DRAW_TEXT[analysis.draw]} About {analysis.draw.outs} outs.",
        ))
    return factors


def _action_reasoning(
    action: PostflopAction,
    analysis: SpotAnalysis,
    in_position: bool | None,
) -> tuple[list[str], list[str]]:
    """Reasoning bullets and tips specific to the chosen action."""
    strength = analysis.strength
    size = f"{action.size:g}" if action.size is not None else "?"
    reasoning: list[str] = []
    tips: list[str] = []

    kind = action.kind
    if kind == ActionKind.BET:
        if strength in _VALUE_STRENGTHS:
            reasoning.append(f"Betting {size}% pot for value with a strong hand.")
            reasoning.append("Build the pot while extracting value from weaker holdings.")
        elif strength == HandStrength.DRAW:
            reasoning.append(f"Semi-bluffing with a {size}% pot bet.")
            reasoning.append("Betting gives you two ways to win: fold equity and card equity.")
        elif strength == HandStrength.AIR:
            reasoning.append(f"Bluffing with {size}% pot as part of a balanced strategy.")
            reasoning.append("Include some bluffs to make your value bets more profitable.")
        else:
            reasoning.append(f"Betting {size}% pot with a {strength} hand.")
            reasoning.append("Thin value or protection bet depending on opponents.")
        if analysis.texture in (BoardTexture.WET, BoardTexture.CONNECTED):
            tips.append("On draw-heavy boards, bet larger to charge draws.")
        elif analysis.texture == BoardTexture.DRY:
            tips.append("On dry boards, smaller bets achieve similar fold equity.")
    elif kind == ActionKind.CHECK:
        if strength in _VALUE_STRENGTHS:
            reasoning.append("Checking to trap or slowplay a strong hand.")
            reasoning.append("Balance your checking range with value hands.")
        elif strength == HandStrength.MEDIUM:
            reasoning.append("Checking for pot control with medium strength.")
            reasoning.append("Avoid building a big pot without a big hand.")
        else:
            reasoning.append("Checking as the default play with a weak holding.")
            reasoning.append("See cheap cards or set up a check-raise.")
        if in_position is False:
            tips.append("Out of position, checking is often correct to see the opponent's action.")
    elif kind == ActionKind.RAISE:
        reasoning.append(f"Raising to {size}% of the bet.")
        if strength in _VALUE_STRENGTHS:
            reasoning.append("Raise for value with your strong hand.")
        elif strength == HandStrength.DRAW:
            reasoning.append("Semi-bluff raise with fold equity and drawing equity.")
        else:
            reasoning.append("Bluff raise as part of a balanced strategy.")
        tips.append("Choose raise sizing based on board texture and opponent tendencies.")
    elif kind == ActionKind.CALL:
        reasoning.append("Calling to see the next card or showdown.")
        if strength == HandStrength.DRAW:
            reasoning.append("Call is correct if pot odds justify the draw.")
        else:
            reasoning.append("Calling keeps bluffs in and catches weaker value bets.")
        tips.append("Consider implied odds when calling with draws.")
        if analysis.draw.is_straight_draw:
            tips.append("Straight draws are well disguised; expect to get paid when they hit.")
    elif kind == ActionKind.FOLD:
        reasoning.append("Folding is the correct play with insufficient equity.")
        reasoning.append("Preserve your stack for better opportunities.")
        if strength in (HandStrength.WEAK, HandStrength.AIR):
            tips.append("Don't hero call without reads suggesting bluffs.")
    elif kind == ActionKind.ALL_IN:
        reasoning.append("All-in commits your remaining stack.")
        if analysis.spr in (SPRCategory.MICRO, SPRCategory.SMALL):
            reasoning.append("With low SPR, shoving is often mathematically correct.")
        tips.append("Ensure you have the equity or fold equity to justify the all-in.")

    return reasoning, tips


def explain(analysis: SpotAnalysis, in_position: bool | None = None) -> Explanation:
    """Explain the recommendation of an analysed spot.

    Args:
        analysis: Output of PostflopAdvisor.analyze.
        in_position: Whether hero acts last. Inferred from the scenario
                     when omitted (c-bet IP/OOP, check-raise, donk bet).

    Returns:
        Explanation. When the spot has no recommendation the summary says
        so and only the situational factors are filled in.
    """
    scenario = None
    if analysis.spot_key is not None:
        scenario = analysis.spot_key.scenario
    if in_position is None and scenario is not None:
        in_position = _IN_POSITION.get(scenario)

    factors = _factors(analysis, in_position)
    rec = analysis.recommendation
    if rec is None:
        return Explanation(
            summary=f"No strategy data for {analysis.scenario} with a "
                    f"{analysis.strength} hand on a {analysis.texture} board",
            factors=factors,
        )

    action = rec.action
    reasoning = [SCENARIO_TEXT[scenario]] if scenario is not None else []
    action_reasoning, tips = _action_reasoning(action, analysis, in_position)
    reasoning.extend(action_reasoning)
    if action.ev >= 0:
        reasoning.append(f"This action has positive expected value (+{action.ev:.2f} BB).")
    else:
        reasoning.append(f"This action minimizes losses ({action.ev:.2f} BB EV).")

    if action.frequency >= PURE_STRATEGY_FREQUENCY:
        summary = (
            f"{action.describe().upper()} with {analysis.strength} hand "
            f"on {analysis.texture} board"
        )
    else:
        summary = f"Mixed strategy: {action.describe()} {action.frequency:g}% of the time"

    return Explanation(
        summary=summary,
        reasoning=reasoning,
        factors=factors,
        tips=tips,
        ev=action.ev,
        alternatives=[
            f"{a.describe()} ({a.frequency:g}%)" for a in rec.alternatives
        ],
    )
