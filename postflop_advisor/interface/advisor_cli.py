"""Command-line postflop advisor.

Classifies a single spot and prints the recommended action, the ranked
alternatives and why.

Usage:
    python -m postflop_advisor.interface.advisor_cli \\
        --hand AhKh --board "9h 5h 2d" --stack 100 --pot 10 --scenario cbet_ip

Example output:
    ══════════════════════════════════════════════════
      RECOMMENDATION: BET 75% POT (70%)
    ══════════════════════════════════════════════════
      Hand:       Ah Kh
      Board:      9h 5h 2d (flop)
      Texture:    wet
      Strength:   draw
      Draw:       flush_draw
      SPR:        large (10.0)
      Players:    heads_up
    ...
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from postflop_advisor.solver.data_structures import SpotAnalysis
from postflop_advisor.solver.engine import PostflopAdvisor
from postflop_advisor.solver.strategy_table import StrategyTableError
from postflop_advisor.strategy.explainer import explain
from postflop_advisor.utils.card import Card, parse_cards
from postflop_advisor.utils.constants import Scenario

_DIVIDER = "═" * 50


def _card_str(cards: list[Card]) -> str:
    return " ".join(str(c) for c in cards)


def format_analysis(
    hand: list[Card],
    board: list[Card],
    stack: float,
    pot: float,
    analysis: SpotAnalysis,
) -> str:
    """Render an analysed spot and its explanation as plain text."""
    rec = analysis.recommendation
    if rec is not None:
        headline = f"{rec.action.describe().upper()} ({rec.action.frequency:g}%)"
    else:
        headline = "NO RECOMMENDATION"
    spr_value = f"{stack / pot:.1f}" if pot > 0 else "n/a"

    lines = [
        _DIVIDER,
        f"  RECOMMENDATION: {headline}",
        _DIVIDER,
        f"  Hand:       {_card_str(hand)}",
        f"  Board:      {_card_str(board)} ({analysis.street})",
        f"  Scenario:   {analysis.scenario}",
        f"  Texture:    {analysis.texture}",
        f"  Strength:   {analysis.strength}",
        f"  Draw:       {analysis.draw}",
        f"  SPR:        {analysis.spr} ({spr_value})",
        f"  Players:    {analysis.player_count}",
    ]

    explanation = explain(analysis)
    lines.append("")
    lines.append(f"  {explanation.summary}")
    if explanation.alternatives:
        lines.append("")
        lines.append("  ── Alternatives ──")
        lines.extend(f"    - {alt}" for alt in explanation.alternatives)
    if explanation.reasoning:
        lines.append("")
        lines.append("  ── Why this play? ──")
        lines.extend(f"    {r}" for r in explanation.reasoning)
    if explanation.tips:
        lines.append("")
        lines.append("  ── Tips ──")
        lines.extend(f"    {t}" for t in explanation.tips)
    lines.append(_DIVIDER)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend a postflop action for a single spot.",
    )
    parser.add_argument("--hand", required=True, help="Hole cards, e.g. AhKh")
    parser.add_argument("--board", required=True, help='Board cards, e.g. "9h 5h 2d"')
    parser.add_argument("--stack", type=float, required=True, help="Effective stack")
    parser.add_argument("--pot", type=float, required=True, help="Current pot size")
    parser.add_argument(
        "--scenario", default=Scenario.CBET_IP.value,
        help="Scenario name, e.g. cbet_ip, facing_cbet, turn_barrel (default: cbet_ip)",
    )
    parser.add_argument(
        "--players", type=int, default=2,
        help="Players in the pot including you (default: 2)",
    )
    parser.add_argument(
        "--strategies", type=Path, default=None,
        help="Path to a strategy table JSON file (default: packaged table)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log classification details",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        hand = parse_cards(args.hand)
        board = parse_cards(args.board)
    except ValueError as e:
        print(f"Invalid cards: {e}", file=sys.stderr)
        return 1
    if len(hand) != 2:
        print(f"Need exactly 2 hole cards, got {len(hand)}", file=sys.stderr)
        return 1

    try:
        advisor = PostflopAdvisor(data_path=args.strategies)
    except (OSError, StrategyTableError) as e:
        print(f"Cannot load strategy table: {e}", file=sys.stderr)
        return 1

    analysis = advisor.analyze(
        hand, board, args.stack, args.pot, args.scenario, args.players,
    )
    print(format_analysis(hand, board, args.stack, args.pot, analysis))
    return 0


if __name__ == "__main__":
    sys.exit(main())
