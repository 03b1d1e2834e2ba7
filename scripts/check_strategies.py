#!/usr/bin/env python3
"""Validate a postflop strategy table and report its coverage.

Loads a strategy JSON file exactly the way the advisor does, prints any
data-quality violations (entries whose frequencies add up to more than
100%, or single frequencies outside 0-100) and the fraction of
(texture, strength) cells each scenario covers.

A table that cannot be loaded at all (unreadable file, invalid JSON,
unknown scenario/texture/strength/action names) exits with status 1.
Soft violations are reported but do not fail the check.

Usage:
    # Check the packaged table
    python scripts/check_strategies.py

    # Check a custom table
    python scripts/check_strategies.py my_strategies.json

    # List every scenario and its coverage
    python scripts/check_strategies.py --list
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path so we can import postflop_advisor
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from postflop_advisor.solver.strategy_table import (
    DEFAULT_DATA_PATH,
    StrategyTable,
    StrategyTableError,
)


def list_scenarios(table: StrategyTable) -> None:
    """Print one line per scenario with its street and coverage."""
    print(f"{'Scenario':<18} {'Street':<8} {'Keyed by':<10} {'Entries':<8} {'Coverage':<8}")
    print("-" * 56)
    for scenario in table.scenarios:
        sub = table.scenario_table(scenario)
        print(
            f"{scenario:<18} {sub.street:<8} {sub.keyed_by:<10} "
            f"{len(sub.entries):<8} {table.coverage(scenario):<8.0%}"
        )


def check(path: Path, show_list: bool = False) -> int:
    try:
        table = StrategyTable.from_json(path)
    except (OSError, StrategyTableError) as e:
        print(f"FAIL {path}: {e}")
        return 1

    print(f"{path}: {len(table.scenarios)} scenarios, {table.entry_count} entries (v{table.version})")
    if show_list:
        print()
        list_scenarios(table)

    if table.violations:
        print(f"\n{len(table.violations)} data-quality issue(s):")
        for v in table.violations:
            print(f"  - {v}")
    else:
        print("No data-quality issues.")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Validate a postflop strategy table JSON file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "path", nargs="?", type=Path, default=DEFAULT_DATA_PATH,
        help="Strategy JSON file (default: the packaged table)",
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List every scenario with its coverage",
    )
    args = parser.parse_args()

    # Violations are printed below; keep the logger quiet
    logging.basicConfig(level=logging.ERROR)

    sys.exit(check(args.path, show_list=args.list))


if __name__ == "__main__":
    main()
