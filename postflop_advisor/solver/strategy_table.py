"""Read-only postflop strategy table backed by versioned JSON data.

The table maps (scenario, board texture, hand strength) to an ordered list
of weighted actions. Some scenarios (turn barrelling, river value) are
keyed by hand strength only and give the same entry on every texture.

Data format (postflop_strategies.json):
    {
      "version": 1,
      "scenarios": {
        "cbet_ip": {
          "street": "flop",
          "keyed_by": "texture",
          "entries": {"dry": {"nuts": [{"action": "bet", "frequency": 85,
                                        "size": 33, "ev": 2.5}, ...]}}
        },
        "turn_barrel": {
          "street": "turn",
          "keyed_by": "strength",
          "entries": {"nuts": [...]}
        }
      }
    }

Usage:
    table = StrategyTable.from_json(path)   # or default_table()
    actions = table.lookup("flop", "cbet", BoardTexture.DRY, HandStrength.NUTS)
    # -> [PostflopAction(kind='bet', frequency=85, size=33, ev=2.5), ...]
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import numpy as np

from postflop_advisor.solver.data_structures import PostflopAction
from postflop_advisor.utils.constants import (
    ActionKind,
    BoardTexture,
    HandStrength,
    Scenario,
    Street,
)

logger = logging.getLogger("postflop_advisor.solver.table")

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "postflop_strategies.json"

# Legacy scenario names still sent by older callers
LEGACY_SCENARIO_ALIASES: dict[str, Scenario] = {
    "cbet": Scenario.CBET_IP,
    "barrel": Scenario.TURN_BARREL,
    "value": Scenario.RIVER_VALUE,
}

KEYED_BY_TEXTURE = "texture"
KEYED_BY_STRENGTH = "strength"

_TEXTURES = list(BoardTexture)
_STRENGTHS = list(HandStrength)

# Soft invariant: an entry's frequencies should not add up to more than this
MAX_TOTAL_FREQUENCY = 100.0


class StrategyTableError(ValueError):
    """Raised when strategy configuration data is malformed."""


def normalize_scenario(name: Scenario | str) -> Scenario | None:
    """Map a scenario name (canonical or legacy) to a Scenario.

    >>> normalize_scenario("cbet")
    <Scenario.CBET_IP: 'cbet_ip'>
    >>> normalize_scenario("nonsense") is None
    True
    """
    if isinstance(name, Scenario):
        return name
    key = name.strip().lower()
    if key in LEGACY_SCENARIO_ALIASES:
        return LEGACY_SCENARIO_ALIASES[key]
    try:
        return Scenario(key)
    except ValueError:
        return None


@dataclass(frozen=True)
class ScenarioTable:
    """Strategy entries for one scenario."""

    scenario: Scenario
    street: Street
    keyed_by: str
    entries: Mapping[tuple[BoardTexture | None, HandStrength], tuple[PostflopAction, ...]]

    def get(
        self,
        texture: BoardTexture,
        strength: HandStrength,
    ) -> tuple[PostflopAction, ...]:
        key = (texture if self.keyed_by == KEYED_BY_TEXTURE else None, strength)
        return self.entries.get(key, ())


class StrategyTable:
    """Process-wide, immutable postflop strategy lookup."""

    def __init__(self, data: Mapping[str, Any], source: str = "<memory>") -> None:
        self._source = source
        self._version = data.get("version", 1)
        self._scenarios: dict[Scenario, ScenarioTable] = {}
        self.violations: list[str] = []

        scenarios = data.get("scenarios")
        if not isinstance(scenarios, Mapping):
            raise StrategyTableError(f"{source}: missing 'scenarios' mapping")

        for name, spec in scenarios.items():
            scenario = normalize_scenario(name)
            if scenario is None:
                raise StrategyTableError(f"{source}: unknown scenario '{name}'")
            self._scenarios[scenario] = _parse_scenario(scenario, spec, f"{source}:{name}")

        self._validate()
        logger.info(
            "Strategy table loaded from %s: %d scenarios, %d entries (v%s)",
            source,
            len(self._scenarios),
            self.entry_count,
            self._version,
        )

    @classmethod
    def from_json(cls, path: Path | str) -> StrategyTable:
        """Load a table from a JSON file.

        Raises:
            StrategyTableError: If the file is not valid JSON or the data
                                is malformed.
            OSError: If the file cannot be read.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise StrategyTableError(f"{path}: invalid JSON ({e})") from e
        if not isinstance(data, Mapping):
            raise StrategyTableError(f"{path}: top level must be an object")
        return cls(data, source=str(path))

    @property
    def version(self) -> int:
        return self._version

    @property
    def scenarios(self) -> list[Scenario]:
        return list(self._scenarios)

    @property
    def entry_count(self) -> int:
        return sum(len(t.entries) for t in self._scenarios.values())

    def scenario_table(self, scenario: Scenario | str) -> ScenarioTable | None:
        normalized = normalize_scenario(scenario)
        if normalized is None:
            return None
        return self._scenarios.get(normalized)

    def lookup(
        self,
        street: Street | str,
        scenario: Scenario | str,
        texture: BoardTexture,
        strength: HandStrength,
    ) -> list[PostflopAction]:
        """Look up the strategy entry for a spot.

        The street is informational: entries are selected by scenario,
        texture and strength only.

        Returns:
            The entry's actions in table order. Empty list if there is no
            data for this combination.
        """
        table = self.scenario_table(scenario)
        if table is None:
            logger.debug("No strategy data for scenario %r", scenario)
            return []
        if str(street) != table.street:
            logger.debug(
                "Scenario %s is a %s spot, looked up on %s",
                table.scenario, table.street, street,
            )
        try:
            key = (BoardTexture(texture), HandStrength(strength))
        except ValueError:
            logger.debug("Unknown texture/strength %r/%r", texture, strength)
            return []
        return list(table.get(*key))

    def frequency_grid(self, scenario: Scenario | str) -> np.ndarray:
        """Total action frequency per (texture, strength) for a scenario.

        Rows follow BoardTexture order and columns HandStrength order.
        Cells with no entry are NaN; strength-keyed scenarios repeat the
        same row for every texture.
        """
        grid = np.full((len(_TEXTURES), len(_STRENGTHS)), np.nan)
        table = self.scenario_table(scenario)
        if table is None:
            return grid
        for i, texture in enumerate(_TEXTURES):
            for j, strength in enumerate(_STRENGTHS):
                entry = table.get(texture, strength)
                if entry:
                    grid[i, j] = sum(a.frequency for a in entry)
        return grid

    def coverage(self, scenario: Scenario | str) -> float:
        """Fraction of (texture, strength) cells that have an entry."""
        return float(np.isfinite(self.frequency_grid(scenario)).mean())

    def _validate(self) -> None:
        """Check the soft frequency invariants once, at load time."""
        for scenario, table in self._scenarios.items():
            grid = self.frequency_grid(scenario)
            if table.keyed_by == KEYED_BY_STRENGTH:
                grid = grid[:1]
            for i, j in np.argwhere(grid > MAX_TOTAL_FREQUENCY):
                where = (
                    f"{scenario}/{_STRENGTHS[j]}"
                    if table.keyed_by == KEYED_BY_STRENGTH
                    else f"{scenario}/{_TEXTURES[i]}/{_STRENGTHS[j]}"
                )
                self._warn(f"{where}: frequencies sum to {grid[i, j]:g}")

            for (texture, strength), entry in table.entries.items():
                for action in entry:
                    if not 0 <= action.frequency <= 100:
                        where = "/".join(
                            str(p) for p in (scenario, texture, strength) if p
                        )
                        self._warn(
                            f"{where}: {action.kind} frequency {action.frequency:g} "
                            "outside 0-100"
                        )

    def _warn(self, message: str) -> None:
        self.violations.append(message)
        logger.warning("Strategy data-quality issue in %s: %s", self._source, message)


def _parse_scenario(scenario: Scenario, spec: Any, where: str) -> ScenarioTable:
    if not isinstance(spec, Mapping):
        raise StrategyTableError(f"{where}: scenario must be an object")

    try:
        street = Street(spec.get("street", Street.FLOP))
    except ValueError:
        raise StrategyTableError(
            f"{where}: unknown street {spec.get('street')!r}"
        ) from None

    keyed_by = spec.get("keyed_by", KEYED_BY_TEXTURE)
    raw_entries = spec.get("entries", {})
    if not isinstance(raw_entries, Mapping):
        raise StrategyTableError(f"{where}: 'entries' must be an object")

    entries: dict[tuple[BoardTexture | None, HandStrength], tuple[PostflopAction, ...]] = {}
    if keyed_by == KEYED_BY_TEXTURE:
        for texture_name, by_strength in raw_entries.items():
            texture = _parse_enum(BoardTexture, texture_name, f"{where}/{texture_name}")
            if not isinstance(by_strength, Mapping):
                raise StrategyTableError(f"{where}/{texture_name}: expected an object")
            for strength_name, actions in by_strength.items():
                path = f"{where}/{texture_name}/{strength_name}"
                strength = _parse_enum(HandStrength, strength_name, path)
                entries[(texture, strength)] = _parse_actions(actions, path)
    elif keyed_by == KEYED_BY_STRENGTH:
        for strength_name, actions in raw_entries.items():
            path = f"{where}/{strength_name}"
            strength = _parse_enum(HandStrength, strength_name, path)
            entries[(None, strength)] = _parse_actions(actions, path)
    else:
        raise StrategyTableError(f"{where}: unknown keyed_by {keyed_by!r}")

    return ScenarioTable(
        scenario=scenario,
        street=street,
        keyed_by=keyed_by,
        entries=entries,
    )


def _parse_enum(enum_cls, name: str, where: str):
    try:
        return enum_cls(name)
    except ValueError:
        raise StrategyTableError(
            f"{where}: unknown {enum_cls.__name__} '{name}'"
        ) from None


def _parse_actions(raw: Any, where: str) -> tuple[PostflopAction, ...]:
    if not isinstance(raw, list):
        raise StrategyTableError(f"{where}: expected a list of actions")
    actions = []
    for a in raw:
        if not isinstance(a, Mapping) or "action" not in a or "frequency" not in a:
            raise StrategyTableError(f"{where}: action needs 'action' and 'frequency'")
        size = a.get("size")
        actions.append(PostflopAction(
            kind=_parse_enum(ActionKind, a["action"], where),
            frequency=float(a["frequency"]),
            size=float(size) if size is not None else None,
            ev=float(a.get("ev", 0.0)),
        ))
    return tuple(actions)


@lru_cache(maxsize=1)
def default_table() -> StrategyTable:
    """The packaged strategy table, loaded once per process."""
    return StrategyTable.from_json(DEFAULT_DATA_PATH)


def lookup_strategy(
    street: Street | str,
    scenario: Scenario | str,
    texture: BoardTexture,
    strength: HandStrength,
) -> list[PostflopAction]:
    """Look up a spot in the packaged strategy table."""
    return default_table().lookup(street, scenario, texture, strength)
