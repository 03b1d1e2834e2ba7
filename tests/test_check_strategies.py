"""Tests for the strategy table check script."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "scripts"))

from check_strategies import check


class TestCheck:
    def test_packaged_table(self, capsys) -> None:
        from postflop_advisor.solver.strategy_table import DEFAULT_DATA_PATH

        assert check(DEFAULT_DATA_PATH, show_list=True) == 0
        out = capsys.readouterr().out
        assert "8 scenarios" in out
        assert "turn_barrel" in out
        assert "No data-quality issues." in out

    def test_reports_violations(self, tmp_path, capsys) -> None:
        path = tmp_path / "table.json"
        path.write_text(json.dumps({"scenarios": {"cbet_ip": {"entries": {"dry": {
            "air": [
                {"action": "bet", "frequency": 90, "size": 33},
                {"action": "check", "frequency": 30},
            ],
        }}}}}))
        assert check(path) == 0
        out = capsys.readouterr().out
        assert "1 data-quality issue(s)" in out
        assert "cbet_ip/dry/air: frequencies sum to 120" in out

    def test_unloadable_table(self, tmp_path, capsys) -> None:
        assert check(tmp_path / "missing.json") == 1
        assert "FAIL" in capsys.readouterr().out
