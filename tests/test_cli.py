"""
Tests for CLI runner.
"""
import json
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent


def _run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "password_game.cli", *args],
        capture_output=True,
        text=True,
        cwd=ROOT,
    )


def test_cli_demo_completes():
    """Demo progression reveals all 10 rules one at a time."""
    result = _run_cli("demo", "--rule-set", "extended")
    assert result.returncode == 0
    out = json.loads(result.stdout)
    assert out["complete"] is True
    assert out["visible_ids"] == list(range(1, 11))
    assert [len(step) for step in out["steps"]] == list(range(1, 11))
    assert out["failing"] == []


def test_cli_incomplete_exit_1():
    """Stopping early leaves the newest rule failing."""
    result = _run_cli("a", "abcde", "--rule-set", "extended", "--order", "ascending")
    assert result.returncode == 1
    out = json.loads(result.stdout)
    assert out["visible_ids"] == [1, 2]
    assert [r["id"] for r in out["rules"]] == [1, 2]
    assert [r["id"] for r in out["failing"]] == [2]
    assert out["length"] == 5


def test_cli_minimal_rule_set():
    result = _run_cli("a", "abcde", "abcde1", "Abcde1", "--rule-set", "minimal")
    assert result.returncode == 0
    out = json.loads(result.stdout)
    assert out["rule_set"] == "minimal"
    assert out["visible_ids"] == [1, 2, 3]


def test_cli_settle_reveals_everything_at_once():
    valid = "Abcde1! level 1985 love above 2+2=4 Einstein relativity"
    result = _run_cli(valid, "--rule-set", "extended", "--settle")
    assert result.returncode == 0
    out = json.loads(result.stdout)
    assert out["steps"] == [list(range(1, 11))]


def test_cli_unknown_rule_set_exit_2():
    result = _run_cli("abc", "--rule-set", "nope")
    assert result.returncode == 2
    assert "Unknown rule set" in result.stderr


def test_cli_uses_config_file(tmp_path):
    config = tmp_path / "game.yaml"
    config.write_text("game:\n  rule_set: minimal\n  display_order: ascending\n")
    result = _run_cli("abcde1", "--config", str(config))
    assert result.returncode == 1
    out = json.loads(result.stdout)
    assert out["rule_set"] == "minimal"
    assert out["visible_ids"] == [1]
