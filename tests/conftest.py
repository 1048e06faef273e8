"""
Pytest fixtures for password game tests.

Provides the compiled-in rule sets, a small custom rule set, and the
input progression that walks the 10-rule game one rule at a time.
"""
import pytest

from password_game.config_loader import reload_config
from password_game.rules import RuleSet, get_rule_set
from password_game.schemas import Rule


@pytest.fixture
def extended_rules():
    return get_rule_set("extended")


@pytest.fixture
def minimal_rules():
    return get_rule_set("minimal")


@pytest.fixture
def flaky_rules():
    """Two rules where rule 2 raises on any input containing 'boom'."""

    def explode(value: str) -> bool:
        if "boom" in value:
            raise RuntimeError("validator blew up")
        return True

    return RuleSet(
        "flaky",
        [
            Rule(id=1, description="Anything goes.", validator=lambda value: True),
            Rule(id=2, description="Must not explode.", validator=explode),
        ],
    )


@pytest.fixture
def progression():
    """Inputs that satisfy the newest rule of the extended set, step by step."""
    return [
        "a",
        "abcde",
        "abcde1",
        "Abcde1",
        "Abcde1!",
        "Abcde1! level",
        "Abcde1! level 1985",
        "Abcde1! level 1985 love above",
        "Abcde1! level 1985 love above 2+2=4",
        "Abcde1! level 1985 love above 2+2=4 Einstein relativity",
    ]


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and load it; restores the default config afterwards."""
    path = tmp_path / "password_game.yaml"

    def _write(text: str):
        path.write_text(text)
        return reload_config(path)

    yield _write
    reload_config()
