"""
Password Game: progressive password rules.

Rules are revealed one at a time as the newest visible rule becomes satisfied.
The caller pushes each input change and renders the failing/passing groups.
"""
from password_game.schemas import (
    GameSettings,
    RevealResult,
    Rule,
    RuleStatus,
)
from password_game.rules import RuleSet, get_rule_set
from password_game.reveal_engine import (
    RevealSession,
    build_result,
    partition,
    settle,
    update,
)

__all__ = [
    "GameSettings",
    "RevealResult",
    "RevealSession",
    "Rule",
    "RuleSet",
    "RuleStatus",
    "build_result",
    "get_rule_set",
    "partition",
    "settle",
    "update",
]
