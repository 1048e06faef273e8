"""
Rule set registry: maps a rule set name to its RuleSet.

Rule sets register themselves on import of password_game.rules.
"""
import logging
from typing import Dict

from password_game.rules.rule_set import RuleSet

logger = logging.getLogger(__name__)

_RULE_SETS: Dict[str, RuleSet] = {}


def register_rule_set(rule_set: RuleSet) -> RuleSet:
    """Register a rule set under its name. Re-registering a name replaces it."""
    if rule_set.name in _RULE_SETS:
        logger.debug("Replacing rule set %s", rule_set.name)
    _RULE_SETS[rule_set.name] = rule_set
    return rule_set


def get_registry() -> Dict[str, RuleSet]:
    """Return the rule set registry (read-only)."""
    return dict(_RULE_SETS)


def get_rule_set(name: str) -> RuleSet:
    """
    Look up a rule set by name.
    Raises KeyError if name not registered.
    """
    rule_set = _RULE_SETS.get(name)
    if rule_set is None:
        raise KeyError(f"Unknown rule set: {name}")
    return rule_set
