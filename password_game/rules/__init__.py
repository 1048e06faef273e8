"""
Rule sets for the password game.

Each rule: (value) -> bool, wrapped in a Rule with id and description.
Rule sets are looked up by name through the registry.
"""
from password_game.rules.registry import get_registry, get_rule_set, register_rule_set
from password_game.rules.rule_set import RuleSet

# Import catalog to register the compiled-in rule sets
from password_game.rules import catalog  # noqa: F401

__all__ = ["RuleSet", "get_registry", "get_rule_set", "register_rule_set"]
