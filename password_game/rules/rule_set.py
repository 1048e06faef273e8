"""
RuleSet: an ordered, immutable collection of Rule records.

Rule ids must be exactly 1..N; the reveal engine finds the next rule as last id + 1.
"""
import logging
from typing import Iterable, Iterator, List

from password_game.schemas import Rule, RuleStatus

logger = logging.getLogger(__name__)


class RuleSet:
    """Named, ordered rules with a total evaluate()."""

    def __init__(self, name: str, rules: Iterable[Rule]):
        ordered = tuple(sorted(rules, key=lambda r: r.id))
        if not ordered:
            raise ValueError(f"Rule set {name!r} has no rules")
        ids = [r.id for r in ordered]
        expected = list(range(1, len(ordered) + 1))
        if ids != expected:
            raise ValueError(
                f"Rule set {name!r} ids must be 1..{len(ordered)} with no gaps, got {ids}"
            )
        self.name = name
        self._rules = ordered

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return isinstance(rule_id, int) and 1 <= rule_id <= len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({self.name!r}, {len(self._rules)} rules)"

    def ids(self) -> List[int]:
        return [r.id for r in self._rules]

    def get(self, rule_id: int) -> Rule:
        """Return the rule with this id. Raises KeyError if the id is not in the set."""
        if rule_id not in self:
            raise KeyError(f"Unknown rule {rule_id} in rule set {self.name!r}")
        return self._rules[rule_id - 1]

    def evaluate(self, rule_id: int, value: str) -> bool:
        """
        Apply one rule to value. Never raises.

        Unknown ids and validator errors both come back as False.
        """
        try:
            rule = self.get(rule_id)
        except KeyError as e:
            logger.warning("%s", e)
            return False
        try:
            return bool(rule.validator(value))
        except Exception:
            logger.exception("Rule %s in %s failed", rule_id, self.name)
            return False

    def evaluate_all(self, value: str) -> List[RuleStatus]:
        """Status of every rule, revealed or not (whole-form check)."""
        return [
            RuleStatus(id=r.id, description=r.description, is_valid=self.evaluate(r.id, value))
            for r in self._rules
        ]
