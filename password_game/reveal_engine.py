"""
Reveal Engine: decide which rules are visible, then split them by validity.

update() and partition() are pure: the caller owns the visible ids and passes
them back on every input change. RevealSession is a thin holder for one form.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from password_game.rules import RuleSet, get_rule_set
from password_game.schemas import DisplayOrder, GameSettings, RevealResult, RuleStatus

logger = logging.getLogger(__name__)


def update(value: str, previous_visible_ids: Sequence[int], rule_set: RuleSet) -> List[int]:
    """
    Compute the visible rule ids after an input change.

    Empty value resets to []. A fresh session always starts at [1]. Otherwise
    the most recently revealed rule is checked, and if it passes the next id is
    appended. At most one rule is revealed per call, even when later rules
    would already pass.
    """
    if not value:
        return []
    visible = sorted(set(previous_visible_ids))
    if not visible:
        return [1]

    last = visible[-1]
    next_id = last + 1
    if next_id <= len(rule_set) and next_id not in visible and rule_set.evaluate(last, value):
        logger.debug("Rule %d passed, revealing rule %d", last, next_id)
        visible.append(next_id)
    return visible


def settle(value: str, previous_visible_ids: Sequence[int], rule_set: RuleSet) -> List[int]:
    """Apply update() until visibility stops changing."""
    visible = update(value, previous_visible_ids, rule_set)
    # Each pass reveals one rule or stops, so this ends within len(rule_set) passes.
    while True:
        after = update(value, visible, rule_set)
        if after == visible:
            return visible
        visible = after


def partition(
    visible_ids: Sequence[int], value: str, rule_set: RuleSet
) -> Tuple[List[RuleStatus], List[RuleStatus]]:
    """Split visible rules into (failing, passing), both in ascending id order."""
    failing: List[RuleStatus] = []
    passing: List[RuleStatus] = []
    for rule_id in sorted(set(visible_ids)):
        if rule_id not in rule_set:
            logger.debug("Skipping rule %s: not in rule set %s", rule_id, rule_set.name)
            continue
        rule = rule_set.get(rule_id)
        is_valid = rule_set.evaluate(rule_id, value)
        status = RuleStatus(id=rule.id, description=rule.description, is_valid=is_valid)
        (passing if is_valid else failing).append(status)
    return failing, passing


def build_result(value: str, visible_ids: Sequence[int], rule_set: RuleSet) -> RevealResult:
    """Package visible ids and their partition for the UI."""
    failing, passing = partition(visible_ids, value, rule_set)
    return RevealResult(
        visible_ids=sorted(set(visible_ids)),
        failing=failing,
        passing=passing,
        length=len(value),
        total_rules=len(rule_set),
    )


class RevealSession:
    """
    Reveal state for one form instance.

    Feed every input change to on_input(); visibility resets when the value
    is cleared.
    """

    def __init__(
        self,
        rule_set: RuleSet,
        *,
        display_order: DisplayOrder = "errors_first",
        settle: bool = False,
    ):
        self.rule_set = rule_set
        self.display_order = display_order
        self.settle = settle
        self.visible_ids: List[int] = []

    @classmethod
    def from_settings(cls, settings: Optional[GameSettings] = None) -> "RevealSession":
        """Build a session from GameSettings (default: loaded from config)."""
        if settings is None:
            from password_game.config_loader import get_game_settings
            settings = get_game_settings()
        return cls(
            get_rule_set(settings.rule_set),
            display_order=settings.display_order,
            settle=settings.settle,
        )

    def on_input(self, value: str) -> RevealResult:
        step = settle if self.settle else update
        visible = step(value, self.visible_ids, self.rule_set)
        if not visible and self.visible_ids:
            logger.debug("Input cleared, resetting %d visible rules", len(self.visible_ids))
        self.visible_ids = visible
        return build_result(value, visible, self.rule_set)

    def reset(self) -> None:
        self.visible_ids = []

    def ordered(self, result: RevealResult) -> List[RuleStatus]:
        return result.ordered(self.display_order)
