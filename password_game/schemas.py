"""
Schemas for the Password Game.

Defines Rule (one predicate of a rule set), RuleStatus and RevealResult
(what the reveal engine hands to the UI), and GameSettings (validated config).
"""
from typing import Callable, List, Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Display order
# ---------------------------------------------------------------------------

DisplayOrder = Literal["errors_first", "ascending"]


# ---------------------------------------------------------------------------
# Rule: input to the reveal engine
# ---------------------------------------------------------------------------


class Rule(BaseModel):
    """One constraint: stable id, text shown to the user, and a pure predicate."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    description: str
    validator: Callable[[str], bool]


# ---------------------------------------------------------------------------
# Reveal Result: output from the reveal engine
# ---------------------------------------------------------------------------


class RuleStatus(BaseModel):
    """A visible rule and whether the current input satisfies it."""

    id: int
    description: str
    is_valid: bool


class RevealResult(BaseModel):
    """
    Visible rules for one input value, split into failing and passing groups.

    Both groups are in ascending id order. Use ordered() to get the list a UI
    renders: errors first, or strictly by id.
    """

    visible_ids: List[int] = Field(default_factory=list)
    failing: List[RuleStatus] = Field(default_factory=list)
    passing: List[RuleStatus] = Field(default_factory=list)
    length: int = 0
    total_rules: int = 0

    @property
    def complete(self) -> bool:
        """Every rule id 1..N is revealed and none of the visible rules fails."""
        return (
            self.total_rules > 0
            and set(range(1, self.total_rules + 1)) <= set(self.visible_ids)
            and not self.failing
        )

    def ordered(self, order: DisplayOrder = "errors_first") -> List[RuleStatus]:
        if order == "ascending":
            return sorted(self.failing + self.passing, key=lambda s: s.id)
        return self.failing + self.passing


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class GameSettings(BaseModel):
    """Game section of the config file, after env resolution."""

    rule_set: str = "extended"
    display_order: DisplayOrder = "errors_first"
    settle: bool = False
