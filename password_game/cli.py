"""
CLI runner for local play.

Usage:
  python -m password_game.cli demo                      # built-in progression
  python -m password_game.cli a abcde abcde1 Abcde1     # each value is one input change
  python -m password_game.cli --rule-set minimal --order ascending a abcde abcde1 Abcde1

Prints the final state as JSON. Exit code 0 when every rule is revealed and passing.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from password_game.config_loader import get_game_settings, get_log_level
from password_game.reveal_engine import RevealSession
from password_game.rules import get_rule_set

logger = logging.getLogger(__name__)

# Demo progression: each step satisfies the newest rule of the 10-rule set
_DEMO_INPUTS = [
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


def _play(session: RevealSession, inputs: list[str]) -> dict:
    """Feed inputs one by one. Returns the final state plus visible ids per step."""
    logger.debug("Playing %d inputs against rule set %s", len(inputs), session.rule_set.name)
    session.reset()
    steps = []
    for value in inputs:
        result = session.on_input(value)
        steps.append(list(result.visible_ids))

    return {
        "rule_set": session.rule_set.name,
        "visible_ids": result.visible_ids,
        "steps": steps,
        "rules": [s.model_dump() for s in session.ordered(result)],
        "failing": [s.model_dump() for s in result.failing],
        "passing": [s.model_dump() for s in result.passing],
        "length": result.length,
        "complete": result.complete,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Password Game CLI")
    parser.add_argument("inputs", nargs="+", help="Successive input values, or 'demo' for built-in")
    parser.add_argument("--rule-set", help="Rule set name (default from config)")
    parser.add_argument("--order", choices=["errors_first", "ascending"], help="Display order of visible rules")
    parser.add_argument("--settle", action="store_true", help="Keep revealing while the newest rule passes")
    parser.add_argument("--config", type=Path, help="Path to YAML config")
    args = parser.parse_args()

    settings = get_game_settings(args.config)
    logging.basicConfig(level=get_log_level(), stream=sys.stderr)

    try:
        rule_set = get_rule_set(args.rule_set or settings.rule_set)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        sys.exit(2)

    session = RevealSession(
        rule_set,
        display_order=args.order or settings.display_order,
        settle=args.settle or settings.settle,
    )
    inputs = _DEMO_INPUTS if args.inputs == ["demo"] else args.inputs

    out = _play(session, inputs)
    print(json.dumps(out, indent=2))

    if not out["complete"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
