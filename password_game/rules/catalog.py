"""
Compiled-in rule sets.

extended: the full 10-rule game.
minimal:  the 3-rule form check (length, number, uppercase).
"""
from password_game.rules import validators as v
from password_game.rules.registry import register_rule_set
from password_game.rules.rule_set import RuleSet
from password_game.schemas import Rule

EXTENDED = register_rule_set(
    RuleSet(
        "extended",
        [
            Rule(
                id=1,
                description="Your password must be at least 5 characters.",
                validator=v.min_length,
            ),
            Rule(
                id=2,
                description="Your password must include a number.",
                validator=v.has_digit,
            ),
            Rule(
                id=3,
                description="Your password must include an uppercase letter",
                validator=v.has_uppercase,
            ),
            Rule(
                id=4,
                description=f"Your password must include a special character ({v.SPECIAL_CHARACTERS})",
                validator=v.has_special_character,
            ),
            Rule(
                id=5,
                description="Your password cannot have 3 consecutive repeated characters",
                validator=v.no_repeated_run,
            ),
            Rule(
                id=6,
                description="Your password must contain a palindrome word (min 3 letters)",
                validator=v.has_palindrome_word,
            ),
            Rule(
                id=7,
                description="Your password must include a year between 1900 and 2024",
                validator=v.has_year,
            ),
            Rule(
                id=8,
                description="Your password must include lyrics that form a complete rhyming couplet",
                validator=v.has_rhyming_couplet,
            ),
            Rule(
                id=9,
                description="Your password must contain a mathematical equation that resolves to an integer",
                validator=v.has_valid_equation,
            ),
            Rule(
                id=10,
                description="Your password must reference a famous historical figure and their significant achievement",
                validator=v.has_historical_reference,
            ),
        ],
    )
)

MINIMAL = register_rule_set(
    RuleSet(
        "minimal",
        [
            Rule(
                id=1,
                description="Your password must be at least 5 characters.",
                validator=v.min_length,
            ),
            Rule(
                id=2,
                description="Your password must include a number.",
                validator=v.has_digit,
            ),
            Rule(
                id=3,
                description="Your password must include an uppercase letter.",
                validator=v.has_uppercase,
            ),
        ],
    )
)
