"""
Password predicates.

Each validator: (value: str) -> bool. Pure, no side effects.
Validators that do their own arithmetic guard it and return False instead of raising.
"""
import logging
import operator
import re
from fractions import Fraction

logger = logging.getLogger(__name__)

SPECIAL_CHARACTERS = "!@#$%^&*()"

_DIGIT = re.compile(r"[0-9]")
_UPPERCASE = re.compile(r"[A-Z]")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")
_REPEATED_RUN = re.compile(r"(.)\1{2}", re.DOTALL)
_WHITESPACE = re.compile(r"\s+")
_NON_LETTER = re.compile(r"[^a-z]")
_YEAR = re.compile(r"\b(19[0-9]{2}|20[0-2][0-9])\b", re.ASCII)
_EQUATION = re.compile(r"([0-9]+)\s*([+\-*/])\s*([0-9]+)\s*=\s*([0-9]+)")

RHYMING_COUPLETS = (
    re.compile(r"\b(love|dove)\b.*\b(above|move)\b", re.IGNORECASE | re.DOTALL | re.ASCII),
    re.compile(r"\b(heart|smart)\b.*\b(art|part)\b", re.IGNORECASE | re.DOTALL | re.ASCII),
    re.compile(r"\b(light|bright)\b.*\b(height|might)\b", re.IGNORECASE | re.DOTALL | re.ASCII),
)

HISTORICAL_REFERENCES = (
    re.compile(r"einstein.*relativity", re.IGNORECASE | re.DOTALL),
    re.compile(r"newton.*gravity", re.IGNORECASE | re.DOTALL),
    re.compile(r"marie\s*curie.*radioactivity", re.IGNORECASE | re.DOTALL),
    re.compile(r"tesla.*electricity", re.IGNORECASE | re.DOTALL),
)

# Fraction keeps division exact; Fraction(a, 0) raises ZeroDivisionError.
_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": Fraction,
}


def min_length(value: str, length: int = 5) -> bool:
    return len(value) >= length


def has_digit(value: str) -> bool:
    return _DIGIT.search(value) is not None


def has_uppercase(value: str) -> bool:
    return _UPPERCASE.search(value) is not None


def has_special_character(value: str) -> bool:
    return _SPECIAL.search(value) is not None


def no_repeated_run(value: str) -> bool:
    """False if any character appears 3 or more times in a row."""
    return _REPEATED_RUN.search(value) is None


def has_palindrome_word(value: str) -> bool:
    """
    True if some whitespace-separated word, lowercased and reduced to a-z,
    is at least 3 letters long and reads the same backwards.
    """
    for word in _WHITESPACE.split(value):
        cleaned = _NON_LETTER.sub("", word.lower())
        if len(cleaned) >= 3 and cleaned == cleaned[::-1]:
            return True
    return False


def has_year(value: str) -> bool:
    """Whole-word year from 1900-1999 or 2000-2029."""
    return _YEAR.search(value) is not None


def has_rhyming_couplet(value: str) -> bool:
    return any(couplet.search(value) for couplet in RHYMING_COUPLETS)


def has_valid_equation(value: str) -> bool:
    """
    Check the first `a <op> b = c` in the value.

    Integer arithmetic with exact comparison: 7/2=3 fails, 6/3=2 passes,
    anything divided by zero fails.
    """
    match = _EQUATION.search(value)
    if not match:
        return False
    left, op, right, result = match.groups()
    try:
        return _OPERATORS[op](int(left), int(right)) == int(result)
    except (KeyError, ValueError, ArithmeticError) as e:
        logger.debug("Equation %r not evaluable: %s", match.group(0), e)
        return False


def has_historical_reference(value: str) -> bool:
    return any(ref.search(value) for ref in HISTORICAL_REFERENCES)
