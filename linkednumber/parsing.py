from collections.abc import Iterator

import regex as re

from linkednumber.config import DIGITS, MAX_BASE, MIN_BASE
from linkednumber.exceptions import InvalidBaseError, InvalidDigitError

SYMBOL_PAT = re.compile(r"[0-9A-Za-z]")
INVALID_PAT = re.compile(r"[^0-9A-Za-z]")


def split_digits(text: str) -> Iterator[str]:
    """
    Split a number string into single-character digit symbols.

    The whole string is checked before anything is yielded, so a caller
    building from the iterator never sees a partial result.

    Args:
        text: Digits in reading order, most significant first

    Returns:
        Iterator of one-character symbols

    Raises:
        InvalidDigitError: If any character is outside 0-9, A-Z, a-z
    """
    bad = INVALID_PAT.search(text)
    if bad is not None:
        raise InvalidDigitError(f"invalid digit {bad.group()!r} at index {bad.start()} of {text!r}")

    for match in SYMBOL_PAT.finditer(text):
        yield match.group()


def symbol_value(symbol: str) -> int:
    """Return the magnitude of a single digit symbol (case-insensitive)."""
    if not isinstance(symbol, str) or SYMBOL_PAT.fullmatch(symbol) is None:
        raise InvalidDigitError(f"invalid digit {symbol!r}")
    return DIGITS.index(symbol.upper())


def symbol_for(value: int) -> str:
    """Return the upper-case symbol for a magnitude in [0, 36)."""
    if not 0 <= value < len(DIGITS):
        raise InvalidDigitError(f"no digit symbol for value {value}")
    return DIGITS[value]


def check_base(base: int) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(f"base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    return base
