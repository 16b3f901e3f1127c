"""Conversion between canonical amount text and integer minor units ("atoms").

Every currency is treated as having exactly two minor-unit digits.
"""

from __future__ import annotations

import re

from suite_money.domain.monetary.errors import AmountMalformedError

MINOR_UNIT_DIGITS = 2
MINOR_UNITS_PER_MAJOR = 10**MINOR_UNIT_DIGITS

# ASCII digits only; `\d` would also accept other Unicode decimal digits
_AMOUNT_PATTERN = re.compile(rf"(-)?([0-9]+)(?:\.([0-9]{{{MINOR_UNIT_DIGITS}}}))?")


def parse_amount(text: str) -> int:
    """Parse amount text like "-123.45" into an exact count of minor units.

    Grammar: optional leading "-", one or more digits, optionally "." followed
    by exactly two digits. Nothing else is allowed, not even whitespace.
    "-0.00" yields 0.

    Args:
        text: Amount text.

    Returns:
        int: Signed number of minor units, e.g. -12345.

    Raises:
        AmountMalformedError: If $text does not match the grammar.

    Examples:
        >>> parse_amount("123.45")
        12345
        >>> parse_amount("-7")
        -700
    """
    if not isinstance(text, str):
        raise AmountMalformedError(f"$text must be a string, but provided value is: {text!r}")

    match = _AMOUNT_PATTERN.fullmatch(text)
    if match is None:
        raise AmountMalformedError(f"Cannot parse amount from $text = '{text}'")

    sign, major, minor = match.groups()
    atoms = int(major) * MINOR_UNITS_PER_MAJOR + int(minor or 0)
    return -atoms if sign else atoms


def format_amount(atoms: int) -> str:
    """Render minor units as canonical amount text, e.g. -1 -> "-0.01".

    Inverse of `parse_amount` for canonical input.
    """
    sign = "-" if atoms < 0 else ""
    major, minor = divmod(abs(atoms), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{major}.{minor:0{MINOR_UNIT_DIGITS}d}"
