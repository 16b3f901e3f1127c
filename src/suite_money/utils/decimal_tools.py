from __future__ import annotations

from decimal import Decimal


def atoms_to_decimal(atoms: int, digits: int) -> Decimal:
    """Convert an integer count of minor units into an exact Decimal.

    The value is built from its string form, so the decimal context precision
    never rounds it, however many digits $atoms has.

    Args:
        atoms: Signed integer count of minor units.
        digits: Number of minor-unit digits of the currency.

    Returns:
        Exact Decimal value, e.g. atoms_to_decimal(12345, 2) == Decimal("123.45").
    """

    return Decimal(f"{atoms}E-{digits}")
