from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from suite_money.domain.monetary.allocation import allocate_atoms
from suite_money.domain.monetary.amount import MINOR_UNIT_DIGITS, format_amount, parse_amount
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import AmountMalformedError, CurrencyMismatchError
from suite_money.utils.decimal_tools import atoms_to_decimal


class Money:
    """Immutable monetary amount in a single currency.

    The amount is held as a signed integer count of minor units ("atoms"), so
    addition, subtraction, integer multiplication and allocation are exact.
    Every currency is treated as having two minor-unit digits.

    Binary operations require both operands to share the same currency and
    raise `CurrencyMismatchError` otherwise. Equality is the exception: Money
    values in different currencies are simply not equal.
    """

    __slots__ = ("_currency", "_atoms")

    def __init__(self, currency: str | Currency, amount: str):
        """Initialize Money from a currency code and canonical amount text.

        Args:
            currency: Currency code like "GBP" (case-insensitive) or a Currency.
            amount: Amount text like "123.45", "-0.01" or "7".

        Raises:
            CurrencyMalformedError: If $currency is not three letters.
            CurrencyUnknownError: If $currency is not a registered code.
            AmountMalformedError: If $amount is not valid amount text.
        """
        if isinstance(currency, Currency):
            currency = currency.code

        self._currency = Currency.from_str(currency)
        self._atoms = parse_amount(amount)

    @classmethod
    def _from_atoms(cls, currency: Currency, atoms: int) -> Money:
        result = cls.__new__(cls)
        result._currency = currency
        result._atoms = atoms
        return result

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): String representation, as produced by `str(money)`.

        Returns:
            Money: Money object.

        Raises:
            AmountMalformedError: If the string does not have two parts or the amount is invalid.
            CurrencyMalformedError: If the currency part is malformed.
            CurrencyUnknownError: If the currency part is not registered.
        """
        parts = value_str.split() if isinstance(value_str, str) else []
        if len(parts) != 2:
            raise AmountMalformedError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts
        return cls(currency_part, amount_part)

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def currency_code(self) -> str:
        """Get the normalized currency code, e.g. "GBP"."""
        return self._currency.code

    @property
    def atoms(self) -> int:
        """Get the amount as a signed integer count of minor units."""
        return self._atoms

    @property
    def amount(self) -> str:
        """Get the canonical amount text, e.g. "-123.45"."""
        return format_amount(self._atoms)

    @property
    def value(self) -> Decimal:
        """Get the exact decimal value."""
        return atoms_to_decimal(self._atoms, MINOR_UNIT_DIGITS)

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self.currency_code != other.currency_code:
            raise CurrencyMismatchError(operation, self.currency_code, other.currency_code)

    # Arithmetic operations
    def add(self, other: Money) -> Money:
        """Return the sum of two Money objects of the same currency."""
        self._check_same_currency(other, "add")
        return Money._from_atoms(self._currency, self._atoms + other._atoms)

    def sub(self, other: Money) -> Money:
        """Return $self minus $other; both must be of the same currency."""
        self._check_same_currency(other, "subtract")
        return Money._from_atoms(self._currency, self._atoms - other._atoms)

    def mul(self, factor: int) -> Money:
        """Return this amount multiplied by an integer $factor (zero and negative allowed).

        Raises:
            TypeError: If $factor is not an int. Floats and Decimals are refused
                because they would require rounding.
        """
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"$factor must be an int, but provided value is: {factor!r}")
        return Money._from_atoms(self._currency, self._atoms * factor)

    def cmp(self, other: Money) -> int:
        """Compare with another Money of the same currency.

        Returns:
            -1 if $self < $other, 0 if equal, +1 if $self > $other.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        self._check_same_currency(other, "compare")
        return (self._atoms > other._atoms) - (self._atoms < other._atoms)

    def share(self, weights: Sequence[int]) -> list[Money]:
        """Allocate this amount between parties according to integer $weights.

        No minor unit is created or lost: the returned parts always add up to
        this amount exactly. Units left over after proportional truncation go
        to parties with non-zero weight, first to last. When all weights are
        zero, the amount is split equally.

        Args:
            weights: Non-negative integer weights, one per party.

        Returns:
            list[Money]: One Money per weight, in the same order and currency.

        Raises:
            ValueError: If $weights is empty or contains a negative weight.
            TypeError: If a weight is not an int.
            AllocationInvariantError: If the allocator failed to conserve the amount.
        """
        return [Money._from_atoms(self._currency, atoms) for atoms in allocate_atoms(self._atoms, weights)]

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        """Multiply Money by an int (returns Money)."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        """Right multiplication: int * Money."""
        return self.__mul__(other)

    def __neg__(self):
        return Money._from_atoms(self._currency, -self._atoms)

    def __pos__(self):
        return self

    def __abs__(self):
        return Money._from_atoms(self._currency, abs(self._atoms))

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self.currency_code == other.currency_code and self._atoms == other._atoms

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cmp(other) >= 0

    def __hash__(self) -> int:
        """Hash based on currency code and atoms."""
        return hash((self.currency_code, self._atoms))

    # String representations
    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self.amount} {self.currency_code}"

    def __repr__(self) -> str:
        """Return string like "Money('USD', '1000.50')"."""
        return f"{self.__class__.__name__}('{self.currency_code}', '{self.amount}')"
