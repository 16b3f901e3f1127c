from __future__ import annotations


class MoneyError(ValueError):
    """Base class for recoverable errors raised by the monetary domain."""

    pass


class CurrencyMalformedError(MoneyError):
    """Raised when a currency code is not three ASCII letters."""

    pass


class CurrencyUnknownError(MoneyError):
    """Raised when a well-formed currency code is not in the registry."""

    pass


class AmountMalformedError(MoneyError):
    """Raised when amount text does not match the `[-]digits[.dd]` grammar."""

    pass


class CurrencyMismatchError(MoneyError):
    """Raised when a binary operation mixes two different currencies.

    Attributes:
        operation (str): Name of the attempted operation (e.g. "add").
        left (str): Currency code of the left operand.
        right (str): Currency code of the right operand.
    """

    def __init__(self, operation: str, left: str, right: str):
        super().__init__(f"Cannot {operation} different currencies: {left} and {right}")
        self.operation = operation
        self.left = left
        self.right = right


class AllocationInvariantError(AssertionError):
    """Raised when an allocation does not conserve the allocated amount.

    This never signals bad input. It means the allocator itself is broken and
    has created or destroyed minor units, so it deliberately does not derive from
    `MoneyError` and must not be handled as an ordinary validation failure.
    """

    pass
