__version__ = "0.0.1"

# Populates the currency registry
import suite_money.domain.monetary.currency_registry  # noqa: F401
from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.errors import (
    AllocationInvariantError,
    AmountMalformedError,
    CurrencyMalformedError,
    CurrencyMismatchError,
    CurrencyUnknownError,
    MoneyError,
)
from suite_money.domain.monetary.money import Money

__all__ = [
    "AllocationInvariantError",
    "AmountMalformedError",
    "Currency",
    "CurrencyMalformedError",
    "CurrencyMismatchError",
    "CurrencyType",
    "CurrencyUnknownError",
    "Money",
    "MoneyError",
]
