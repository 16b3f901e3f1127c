from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Dict

from bidict import bidict

from suite_money.domain.monetary.errors import CurrencyMalformedError, CurrencyUnknownError

logger = logging.getLogger(__name__)

_CODE_PATTERN = re.compile(r"[A-Z]{3}")


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    FUND = "FUND"
    COMMODITY = "COMMODITY"
    OTHER = "OTHER"


class Currency:
    """Represents an ISO 4217 currency with alphabetic code, numeric code and metadata.

    Attributes:
        code (str): Alphabetic currency code (e.g., "GBP").
        numeric_code (int): ISO 4217 numeric code (e.g., 826).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, FUND, COMMODITY, OTHER).
    """

    # Class-level registry: alphabetic code -> Currency
    _registry: Dict[str, "Currency"] = {}
    # Alphabetic code <-> numeric code
    _numeric_codes: bidict = bidict()

    def __init__(self, code: str, numeric_code: int, name: str, currency_type: CurrencyType = CurrencyType.FIAT):
        """Initialize a Currency instance.

        Args:
            code (str): Alphabetic currency code; normalized to upper case.
            numeric_code (int): ISO 4217 numeric code (1-999).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.

        Raises:
            CurrencyMalformedError: If $code is not three ASCII letters.
            ValueError: If other parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        normalized_code = self._normalize_shape(code)

        if not isinstance(numeric_code, int) or isinstance(numeric_code, bool) or not 0 < numeric_code < 1000:
            raise ValueError(f"$numeric_code must be an integer between 1 and 999, but provided value is: {numeric_code}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = normalized_code
        self._numeric_code = numeric_code
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Get the alphabetic currency code."""
        return self._code

    @property
    def numeric_code(self) -> int:
        """Get the ISO 4217 numeric code."""
        return self._numeric_code

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @staticmethod
    def _normalize_shape(code: str) -> str:
        if not isinstance(code, str):
            raise CurrencyMalformedError(f"$code must be a string, but provided value is: {code!r}")

        # ASCII check comes first: upper() may expand some characters (e.g. "ﬀ" -> "FF")
        normalized = code.strip()
        if not normalized.isascii() or not _CODE_PATTERN.fullmatch(normalized.upper()):
            raise CurrencyMalformedError(f"$code must be exactly 3 letters, but provided value is: '{code}'")

        return normalized.upper()

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False, or if its
                numeric code is already taken by another currency.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        owner = cls._numeric_codes.inverse.get(currency.numeric_code)
        if owner is not None and owner != currency.code:
            raise ValueError(f"Numeric code {currency.numeric_code:03d} of '{currency.code}' is already used by '{owner}'")

        cls._registry[currency.code] = currency
        cls._numeric_codes.forceput(currency.code, currency.numeric_code)
        logger.debug(f"Registered currency '{currency.code}' ({currency.numeric_code:03d}, {currency.currency_type.name})")

    @classmethod
    def normalize(cls, code: str) -> str:
        """Validate a currency code and return its normalized form.

        Surrounding whitespace is ignored and the code is upper-cased.

        Args:
            code (str): Candidate currency code, e.g. "gbp".

        Returns:
            str: Normalized registered code, e.g. "GBP".

        Raises:
            CurrencyMalformedError: If $code is not three ASCII letters.
            CurrencyUnknownError: If $code is well formed but not registered.
        """
        normalized = cls._normalize_shape(code)
        if normalized not in cls._registry:
            raise CurrencyUnknownError(f"Currency with code '{normalized}' not found in registry")

        return normalized

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by alphabetic code.

        Raises:
            CurrencyMalformedError: If $code is not three ASCII letters.
            CurrencyUnknownError: If $code is not registered.
        """
        return cls._registry[cls.normalize(code)]

    @classmethod
    def from_numeric(cls, numeric_code: int) -> "Currency":
        """Get currency from registry by ISO 4217 numeric code.

        Raises:
            CurrencyUnknownError: If no registered currency has $numeric_code.
        """
        code = cls._numeric_codes.inverse.get(numeric_code)
        if code is None:
            raise CurrencyUnknownError(f"Currency with numeric code '{numeric_code}' not found in registry")

        return cls._registry[code]

    @classmethod
    def registered_codes(cls) -> list[str]:
        """Return all registered alphabetic codes, sorted."""
        return sorted(cls._registry)

    @property
    def is_fiat(self) -> bool:
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_fund(self) -> bool:
        return self._currency_type == CurrencyType.FUND

    @property
    def is_commodity(self) -> bool:
        return self._currency_type == CurrencyType.COMMODITY

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.numeric_code}, '{self.name}', {self.currency_type})"
