from __future__ import annotations

import pytest

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.currency_registry import AUD, GBP, ISO_4217_CURRENCIES, XAU
from suite_money.domain.monetary.errors import CurrencyMalformedError, CurrencyUnknownError, MoneyError


@pytest.mark.parametrize("code, expected", [("GBP", "GBP"), ("gbp", "GBP"), ("Aud", "AUD"), (" EUR ", "EUR")])
def test_normalize_accepts_registered_codes(code, expected):
    """Verify that registered codes are upper-cased and stripped."""
    assert Currency.normalize(code) == expected


@pytest.mark.parametrize("code", ["boogaloo", "$", "GB", "", "G1P", "GB P", "ÄBC", "ﬀx", None, 826])
def test_normalize_rejects_malformed_codes(code):
    """Verify that codes which are not three ASCII letters are malformed."""
    with pytest.raises(CurrencyMalformedError):
        Currency.normalize(code)


@pytest.mark.parametrize("code", ["FOO", "ABC", "zzz"])
def test_normalize_rejects_unknown_codes(code):
    """Verify that well-formed but unregistered codes are unknown."""
    with pytest.raises(CurrencyUnknownError, match="not found in registry"):
        Currency.normalize(code)


def test_currency_errors_are_recoverable_value_errors():
    assert issubclass(CurrencyMalformedError, MoneyError)
    assert issubclass(CurrencyUnknownError, ValueError)


def test_from_str_returns_registered_instance():
    currency = Currency.from_str("gbp")

    assert currency is GBP
    assert currency.code == "GBP"
    assert currency.numeric_code == 826
    assert currency.name == "Pound Sterling"
    assert currency.is_fiat
    assert str(currency) == "GBP"


def test_from_numeric_looks_up_by_iso_number():
    """Verify reverse lookup through the numeric-code mapping."""
    assert Currency.from_numeric(36) is AUD
    assert Currency.from_numeric(959) is XAU
    assert XAU.is_commodity

    with pytest.raises(CurrencyUnknownError):
        Currency.from_numeric(1)


def test_registry_contains_whole_table():
    codes = Currency.registered_codes()

    assert len(codes) >= len(ISO_4217_CURRENCIES)
    assert {code for code, *_ in ISO_4217_CURRENCIES} <= set(codes)
    assert Currency.from_str("CLF").is_fund


def test_register_refuses_duplicate_without_overwrite():
    with pytest.raises(ValueError, match="already exists"):
        Currency.register(Currency("GBP", 826, "Pound Sterling"))


def test_register_refuses_numeric_code_of_other_currency():
    with pytest.raises(ValueError, match="already used by 'GBP'"):
        Currency.register(Currency("QQQ", 826, "Clashing Currency"))

    with pytest.raises(CurrencyUnknownError):
        Currency.normalize("QQQ")


def test_register_new_currency(monkeypatch):
    """Verify that a newly registered currency becomes known by code and number."""
    monkeypatch.setattr(Currency, "_registry", dict(Currency._registry))
    monkeypatch.setattr(Currency, "_numeric_codes", Currency._numeric_codes.copy())

    Currency.register(Currency("qqq", 998, "Test Currency", CurrencyType.OTHER))

    assert Currency.normalize("QQQ") == "QQQ"
    assert Currency.from_numeric(998).code == "QQQ"


@pytest.mark.parametrize(
    "kwargs, error",
    [
        (dict(code="GBP", numeric_code=0, name="Pound"), ValueError),
        (dict(code="GBP", numeric_code=True, name="Pound"), ValueError),
        (dict(code="GBP", numeric_code=826, name=" "), ValueError),
        (dict(code="GBP", numeric_code=826, name="Pound", currency_type="FIAT"), TypeError),
        (dict(code="GBPX", numeric_code=826, name="Pound"), CurrencyMalformedError),
    ],
)
def test_currency_constructor_validates_arguments(kwargs, error):
    with pytest.raises(error):
        Currency(**kwargs)


def test_currency_equality_and_hash_use_code():
    other = Currency("gbp", 826, "Sterling")

    assert other == GBP
    assert hash(other) == hash(GBP)
    assert GBP != AUD
    assert GBP != "GBP"
