from __future__ import annotations

import logging
import random

import pytest

from suite_money.domain.monetary import allocation
from suite_money.domain.monetary.allocation import allocate_atoms
from suite_money.domain.monetary.amount import format_amount
from suite_money.domain.monetary.errors import AllocationInvariantError, MoneyError
from tests.helpers.test_assistant import TEST_ASSISTANT as TA

gbp = TA.money.gbp
amounts = TA.money.amounts
total_atoms = TA.money.total_atoms


@pytest.mark.parametrize(
    "amount, weights, expected",
    [
        ("1.05", [3, 7], ["0.32", "0.73"]),
        ("0.05", [1, 1], ["0.03", "0.02"]),
        ("-1.05", [3, 7], ["-0.32", "-0.73"]),
        ("-0.05", [1, 1], ["-0.03", "-0.02"]),
        ("300.00", [0, 0, 0], ["100.00", "100.00", "100.00"]),
        ("1.00", [0, 1, 0], ["0.00", "1.00", "0.00"]),
        ("1.00", [1, 1, 1], ["0.34", "0.33", "0.33"]),
        ("0.02", [1, 1, 1], ["0.01", "0.01", "0.00"]),
        ("0.02", [0, 1, 0, 1, 1], ["0.00", "0.01", "0.00", "0.01", "0.00"]),
        ("100.00", [1], ["100.00"]),
        ("-3.99", [0], ["-3.99"]),
        ("0.00", [5, 3], ["0.00", "0.00"]),
        ("10.00", [1, 2, 3, 4], ["1.00", "2.00", "3.00", "4.00"]),
    ],
)
def test_share(amount, weights, expected):
    shares = gbp(amount).share(weights)

    assert amounts(shares) == expected
    assert all(share.currency_code == "GBP" for share in shares)


def test_share_does_not_modify_weights():
    """Verify that the equal-split fallback does not rewrite the caller's weights."""
    weights = [0, 0, 0]

    gbp("3.00").share(weights)

    assert weights == [0, 0, 0]


def test_share_accepts_any_integer_sequence():
    assert amounts(gbp("1.00").share((1, 3))) == ["0.25", "0.75"]
    assert amounts(gbp("1.00").share(range(1, 3))) == ["0.34", "0.66"]


def test_share_is_exact_for_large_amounts_and_weights():
    """Verify integer arithmetic where a float ratio would lose precision."""
    atoms = 10**30 + 7
    weights = [10**20 + 1, 10**20 + 3, 1]

    parts = allocate_atoms(atoms, weights)

    total = sum(weights)
    assert sum(parts) == atoms
    assert parts[2] == atoms * weights[2] // total
    for part, weight in zip(parts, weights):
        assert abs(part - atoms * weight // total) <= 1


def test_share_conserves_amount_for_random_inputs():
    rng = random.Random(42)

    for _ in range(500):
        atoms = rng.randint(-10**9, 10**9)
        weights = [rng.choice([0, 0, rng.randint(0, 1000)]) for _ in range(rng.randint(1, 12))]

        shares = gbp(format_amount(atoms)).share(weights)

        assert len(shares) == len(weights)
        assert total_atoms(shares) == atoms
        if any(weights):
            for share, weight in zip(shares, weights):
                if weight == 0:
                    assert share.atoms == 0


def test_share_negative_mirrors_positive():
    rng = random.Random(7)

    for _ in range(100):
        atoms = rng.randint(1, 10**6)
        weights = [rng.randint(0, 50) for _ in range(rng.randint(1, 8))]

        assert allocate_atoms(-atoms, weights) == [-part for part in allocate_atoms(atoms, weights)]


@pytest.mark.parametrize("weights", [[], ()])
def test_share_rejects_empty_weights(weights):
    with pytest.raises(ValueError, match="cannot be empty"):
        gbp("1.00").share(weights)


def test_share_rejects_negative_weight():
    with pytest.raises(ValueError, match=r"weights\[1\] must be >= 0"):
        gbp("1.00").share([1, -1, 2])


@pytest.mark.parametrize("weight", [1.5, "1", None, True])
def test_share_rejects_non_integer_weight(weight):
    with pytest.raises(TypeError, match="must be an int"):
        gbp("1.00").share([1, weight])


def test_invariant_error_is_not_an_ordinary_money_error():
    assert issubclass(AllocationInvariantError, AssertionError)
    assert not issubclass(AllocationInvariantError, MoneyError)


def test_conservation_failure_raises_invariant_error(monkeypatch, caplog):
    """Verify that a broken remainder step is reported loudly instead of returned."""
    monkeypatch.setattr(allocation, "_distribute_remainder", lambda atoms, weights, parts: list(parts))

    with caplog.at_level(logging.ERROR, logger=allocation.__name__):
        with pytest.raises(AllocationInvariantError, match="started with 105 atoms but allocated 104"):
            gbp("1.05").share([3, 7])

    assert "Bad allocation" in caplog.text


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger=allocation.__name__):
        allocate_atoms(300, [0, 0, 0])

    assert "splitting 300 atoms equally" in caplog.text
