"""Pytest configuration and shared fixtures for debtplan tests.

Provides reusable debt fixture sets, an isolated environment for config and
logging, and a cent-tolerance float helper.
"""

from __future__ import annotations

import logging

import pytest

from debtplan.models import Debt


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep config and logging away from the working directory."""

    monkeypatch.setenv("DEBTPLAN_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("DEBTPLAN_DEV_MODE", "false")
    monkeypatch.setenv("DEBTPLAN_LOG_FILE", "false")
    for name in (
        "DEBTPLAN_DEFAULT_STRATEGY",
        "DEBTPLAN_EXTRA_PAYMENT",
        "DEBTPLAN_OVERFLOW_POLICY",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    package_logger = logging.getLogger("debtplan")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


# =============================================================================
# Debt Fixtures
# =============================================================================


@pytest.fixture
def single_debt():
    """1200 at 12% APR with a 100 minimum: 12 interest in month one."""

    return [Debt(id="card", name="Card", balance=1200.0, interest_rate=12.0, minimum_payment=100.0)]


@pytest.fixture
def two_debts():
    """A high-rate large debt and a low-rate small one."""

    return [
        Debt(id="a", name="A", balance=1000.0, interest_rate=20.0, minimum_payment=50.0),
        Debt(id="b", name="B", balance=500.0, interest_rate=10.0, minimum_payment=25.0),
    ]


@pytest.fixture
def household_debts():
    """Three debts where snowball and avalanche pick different targets."""

    return [
        Debt(id=1, name="Visa", balance=5000.0, interest_rate=18.0, minimum_payment=100.0),
        Debt(id=2, name="Store Card", balance=1000.0, interest_rate=12.0, minimum_payment=50.0),
        Debt(id=3, name="Car Loan", balance=3000.0, interest_rate=15.0, minimum_payment=75.0),
    ]


FIXTURE_SETS = {
    "small_low_rate_vs_large_high_rate": (
        [
            {"id": 1, "name": "Small", "balance": 500.0, "interestRate": 10.0, "minimumPayment": 25.0},
            {"id": 2, "name": "Large", "balance": 5000.0, "interestRate": 20.0, "minimumPayment": 100.0},
        ],
        200.0,
    ),
    "household": (
        [
            {"id": 1, "name": "Visa", "balance": 5000.0, "interestRate": 18.0, "minimumPayment": 100.0},
            {"id": 2, "name": "Store Card", "balance": 1000.0, "interestRate": 12.0, "minimumPayment": 50.0},
            {"id": 3, "name": "Car Loan", "balance": 3000.0, "interestRate": 15.0, "minimumPayment": 75.0},
        ],
        200.0,
    ),
    "card_loan_medium": (
        [
            {"id": "c", "name": "High APR Card", "balance": 4000.0, "interestRate": 24.0, "minimumPayment": 120.0},
            {"id": "l", "name": "Low APR Loan", "balance": 8000.0, "interestRate": 6.0, "minimumPayment": 160.0},
            {"id": "m", "name": "Medium Loan", "balance": 2500.0, "interestRate": 15.0, "minimumPayment": 75.0},
        ],
        300.0,
    ),
}


@pytest.fixture(params=sorted(FIXTURE_SETS))
def fixture_set(request):
    """Yield (debts, extra_payment) for each reference debt set."""

    debts, extra = FIXTURE_SETS[request.param]
    return [dict(debt) for debt in debts], extra


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
