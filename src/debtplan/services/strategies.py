"""Repayment priority ordering (snowball and avalanche)."""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Iterable

from ..models.debt import WorkingDebt


class PayoffStrategy(str, Enum):
    """Which unpaid debt receives the extra payment pool first."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"

    @classmethod
    def parse(cls, value: "PayoffStrategy | str") -> "PayoffStrategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid debt payoff strategy: {value!r}.") from None


def order_debts(debts: Iterable[WorkingDebt], strategy: PayoffStrategy | str) -> list[WorkingDebt]:
    """Return unpaid debts in priority order; index 0 gets the extra payment.

    Python's sort is stable and the key carries the input position, so ties
    keep the caller's original order.
    """

    strategy = PayoffStrategy.parse(strategy)
    active = [debt for debt in debts if not debt.paid]
    if strategy is PayoffStrategy.AVALANCHE:
        # Highest APR first.
        return sorted(active, key=lambda d: (-d.interest_rate, d.position))
    # Smallest remaining balance first.
    return sorted(active, key=lambda d: (d.remaining_balance, d.position))


def priority_order(debts: Iterable[WorkingDebt], strategy: PayoffStrategy | str) -> list[Hashable]:
    """Return the ids of unpaid debts in priority order."""

    return [debt.id for debt in order_debts(debts, strategy)]


__all__ = ["PayoffStrategy", "order_debts", "priority_order"]
