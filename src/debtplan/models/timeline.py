"""Output records produced by a payoff simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Hashable, Mapping

from .debt import WorkingDebt

if TYPE_CHECKING:
    from ..services.accrual import OverflowPolicy
    from ..services.strategies import PayoffStrategy


@dataclass(frozen=True, slots=True)
class TimelineRecord:
    """One sampled point of the payoff timeline."""

    month: int
    total_balance: float
    balances: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "balances", MappingProxyType(dict(self.balances)))

    def as_row(self) -> dict[str, Any]:
        """Return the flat ``{month, totalBalance, <debt>: balance}`` chart row."""

        row: dict[str, Any] = {"month": self.month, "totalBalance": self.total_balance}
        row.update(self.balances)
        return row


@dataclass(frozen=True, slots=True)
class DebtMonth:
    """Interest and payment applied to one debt in one month."""

    debt_id: Hashable
    label: str
    interest: float
    payment: float
    remaining_balance: float
    paid_off: bool = False

    @property
    def principal(self) -> float:
        """Portion of the payment that reduced principal."""

        return self.payment - self.interest


@dataclass(slots=True)
class MonthResult:
    """Outcome of a single accrual step."""

    month: int
    entries: list[DebtMonth] = field(default_factory=list)
    overflow: float = 0.0
    unused_pool: float = 0.0
    retired: list[Hashable] = field(default_factory=list)

    @property
    def interest(self) -> float:
        return sum((entry.interest for entry in self.entries), 0.0)

    @property
    def payments(self) -> float:
        return sum((entry.payment for entry in self.entries), 0.0)

    @property
    def principal(self) -> float:
        return sum((entry.principal for entry in self.entries), 0.0)

    def entry_for(self, debt_id: Hashable) -> DebtMonth | None:
        for entry in self.entries:
            if entry.debt_id == debt_id:
                return entry
        return None


@dataclass(slots=True)
class SimulationResult:
    """Timeline plus run metadata returned by the simulation driver."""

    strategy: "PayoffStrategy"
    extra_payment: float
    overflow_policy: "OverflowPolicy"
    timeline: list[TimelineRecord]
    debts: list[WorkingDebt]
    final_month: int
    final_balance: float
    history: list[MonthResult] = field(default_factory=list)

    @property
    def debt_free(self) -> bool:
        return self.final_balance <= 0

    @property
    def starting_balance(self) -> float:
        return sum((debt.starting_balance for debt in self.debts), 0.0)

    @property
    def total_interest(self) -> float:
        return sum((debt.interest_accrued for debt in self.debts), 0.0)

    @property
    def total_paid(self) -> float:
        return sum((debt.total_paid for debt in self.debts), 0.0)

    def rows(self) -> list[dict[str, Any]]:
        return [record.as_row() for record in self.timeline]


__all__ = ["DebtMonth", "MonthResult", "SimulationResult", "TimelineRecord"]
