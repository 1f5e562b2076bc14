"""Payoff summaries and snowball/avalanche comparison."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from ..models.timeline import SimulationResult
from .accrual import OverflowPolicy
from .simulation import DebtInput, simulate_payoff
from .strategies import PayoffStrategy


@dataclass(slots=True)
class PayoffSummary:
    """Headline numbers for one simulated strategy."""

    strategy: PayoffStrategy
    debt_free: bool
    months_to_debt_free: int | None
    months_simulated: int
    starting_balance: float
    remaining_balance: float
    total_interest: float
    total_paid: float
    payoff_months: dict[str, int | None] = field(default_factory=dict)

    @property
    def first_payoff_month(self) -> int | None:
        months = [m for m in self.payoff_months.values() if m is not None]
        return min(months) if months else None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["strategy"] = self.strategy.value
        data["first_payoff_month"] = self.first_payoff_month
        return data


def summarize(result: SimulationResult) -> PayoffSummary:
    """Return (debt free?, months, interest, paid) for a finished run."""

    return PayoffSummary(
        strategy=result.strategy,
        debt_free=result.debt_free,
        months_to_debt_free=result.final_month if result.debt_free else None,
        months_simulated=result.final_month,
        starting_balance=result.starting_balance,
        remaining_balance=result.final_balance,
        total_interest=result.total_interest,
        total_paid=result.total_paid,
        payoff_months={debt.label: debt.paid_off_month for debt in result.debts},
    )


@dataclass(slots=True)
class StrategyComparison:
    """Avalanche and snowball side by side for the same inputs."""

    avalanche: PayoffSummary
    snowball: PayoffSummary
    recommended: PayoffStrategy

    @property
    def interest_saved(self) -> float:
        """Interest avalanche saves over snowball (negative if it costs more)."""

        return self.snowball.total_interest - self.avalanche.total_interest

    @property
    def months_saved(self) -> int:
        """Months avalanche finishes ahead of snowball; horizon used when unpaid."""

        return self.snowball.months_simulated - self.avalanche.months_simulated

    def to_dict(self) -> dict[str, Any]:
        return {
            "avalanche": self.avalanche.to_dict(),
            "snowball": self.snowball.to_dict(),
            "recommended": self.recommended.value,
            "interest_saved": self.interest_saved,
            "months_saved": self.months_saved,
        }


def _ranking_key(summary: PayoffSummary) -> tuple[float, int, int]:
    return (
        round(summary.total_interest, 2),
        0 if summary.debt_free else 1,
        summary.months_simulated,
    )


def compare_strategies(
    debts: DebtInput,
    extra_payment: float = 0.0,
    *,
    overflow: OverflowPolicy | str = OverflowPolicy.CASCADE,
) -> StrategyComparison:
    """Simulate both strategies and recommend the cheaper one.

    Lowest total interest wins; ties go to whichever is debt free sooner, and
    a full tie goes to avalanche.
    """

    debt_list = list(debts)
    avalanche = summarize(
        simulate_payoff(debt_list, PayoffStrategy.AVALANCHE, extra_payment, overflow=overflow)
    )
    snowball = summarize(
        simulate_payoff(debt_list, PayoffStrategy.SNOWBALL, extra_payment, overflow=overflow)
    )
    recommended = (
        PayoffStrategy.SNOWBALL
        if _ranking_key(snowball) < _ranking_key(avalanche)
        else PayoffStrategy.AVALANCHE
    )
    return StrategyComparison(avalanche=avalanche, snowball=snowball, recommended=recommended)


__all__ = ["PayoffSummary", "StrategyComparison", "compare_strategies", "summarize"]
