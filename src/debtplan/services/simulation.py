"""Month-by-month debt payoff simulation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

from ..constants import MAX_SIMULATION_MONTHS
from ..models.debt import Debt, WorkingDebt, clamp_amount, snapshot_debts
from ..models.timeline import MonthResult, SimulationResult, TimelineRecord
from .accrual import OverflowPolicy, apply_month
from .strategies import PayoffStrategy, order_debts
from .timeline import TimelineBuilder, total_balance

logger = logging.getLogger(__name__)

DebtInput = Iterable[Debt | Mapping[str, Any]]


class SimulationPhase(str, Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(slots=True)
class SimulationState:
    """Mutable state of one run; never shared between runs."""

    debts: list[WorkingDebt]
    month: int = 0
    phase: SimulationPhase = SimulationPhase.RUNNING
    history: list[MonthResult] = field(default_factory=list)

    @property
    def total_balance(self) -> float:
        return total_balance(self.debts)


def _horizon(max_months: float | None) -> int:
    if max_months is None:
        return MAX_SIMULATION_MONTHS
    try:
        months = float(max_months)
    except (TypeError, ValueError):
        return MAX_SIMULATION_MONTHS
    if math.isnan(months):
        return MAX_SIMULATION_MONTHS
    # Infinite values clamp to the ceiling, negative ones to a single month.
    return int(min(max(months, 1), MAX_SIMULATION_MONTHS))


def _warn_negative_amortization(debts: Iterable[WorkingDebt]) -> None:
    for debt in debts:
        if debt.paid or debt.remaining_balance <= 0:
            continue
        if debt.minimum_payment < debt.remaining_balance * debt.monthly_rate:
            logger.warning(
                "Minimum payment does not cover monthly interest for %s",
                debt.label,
                extra={"minimum_payment": debt.minimum_payment, "apr": debt.interest_rate},
            )


def _is_terminal(state: SimulationState, horizon: int) -> bool:
    return state.total_balance <= 0 or state.month >= horizon


def simulate_payoff(
    debts: DebtInput,
    strategy: PayoffStrategy | str = PayoffStrategy.AVALANCHE,
    extra_payment: float = 0.0,
    *,
    overflow: OverflowPolicy | str = OverflowPolicy.CASCADE,
    max_months: float | None = None,
) -> SimulationResult:
    """Project balances month by month until debt free or the horizon.

    The caller's debts are copied into a private snapshot; nothing passed in is
    mutated. Month 0 is always recorded, later months follow the timeline
    sampling policy while interest still accrues every month.
    """

    strategy = PayoffStrategy.parse(strategy)
    overflow = OverflowPolicy.parse(overflow)
    pool = clamp_amount(extra_payment, field="extra_payment")
    horizon = _horizon(max_months)

    state = SimulationState(debts=snapshot_debts(debts))
    builder = TimelineBuilder()
    builder.record(state.month, state.debts)
    _warn_negative_amortization(state.debts)

    while state.phase is SimulationPhase.RUNNING:
        if _is_terminal(state, horizon):
            state.phase = SimulationPhase.TERMINATED
            break
        state.month += 1
        ordering = order_debts(state.debts, strategy)
        outcome = apply_month(state.debts, ordering, pool, overflow=overflow, month=state.month)
        state.history.append(outcome)
        builder.record(state.month, state.debts)
        logger.debug(
            "Simulated month %s",
            state.month,
            extra={"total_balance": state.total_balance, "overflow": outcome.overflow},
        )

    result = SimulationResult(
        strategy=strategy,
        extra_payment=pool,
        overflow_policy=overflow,
        timeline=builder.records,
        debts=state.debts,
        final_month=state.month,
        final_balance=state.total_balance,
        history=state.history,
    )
    logger.info(
        "Payoff simulation finished",
        extra={
            "strategy": strategy.value,
            "debts": len(state.debts),
            "months": state.month,
            "debt_free": result.debt_free,
            "samples": len(result.timeline),
        },
    )
    return result


def generate_payoff_timeline(
    debts: DebtInput,
    strategy: PayoffStrategy | str = PayoffStrategy.AVALANCHE,
    extra_payment: float = 0.0,
    *,
    overflow: OverflowPolicy | str = OverflowPolicy.CASCADE,
) -> list[TimelineRecord]:
    """Return only the sampled timeline for charting."""

    return simulate_payoff(debts, strategy, extra_payment, overflow=overflow).timeline


__all__ = [
    "SimulationPhase",
    "SimulationState",
    "generate_payoff_timeline",
    "simulate_payoff",
]
