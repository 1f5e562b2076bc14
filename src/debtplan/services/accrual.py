"""Monthly interest accrual and payment application."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from ..constants import BALANCE_EPSILON
from ..models.debt import WorkingDebt
from ..models.timeline import DebtMonth, MonthResult

logger = logging.getLogger(__name__)


class OverflowPolicy(str, Enum):
    """What happens to pool money the priority debt no longer needs.

    ``CASCADE`` spends the overflow in the same month on the next debts in
    priority order. ``DISCARD`` reports it but leaves it unspent; next month the
    pool is the configured amount again.
    """

    CASCADE = "cascade"
    DISCARD = "discard"

    @classmethod
    def parse(cls, value: "OverflowPolicy | str") -> "OverflowPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid overflow policy: {value!r}.") from None


def _settle(balance: float) -> float:
    """Clamp a balance at zero and snap sub-cent residue to zero."""

    if balance < BALANCE_EPSILON:
        return 0.0
    return balance


def apply_month(
    debts: Sequence[WorkingDebt],
    ordering: Sequence[WorkingDebt],
    extra_payment: float,
    *,
    overflow: OverflowPolicy | str = OverflowPolicy.CASCADE,
    month: int = 0,
) -> MonthResult:
    """Accrue one month of interest and apply payments in place.

    Interest and minimum payments are computed for every unpaid debt in input
    order. The extra payment pool then goes to ``ordering[0]``; whatever that
    debt does not need is the month's overflow, handled per ``overflow``.
    Finally balances are settled and retired debts are marked paid.
    """

    overflow = OverflowPolicy.parse(overflow)
    result = MonthResult(month=month)

    active = [debt for debt in debts if not debt.paid]
    owed: dict[int, float] = {}
    interest: dict[int, float] = {}
    payment: dict[int, float] = {}
    for debt in active:
        monthly_interest = debt.remaining_balance * debt.monthly_rate
        interest[debt.position] = monthly_interest
        owed[debt.position] = debt.remaining_balance + monthly_interest
        payment[debt.position] = debt.minimum_payment

    pool = max(float(extra_payment), 0.0)
    recipients = [debt for debt in ordering if debt.position in owed]
    for rank, debt in enumerate(recipients):
        if pool <= 0:
            break
        if rank > 0 and overflow is OverflowPolicy.DISCARD:
            break
        payment[debt.position] += pool
        excess = payment[debt.position] - owed[debt.position]
        pool = max(excess, 0.0)
        if rank == 0:
            result.overflow = pool
        if pool > 0:
            # Retired this month; only what was owed is actually paid.
            payment[debt.position] = owed[debt.position]
    result.unused_pool = pool

    for debt in active:
        due = owed[debt.position]
        applied = min(payment[debt.position], due)
        new_balance = _settle(max(0.0, due - applied))
        debt.interest_accrued += interest[debt.position]
        debt.total_paid += applied
        debt.remaining_balance = new_balance
        retired = new_balance == 0.0
        if retired:
            debt.paid = True
            debt.paid_off_month = month
            result.retired.append(debt.id)
        result.entries.append(
            DebtMonth(
                debt_id=debt.id,
                label=debt.label,
                interest=interest[debt.position],
                payment=applied,
                remaining_balance=new_balance,
                paid_off=retired,
            )
        )

    if result.retired:
        logger.debug(
            "Debts retired in month %s", month, extra={"retired": [str(i) for i in result.retired]}
        )
    return result


__all__ = ["OverflowPolicy", "apply_month"]
