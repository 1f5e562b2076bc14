"""Timeline sampling for payoff charts."""

from __future__ import annotations

from typing import Iterable

from ..constants import MONTHLY_SAMPLE_HORIZON, MONTHS_PER_YEAR, QUARTERLY_SAMPLE_INTERVAL
from ..models.debt import WorkingDebt
from ..models.timeline import TimelineRecord


def should_record(month: int) -> bool:
    """Monthly samples for the first year, quarterly after that."""

    if month <= MONTHLY_SAMPLE_HORIZON:
        return True
    return month % QUARTERLY_SAMPLE_INTERVAL == 0


def total_balance(debts: Iterable[WorkingDebt]) -> float:
    return sum((debt.remaining_balance for debt in debts if not debt.paid), 0.0)


def snapshot_record(month: int, debts: Iterable[WorkingDebt]) -> TimelineRecord:
    """Capture the balances of every debt at ``month``."""

    debt_list = list(debts)
    return TimelineRecord(
        month=month,
        total_balance=total_balance(debt_list),
        balances={debt.label: debt.remaining_balance for debt in debt_list},
    )


class TimelineBuilder:
    """Accumulates sampled timeline records for one simulation run."""

    def __init__(self) -> None:
        self._records: list[TimelineRecord] = []

    @property
    def records(self) -> list[TimelineRecord]:
        return list(self._records)

    def record(self, month: int, debts: Iterable[WorkingDebt]) -> TimelineRecord | None:
        """Append a sample when ``month`` falls on the sampling policy."""

        if not should_record(month):
            return None
        entry = snapshot_record(month, debts)
        self._records.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self._records)


def format_month_tick(month: int) -> str:
    """Axis label for a month: ``"0"``, ``"<n>y"`` on whole years, else blank."""

    if month == 0:
        return "0"
    if month % MONTHS_PER_YEAR == 0:
        return f"{month // MONTHS_PER_YEAR}y"
    return ""


def timeline_rows(records: Iterable[TimelineRecord]) -> list[dict]:
    return [record.as_row() for record in records]


__all__ = [
    "TimelineBuilder",
    "format_month_tick",
    "should_record",
    "snapshot_record",
    "timeline_rows",
    "total_balance",
]
