"""Value objects exchanged with the payoff engine."""

from .debt import Debt, WorkingDebt, clamp_amount, coerce_debts, snapshot_debts
from .timeline import DebtMonth, MonthResult, SimulationResult, TimelineRecord

__all__ = [
    "Debt",
    "WorkingDebt",
    "clamp_amount",
    "coerce_debts",
    "snapshot_debts",
    "DebtMonth",
    "MonthResult",
    "SimulationResult",
    "TimelineRecord",
]
