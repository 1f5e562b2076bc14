"""Debt repayment simulation engine (snowball and avalanche)."""

from __future__ import annotations

from .models import Debt, SimulationResult, TimelineRecord
from .services.accrual import OverflowPolicy
from .services.comparison import compare_strategies, summarize
from .services.simulation import generate_payoff_timeline, simulate_payoff
from .services.strategies import PayoffStrategy

__all__ = [
    "Debt",
    "OverflowPolicy",
    "PayoffStrategy",
    "SimulationResult",
    "TimelineRecord",
    "compare_strategies",
    "generate_payoff_timeline",
    "simulate_payoff",
    "summarize",
]
