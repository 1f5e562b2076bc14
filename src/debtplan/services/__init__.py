"""Service module exports."""

from . import accrual, comparison, simulation, strategies, timeline

__all__ = [
    "accrual",
    "comparison",
    "simulation",
    "strategies",
    "timeline",
]
