"""Shared constants for the payoff simulation engine."""

from __future__ import annotations

# Hard ceiling on simulated months (ten years).
MAX_SIMULATION_MONTHS = 120

# Every month up to and including this one is sampled; later months are sampled
# only on the quarterly interval below.
MONTHLY_SAMPLE_HORIZON = 12
QUARTERLY_SAMPLE_INTERVAL = 3

# Balances under half a cent are treated as paid off.
BALANCE_EPSILON = 0.005

MONTHS_PER_YEAR = 12

# Accepted input keys for loosely structured debt payloads, in lookup order.
INTEREST_RATE_KEYS: tuple[str, ...] = ("interestRate", "interest_rate", "apr")
MINIMUM_PAYMENT_KEYS: tuple[str, ...] = ("minimumPayment", "minimum_payment", "min_payment")

# Keys every chart row carries; debt series labels must not reuse them.
RESERVED_ROW_KEYS: tuple[str, ...] = ("month", "totalBalance")
