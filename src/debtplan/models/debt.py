"""Debt value objects and the per-run working snapshot."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping

from ..constants import INTEREST_RATE_KEYS, MINIMUM_PAYMENT_KEYS, RESERVED_ROW_KEYS

logger = logging.getLogger(__name__)


def clamp_amount(value: Any, *, field: str = "amount", debt: str | None = None) -> float:
    """Coerce ``value`` to a finite, non-negative float.

    Negative, non-finite and unparseable values become ``0.0``; a warning is
    logged so bad input stays visible without failing the projection.
    """

    if value is None or value == "":
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(
            "Unparseable %s clamped to 0", field, extra={"debt": debt, "value": repr(value)}
        )
        return 0.0
    if not math.isfinite(number) or number < 0:
        logger.warning(
            "Invalid %s clamped to 0", field, extra={"debt": debt, "value": repr(value)}
        )
        return 0.0
    return number


def _first_present(data: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


@dataclass(frozen=True, slots=True)
class Debt:
    """A single liability supplied by the caller.

    ``interest_rate`` is an annual percentage (``18.0`` means 18% APR) and
    ``minimum_payment`` is a fixed monthly amount.
    """

    id: Hashable
    name: str
    balance: float
    interest_rate: float = 0.0
    minimum_payment: float = 0.0

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__.
        label = str(self.name) if self.name is not None else ""
        object.__setattr__(self, "name", label)
        object.__setattr__(self, "balance", clamp_amount(self.balance, field="balance", debt=label))
        object.__setattr__(
            self,
            "interest_rate",
            clamp_amount(self.interest_rate, field="interest_rate", debt=label),
        )
        object.__setattr__(
            self,
            "minimum_payment",
            clamp_amount(self.minimum_payment, field="minimum_payment", debt=label),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, position: int = 0) -> "Debt":
        """Build a debt from a loosely structured mapping (JSON, form payload)."""

        raw_name = data.get("name")
        name = str(raw_name).strip() if raw_name is not None else ""
        if not name:
            name = f"Debt {position + 1}"
        debt_id = data.get("id")
        if debt_id is None:
            debt_id = position
        return cls(
            id=debt_id,
            name=name,
            balance=data.get("balance"),
            interest_rate=_first_present(data, INTEREST_RATE_KEYS),
            minimum_payment=_first_present(data, MINIMUM_PAYMENT_KEYS),
        )

    @property
    def monthly_rate(self) -> float:
        return self.interest_rate / 100.0 / 12.0


@dataclass(slots=True)
class WorkingDebt:
    """Mutable copy of a :class:`Debt` owned by exactly one simulation run."""

    id: Hashable
    name: str
    label: str
    position: int
    interest_rate: float
    minimum_payment: float
    starting_balance: float
    remaining_balance: float
    paid: bool = False
    interest_accrued: float = 0.0
    total_paid: float = 0.0
    paid_off_month: int | None = None

    @property
    def monthly_rate(self) -> float:
        return self.interest_rate / 100.0 / 12.0


def coerce_debts(debts: Iterable[Debt | Mapping[str, Any]]) -> list[Debt]:
    """Return ``Debt`` instances for a mix of value objects and mappings."""

    coerced: list[Debt] = []
    for position, item in enumerate(debts):
        if isinstance(item, Debt):
            coerced.append(item)
        elif isinstance(item, Mapping):
            coerced.append(Debt.from_mapping(item, position=position))
        else:
            raise TypeError(f"Unsupported debt record type: {type(item).__name__}")
    return coerced


def snapshot_debts(debts: Iterable[Debt | Mapping[str, Any]]) -> list[WorkingDebt]:
    """Copy caller debts into fresh working records.

    Series labels are unique and never shadow the ``month``/``totalBalance``
    row keys: repeated or reserved names get a `` (n)`` suffix.
    """

    working: list[WorkingDebt] = []
    used_labels: set[str] = set(RESERVED_ROW_KEYS)
    for position, debt in enumerate(coerce_debts(debts)):
        label = debt.name
        suffix = 1
        while label in used_labels:
            suffix += 1
            label = f"{debt.name} ({suffix})"
        used_labels.add(label)
        working.append(
            WorkingDebt(
                id=debt.id,
                name=debt.name,
                label=label,
                position=position,
                interest_rate=debt.interest_rate,
                minimum_payment=debt.minimum_payment,
                starting_balance=debt.balance,
                remaining_balance=debt.balance,
            )
        )
    return working


__all__ = ["Debt", "WorkingDebt", "clamp_amount", "coerce_debts", "snapshot_debts"]
