"""Application configuration objects and helpers."""

from __future__ import annotations

import math
import os
from pathlib import Path

from dotenv import load_dotenv

from .services.accrual import OverflowPolicy
from .services.strategies import PayoffStrategy

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_amount(name: str, default: float = 0.0) -> float:
    """Read a non-negative amount, falling back to ``default`` when unusable."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        amount = float(value)
    except ValueError:
        return default
    if not math.isfinite(amount) or amount < 0:
        return default
    return amount


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "debtplan"
    LOG_FILENAME = "debtplan.log"
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTPLAN_DEV_MODE", default=True)
        self.LOG_TO_FILE = _env_bool("DEBTPLAN_LOG_FILE", default=True)
        self.DEFAULT_STRATEGY = PayoffStrategy.parse(
            os.getenv("DEBTPLAN_DEFAULT_STRATEGY", PayoffStrategy.AVALANCHE.value)
        )
        self.DEFAULT_EXTRA_PAYMENT = _env_amount("DEBTPLAN_EXTRA_PAYMENT", default=0.0)
        self.OVERFLOW_POLICY = OverflowPolicy.parse(
            os.getenv("DEBTPLAN_OVERFLOW_POLICY", OverflowPolicy.CASCADE.value)
        )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("DEBTPLAN_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Read-only working directories fall back to user-local storage.
            fallback_path = Path.home() / f".{self.APP_NAME}"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()


class DevConfig(BaseConfig):
    """Development configuration with verbose console logging."""

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; never writes log files."""

    __test__ = False

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = False
        self.LOG_TO_FILE = False
