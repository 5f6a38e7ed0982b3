"""Shared test fixtures for txmonitor tests."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
import structlog

from txmonitor.monitoring.config import MonitoringConfig
from txmonitor.monitoring.models import Transaction

BASE_TIME = datetime(2026, 1, 15, 14, 0, 0)


def make_tx(
    user_id: str = "user-1",
    minutes: float = 0,
    merchant_name: str = "Corner Grocery",
    amount: str | int = "100.00",
    base: datetime = BASE_TIME,
) -> Transaction:
    """Build a transaction ``minutes`` after ``base``."""
    return Transaction(
        user_id=user_id,
        timestamp=base + timedelta(minutes=minutes),
        merchant_name=merchant_name,
        amount=Decimal(str(amount)),
    )


@pytest.fixture
def config() -> MonitoringConfig:
    return MonitoringConfig()


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def transactions_csv(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text(
        "user_id,timestamp,merchant_name,amount\n"
        "u1,2026-01-15 03:15:00,Corner Grocery,25.00\n"
        "u1,2026-01-15 03:40:00,City Coffee,4.50\n"
        "u2,2026-01-15 12:00:00,Travel Desk,15000\n"
        "u3,2026-01-15 13:00:00,Corner Grocery,20.00\n"
    )
    return path
