"""Transaction monitoring domain."""

from .config import AmountThresholds, GeoThresholds, MonitoringConfig, VelocityThresholds
from .engine import MonitoringEngine, flag_transactions, summarize
from .grouping import group_by_merchant, group_by_user, sort_by_timestamp
from .models import FlaggedTransaction, FlagReason, Transaction
from .rules import ALL_RULES

__all__ = [
    "ALL_RULES",
    "AmountThresholds",
    "FlagReason",
    "FlaggedTransaction",
    "GeoThresholds",
    "MonitoringConfig",
    "MonitoringEngine",
    "Transaction",
    "VelocityThresholds",
    "flag_transactions",
    "group_by_merchant",
    "group_by_user",
    "sort_by_timestamp",
    "summarize",
]
