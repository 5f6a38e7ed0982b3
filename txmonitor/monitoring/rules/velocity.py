"""Velocity and timing monitoring rules."""

from collections.abc import Sequence
from datetime import datetime

from ..config import MonitoringConfig
from ..models import FlaggedTransaction, FlagReason, Transaction
from .base import PartitionRule, TransactionRule


def whole_minutes_between(start: datetime, end: datetime) -> int:
    """Elapsed minutes, truncated toward zero."""
    return int((end - start).total_seconds() // 60)


class OddHourRule(TransactionRule):
    """Triggers for transactions between midnight and the end of ``odd_hour_max``."""

    rule_id = "odd_hour"
    reason = FlagReason.ODD_HOUR_TRANSACTION

    def matches(self, transaction: Transaction, config: MonitoringConfig) -> bool:
        return transaction.timestamp.hour <= config.velocity.odd_hour_max


class HighFrequencyRule(PartitionRule):
    """Triggers when ``high_frequency_count`` consecutive transactions of one
    user fall within ``high_frequency_window_minutes``.

    Expects the user's transactions sorted by timestamp. Windows are scanned
    left to right; a flagged block is consumed whole and the scan resumes
    after it, so a cluster is reported once rather than once per offset.
    """

    rule_id = "high_frequency"
    scope = "user"
    reason = FlagReason.HIGH_FREQUENCY

    def evaluate(
        self, transactions: Sequence[Transaction], config: MonitoringConfig
    ) -> list[FlaggedTransaction]:
        size = config.velocity.high_frequency_count
        limit = config.velocity.high_frequency_window_minutes
        flagged: list[FlaggedTransaction] = []

        i = 0
        while i + size <= len(transactions):
            block = transactions[i : i + size]
            if whole_minutes_between(block[0].timestamp, block[-1].timestamp) <= limit:
                flagged.extend(self._flag(tx) for tx in block)
                i += size
            else:
                i += 1
        return flagged
