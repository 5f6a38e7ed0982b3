"""Location monitoring rules. Merchant name is the location proxy."""

from collections.abc import Sequence
from datetime import datetime

from ..config import MonitoringConfig
from ..models import FlaggedTransaction, FlagReason, Transaction
from .base import PartitionRule


def whole_hours_between(start: datetime, end: datetime) -> int:
    """Elapsed hours, truncated toward zero (59 minutes is 0 hours)."""
    return int((end - start).total_seconds() // 3600)


class LocationInconsistencyRule(PartitionRule):
    """Triggers when consecutive transactions of one user hit different
    merchants within ``location_window_hours``.

    Both members of a qualifying pair are flagged. Pairs overlap, so a
    transaction between two qualifying gaps is flagged twice.
    """

    rule_id = "location_inconsistency"
    scope = "user"
    reason = FlagReason.LOCATION_INCONSISTENCY

    def evaluate(
        self, transactions: Sequence[Transaction], config: MonitoringConfig
    ) -> list[FlaggedTransaction]:
        window = config.geo.location_window_hours
        flagged: list[FlaggedTransaction] = []

        for first, second in zip(transactions, transactions[1:]):
            if first.merchant_name == second.merchant_name:
                continue
            if whole_hours_between(first.timestamp, second.timestamp) <= window:
                flagged.append(self._flag(first))
                flagged.append(self._flag(second))
        return flagged
