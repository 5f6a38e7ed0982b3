"""Monitoring rules package.

Exports ALL_RULES (list of all rule instances) and individual rule classes
for direct use.
"""

from .amount import LargeTransactionRule, MerchantMedianOutlierRule
from .base import MonitoringRule, PartitionRule, TransactionRule
from .geo import LocationInconsistencyRule, whole_hours_between
from .velocity import HighFrequencyRule, OddHourRule, whole_minutes_between

# All rule instances in evaluation order
ALL_RULES: list[MonitoringRule] = [
    # Per-transaction rules
    LargeTransactionRule(),
    OddHourRule(),
    # Per-user rules
    HighFrequencyRule(),
    LocationInconsistencyRule(),
    # Per-merchant rules
    MerchantMedianOutlierRule(),
]

__all__ = [
    "ALL_RULES",
    "MonitoringRule",
    "PartitionRule",
    "TransactionRule",
    "whole_hours_between",
    "whole_minutes_between",
    # Amount
    "LargeTransactionRule",
    "MerchantMedianOutlierRule",
    # Velocity
    "OddHourRule",
    "HighFrequencyRule",
    # Geo
    "LocationInconsistencyRule",
]
