"""Amount-based monitoring rules."""

import statistics
from collections.abc import Sequence
from decimal import Decimal

import structlog

from ..config import MonitoringConfig
from ..models import FlaggedTransaction, FlagReason, Transaction
from .base import PartitionRule, TransactionRule

logger = structlog.get_logger()


class LargeTransactionRule(TransactionRule):
    """Triggers for single transactions above the large-transaction threshold."""

    rule_id = "large_transaction"
    reason = FlagReason.LARGE_TRANSACTION

    def matches(self, transaction: Transaction, config: MonitoringConfig) -> bool:
        return transaction.amount > config.amount.large_transaction_threshold


class MerchantMedianOutlierRule(PartitionRule):
    """Triggers for amounts far above the merchant's median amount.

    The threshold is ``outlier_multiplier * median`` and the comparison is
    inclusive. A merchant whose median is zero is skipped, otherwise every
    one of its transactions would qualify.
    """

    rule_id = "merchant_median_outlier"
    scope = "merchant"
    reason = FlagReason.UNUSUALLY_LARGE_TRANSACTION

    def evaluate(
        self, transactions: Sequence[Transaction], config: MonitoringConfig
    ) -> list[FlaggedTransaction]:
        if not transactions:
            return []

        median = statistics.median(tx.amount for tx in transactions)
        if median == 0:
            logger.debug(
                "outlier_rule_skipped_zero_median",
                merchant_name=transactions[0].merchant_name,
                transaction_count=len(transactions),
            )
            return []

        threshold = Decimal(str(config.amount.outlier_multiplier)) * median
        return [self._flag(tx) for tx in transactions if tx.amount >= threshold]
