"""Abstract base classes for monitoring rules."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..config import MonitoringConfig
from ..models import FlaggedTransaction, FlagReason, Transaction


class MonitoringRule(ABC):
    """Base class for all monitoring rules.

    ``scope`` tells the engine what a rule consumes: a single transaction,
    one user's transactions sorted by timestamp, or one merchant's
    transactions in input order.
    """

    rule_id: str
    scope: str  # "transaction" | "user" | "merchant"
    reason: FlagReason

    def _flag(self, transaction: Transaction) -> FlaggedTransaction:
        """Convenience: flag a transaction with this rule's reason."""
        return FlaggedTransaction.from_transaction(transaction, self.reason)


class TransactionRule(MonitoringRule):
    """A stateless check over one transaction."""

    scope = "transaction"

    @abstractmethod
    def matches(self, transaction: Transaction, config: MonitoringConfig) -> bool:
        ...

    def evaluate(
        self, transaction: Transaction, config: MonitoringConfig
    ) -> list[FlaggedTransaction]:
        if self.matches(transaction, config):
            return [self._flag(transaction)]
        return []


class PartitionRule(MonitoringRule):
    """A check over a whole user or merchant partition."""

    @abstractmethod
    def evaluate(
        self, transactions: Sequence[Transaction], config: MonitoringConfig
    ) -> list[FlaggedTransaction]:
        """Evaluate this rule and return the flags it raises, in order."""
        ...
