"""Pydantic models for the monitoring domain."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class FlagReason(StrEnum):
    LARGE_TRANSACTION = "LargeTransaction"
    ODD_HOUR_TRANSACTION = "OddHourTransaction"
    HIGH_FREQUENCY = "HighFrequency"
    LOCATION_INCONSISTENCY = "LocationInconsistency"
    UNUSUALLY_LARGE_TRANSACTION = "UnusuallyLargeTransaction"


class Transaction(BaseModel):
    """One row of the analyst export. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    timestamp: datetime
    merchant_name: str = Field(min_length=1)
    amount: Decimal = Field(ge=0)


class FlaggedTransaction(BaseModel):
    """A copy of a transaction's fields paired with the rule that matched it."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    timestamp: datetime
    merchant_name: str
    amount: Decimal
    reason: FlagReason

    @classmethod
    def from_transaction(cls, transaction: Transaction, reason: FlagReason) -> "FlaggedTransaction":
        return cls(
            user_id=transaction.user_id,
            timestamp=transaction.timestamp,
            merchant_name=transaction.merchant_name,
            amount=transaction.amount,
            reason=reason,
        )

    @property
    def transaction(self) -> Transaction:
        return Transaction(
            user_id=self.user_id,
            timestamp=self.timestamp,
            merchant_name=self.merchant_name,
            amount=self.amount,
        )
