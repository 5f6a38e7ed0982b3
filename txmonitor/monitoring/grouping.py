"""Partitioning and ordering of a transaction batch.

Partitions keep the original relative order of their members and keys
appear in first-seen order, so engine output is reproducible run to run.
"""

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from operator import attrgetter

from .models import Transaction


def group_by(
    transactions: Iterable[Transaction],
    key: Callable[[Transaction], str],
) -> dict[str, list[Transaction]]:
    groups: dict[str, list[Transaction]] = defaultdict(list)
    for tx in transactions:
        groups[key(tx)].append(tx)
    return dict(groups)


def group_by_user(transactions: Iterable[Transaction]) -> dict[str, list[Transaction]]:
    return group_by(transactions, attrgetter("user_id"))


def group_by_merchant(transactions: Iterable[Transaction]) -> dict[str, list[Transaction]]:
    return group_by(transactions, attrgetter("merchant_name"))


def sort_by_timestamp(transactions: Sequence[Transaction]) -> list[Transaction]:
    """Return a new list ordered by timestamp; ties keep input order."""
    return sorted(transactions, key=attrgetter("timestamp"))
