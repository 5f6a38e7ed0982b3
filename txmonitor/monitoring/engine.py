"""Batch monitoring engine: runs every rule over a transaction batch."""

from collections import Counter
from collections.abc import Iterable, Sequence

import structlog

from .config import MonitoringConfig
from .grouping import group_by_merchant, group_by_user, sort_by_timestamp
from .models import FlaggedTransaction, FlagReason, Transaction
from .rules import ALL_RULES, MonitoringRule

logger = structlog.get_logger()

_SCOPES = ("transaction", "user", "merchant")


def summarize(flags: Iterable[FlaggedTransaction]) -> dict[str, int]:
    """Count flags per reason. Every reason is present, zero-filled."""
    counts = Counter(flag.reason for flag in flags)
    return {reason.value: counts.get(reason, 0) for reason in FlagReason}


class MonitoringEngine:
    """Evaluates a transaction batch against the monitoring rules.

    Output is the plain concatenation of rule output, never de-duplicated:
    1. Per-transaction rules, for each transaction in input order
    2. Per-user rules, for each user (first-seen order) over the user's
       transactions sorted by timestamp
    3. Per-merchant rules, for each merchant (first-seen order)
    Within a partition, rules run in registration order.
    """

    def __init__(
        self,
        config: MonitoringConfig | None = None,
        rules: Sequence[MonitoringRule] | None = None,
    ) -> None:
        self._rules = list(ALL_RULES if rules is None else rules)
        self._config = config or MonitoringConfig()

        for rule in self._rules:
            if rule.scope not in _SCOPES:
                raise ValueError(f"Rule {rule.rule_id} has unknown scope '{rule.scope}'")

        logger.info(
            "monitoring_engine_initialized",
            rule_count=len(self._rules),
            rules=[rule.rule_id for rule in self._rules],
        )

    @property
    def config(self) -> MonitoringConfig:
        return self._config

    @property
    def rules(self) -> list[MonitoringRule]:
        return list(self._rules)

    def flag_transactions(self, transactions: Iterable[Transaction]) -> list[FlaggedTransaction]:
        """Flag suspicious transactions in a batch. Does not modify the input."""
        store = tuple(transactions)
        by_scope = {
            scope: [rule for rule in self._rules if rule.scope == scope] for scope in _SCOPES
        }
        flagged: list[FlaggedTransaction] = []

        for tx in store:
            for rule in by_scope["transaction"]:
                flagged.extend(self._run_rule(rule, tx))

        users = group_by_user(store)
        for user_transactions in users.values():
            ordered = sort_by_timestamp(user_transactions)
            for rule in by_scope["user"]:
                flagged.extend(self._run_rule(rule, ordered))

        merchants = group_by_merchant(store)
        for merchant_transactions in merchants.values():
            for rule in by_scope["merchant"]:
                flagged.extend(self._run_rule(rule, merchant_transactions))

        logger.info(
            "monitoring_run_completed",
            transaction_count=len(store),
            user_count=len(users),
            merchant_count=len(merchants),
            flag_count=len(flagged),
            flags_by_reason=summarize(flagged),
        )
        return flagged

    def _run_rule(self, rule: MonitoringRule, subject) -> list[FlaggedTransaction]:
        try:
            return rule.evaluate(subject, self._config)
        except Exception:
            logger.exception("rule_evaluation_error", rule_id=rule.rule_id, scope=rule.scope)
            return []


def flag_transactions(
    transactions: Iterable[Transaction],
    config: MonitoringConfig | None = None,
) -> list[FlaggedTransaction]:
    """Convenience wrapper: evaluate a batch with the default rule set."""
    return MonitoringEngine(config=config).flag_transactions(transactions)
