"""Transaction export generator with suspicious-pattern injection."""

from datetime import datetime, timedelta
from typing import Any

from .base import BaseGenerator

DEFAULT_MERCHANTS = {
    "Corner Grocery": 0.25,
    "City Coffee": 0.20,
    "Metro Transit": 0.15,
    "Fuel Stop": 0.12,
    "Online Books": 0.10,
    "Electronics Hub": 0.08,
    "Jewelry Palace": 0.05,
    "Travel Desk": 0.05,
}


class TransactionGenerator(BaseGenerator):
    def generate(self, num_transactions: int = 10000) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        config = self.config

        num_users = config.get("num_users", 200)
        time_span = config.get("time_span_days", 30)
        base_time = datetime(2026, 1, 1)
        end_time = base_time + timedelta(days=time_span)

        merchants = config.get("merchant_weights", DEFAULT_MERCHANTS)
        amount_dist = config.get(
            "amount_distribution", {"log_normal_mean": 3.5, "log_normal_std": 1.0}
        )
        users = [f"user-{i:04d}" for i in range(1, num_users + 1)]

        while len(rows) < num_transactions:
            user_id = self.rng.choice(users)
            merchant = self._weighted_choice(merchants)
            txn_time = self._random_datetime(base_time, end_time)
            amount = self._log_normal(
                amount_dist["log_normal_mean"],
                amount_dist["log_normal_std"],
                min_val=1.0,
                max_val=5_000.0,
            )

            # Injection: burst of rapid purchases across merchants
            if self.rng.random() < config.get("burst_injection_rate", 0.0):
                rows.extend(self._burst(user_id, merchants, txn_time, amount_dist))
                continue

            # Injection: night-time activity
            if self.rng.random() < config.get("night_injection_rate", 0.0):
                txn_time = txn_time.replace(hour=self.rng.randint(0, 4))

            # Injection: large amount
            if self.rng.random() < config.get("large_injection_rate", 0.0):
                amount = self.rng.uniform(10_001, 50_000)

            rows.append(self._row(user_id, txn_time, merchant, amount))

        del rows[num_transactions:]
        rows.sort(key=lambda r: r["timestamp"])
        return rows

    def _burst(
        self,
        user_id: str,
        merchants: dict[str, float],
        start: datetime,
        amount_dist: dict[str, float],
    ) -> list[dict[str, Any]]:
        rows = []
        offset = 0
        for _ in range(self.rng.randint(5, 8)):
            offset += self.rng.randint(15, 90)
            amount = self._log_normal(
                amount_dist["log_normal_mean"],
                amount_dist["log_normal_std"],
                min_val=1.0,
                max_val=500.0,
            )
            rows.append(
                self._row(
                    user_id,
                    start + timedelta(seconds=offset),
                    self._weighted_choice(merchants),
                    amount,
                )
            )
        return rows

    def _row(
        self, user_id: str, timestamp: datetime, merchant: str, amount: float
    ) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "timestamp": timestamp,
            "merchant_name": merchant,
            "amount": self._decimal_str(amount),
        }
