"""Base generator class with seeded RNG and CSV output handling."""

import csv
import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, TextIO

from txmonitor.config import DEFAULT_TIMESTAMP_FORMAT

CSV_HEADER = ["user_id", "timestamp", "merchant_name", "amount"]


class BaseGenerator:
    def __init__(self, config: dict[str, Any] | None = None, seed: int = 42):
        self.config = config or {}
        self.seed = seed
        self.rng = random.Random(seed)

    def _random_datetime(self, start: datetime, end: datetime) -> datetime:
        """Generate a random datetime between start and end, whole seconds."""
        delta = end - start
        random_seconds = self.rng.randint(0, max(1, int(delta.total_seconds())))
        return start + timedelta(seconds=random_seconds)

    def _log_normal(
        self, mean: float, std: float, min_val: float = 0.01, max_val: float | None = None
    ) -> float:
        value = max(self.rng.lognormvariate(mean, std), min_val)
        if max_val is not None:
            value = min(value, max_val)
        return value

    def _decimal_str(self, value: float) -> str:
        """Format a float as a decimal string with 2 decimal places."""
        return f"{value:.2f}"

    def _weighted_choice(self, options: dict[str, float]) -> str:
        """Choose from weighted options."""
        items = list(options.keys())
        weights = list(options.values())
        return self.rng.choices(items, weights=weights, k=1)[0]


def write_csv(
    rows: list[dict[str, Any]],
    out: str | Path | TextIO,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> int:
    """Write generated rows in the loader's CSV layout. Returns the row count."""

    def _write(f: TextIO) -> None:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for row in rows:
            writer.writerow(
                [
                    row["user_id"],
                    row["timestamp"].strftime(timestamp_format),
                    row["merchant_name"],
                    row["amount"],
                ]
            )

    if isinstance(out, (str, Path)):
        Path(out).parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", newline="") as f:
            _write(f)
    else:
        _write(out)
    return len(rows)
