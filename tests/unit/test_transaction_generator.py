"""Tests for the synthetic transaction generator."""

from generators.base import write_csv
from generators.cli import main as generator_main
from generators.transaction_generator import TransactionGenerator

from txmonitor.monitoring.engine import flag_transactions
from txmonitor.monitoring.models import FlagReason
from txmonitor.pipeline.loader import load_transactions

DEFAULT_CONFIG = {
    "num_users": 20,
    "time_span_days": 7,
    "burst_injection_rate": 0.0,
    "night_injection_rate": 0.0,
    "large_injection_rate": 0.0,
}


class TestTransactionGenerator:
    def test_deterministic_output(self):
        rows1 = TransactionGenerator(config=DEFAULT_CONFIG, seed=42).generate(100)
        rows2 = TransactionGenerator(config=DEFAULT_CONFIG, seed=42).generate(100)
        assert rows1 == rows2

    def test_seed_changes_output(self):
        rows1 = TransactionGenerator(config=DEFAULT_CONFIG, seed=1).generate(50)
        rows2 = TransactionGenerator(config=DEFAULT_CONFIG, seed=2).generate(50)
        assert rows1 != rows2

    def test_exact_count_with_bursts(self):
        config = {**DEFAULT_CONFIG, "burst_injection_rate": 0.5}
        assert len(TransactionGenerator(config=config, seed=3).generate(101)) == 101

    def test_rows_sorted_by_time(self):
        rows = TransactionGenerator(config=DEFAULT_CONFIG, seed=42).generate(200)
        timestamps = [r["timestamp"] for r in rows]
        assert timestamps == sorted(timestamps)

    def test_injected_patterns_are_flagged(self, tmp_path):
        config = {
            **DEFAULT_CONFIG,
            "burst_injection_rate": 0.05,
            "night_injection_rate": 0.1,
            "large_injection_rate": 0.02,
        }
        rows = TransactionGenerator(config=config, seed=7).generate(2000)
        path = tmp_path / "transactions.csv"
        assert write_csv(rows, path) == 2000

        flags = flag_transactions(load_transactions(path))
        reasons = {f.reason for f in flags}
        assert FlagReason.HIGH_FREQUENCY in reasons
        assert FlagReason.ODD_HOUR_TRANSACTION in reasons
        assert FlagReason.LARGE_TRANSACTION in reasons

    def test_cli_writes_file(self, tmp_path):
        path = tmp_path / "gen" / "out.csv"
        generator_main(["--count", "25", "--seed", "5", "--output-file", str(path)])
        assert len(load_transactions(path)) == 25
