"""End-to-end tests for the monitoring CLI."""

import csv
import io
import json

import pytest

from txmonitor.cli import main


class TestCli:
    def test_text_report(self, transactions_csv, capsys):
        assert main([str(transactions_csv)]) == 0
        out, err = capsys.readouterr()
        lines = out.splitlines()
        assert (
            "User: u1, Merchant: Corner Grocery, Amount: 25.00, "
            "Time: 2026-01-15 03:15:00, Flagged for: OddHourTransaction"
        ) in lines
        assert any(line.endswith("Flagged for: LargeTransaction") for line in lines)
        assert sum("LocationInconsistency" in line for line in lines) == 2
        assert "LargeTransaction: 1" in err

    def test_csv_output_file(self, transactions_csv, tmp_path):
        out_path = tmp_path / "out" / "flags.csv"
        assert main([str(transactions_csv), "--format", "csv", "--output-file", str(out_path)]) == 0
        rows = list(csv.DictReader(io.StringIO(out_path.read_text())))
        reasons = [row["reason"] for row in rows]
        assert reasons == [
            "OddHourTransaction",
            "OddHourTransaction",
            "LargeTransaction",
            "LocationInconsistency",
            "LocationInconsistency",
        ]

    def test_json_with_rule_config(self, transactions_csv, tmp_path, capsys):
        rules = tmp_path / "rules.yaml"
        rules.write_text("velocity:\n  odd_hour_max: 2\namount:\n  large_transaction_threshold: 20000\n")
        assert main([str(transactions_csv), "--format", "json", "--config", str(rules)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [row["reason"] for row in data] == ["LocationInconsistency", "LocationInconsistency"]

    def test_env_thresholds(self, transactions_csv, monkeypatch, capsys):
        monkeypatch.setenv("MONITOR_LOCATION_WINDOW_HOURS", "0")
        monkeypatch.setenv("MONITOR_ODD_HOUR_MAX", "0")
        assert main([str(transactions_csv), "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [row["reason"] for row in data] == [
            "LargeTransaction",
            "LocationInconsistency",
            "LocationInconsistency",
        ]

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.csv")]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "monitoring_run_failed" in err

    def test_malformed_input(self, tmp_path, capsys):
        path = tmp_path / "bad.csv"
        path.write_text("user_id,timestamp,merchant_name,amount\nu1,not-a-date,Shop,1\n")
        assert main([str(path)]) == 1
        assert "line 2" in capsys.readouterr().err

    def test_invalid_rule_config(self, transactions_csv, tmp_path):
        rules = tmp_path / "rules.yaml"
        rules.write_text("velocity:\n  odd_hours: 2\n")
        assert main([str(transactions_csv), "--config", str(rules)]) == 1

    def test_fractional_count_in_rule_config(self, transactions_csv, tmp_path, capsys):
        rules = tmp_path / "rules.yaml"
        rules.write_text("velocity:\n  high_frequency_count: 2.5\n")
        assert main([str(transactions_csv), "--config", str(rules)]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "high_frequency_count" in err

    def test_exponent_threshold_in_rule_config(self, transactions_csv, tmp_path, capsys):
        rules = tmp_path / "rules.yaml"
        rules.write_text("amount:\n  large_transaction_threshold: 1e4\n")
        assert main([str(transactions_csv), "--format", "json", "--config", str(rules)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [row["reason"] for row in data].count("LargeTransaction") == 1

    def test_unknown_log_level_flag(self, transactions_csv):
        with pytest.raises(SystemExit) as excinfo:
            main([str(transactions_csv), "--log-level", "LOUD"])
        assert excinfo.value.code == 2

    def test_log_level_flag_is_case_insensitive(self, transactions_csv):
        assert main([str(transactions_csv), "--log-level", "warning"]) == 0

    def test_unknown_log_level_from_env(self, transactions_csv, monkeypatch, capsys):
        monkeypatch.setenv("TXMONITOR_LOG_LEVEL", "LOUD")
        assert main([str(transactions_csv)]) == 1
        assert "LOUD" in capsys.readouterr().err

    def test_batch_limit_from_settings(self, transactions_csv, monkeypatch, capsys):
        monkeypatch.setenv("TXMONITOR_MAX_ROWS", "2")
        assert main([str(transactions_csv)]) == 1
        assert "batch limit" in capsys.readouterr().err
