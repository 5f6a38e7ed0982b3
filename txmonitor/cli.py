"""CLI entry point for batch transaction monitoring.

Usage:
    python -m txmonitor data/transactions.csv
    python -m txmonitor data/transactions.csv --config configs/rules.yaml --format csv
    python -m txmonitor data/transactions.csv --format json --output-file output/flags.json
"""

import argparse
import sys
from pathlib import Path

import structlog

from txmonitor.config import Settings
from txmonitor.errors import MonitoringError
from txmonitor.monitoring.config import MonitoringConfig
from txmonitor.monitoring.engine import MonitoringEngine, summarize
from txmonitor.pipeline.loader import load_transactions
from txmonitor.pipeline.reporting import RENDERERS
from txmonitor.shared.logging import setup_logging

logger = structlog.get_logger()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flag suspicious transactions in a CSV export")
    parser.add_argument("input", type=str, help="Path to the transaction CSV export")
    parser.add_argument(
        "--config", type=str, default=None, help="Path to YAML file with rule thresholds"
    )
    parser.add_argument(
        "--format",
        type=str,
        default="text",
        choices=sorted(RENDERERS),
        help="Report format",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Write report to file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=LOG_LEVELS,
        help="Override log level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    try:
        setup_logging(args.log_level or settings.log_level, json_output=settings.log_json)
    except ValueError as exc:
        print(f"Invalid logging configuration: {exc}", file=sys.stderr)
        return 1

    try:
        config = MonitoringConfig.from_yaml(args.config) if args.config else MonitoringConfig()
        config = MonitoringConfig.from_env(config)
        transactions = load_transactions(
            args.input,
            timestamp_format=settings.timestamp_format,
            max_rows=settings.max_rows,
        )
    except (OSError, MonitoringError, ValueError) as exc:
        logger.error("monitoring_run_failed", input=args.input, error=str(exc))
        return 1

    flags = MonitoringEngine(config=config).flag_transactions(transactions)
    report = RENDERERS[args.format](flags, settings.timestamp_format)

    if args.output_file:
        output_path = Path(args.output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report)
        print(f"Wrote {len(flags)} flags to {output_path}", file=sys.stderr)
    else:
        sys.stdout.write(report)

    for reason, count in summarize(flags).items():
        print(f"{reason}: {count}", file=sys.stderr)
    return 0
