"""CLI entry point for the synthetic transaction generator.

Usage:
    python -m generators --count 10000 --output-file data/transactions.csv
    python -m generators --config configs/suspicious.yaml --seed 7 --count 500
"""

import argparse
import sys

import yaml

from .base import write_csv
from .transaction_generator import TransactionGenerator


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Synthetic transaction export generator")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument(
        "--count", type=int, default=1000, help="Number of transactions to generate"
    )
    parser.add_argument(
        "--output-file", type=str, default=None, help="Output CSV path (default: stdout)"
    )

    args = parser.parse_args(argv)

    config = {}
    if args.config:
        with open(args.config) as f:
            config = yaml.safe_load(f) or {}

    gen = TransactionGenerator(config=config, seed=args.seed)
    rows = gen.generate(num_transactions=args.count)

    if args.output_file:
        write_csv(rows, args.output_file)
        print(f"Wrote {len(rows)} transactions to {args.output_file}", file=sys.stderr)
    else:
        write_csv(rows, sys.stdout)
