"""CSV loader for the transaction export.

Expected layout, one header row then one transaction per line::

    user_id,timestamp,merchant_name,amount
    u-001,2026-01-15 14:00:00,Coffee Shop,4.50

Every malformed row is reported as a TransactionParseError with its line
number; the engine only ever receives well-formed transactions.
"""

import csv
from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

import structlog
from pydantic import ValidationError

from txmonitor.config import DEFAULT_TIMESTAMP_FORMAT
from txmonitor.errors import BatchTooLargeError, TransactionParseError
from txmonitor.monitoring.models import Transaction

logger = structlog.get_logger()

EXPECTED_COLUMNS = 4
DEFAULT_MAX_ROWS = 10_000


def parse_row(
    fields: Sequence[str],
    line_number: int,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> Transaction:
    if len(fields) != EXPECTED_COLUMNS:
        raise TransactionParseError(
            line_number, f"expected {EXPECTED_COLUMNS} columns, got {len(fields)}"
        )
    user_id, raw_timestamp, merchant_name, raw_amount = (f.strip() for f in fields)

    try:
        timestamp = datetime.strptime(raw_timestamp, timestamp_format)
    except ValueError:
        raise TransactionParseError(
            line_number, f"unparseable timestamp {raw_timestamp!r}"
        ) from None

    try:
        amount = Decimal(raw_amount)
    except InvalidOperation:
        raise TransactionParseError(line_number, f"unparseable amount {raw_amount!r}") from None
    if not amount.is_finite():
        raise TransactionParseError(line_number, f"unparseable amount {raw_amount!r}")

    try:
        return Transaction(
            user_id=user_id,
            timestamp=timestamp,
            merchant_name=merchant_name,
            amount=amount,
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise TransactionParseError(line_number, problems) from exc


def parse_rows(
    rows: Iterable[Sequence[str]],
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    max_rows: int = DEFAULT_MAX_ROWS,
    first_line: int = 2,
) -> list[Transaction]:
    """Parse data rows (header already consumed). Blank rows are skipped."""
    return parse_numbered_rows(enumerate(rows, start=first_line), timestamp_format, max_rows)


def parse_numbered_rows(
    numbered_rows: Iterable[tuple[int, Sequence[str]]],
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> list[Transaction]:
    """Parse (line number, fields) pairs. Blank rows are skipped."""
    transactions: list[Transaction] = []
    for line_number, fields in numbered_rows:
        if not fields or all(not f.strip() for f in fields):
            continue
        if len(transactions) >= max_rows:
            raise BatchTooLargeError(max_rows)
        transactions.append(parse_row(fields, line_number, timestamp_format))
    return transactions


def _numbered_records(reader) -> Iterator[tuple[int, list[str]]]:
    """Pair each record with the file line it starts on.

    A quoted field may span lines, so record count and line number diverge.
    """
    start = reader.line_num + 1
    for row in reader:
        yield start, row
        start = reader.line_num + 1


def load_transactions(
    path: str | Path,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> list[Transaction]:
    """Read a transaction export. Raises FileNotFoundError for a missing file."""
    with open(path, newline="") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            transactions: list[Transaction] = []
        else:
            transactions = parse_numbered_rows(
                _numbered_records(reader), timestamp_format, max_rows
            )

    logger.info("transactions_loaded", path=str(path), transaction_count=len(transactions))
    return transactions
