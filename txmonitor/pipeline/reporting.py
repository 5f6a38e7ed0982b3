"""Rendering of flagged transactions for analysts."""

import csv
import io
import json

from txmonitor.config import DEFAULT_TIMESTAMP_FORMAT
from txmonitor.monitoring.models import FlaggedTransaction

CSV_FIELDS = ["user_id", "timestamp", "merchant_name", "amount", "reason"]


def render_flag(flag: FlaggedTransaction, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    return (
        f"User: {flag.user_id}, Merchant: {flag.merchant_name}, Amount: {flag.amount}, "
        f"Time: {flag.timestamp.strftime(timestamp_format)}, Flagged for: {flag.reason.value}"
    )


def render_text(
    flags: list[FlaggedTransaction], timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
) -> str:
    return "".join(render_flag(flag, timestamp_format) + "\n" for flag in flags)


def _as_row(flag: FlaggedTransaction, timestamp_format: str) -> dict[str, str]:
    return {
        "user_id": flag.user_id,
        "timestamp": flag.timestamp.strftime(timestamp_format),
        "merchant_name": flag.merchant_name,
        "amount": str(flag.amount),
        "reason": flag.reason.value,
    }


def to_csv(
    flags: list[FlaggedTransaction], timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
) -> str:
    """Export flags as CSV. The header is written even when there are no flags."""
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(_as_row(flag, timestamp_format) for flag in flags)
    return output.getvalue()


def to_json(
    flags: list[FlaggedTransaction], timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
) -> str:
    return json.dumps([_as_row(flag, timestamp_format) for flag in flags], indent=2) + "\n"


RENDERERS = {
    "text": render_text,
    "csv": to_csv,
    "json": to_json,
}
