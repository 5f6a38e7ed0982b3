"""Exception types raised around the monitoring engine."""


class MonitoringError(Exception):
    """Base class for txmonitor errors."""


class TransactionParseError(MonitoringError):
    """A row of the input export could not be turned into a Transaction."""

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number = line_number
        self.message = message
        super().__init__(f"line {line_number}: {message}")


class BatchTooLargeError(MonitoringError):
    def __init__(self, max_rows: int) -> None:
        self.max_rows = max_rows
        super().__init__(f"input exceeds the batch limit of {max_rows} rows")


class ConfigError(MonitoringError, ValueError):
    """Invalid rule threshold configuration."""
