"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    app_name: str = "txmonitor"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    log_json: bool = False

    # Input export
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    max_rows: int = 10_000

    model_config = {"env_prefix": "TXMONITOR_", "env_file": ".env", "extra": "ignore"}
