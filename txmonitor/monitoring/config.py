"""Rule thresholds for the monitoring engine with sensible defaults."""

import copy
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from pydantic import StrictInt, TypeAdapter, ValidationError

from txmonitor.errors import ConfigError


@dataclass
class AmountThresholds:
    # Single transactions strictly above this amount are flagged
    large_transaction_threshold: float = 10_000.0
    # A transaction at or above multiplier x merchant median is an outlier
    outlier_multiplier: float = 10.0


@dataclass
class VelocityThresholds:
    # Hours 0..odd_hour_max inclusive count as odd hours (5 covers 05:00-05:59)
    odd_hour_max: StrictInt = 5
    high_frequency_count: StrictInt = 5
    high_frequency_window_minutes: StrictInt = 10


@dataclass
class GeoThresholds:
    # Merchant name stands in for location
    location_window_hours: StrictInt = 1


_SECTIONS = {
    "amount": AmountThresholds,
    "velocity": VelocityThresholds,
    "geo": GeoThresholds,
}


@dataclass
class MonitoringConfig:
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    velocity: VelocityThresholds = field(default_factory=VelocityThresholds)
    geo: GeoThresholds = field(default_factory=GeoThresholds)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError when a threshold cannot drive its rule."""
        if self.amount.large_transaction_threshold < 0:
            raise ConfigError("amount.large_transaction_threshold must be >= 0")
        if self.amount.outlier_multiplier <= 0:
            raise ConfigError("amount.outlier_multiplier must be > 0")
        if not 0 <= self.velocity.odd_hour_max <= 23:
            raise ConfigError("velocity.odd_hour_max must be between 0 and 23")
        if self.velocity.high_frequency_count < 2:
            raise ConfigError("velocity.high_frequency_count must be >= 2")
        if self.velocity.high_frequency_window_minutes < 0:
            raise ConfigError("velocity.high_frequency_window_minutes must be >= 0")
        if self.geo.location_window_hours < 0:
            raise ConfigError("geo.location_window_hours must be >= 0")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MonitoringConfig":
        """Build a config from a nested mapping such as a parsed YAML file.

        Missing sections and keys keep their defaults; unknown ones are
        rejected so that typos do not silently fall back to defaults.
        """
        unknown = set(data) - set(_SECTIONS)
        if unknown:
            raise ConfigError(f"Unknown config sections: {', '.join(sorted(unknown))}")

        sections = {}
        for name, section_cls in _SECTIONS.items():
            values = data.get(name) or {}
            if not isinstance(values, dict):
                raise ConfigError(f"Config section '{name}' must be a mapping")
            allowed = {f.name for f in fields(section_cls)}
            bad_keys = set(values) - allowed
            if bad_keys:
                raise ConfigError(
                    f"Unknown keys in '{name}': {', '.join(sorted(bad_keys))}"
                )
            try:
                sections[name] = TypeAdapter(section_cls).validate_python(values)
            except ValidationError as exc:
                problems = "; ".join(
                    f"{name}.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in exc.errors()
                )
                raise ConfigError(f"Invalid config values: {problems}") from exc
        return cls(**sections)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "MonitoringConfig":
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, base: "MonitoringConfig | None" = None) -> "MonitoringConfig":
        """Load config with env var overrides. Env vars use MONITOR_ prefix."""
        config = copy.deepcopy(base) if base is not None else cls()

        # Amount overrides
        if v := os.getenv("MONITOR_LARGE_TRANSACTION_THRESHOLD"):
            config.amount.large_transaction_threshold = float(v)
        if v := os.getenv("MONITOR_OUTLIER_MULTIPLIER"):
            config.amount.outlier_multiplier = float(v)

        # Velocity overrides
        if v := os.getenv("MONITOR_ODD_HOUR_MAX"):
            config.velocity.odd_hour_max = int(v)
        if v := os.getenv("MONITOR_HIGH_FREQUENCY_COUNT"):
            config.velocity.high_frequency_count = int(v)
        if v := os.getenv("MONITOR_HIGH_FREQUENCY_WINDOW_MINUTES"):
            config.velocity.high_frequency_window_minutes = int(v)

        # Geo overrides
        if v := os.getenv("MONITOR_LOCATION_WINDOW_HOURS"):
            config.geo.location_window_hours = int(v)

        config.validate()
        return config
