"""Environment and CLI runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from indicatornode.domain.models import Indicator, Interval
from indicatornode.errors import ConfigError

DATA_SOURCES = ("csv", "yfinance")

_INTERVAL_ALIASES = {
    "day": Interval.DAY,
    "daily": Interval.DAY,
    "1d": Interval.DAY,
    "1day": Interval.DAY,
    "hour": Interval.HOUR,
    "hourly": Interval.HOUR,
    "1h": Interval.HOUR,
    "1hour": Interval.HOUR,
    "60m": Interval.HOUR,
    "week": Interval.WEEK,
    "weekly": Interval.WEEK,
    "1w": Interval.WEEK,
    "1wk": Interval.WEEK,
    "1week": Interval.WEEK,
}


def _compact(value: str) -> str:
    return value.strip().lower().replace("-", "_").replace(" ", "_")


def parse_interval(value: str | Interval) -> Interval:
    """Resolve loose interval spellings such as `Daily` or `1h`."""
    if isinstance(value, Interval):
        return value
    candidate = _compact(value).replace("_", "")
    interval = _INTERVAL_ALIASES.get(candidate)
    if interval is None:
        supported = ", ".join(item.value for item in Interval)
        raise ConfigError(f"Unknown interval '{value}'. Supported: {supported}")
    return interval


def parse_indicator(value: str | Indicator) -> Indicator:
    """Resolve loose indicator spellings such as `EMA21` or `bollinger-width`."""
    if isinstance(value, Indicator):
        return value
    candidate = _compact(value)
    for indicator in Indicator:
        if candidate in {indicator.value, indicator.name.lower()}:
            return indicator
    raise ConfigError(
        f"Unknown indicator '{value}'. Supported: {', '.join(available_indicator_ids())}"
    )


def available_indicator_ids() -> list[str]:
    return [indicator.value for indicator in Indicator]


def parse_optional_path(value: str | None) -> str | None:
    if value is None:
        return None
    text = value.strip()
    return text or None


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    symbol: str = "CRYPTO:BTCUSD"
    indicator: Indicator = Indicator.RSI14
    interval: Interval = Interval.DAY
    data_source: str = "csv"
    historical_data_dir: str = "historical_data"
    report_path: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            symbol=str(os.getenv("SYMBOL", "CRYPTO:BTCUSD")).strip().upper(),
            indicator=parse_indicator(os.getenv("INDICATOR", "rsi14")),
            interval=parse_interval(os.getenv("INTERVAL", "day")),
            data_source=str(os.getenv("DATA_SOURCE", "csv")).strip().lower(),
            historical_data_dir=str(os.getenv("HISTORICAL_DATA_DIR", "historical_data")).strip(),
            report_path=parse_optional_path(os.getenv("REPORT_PATH")),
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        overrides = dict(kwargs)
        indicator = overrides.get("indicator")
        if isinstance(indicator, str):
            overrides["indicator"] = parse_indicator(indicator)
        interval = overrides.get("interval")
        if isinstance(interval, str):
            overrides["interval"] = parse_interval(interval)
        symbol = overrides.get("symbol")
        if isinstance(symbol, str):
            overrides["symbol"] = symbol.strip().upper()
        data_source = overrides.get("data_source")
        if isinstance(data_source, str):
            overrides["data_source"] = data_source.strip().lower()
        updated = replace(self, **overrides)
        return updated.validate()

    def validate(self) -> Self:
        """Validate settings fields."""
        if not self.symbol.strip():
            raise ConfigError("symbol must not be empty")
        if not isinstance(self.indicator, Indicator):
            raise ConfigError("indicator must be an Indicator")
        if not isinstance(self.interval, Interval):
            raise ConfigError("interval must be an Interval")
        if self.data_source not in DATA_SOURCES:
            raise ConfigError(f"data_source must be one of {', '.join(DATA_SOURCES)}")
        if self.data_source == "csv" and not self.historical_data_dir.strip():
            raise ConfigError("historical_data_dir is required for the csv data source")
        return self
