"""Indicator pipeline dispatch and latest-value conversion."""

from __future__ import annotations

import math
from decimal import Decimal

import pandas as pd

from indicatornode import indicators
from indicatornode.domain.models import Indicator, IndicatorKind, IndicatorSpec
from indicatornode.errors import InsufficientDataError, NonFiniteReadingError
from indicatornode.series import close_price


def build_indicator(indicator: Indicator, series: pd.DataFrame) -> pd.Series:
    """Compose the indicator pipeline for `indicator` over a bar series."""
    spec = indicator.spec
    close = close_price(series)
    values = _build_for_spec(spec, close)
    values.name = indicator.value
    return values


def _build_for_spec(spec: IndicatorSpec, close: pd.Series) -> pd.Series:
    if spec.kind is IndicatorKind.RSI:
        return indicators.rsi(close, spec.period)
    if spec.kind is IndicatorKind.EMA:
        return indicators.ema(close, spec.period)
    if spec.kind is IndicatorKind.SMA:
        return indicators.sma(close, spec.period)
    if spec.kind is IndicatorKind.ROC:
        return indicators.roc(close, spec.period)

    bands = indicators.bollinger_bands(close, period=spec.period)
    if spec.kind is IndicatorKind.BOLLINGER_MIDDLE:
        return bands.middle
    if spec.kind is IndicatorKind.BOLLINGER_UPPER:
        return bands.upper
    if spec.kind is IndicatorKind.BOLLINGER_LOWER:
        return bands.lower
    if spec.kind is IndicatorKind.BOLLINGER_WIDTH:
        return bands.width
    raise ValueError(f"Unsupported indicator kind: {spec.kind}")


def latest_value(indicator: Indicator, series: pd.DataFrame, interval_label: str = "") -> Decimal:
    """Return the reading at the last bar of `series` as an exact decimal.

    Raises InsufficientDataError when the series is empty or still inside the
    indicator's warm-up window, and NonFiniteReadingError when a full window
    still yields NaN or infinity (for example a zero middle band).
    """
    required = indicator.spec.warmup_bars
    available = len(series)
    if available == 0:
        raise InsufficientDataError(_shortfall_message(indicator, interval_label, required, 0))
    values = build_indicator(indicator, series)
    reading = float(values.iloc[-1])
    if math.isnan(reading) and available < required:
        raise InsufficientDataError(
            _shortfall_message(indicator, interval_label, required, available)
        )
    if not math.isfinite(reading):
        raise NonFiniteReadingError(
            f"{indicator.value} produced a non-finite reading ({reading}) "
            f"over {available} bars"
        )
    return to_decimal(reading)


def to_decimal(value: float) -> Decimal:
    """Convert a float through its shortest round-trip text."""
    if not math.isfinite(value):
        raise NonFiniteReadingError(f"Cannot convert non-finite value to decimal: {value}")
    return Decimal(repr(float(value)))


def _shortfall_message(
    indicator: Indicator,
    interval_label: str,
    required: int,
    available: int,
) -> str:
    scope = f"{interval_label.lower()} bars" if interval_label else "bars"
    return f"{indicator.value} needs at least {required} {scope}, got {available}"
