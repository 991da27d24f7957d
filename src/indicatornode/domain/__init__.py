"""Domain types for indicator evaluation."""

from .models import (
    INDICATOR_SPECS,
    Bar,
    Indicator,
    IndicatorKind,
    IndicatorSpec,
    Interval,
    PortValue,
    Ticker,
)

__all__ = [
    "INDICATOR_SPECS",
    "Bar",
    "Indicator",
    "IndicatorKind",
    "IndicatorSpec",
    "Interval",
    "PortValue",
    "Ticker",
]
