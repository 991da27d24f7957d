"""Core indicator domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

BOLLINGER_PERIOD = 20
BOLLINGER_MULTIPLIER = 2.0


class Interval(StrEnum):
    """Bar granularities served by a market port."""

    DAY = "day"
    HOUR = "hour"
    WEEK = "week"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class IndicatorKind(StrEnum):
    """Indicator families the evaluator knows how to build."""

    RSI = "rsi"
    EMA = "ema"
    SMA = "sma"
    ROC = "roc"
    BOLLINGER_UPPER = "bollinger_upper"
    BOLLINGER_MIDDLE = "bollinger_middle"
    BOLLINGER_LOWER = "bollinger_lower"
    BOLLINGER_WIDTH = "bollinger_width"


class Indicator(StrEnum):
    """Supported indicator selectors."""

    RSI14 = "rsi14"
    EMA21 = "ema21"
    EMA34 = "ema34"
    EMA55 = "ema55"
    EMA89 = "ema89"
    EMA200 = "ema200"
    SMA50 = "sma50"
    SMA100 = "sma100"
    SMA200 = "sma200"
    ROC100 = "roc100"
    BOLLINGER_UPPER = "bollinger_upper"
    BOLLINGER_MIDDLE = "bollinger_middle"
    BOLLINGER_LOWER = "bollinger_lower"
    BOLLINGER_WIDTH = "bollinger_width"

    @property
    def spec(self) -> IndicatorSpec:
        return INDICATOR_SPECS[self]


@dataclass(frozen=True)
class IndicatorSpec:
    """Indicator family plus its lookback period."""

    kind: IndicatorKind
    period: int

    @property
    def warmup_bars(self) -> int:
        """Bars needed before the indicator reports a value."""
        if self.kind in {IndicatorKind.RSI, IndicatorKind.ROC}:
            # Both look at price changes, so the first bar only seeds the series.
            return self.period + 1
        return self.period


INDICATOR_SPECS: dict[Indicator, IndicatorSpec] = {
    Indicator.RSI14: IndicatorSpec(IndicatorKind.RSI, 14),
    Indicator.EMA21: IndicatorSpec(IndicatorKind.EMA, 21),
    Indicator.EMA34: IndicatorSpec(IndicatorKind.EMA, 34),
    Indicator.EMA55: IndicatorSpec(IndicatorKind.EMA, 55),
    Indicator.EMA89: IndicatorSpec(IndicatorKind.EMA, 89),
    Indicator.EMA200: IndicatorSpec(IndicatorKind.EMA, 200),
    Indicator.SMA50: IndicatorSpec(IndicatorKind.SMA, 50),
    Indicator.SMA100: IndicatorSpec(IndicatorKind.SMA, 100),
    Indicator.SMA200: IndicatorSpec(IndicatorKind.SMA, 200),
    Indicator.ROC100: IndicatorSpec(IndicatorKind.ROC, 100),
    Indicator.BOLLINGER_UPPER: IndicatorSpec(IndicatorKind.BOLLINGER_UPPER, BOLLINGER_PERIOD),
    Indicator.BOLLINGER_MIDDLE: IndicatorSpec(IndicatorKind.BOLLINGER_MIDDLE, BOLLINGER_PERIOD),
    Indicator.BOLLINGER_LOWER: IndicatorSpec(IndicatorKind.BOLLINGER_LOWER, BOLLINGER_PERIOD),
    Indicator.BOLLINGER_WIDTH: IndicatorSpec(IndicatorKind.BOLLINGER_WIDTH, BOLLINGER_PERIOD),
}


@dataclass(frozen=True)
class Bar:
    """One OHLCV observation closing at `end_time`."""

    end_time: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0


class PortValue:
    """Marker base for values handed back to the automation layer."""


@dataclass(frozen=True)
class Ticker(PortValue):
    """Latest indicator reading as an exact decimal."""

    value: Decimal

    def __str__(self) -> str:
        return str(self.value)
