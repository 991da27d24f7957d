"""Automation value node backed by a technical indicator."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from indicatornode.data.base import MarketPort, bars_for_interval
from indicatornode.domain.models import Indicator, Interval, PortValue, Ticker
from indicatornode.evaluator import latest_value
from indicatornode.series import build_series, series_name


class ValueNode(Protocol):
    """Automation node that yields a value for a point in time."""

    def get_value(self, now: datetime) -> PortValue | None:
        """Return the current value, or None when there is nothing to report."""


class IndicatorValueNode:
    """Evaluate one indicator over one interval of a market port."""

    def __init__(self, ticker_port: MarketPort, indicator: Indicator, interval: Interval) -> None:
        self.ticker_port = ticker_port
        self.indicator = Indicator(indicator)
        self.interval = Interval(interval)

    def get_value(self, now: datetime) -> Ticker | None:
        # Readings come from the port snapshot; `now` is not used to slice it.
        _ = now
        data_source = bars_for_interval(self.ticker_port, self.interval)
        if data_source is None:
            return None
        series = build_series(data_source, name=series_name(self.interval))
        value = latest_value(self.indicator, series, interval_label=self.interval.label)
        return Ticker(value)
