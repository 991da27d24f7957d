"""Tests for the indicator-backed value node."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from indicatornode.data.base import StaticMarketPort, bars_for_interval
from indicatornode.domain.models import Bar, Indicator, Interval, PortValue, Ticker
from indicatornode.errors import InsufficientDataError
from indicatornode.node import IndicatorValueNode, ValueNode

NOW = datetime(2026, 10, 19, 12, 0)


def _bars(closes: list[float], step: timedelta = timedelta(days=1)) -> list[Bar]:
    start = datetime(2026, 1, 1)
    return [
        Bar(
            end_time=start + step * index,
            open=close,
            high=close + 0.5,
            low=close - 0.5,
            close=close,
            volume=1.0,
        )
        for index, close in enumerate(closes)
    ]


@pytest.mark.parametrize("interval", list(Interval))
def test_missing_data_source_returns_none(interval: Interval) -> None:
    node = IndicatorValueNode(StaticMarketPort(), Indicator.RSI14, interval)

    assert node.get_value(NOW) is None


def test_node_reads_selected_interval_only() -> None:
    port = StaticMarketPort(
        daily_data=_bars([100.0] * 60),
        hourly_data=_bars([10.0] * 60, step=timedelta(hours=1)),
        weekly_data=None,
    )

    daily = IndicatorValueNode(port, Indicator.SMA50, Interval.DAY).get_value(NOW)
    hourly = IndicatorValueNode(port, Indicator.SMA50, Interval.HOUR).get_value(NOW)
    weekly = IndicatorValueNode(port, Indicator.SMA50, Interval.WEEK).get_value(NOW)

    assert isinstance(daily, Ticker)
    assert isinstance(daily, PortValue)
    assert daily.value == Decimal("100.0")
    assert hourly is not None and hourly.value == Decimal("10.0")
    assert weekly is None


def test_node_sorts_unordered_bars_before_reading_latest() -> None:
    ordered = _bars([float(value) for value in range(1, 61)])
    shuffled = list(reversed(ordered))
    node_ordered = IndicatorValueNode(
        StaticMarketPort(daily_data=ordered), Indicator.EMA21, Interval.DAY
    )
    node_shuffled = IndicatorValueNode(
        StaticMarketPort(daily_data=shuffled), Indicator.EMA21, Interval.DAY
    )

    assert node_ordered.get_value(NOW) == node_shuffled.get_value(NOW)


def test_node_accepts_string_selectors() -> None:
    node = IndicatorValueNode(StaticMarketPort(daily_data=_bars([1.0] * 30)), "rsi14", "day")

    assert node.indicator is Indicator.RSI14
    assert node.interval is Interval.DAY


def test_empty_data_source_raises_insufficient_data() -> None:
    node = IndicatorValueNode(StaticMarketPort(weekly_data=[]), Indicator.SMA50, Interval.WEEK)

    with pytest.raises(InsufficientDataError, match="week bars, got 0"):
        node.get_value(NOW)


def test_bars_for_interval_dispatch() -> None:
    daily = _bars([1.0])
    hourly = _bars([2.0])
    weekly = _bars([3.0])
    port = StaticMarketPort(daily_data=daily, hourly_data=hourly, weekly_data=weekly)

    assert bars_for_interval(port, Interval.DAY) is daily
    assert bars_for_interval(port, Interval.HOUR) is hourly
    assert bars_for_interval(port, Interval.WEEK) is weekly


def _poll(nodes: list[ValueNode]) -> list[PortValue | None]:
    return [node.get_value(NOW) for node in nodes]


def test_indicator_node_satisfies_value_node_protocol() -> None:
    port = StaticMarketPort(daily_data=_bars([100.0] * 60))

    readings = _poll(
        [
            IndicatorValueNode(port, Indicator.SMA50, Interval.DAY),
            IndicatorValueNode(port, Indicator.SMA50, Interval.HOUR),
        ]
    )

    assert [str(reading) if reading is not None else None for reading in readings] == [
        "100.0",
        None,
    ]
