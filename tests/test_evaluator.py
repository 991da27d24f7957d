"""Tests for indicator dispatch and latest-value conversion."""

from __future__ import annotations

import math
import statistics
from datetime import datetime, timedelta
from decimal import Decimal

import pandas as pd
import pytest

from indicatornode.domain.models import INDICATOR_SPECS, Bar, Indicator, IndicatorKind
from indicatornode.errors import InsufficientDataError, NonFiniteReadingError
from indicatornode.evaluator import build_indicator, latest_value, to_decimal
from indicatornode.series import build_series


def _series(closes: list[float]) -> pd.DataFrame:
    start = datetime(2026, 1, 1)
    bars = [
        Bar(
            end_time=start + timedelta(days=index),
            open=close,
            high=close,
            low=close,
            close=close,
        )
        for index, close in enumerate(closes)
    ]
    return build_series(bars, name="Day series")


def _wave(length: int) -> list[float]:
    return [50.0 + 5.0 * math.cos(index / 4.0) + index * 0.1 for index in range(length)]


def _seeded_ema(closes: list[float], period: int) -> float:
    multiplier = 2.0 / (period + 1)
    result = sum(closes[:period]) / period
    for close in closes[period:]:
        result = result + multiplier * (close - result)
    return result


def _band(closes: list[float], sign: int) -> float:
    return _seeded_ema(closes, 20) + sign * 2.0 * statistics.pstdev(closes[-20:])


def test_every_selector_has_an_indicator_spec() -> None:
    assert set(INDICATOR_SPECS) == set(Indicator)
    assert Indicator.EMA200.spec.period == 200
    assert Indicator.ROC100.spec.warmup_bars == 101
    assert Indicator.RSI14.spec.warmup_bars == 15
    assert Indicator.BOLLINGER_WIDTH.spec.kind is IndicatorKind.BOLLINGER_WIDTH


def test_flat_series_readings() -> None:
    series = _series([100.0] * 60)

    assert float(latest_value(Indicator.SMA50, series)) == pytest.approx(100.0)
    assert float(latest_value(Indicator.EMA21, series)) == pytest.approx(100.0)
    assert latest_value(Indicator.RSI14, series) == Decimal("0.0")
    assert float(latest_value(Indicator.BOLLINGER_WIDTH, series)) == pytest.approx(0.0, abs=1e-9)
    with pytest.raises(InsufficientDataError, match="roc100 needs at least 101"):
        latest_value(Indicator.ROC100, series)


@pytest.mark.parametrize(
    ("indicator", "reference"),
    [
        (Indicator.SMA100, lambda closes: statistics.fmean(closes[-100:])),
        (Indicator.EMA89, lambda closes: _seeded_ema(closes, 89)),
        (Indicator.ROC100, lambda closes: (closes[-1] - closes[-101]) / closes[-101] * 100.0),
        (Indicator.BOLLINGER_UPPER, lambda closes: _band(closes, 1)),
        (Indicator.BOLLINGER_LOWER, lambda closes: _band(closes, -1)),
    ],
)
def test_latest_reading_matches_textbook_formula(indicator: Indicator, reference) -> None:
    closes = _wave(150)

    assert float(latest_value(indicator, _series(closes))) == pytest.approx(reference(closes))


def test_bollinger_middle_is_ema20() -> None:
    closes = _wave(40)
    series = _series(closes)

    middle = build_indicator(Indicator.BOLLINGER_MIDDLE, series)

    assert middle.name == "bollinger_middle"
    assert middle.iloc[-1] == pytest.approx(_seeded_ema(closes, 20))


def test_bollinger_readings_are_ordered() -> None:
    series = _series(_wave(40))

    upper = latest_value(Indicator.BOLLINGER_UPPER, series)
    middle = latest_value(Indicator.BOLLINGER_MIDDLE, series)
    lower = latest_value(Indicator.BOLLINGER_LOWER, series)

    assert upper > middle > lower


def test_short_series_raises_with_counts() -> None:
    series = _series([1.0] * 10)

    with pytest.raises(InsufficientDataError, match="sma50 needs at least 50 day bars, got 10"):
        latest_value(Indicator.SMA50, series, interval_label="Day")


def test_empty_series_raises() -> None:
    with pytest.raises(InsufficientDataError, match="got 0"):
        latest_value(Indicator.EMA21, _series([]))


def test_insufficient_data_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        latest_value(Indicator.RSI14, _series([1.0, 2.0]))


def test_zero_close_width_is_a_non_finite_reading() -> None:
    series = _series([0.0] * 30)

    with pytest.raises(NonFiniteReadingError, match="non-finite") as excinfo:
        latest_value(Indicator.BOLLINGER_WIDTH, series)
    assert not isinstance(excinfo.value, InsufficientDataError)


def test_zero_reference_close_reads_as_zero_rate_of_change() -> None:
    series = _series([0.0] + [1.0] * 100)

    assert latest_value(Indicator.ROC100, series) == Decimal("0.0")


def test_to_decimal_uses_shortest_text() -> None:
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(100.0) == Decimal("100.0")
    with pytest.raises(NonFiniteReadingError):
        to_decimal(float("nan"))
