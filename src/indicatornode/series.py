"""Bar series construction and price projections."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from indicatornode.domain.models import Bar, Interval

OHLCV_COLUMNS = ["open", "high", "low", "close", "volume"]


def series_name(interval: Interval) -> str:
    return f"{interval.label} series"


def build_series(bars: Iterable[Bar], name: str = "") -> pd.DataFrame:
    """Return bars as a frame indexed by `end_time`, oldest first.

    The frame is rebuilt from the bars on every call, so sorting input that is
    already ordered yields an identical frame.
    """
    ordered = sorted(bars, key=lambda bar: bar.end_time)
    frame = pd.DataFrame(
        {
            "open": [float(bar.open) for bar in ordered],
            "high": [float(bar.high) for bar in ordered],
            "low": [float(bar.low) for bar in ordered],
            "close": [float(bar.close) for bar in ordered],
            "volume": [float(bar.volume) for bar in ordered],
        },
        index=pd.DatetimeIndex([bar.end_time for bar in ordered], name="end_time"),
        columns=OHLCV_COLUMNS,
    )
    frame.attrs["name"] = name
    return frame


def close_price(series: pd.DataFrame) -> pd.Series:
    """Closing-price projection of a bar series."""
    if "close" not in series.columns:
        raise ValueError("series must include close column")
    close = series["close"].astype(float)
    close.name = "close"
    return close


def frame_to_bars(frame: pd.DataFrame) -> list[Bar]:
    """Convert a normalized OHLCV frame with a datetime index into bars."""
    bars: list[Bar] = []
    for end_time, row in frame.iterrows():
        bars.append(
            Bar(
                end_time=pd.Timestamp(end_time).to_pydatetime(),
                open=float(row["open"]),
                high=float(row["high"]),
                low=float(row["low"]),
                close=float(row["close"]),
                volume=float(row["volume"]),
            )
        )
    return bars
