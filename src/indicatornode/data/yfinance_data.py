"""Yahoo Finance market port."""

from __future__ import annotations

from typing import Any

import pandas as pd

from indicatornode.data.symbols import to_yfinance_ticker
from indicatornode.domain.models import Bar, Interval
from indicatornode.errors import DataProviderError
from indicatornode.series import OHLCV_COLUMNS, frame_to_bars

_YFINANCE_INTERVALS = {
    Interval.DAY: "1d",
    Interval.HOUR: "60m",
    Interval.WEEK: "1wk",
}


class YFinanceMarketPort:
    """Fetch per-interval OHLCV bars for one symbol via yfinance."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        self.ticker = to_yfinance_ticker(symbol)
        self._bars_cache: dict[Interval, list[Bar]] = {}

    @property
    def daily_data(self) -> list[Bar] | None:
        return self._bars(Interval.DAY)

    @property
    def hourly_data(self) -> list[Bar] | None:
        return self._bars(Interval.HOUR)

    @property
    def weekly_data(self) -> list[Bar] | None:
        return self._bars(Interval.WEEK)

    def _bars(self, interval: Interval) -> list[Bar]:
        cached = self._bars_cache.get(interval)
        if cached is None:
            cached = frame_to_bars(self.get_frame(interval))
            self._bars_cache[interval] = cached
        return cached

    def get_frame(self, interval: Interval) -> pd.DataFrame:
        try:
            import yfinance as yf
        except ImportError as exc:
            raise DataProviderError(
                "yfinance is required for the yfinance data source. "
                "Install it with `pip install yfinance`."
            ) from exc

        yf_interval = _YFINANCE_INTERVALS[interval]
        try:
            history = yf.Ticker(self.ticker).history(
                period=self._period_for_interval(yf_interval),
                interval=yf_interval,
                auto_adjust=False,
                actions=False,
            )
        except Exception as exc:
            raise DataProviderError(
                f"yfinance request failed for {self.symbol} ({self.ticker}): {exc}"
            ) from exc
        return self._to_ohlcv(history)

    def _to_ohlcv(self, history: Any) -> pd.DataFrame:
        frame = pd.DataFrame(history) if history is not None else pd.DataFrame()
        if frame.empty:
            raise DataProviderError(f"yfinance returned no rows for {self.symbol} ({self.ticker})")

        frame = frame.rename(columns=lambda column: str(column).strip().lower())
        missing = [name for name in ("open", "high", "low", "close") if name not in frame.columns]
        if missing:
            raise DataProviderError(
                f"yfinance payload for {self.symbol} ({self.ticker}) is missing "
                f"{', '.join(missing)}"
            )
        if "volume" not in frame.columns:
            frame["volume"] = 0.0

        ohlcv = frame[OHLCV_COLUMNS].apply(pd.to_numeric, errors="coerce")
        ohlcv.index = pd.DatetimeIndex(pd.to_datetime(frame.index, utc=True), name="end_time")
        ohlcv["volume"] = ohlcv["volume"].fillna(0.0)
        ohlcv = ohlcv.dropna(subset=["open", "high", "low", "close"]).sort_index()
        if ohlcv.empty:
            raise DataProviderError(f"yfinance returned no rows for {self.symbol} ({self.ticker})")
        return ohlcv

    @staticmethod
    def _period_for_interval(interval: str) -> str:
        # Yahoo only serves roughly two months of hourly history.
        if interval == "60m":
            return "60d"
        return "max"
