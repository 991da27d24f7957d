"""CSV-backed market port."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from indicatornode.data.symbols import split_market_symbol
from indicatornode.domain.models import Bar, Interval
from indicatornode.errors import DataProviderError
from indicatornode.series import OHLCV_COLUMNS, frame_to_bars


class CsvMarketPort:
    """Load OHLCV bars for one symbol from `<data_dir>/<interval>/<SYMBOL>.csv`.

    A missing file means the port has no source for that interval. Weekly bars
    fall back to a resample of the daily file when no weekly file exists.
    """

    date_column_candidates = ("date", "datetime", "timestamp", "end_time")

    def __init__(self, data_dir: str, symbol: str, resample_weekly: bool = True) -> None:
        self.data_dir = Path(data_dir)
        self.symbol = symbol
        self.resample_weekly = resample_weekly
        self._frames: dict[Interval, pd.DataFrame | None] = {}

    @property
    def daily_data(self) -> list[Bar] | None:
        return self._bars(Interval.DAY)

    @property
    def hourly_data(self) -> list[Bar] | None:
        return self._bars(Interval.HOUR)

    @property
    def weekly_data(self) -> list[Bar] | None:
        return self._bars(Interval.WEEK)

    def _bars(self, interval: Interval) -> list[Bar] | None:
        frame = self._load_frame(interval)
        if frame is None:
            return None
        return frame_to_bars(frame)

    def _load_frame(self, interval: Interval) -> pd.DataFrame | None:
        if interval in self._frames:
            return self._frames[interval]

        path = self._resolve_path(interval)
        frame: pd.DataFrame | None
        if path is not None:
            frame = self._normalize_csv(pd.read_csv(path), path)
        elif interval is Interval.WEEK and self.resample_weekly:
            daily = self._load_frame(Interval.DAY)
            frame = None if daily is None else resample_weekly(daily)
        else:
            frame = None
        self._frames[interval] = frame
        return frame

    def _resolve_path(self, interval: Interval) -> Path | None:
        market, bare_symbol = split_market_symbol(self.symbol)
        symbol_upper = bare_symbol.upper()
        symbol_lower = bare_symbol.lower()
        interval_dir = self.data_dir / interval.value
        candidates: list[Path] = []
        if market is not None:
            for market_name in (market.upper(), market.lower()):
                candidates.extend(
                    [
                        interval_dir / market_name / f"{symbol_upper}.csv",
                        interval_dir / market_name / f"{symbol_lower}.csv",
                    ]
                )
        candidates.extend(
            [
                interval_dir / f"{symbol_upper}.csv",
                interval_dir / f"{symbol_lower}.csv",
            ]
        )
        seen: set[Path] = set()
        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            if candidate.exists():
                return candidate
        return None

    def _normalize_csv(self, frame: pd.DataFrame, path: Path) -> pd.DataFrame:
        lower_to_original = {str(column).strip().lower(): column for column in frame.columns}
        date_column = self._pick_date_column(lower_to_original, path)
        rename_map = self._build_ohlcv_rename_map(lower_to_original, path)
        normalized = frame.rename(columns=rename_map)
        normalized.index = pd.DatetimeIndex(
            pd.to_datetime(normalized[date_column], utc=False), name="end_time"
        )
        if "volume" not in normalized.columns:
            normalized["volume"] = 0.0
        normalized = normalized.sort_index()
        normalized = normalized[OHLCV_COLUMNS].copy()
        normalized = normalized.apply(pd.to_numeric, errors="coerce")
        normalized = normalized.dropna(subset=["open", "high", "low", "close"])
        normalized["volume"] = normalized["volume"].fillna(0.0)
        if normalized.empty:
            raise DataProviderError(f"{path}: data has no valid OHLC rows")
        return normalized

    def _pick_date_column(self, lower_to_original: dict[str, str], path: Path) -> str:
        for candidate in self.date_column_candidates:
            if candidate in lower_to_original:
                return lower_to_original[candidate]
        candidates = ", ".join(self.date_column_candidates)
        raise DataProviderError(f"{path}: CSV missing date column. Expected one of: {candidates}")

    @staticmethod
    def _build_ohlcv_rename_map(
        lower_to_original: dict[str, str],
        path: Path,
    ) -> dict[str, str]:
        rename_map: dict[str, str] = {}
        for name in ("open", "high", "low", "close"):
            source = lower_to_original.get(name)
            if source is None:
                raise DataProviderError(f"{path}: CSV missing required column '{name}'")
            rename_map[source] = name
        volume_source = lower_to_original.get("volume")
        if volume_source is not None:
            rename_map[volume_source] = "volume"
        return rename_map


def resample_weekly(daily: pd.DataFrame) -> pd.DataFrame:
    """Aggregate daily OHLCV rows into Sunday-ending weekly rows."""
    weekly = daily.resample("W-SUN").agg(
        {
            "open": "first",
            "high": "max",
            "low": "min",
            "close": "last",
            "volume": "sum",
        }
    )
    weekly = weekly.dropna(subset=["open", "high", "low", "close"])
    weekly.index.name = "end_time"
    return weekly[OHLCV_COLUMNS]
