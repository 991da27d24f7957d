"""TA-Lib indicator stages over closing-price series.

Each function takes a float series and returns a series aligned to the same
index. Positions inside TA-Lib's lookback window hold NaN.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd
import talib

from indicatornode.domain.models import BOLLINGER_MULTIPLIER, BOLLINGER_PERIOD


def _require_period(period: int) -> None:
    if period <= 0:
        raise ValueError("period must be positive")


def _as_input(close: pd.Series) -> np.ndarray:
    return np.ascontiguousarray(close.to_numpy(dtype=float))


def _aligned(values: np.ndarray, close: pd.Series) -> pd.Series:
    return pd.Series(values, index=close.index, dtype=float)


def _empty_like(close: pd.Series) -> pd.Series:
    return pd.Series(np.array([], dtype=float), index=close.index, dtype=float)


def sma(close: pd.Series, period: int) -> pd.Series:
    """Simple moving average."""
    _require_period(period)
    if close.empty:
        return _empty_like(close)
    return _aligned(talib.SMA(_as_input(close), timeperiod=period), close)


def ema(close: pd.Series, period: int) -> pd.Series:
    """Exponential moving average seeded with the SMA of the first `period` closes."""
    _require_period(period)
    if close.empty:
        return _empty_like(close)
    return _aligned(talib.EMA(_as_input(close), timeperiod=period), close)


def rsi(close: pd.Series, period: int) -> pd.Series:
    """Relative strength index with Wilder smoothing; 0 when prices never move."""
    _require_period(period)
    if close.empty:
        return _empty_like(close)
    return _aligned(talib.RSI(_as_input(close), timeperiod=period), close)


def roc(close: pd.Series, period: int) -> pd.Series:
    """Rate of change in percent against the close `period` bars back."""
    _require_period(period)
    if close.empty:
        return _empty_like(close)
    return _aligned(talib.ROC(_as_input(close), timeperiod=period), close)


@dataclass(frozen=True)
class BollingerBands:
    """Bollinger stages from one BBANDS call."""

    middle: pd.Series
    upper: pd.Series
    lower: pd.Series

    @property
    def width(self) -> pd.Series:
        """Band width as a percentage of the middle band."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return (self.upper - self.lower) / self.middle * 100.0


def bollinger_bands(
    close: pd.Series,
    period: int = BOLLINGER_PERIOD,
    multiplier: float = BOLLINGER_MULTIPLIER,
) -> BollingerBands:
    """Bands around an EMA middle line at `multiplier` population deviations."""
    _require_period(period)
    if close.empty:
        return BollingerBands(_empty_like(close), _empty_like(close), _empty_like(close))
    upper, middle, lower = talib.BBANDS(
        _as_input(close),
        timeperiod=period,
        nbdevup=multiplier,
        nbdevdn=multiplier,
        matype=talib.MA_Type.EMA,
    )
    return BollingerBands(
        middle=_aligned(middle, close),
        upper=_aligned(upper, close),
        lower=_aligned(lower, close),
    )
