"""Market port implementations."""

from .base import MarketPort, StaticMarketPort, bars_for_interval
from .csv_data import CsvMarketPort
from .symbols import split_market_symbol, to_yfinance_ticker
from .yfinance_data import YFinanceMarketPort

__all__ = [
    "MarketPort",
    "StaticMarketPort",
    "bars_for_interval",
    "CsvMarketPort",
    "YFinanceMarketPort",
    "split_market_symbol",
    "to_yfinance_ticker",
]
