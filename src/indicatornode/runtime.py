"""Runtime wiring for a single indicator evaluation."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from indicatornode.config import Settings
from indicatornode.data.base import MarketPort, bars_for_interval
from indicatornode.data.csv_data import CsvMarketPort
from indicatornode.data.yfinance_data import YFinanceMarketPort
from indicatornode.errors import IndicatorNodeError
from indicatornode.evaluator import build_indicator
from indicatornode.logging.logger import HumanLogger
from indicatornode.logging.report import generate_plotly_report
from indicatornode.node import IndicatorValueNode, ValueNode
from indicatornode.series import build_series, series_name

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_DATA = 3


def evaluate(settings: Settings) -> int:
    """Evaluate the configured indicator once and log the reading."""
    human_logger = HumanLogger(level=settings.log_level)
    human_logger.evaluation_started(
        settings.symbol,
        settings.indicator.value,
        settings.interval.value,
        settings.data_source,
    )
    try:
        port = build_market_port(settings)
        node: ValueNode = IndicatorValueNode(port, settings.indicator, settings.interval)
        result = node.get_value(datetime.now(tz=UTC))
        if result is None:
            human_logger.no_data(settings.symbol, settings.interval.value)
            return EXIT_NO_DATA
        human_logger.value(
            settings.symbol,
            settings.indicator.value,
            settings.interval.value,
            Decimal(str(result)),
        )
        if settings.report_path:
            write_report(settings, port)
            human_logger.report(settings.report_path)
    except IndicatorNodeError as exc:
        human_logger.error(str(exc))
        return EXIT_ERROR
    return EXIT_OK


def write_report(settings: Settings, port: MarketPort) -> None:
    """Chart the full indicator history the evaluation was read from."""
    if settings.report_path is None:
        return None
    bars = bars_for_interval(port, settings.interval) or []
    series = build_series(bars, name=series_name(settings.interval))
    values = build_indicator(settings.indicator, series)
    generate_plotly_report(series, values, settings.indicator, settings.report_path)
    return None


def build_market_port(settings: Settings) -> MarketPort:
    if settings.data_source == "yfinance":
        return YFinanceMarketPort(settings.symbol)
    return CsvMarketPort(settings.historical_data_dir, settings.symbol)
