"""Concise human-readable evaluation logger."""

from __future__ import annotations

import logging
from decimal import Decimal


class HumanLogger:
    """Console logger with fixed line types."""

    def __init__(self, level: str = "INFO") -> None:
        self._logger = logging.getLogger("indicatornode")
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._logger.propagate = False
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def evaluation_started(self, symbol: str, indicator: str, interval: str, source: str) -> None:
        self._logger.debug(
            "evaluate | %s | %s | %s | source %s", symbol, indicator, interval, source
        )

    def value(self, symbol: str, indicator: str, interval: str, value: Decimal) -> None:
        self._logger.info(
            "value | %s | %s | %s | %s", symbol, indicator, interval, self._format_value(value)
        )

    def no_data(self, symbol: str, interval: str) -> None:
        self._logger.warning("no-data | %s | %s", symbol, interval)

    def report(self, path: str) -> None:
        self._logger.info("report | %s", path)

    def error(self, message: str) -> None:
        self._logger.error("error | %s", message)

    @staticmethod
    def _format_value(value: Decimal, precision: int = 6) -> str:
        quantized = f"{value:,.{max(0, precision)}f}".rstrip("0").rstrip(".")
        if quantized in {"", "-", "-0"}:
            return "0"
        return quantized
