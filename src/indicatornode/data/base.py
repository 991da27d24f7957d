"""Market port contract."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from indicatornode.domain.models import Bar, Interval


class MarketPort(Protocol):
    """Interface for per-interval bar collections of one instrument."""

    @property
    def daily_data(self) -> Sequence[Bar] | None:
        """Return daily bars, or None when no daily source exists."""

    @property
    def hourly_data(self) -> Sequence[Bar] | None:
        """Return hourly bars, or None when no hourly source exists."""

    @property
    def weekly_data(self) -> Sequence[Bar] | None:
        """Return weekly bars, or None when no weekly source exists."""


def bars_for_interval(port: MarketPort, interval: Interval) -> Sequence[Bar] | None:
    """Select the port accessor matching `interval`."""
    if interval is Interval.DAY:
        return port.daily_data
    if interval is Interval.HOUR:
        return port.hourly_data
    if interval is Interval.WEEK:
        return port.weekly_data
    raise ValueError(f"Unsupported interval: {interval}")


@dataclass(frozen=True)
class StaticMarketPort:
    """In-memory port over prebuilt bar lists."""

    daily_data: Sequence[Bar] | None = None
    hourly_data: Sequence[Bar] | None = None
    weekly_data: Sequence[Bar] | None = None
