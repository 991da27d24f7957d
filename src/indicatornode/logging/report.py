"""Plotly chart of an indicator against the closing price."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import plotly.express as px

from indicatornode.domain.models import Indicator, IndicatorKind


def generate_plotly_report(
    series: pd.DataFrame,
    values: pd.Series,
    indicator: Indicator,
    output_html_path: str,
) -> None:
    """Render close price and indicator readings to an interactive HTML file."""
    output = Path(output_html_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    name = str(series.attrs.get("name") or "series")
    frame = pd.DataFrame(
        {
            "end_time": series.index,
            "close": series["close"].to_numpy(),
            indicator.value: values.to_numpy(),
        }
    )
    finite = values.dropna()
    latest = f"{float(finite.iloc[-1]):,.4f}" if not finite.empty else "none"
    title = f"{name} | {indicator.value} latest {latest}"

    if _shares_price_scale(indicator):
        long_frame = frame.melt(
            id_vars="end_time",
            value_vars=["close", indicator.value],
            var_name="line",
            value_name="value",
        )
        figure = px.line(long_frame, x="end_time", y="value", color="line", title=title)
    else:
        figure = px.line(frame, x="end_time", y=indicator.value, title=title)
    figure.write_html(str(output), include_plotlyjs="cdn")


def _shares_price_scale(indicator: Indicator) -> bool:
    # Oscillators and widths are percentages, not prices.
    return indicator.spec.kind not in {
        IndicatorKind.RSI,
        IndicatorKind.ROC,
        IndicatorKind.BOLLINGER_WIDTH,
    }
