"""Command-line interface for indicator evaluation."""

from __future__ import annotations

import argparse
import sys

from indicatornode.config import Settings
from indicatornode.domain.models import INDICATOR_SPECS, Interval
from indicatornode.errors import ConfigError
from indicatornode.runtime import evaluate


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="Evaluate the latest technical indicator reading for a symbol"
    )
    parser.add_argument(
        "--symbol", type=str, help="Instrument symbol, e.g. SPY, CRYPTO:BTCUSD or FX:EURUSD"
    )
    parser.add_argument("--indicator", type=str, help="Indicator id, e.g. rsi14 or ema21")
    parser.add_argument(
        "--interval",
        type=str,
        help=f"Bar interval ({', '.join(item.value for item in Interval)})",
    )
    parser.add_argument("--data-source", choices=["csv", "yfinance"], help="Data source")
    parser.add_argument("--historical-dir", type=str, help="CSV historical data directory")
    parser.add_argument("--report", type=str, help="Write an HTML indicator chart to this path")
    parser.add_argument("--log-level", type=str, help="Logging level")
    parser.add_argument(
        "--list-indicators",
        action="store_true",
        help="List supported indicator ids and exit",
    )
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, object] = {}
    if args.symbol:
        overrides["symbol"] = args.symbol
    if args.indicator:
        overrides["indicator"] = args.indicator
    if args.interval:
        overrides["interval"] = args.interval
    if args.data_source:
        overrides["data_source"] = args.data_source
    if args.historical_dir:
        overrides["historical_data_dir"] = args.historical_dir
    if args.report:
        overrides["report_path"] = args.report
    if args.log_level:
        overrides["log_level"] = args.log_level.strip().upper()
    return settings.with_overrides(**overrides)


def format_indicator_listing() -> str:
    lines: list[str] = []
    for indicator, spec in INDICATOR_SPECS.items():
        lines.append(
            f"{indicator.value:<18} {spec.kind.value:<18} period {spec.period:<4} "
            f"warmup {spec.warmup_bars}"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.list_indicators:
        print(format_indicator_listing())
        return 0
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}")
        return 2
    return evaluate(settings)


if __name__ == "__main__":
    sys.exit(main())
