"""Market-prefixed symbol handling shared by the ports."""

from __future__ import annotations

CRYPTO_MARKET = "CRYPTO"
FX_MARKET = "FX"
_CRYPTO_QUOTES = ("USDT", "USD")


def split_market_symbol(symbol: str) -> tuple[str | None, str]:
    """Split `MARKET:SYMBOL` into its parts; unprefixed symbols have no market."""
    value = symbol.strip()
    market, separator, bare_symbol = value.partition(":")
    if not separator or not market.strip() or not bare_symbol.strip():
        return None, value
    return market.strip().upper(), bare_symbol.strip()


def to_yfinance_ticker(symbol: str) -> str:
    """Map a symbol onto Yahoo's ticker scheme.

    Only explicit markets are rewritten: `CRYPTO:BTCUSDT` becomes `BTC-USD` and
    `FX:EURUSD` becomes `EURUSD=X`. Anything else is passed through upper-cased.
    """
    market, bare_symbol = split_market_symbol(symbol)
    compact = bare_symbol.upper().replace("/", "").replace("-", "")
    if market == CRYPTO_MARKET:
        for quote in _CRYPTO_QUOTES:
            if compact.endswith(quote) and len(compact) > len(quote):
                return f"{compact[: -len(quote)]}-USD"
        return compact
    if market == FX_MARKET:
        return f"{compact}=X"
    return bare_symbol.upper()
