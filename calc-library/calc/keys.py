"""
Market data keys.

A key identifies one piece of market data, both when a function declares its
requirements and when it reads the value back from scenario market data.
Keys are frozen dataclasses, so equality and hashing are structural.
"""

from __future__ import annotations

from dataclasses import dataclass

from calc.basics import Currency, CurrencyPair, StandardId


@dataclass(frozen=True)
class MarketDataKey:
    """Base class for market data keys."""


@dataclass(frozen=True)
class QuoteKey(MarketDataKey):
    """Market quote (price) of a security; the value is a float."""

    standard_id: StandardId

    def __str__(self) -> str:
        return f"Quote:{self.standard_id}"


@dataclass(frozen=True)
class FxRateKey(MarketDataKey):
    """Spot FX rate for a pair; the value is a float (counter per base)."""

    pair: CurrencyPair

    def __str__(self) -> str:
        return f"FxRate:{self.pair}"


@dataclass(frozen=True)
class DiscountCurveKey(MarketDataKey):
    """Discount curve for a currency; the value implements the Curve protocol."""

    currency: Currency

    def __str__(self) -> str:
        return f"DiscountCurve:{self.currency}"
