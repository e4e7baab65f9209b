"""
Basic financial value objects consumed by the calculation core.

These are intentionally narrow: currencies, currency pairs and FX rates,
currency amounts, security identifiers and a buy/sell flag. They are
immutable (frozen dataclasses) and validate themselves on construction,
raising ValueError for malformed input.

Dates are plain `datetime.date`; year fractions use ACT/365F.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


@dataclass(frozen=True, order=True)
class Currency:
    """ISO-4217 style currency: three upper-case letters (e.g. 'USD')."""

    code: str

    def __post_init__(self) -> None:
        if len(self.code) != 3 or not self.code.isascii() or not self.code.isalpha() or not self.code.isupper():
            raise ValueError(f"Invalid currency code: {self.code!r}")

    @classmethod
    def of(cls, code: str) -> Currency:
        """Parse a currency code, normalising case and surrounding whitespace."""
        return cls(code.strip().upper())

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class CurrencyPair:
    """Ordered pair of currencies, e.g. USD/INR (base USD, counter INR)."""

    base: Currency
    counter: Currency

    def __post_init__(self) -> None:
        if self.base == self.counter:
            raise ValueError(f"Currency pair must have distinct currencies: {self.base}/{self.counter}")

    @classmethod
    def of(cls, base: Currency | str, counter: Currency | str) -> CurrencyPair:
        b = base if isinstance(base, Currency) else Currency.of(base)
        c = counter if isinstance(counter, Currency) else Currency.of(counter)
        return cls(b, c)

    @classmethod
    def parse(cls, text: str) -> CurrencyPair:
        """Parse 'USD/INR' (or 'USDINR')."""
        s = text.strip()
        if "/" in s:
            base, _, counter = s.partition("/")
        elif len(s) == 6:
            base, counter = s[:3], s[3:]
        else:
            raise ValueError(f"Invalid currency pair: {text!r}")
        return cls.of(base, counter)

    def inverse(self) -> CurrencyPair:
        return CurrencyPair(self.counter, self.base)

    def contains(self, currency: Currency) -> bool:
        return currency == self.base or currency == self.counter

    def is_inverse(self, other: CurrencyPair) -> bool:
        return self.base == other.counter and self.counter == other.base

    def other(self, currency: Currency) -> Currency:
        """Return the currency of the pair that is not `currency`."""
        if currency == self.base:
            return self.counter
        if currency == self.counter:
            return self.base
        raise ValueError(f"Currency {currency} is not part of {self}")

    def __str__(self) -> str:
        return f"{self.base}/{self.counter}"


@dataclass(frozen=True)
class FxRate:
    """FX rate: one unit of `pair.base` is worth `rate` units of `pair.counter`."""

    pair: CurrencyPair
    rate: float

    def __post_init__(self) -> None:
        if not self.rate > 0:
            raise ValueError(f"FX rate must be positive, got {self.rate}")

    def inverse(self) -> FxRate:
        return FxRate(self.pair.inverse(), 1.0 / self.rate)

    def rate_for(self, base: Currency, counter: Currency) -> float:
        """Rate expressed as `counter` per unit of `base`."""
        if base == self.pair.base and counter == self.pair.counter:
            return self.rate
        if base == self.pair.counter and counter == self.pair.base:
            return 1.0 / self.rate
        raise ValueError(f"Rate for {base}/{counter} cannot be derived from {self.pair}")


@dataclass(frozen=True)
class FxIndex:
    """FX fixing index, e.g. 'USD/INR-FBIL', observing the rate of `pair`."""

    name: str
    pair: CurrencyPair

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CurrencyAmount:
    """An amount of money in a single currency."""

    currency: Currency
    amount: float

    @classmethod
    def zero(cls, currency: Currency) -> CurrencyAmount:
        return cls(currency, 0.0)

    def __add__(self, other: CurrencyAmount) -> CurrencyAmount:
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        if other.currency != self.currency:
            raise ValueError(f"Cannot add {other.currency} amount to {self.currency} amount")
        return CurrencyAmount(self.currency, self.amount + other.amount)

    def __sub__(self, other: CurrencyAmount) -> CurrencyAmount:
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> CurrencyAmount:
        return CurrencyAmount(self.currency, -self.amount)

    def __mul__(self, factor: float) -> CurrencyAmount:
        return CurrencyAmount(self.currency, self.amount * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"


@dataclass(frozen=True)
class StandardId:
    """Identifier within a scheme, e.g. OG-Ticker~ABC. Rendered as 'scheme~value'."""

    scheme: str
    value: str

    def __post_init__(self) -> None:
        if not self.scheme or "~" in self.scheme:
            raise ValueError(f"Invalid identifier scheme: {self.scheme!r}")
        if not self.value:
            raise ValueError("Identifier value must not be empty")

    @classmethod
    def parse(cls, text: str) -> StandardId:
        scheme, sep, value = text.partition("~")
        if not sep:
            raise ValueError(f"Invalid standard identifier, expected 'scheme~value': {text!r}")
        return cls(scheme, value)

    def __str__(self) -> str:
        return f"{self.scheme}~{self.value}"


class BuySell(str, Enum):
    """Direction of a trade from the point of view of the holder."""

    BUY = "BUY"
    SELL = "SELL"

    def normalize(self, amount: float) -> float:
        """Positive amount when buying, negative when selling (sign of input ignored)."""
        return abs(amount) if self is BuySell.BUY else -abs(amount)


def year_fraction(start: date, end: date) -> float:
    """ACT/365F year fraction between two dates (negative if end < start)."""
    return (end - start).days / 365.0
