"""
Discount curve used as a market data value.

Kept deliberately simple:
- Times are **year fractions** from the valuation date.
- Rates are **continuously compounded zero rates**, interpolated linearly
  between pillars and extrapolated flat beyond the first/last pillar.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from dataclasses import dataclass

from calc.basics import Currency


@dataclass(frozen=True)
class ZeroRateCurve:
    """
    Zero rate curve for one currency.

    Implements the Curve protocol structurally (no explicit inheritance).
    """

    currency: Currency
    pillars: tuple[float, ...]
    zero_rates: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pillars", tuple(self.pillars))
        object.__setattr__(self, "zero_rates", tuple(self.zero_rates))
        if len(self.pillars) != len(self.zero_rates):
            raise ValueError("pillars and zero_rates must have the same length")
        if not self.pillars:
            raise ValueError("curve must have at least one pillar")
        if any(b <= a for a, b in zip(self.pillars, self.pillars[1:])):
            raise ValueError("pillars must be strictly increasing")

    @property
    def name(self) -> str:
        return f"{self.currency}-DSC"

    def zero_rate(self, t: float) -> float:
        """CC zero rate at year fraction t (t >= 0)."""
        if t < 0:
            raise ValueError("t must be >= 0")
        pillars, rates = self.pillars, self.zero_rates
        if t <= pillars[0]:
            return rates[0]
        if t >= pillars[-1]:
            return rates[-1]
        i = bisect_left(pillars, t)
        t0, t1 = pillars[i - 1], pillars[i]
        r0, r1 = rates[i - 1], rates[i]
        return r0 + (r1 - r0) * (t - t0) / (t1 - t0)

    def df(self, t: float) -> float:
        """Discount factor exp(-r(t) * t)."""
        return math.exp(-self.zero_rate(t) * t)

    def bumped(self, shift: float) -> ZeroRateCurve:
        """New curve with all zero rates shifted by `shift` (1bp = 0.0001)."""
        return ZeroRateCurve(
            currency=self.currency,
            pillars=self.pillars,
            zero_rates=tuple(r + shift for r in self.zero_rates),
        )
