"""FX delta risk measure (spot bump, finite difference)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from calc.basics import CurrencyPair
from calc.interfaces import MarketData
from calc.keys import FxRateKey
from calc.pricers.base import BasePricer
from calc.risk.base import BaseRiskMeasure


@dataclass(frozen=True)
class FXDelta(BaseRiskMeasure):
    """FX delta: (PV(bumped) - PV(base)) / (spot_bumped - spot)."""

    pricer: BasePricer
    pair: CurrencyPair
    bump_pct: float = 0.01

    @property
    def name(self) -> str:
        return f"FXDelta_{self.pair.base}{self.pair.counter}"

    def compute(self, trade: Any, market: MarketData) -> float:
        """Finite-difference delta with relative spot bump, in the trade currency per unit of rate."""
        key = FxRateKey(self.pair)
        spot = float(market.value(key))
        spot_bumped = spot * (1.0 + self.bump_pct)
        bumped_market = market.with_value(key, spot_bumped)
        pv_base = self.pricer.present_value(trade, market)
        pv_bumped = self.pricer.present_value(trade, bumped_market)
        return (pv_bumped.amount - pv_base.amount) / (spot_bumped - spot)
