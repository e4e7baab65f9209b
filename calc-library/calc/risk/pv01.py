"""Parallel PV01 risk measure (bump-and-reprice)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from calc.basics import Currency, CurrencyAmount
from calc.interfaces import MarketData
from calc.keys import DiscountCurveKey
from calc.pricers.base import BasePricer
from calc.risk.base import BaseRiskMeasure


@dataclass(frozen=True)
class PV01Parallel(BaseRiskMeasure):
    """Parallel PV01: PV change for a parallel shift of one currency's discount curve."""

    pricer: BasePricer
    currency: Currency
    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"PV01_{self.currency}"

    def compute(self, trade: Any, market: MarketData) -> CurrencyAmount:
        """PV(bumped) - PV(base)."""
        key = DiscountCurveKey(self.currency)
        bumped_curve = market.discount_curve(self.currency).bumped(self.bump_bp / 10000.0)
        bumped_market = market.with_value(key, bumped_curve)
        return self.pricer.present_value(trade, bumped_market) - self.pricer.present_value(trade, market)
