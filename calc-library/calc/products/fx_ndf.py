"""FX non-deliverable forward (data only; calculations via CalculationFunction)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from calc.basics import BuySell, Currency, FxIndex, FxRate


@dataclass(frozen=True)
class FxNonDeliverableForward:
    """
    FX non-deliverable forward (NDF).

    The two currencies are exchanged at `agreed_fx_rate` on `payment_date`,
    but only the net difference against the `index` fixing is paid, in the
    settlement currency. `notional` is in the settlement currency; buying
    means receiving the settlement currency leg.
    """

    buy_sell: BuySell
    settlement_currency: Currency
    notional: float
    agreed_fx_rate: FxRate
    payment_date: date
    index: FxIndex

    def __post_init__(self) -> None:
        if self.notional < 0:
            raise ValueError(f"notional must not be negative, got {self.notional}")
        pair = self.index.pair
        if not pair.contains(self.settlement_currency):
            raise ValueError("FxIndex and settlement currency are incompatible")
        if not (pair == self.agreed_fx_rate.pair or pair.is_inverse(self.agreed_fx_rate.pair)):
            raise ValueError("FxIndex and agreed FX rate are incompatible")

    @property
    def currency(self) -> Currency:
        return self.settlement_currency

    @property
    def non_deliverable_currency(self) -> Currency:
        return self.agreed_fx_rate.pair.other(self.settlement_currency)

    @property
    def signed_notional(self) -> float:
        return self.buy_sell.normalize(self.notional)


@dataclass(frozen=True)
class FxNdfTrade:
    """Trade in an FX non-deliverable forward."""

    product: FxNonDeliverableForward
    trade_id: Optional[str] = None
    trade_date: Optional[date] = None

    @property
    def currency(self) -> Currency:
        return self.product.settlement_currency
