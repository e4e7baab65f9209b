"""Pricer for FX non-deliverable forwards (discounting, CIP forward)."""

from __future__ import annotations

from calc.basics import CurrencyAmount, year_fraction
from calc.interfaces import MarketData
from calc.pricers.base import BasePricer
from calc.products.fx_ndf import FxNdfTrade


class FxNdfTradePricer(BasePricer):
    """
    Pricer for FX NDF trades.

    Rates are quoted as non-deliverable currency per unit of settlement
    currency. With S the settlement currency and O the other one:

    - forward = spot * DF_S(T) / DF_O(T)
    - PV (in S) = signed_notional * (DF_S(T) - agreed * DF_O(T) / spot)

    A forward whose payment date is before the valuation date has PV 0.
    """

    def present_value(self, trade: FxNdfTrade, market: MarketData) -> CurrencyAmount:
        ndf = trade.product
        ccy_settle = ndf.settlement_currency
        t = year_fraction(market.valuation_date, ndf.payment_date)
        if t < 0:
            return CurrencyAmount.zero(ccy_settle)
        ccy_other = ndf.non_deliverable_currency
        agreed = ndf.agreed_fx_rate.rate_for(ccy_settle, ccy_other)
        spot = market.fx_rate(ccy_settle, ccy_other)
        df_settle = market.discount_curve(ccy_settle).df(t)
        df_other = market.discount_curve(ccy_other).df(t)
        return CurrencyAmount(ccy_settle, ndf.signed_notional * (df_settle - agreed * df_other / spot))

    def forward_fx_rate(self, trade: FxNdfTrade, market: MarketData) -> float:
        """Forward rate (other per settlement) at the payment date; the par agreed rate."""
        ndf = trade.product
        ccy_settle = ndf.settlement_currency
        ccy_other = ndf.non_deliverable_currency
        t = max(year_fraction(market.valuation_date, ndf.payment_date), 0.0)
        spot = market.fx_rate(ccy_settle, ccy_other)
        df_settle = market.discount_curve(ccy_settle).df(t)
        df_other = market.discount_curve(ccy_other).df(t)
        return spot * df_settle / df_other
