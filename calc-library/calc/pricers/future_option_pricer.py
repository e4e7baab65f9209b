"""Pricer for generic future option trades (valued from the market price)."""

from __future__ import annotations

from calc.basics import CurrencyAmount
from calc.interfaces import MarketData
from calc.pricers.base import BasePricer
from calc.products.future_option import GenericFutureOptionTrade


class GenericFutureOptionTradePricer(BasePricer):
    """Pricer for generic future option trades."""

    def present_value(self, trade: GenericFutureOptionTrade, market: MarketData) -> CurrencyAmount:
        """PV = price / tick_size * tick_value * quantity."""
        price = market.quote(trade.security_id)
        return self.present_value_from_price(trade, price)

    @staticmethod
    def present_value_from_price(trade: GenericFutureOptionTrade, price: float) -> CurrencyAmount:
        product = trade.product
        ticks = price / product.tick_size
        return CurrencyAmount(product.currency, ticks * product.tick_value * trade.quantity)
