"""Calculation function for generic future option trades."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Optional

from calc.basics import Currency, CurrencyAmount
from calc.functions.base import BaseCalculationFunction, per_scenario
from calc.interfaces import MarketData
from calc.keys import MarketDataKey, QuoteKey
from calc.measure import PRESENT_VALUE, Measure
from calc.pricers.future_option_pricer import GenericFutureOptionTradePricer
from calc.products.future_option import GenericFutureOptionTrade
from calc.requirements import FunctionRequirements

_PRICER = GenericFutureOptionTradePricer()


def _present_value(trade: GenericFutureOptionTrade, market: MarketData) -> CurrencyAmount:
    return _PRICER.present_value(trade, market)


class GenericFutureOptionCalculationFunction(BaseCalculationFunction[GenericFutureOptionTrade]):
    """
    Calculates measures for a single GenericFutureOptionTrade in each scenario.

    Supported measures: PRESENT_VALUE, from the market quote of the option
    security.
    """

    target_type = GenericFutureOptionTrade
    calculators = MappingProxyType({
        PRESENT_VALUE: per_scenario(_present_value),
    })

    def default_reporting_currency(self, trade: GenericFutureOptionTrade) -> Optional[Currency]:
        return trade.currency

    def requirements(
        self,
        trade: GenericFutureOptionTrade,
        measures: Iterable[Measure],
    ) -> FunctionRequirements:
        keys: set[MarketDataKey] = set()
        if self.supported_measures().intersection(measures):
            keys.add(QuoteKey(trade.security_id))
        return FunctionRequirements.of(single_values=keys, output_currencies=[trade.currency])
