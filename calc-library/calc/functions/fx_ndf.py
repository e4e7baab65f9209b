"""Calculation function for FX non-deliverable forward trades."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Optional

from calc.basics import Currency, CurrencyAmount
from calc.functions.base import BaseCalculationFunction, per_scenario
from calc.interfaces import MarketData
from calc.keys import DiscountCurveKey, FxRateKey, MarketDataKey
from calc.measure import FX_DELTA, PAR_RATE, PRESENT_VALUE, PV01, Measure
from calc.pricers.fx_ndf_pricer import FxNdfTradePricer
from calc.products.fx_ndf import FxNdfTrade
from calc.requirements import FunctionRequirements
from calc.risk import FXDelta, PV01Parallel

_PRICER = FxNdfTradePricer()


def _present_value(trade: FxNdfTrade, market: MarketData) -> CurrencyAmount:
    return _PRICER.present_value(trade, market)


def _par_rate(trade: FxNdfTrade, market: MarketData) -> float:
    return _PRICER.forward_fx_rate(trade, market)


def _pv01(trade: FxNdfTrade, market: MarketData) -> CurrencyAmount:
    """Sum of the 1bp parallel PV01 of both discount curves."""
    ndf = trade.product
    total = CurrencyAmount.zero(ndf.settlement_currency)
    for ccy in (ndf.settlement_currency, ndf.non_deliverable_currency):
        total = total + PV01Parallel(_PRICER, ccy).compute(trade, market)
    return total


def _fx_delta(trade: FxNdfTrade, market: MarketData) -> float:
    return FXDelta(_PRICER, trade.product.index.pair).compute(trade, market)


class FxNdfCalculationFunction(BaseCalculationFunction[FxNdfTrade]):
    """
    Calculates measures for a single FxNdfTrade in each scenario.

    Supported measures:
    - PRESENT_VALUE: PV in the settlement currency
    - PAR_RATE: forward FX rate at the payment date (other per settlement)
    - PV01: PV change for a 1bp shift of each discount curve, summed
    - FX_DELTA: PV sensitivity to the index FX rate
    """

    target_type = FxNdfTrade
    calculators = MappingProxyType({
        PRESENT_VALUE: per_scenario(_present_value),
        PAR_RATE: per_scenario(_par_rate),
        PV01: per_scenario(_pv01),
        FX_DELTA: per_scenario(_fx_delta),
    })

    def default_reporting_currency(self, trade: FxNdfTrade) -> Optional[Currency]:
        return trade.product.settlement_currency

    def requirements(self, trade: FxNdfTrade, measures: Iterable[Measure]) -> FunctionRequirements:
        ndf = trade.product
        keys: set[MarketDataKey] = set()
        if self.supported_measures().intersection(measures):
            keys.update((
                DiscountCurveKey(ndf.settlement_currency),
                DiscountCurveKey(ndf.non_deliverable_currency),
                FxRateKey(ndf.index.pair),
            ))
        return FunctionRequirements.of(single_values=keys, output_currencies=[ndf.settlement_currency])
