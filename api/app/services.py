"""Service layer: convert GraphQL inputs to calculation library objects and run the engine."""

from __future__ import annotations

import logging
from typing import Any, Union

from calc.basics import BuySell, Currency, CurrencyAmount, CurrencyPair, FxIndex, FxRate, StandardId
from calc.config import EngineConfig
from calc.curves import ZeroRateCurve
from calc.engine import CalculationEngine, CalculationResults, create_default_engine
from calc.keys import DiscountCurveKey, FxRateKey, MarketDataKey, QuoteKey
from calc.market import ScenarioMarketData
from calc.measure import Measure
from calc.products import (
    TARGET_TYPES,
    FxNdfTrade,
    FxNonDeliverableForward,
    GenericFutureOption,
    GenericFutureOptionTrade,
)
from calc.requirements import FunctionRequirements
from calc.result import Result
from calc.scenario import ScenarioResult

from app.types import (
    CalculationCell,
    CalculationGrid,
    CalculationRow,
    FailureInfo,
    FutureOptionTradeInput,
    FxNdfTradeInput,
    MarketDataInput,
    RequirementsResult,
    TradeInput,
)

logger = logging.getLogger(__name__)

Trade = Union[GenericFutureOptionTrade, FxNdfTrade]

config = EngineConfig.from_env()
engine: CalculationEngine = create_default_engine(config)


def _future_option_from_input(t: FutureOptionTradeInput) -> GenericFutureOptionTrade:
    """Build GenericFutureOptionTrade from GraphQL FutureOptionTradeInput."""
    product = GenericFutureOption(
        security_id=StandardId.parse(t.security_id),
        currency=Currency.of(t.currency),
        tick_size=t.tick_size,
        tick_value=t.tick_value,
    )
    return GenericFutureOptionTrade(product=product, quantity=t.quantity, trade_id=t.trade_id)


def _fx_ndf_from_input(t: FxNdfTradeInput) -> FxNdfTrade:
    """Build FxNdfTrade from GraphQL FxNdfTradeInput."""
    try:
        buy_sell = BuySell(t.buy_sell.strip().upper())
    except ValueError:
        raise ValueError(f"fxNdf.buySell must be BUY or SELL, got {t.buy_sell!r}") from None
    pair = CurrencyPair.parse(t.currency_pair)
    product = FxNonDeliverableForward(
        buy_sell=buy_sell,
        settlement_currency=Currency.of(t.settlement_currency),
        notional=t.notional,
        agreed_fx_rate=FxRate(pair, t.agreed_fx_rate),
        payment_date=t.payment_date,
        index=FxIndex(t.index_name or str(pair), pair),
    )
    return FxNdfTrade(product=product, trade_id=t.trade_id)


def trades_from_input(trades: list[TradeInput]) -> list[Trade]:
    """Build trades from GraphQL TradeInputs, keeping request order."""
    result: list[Trade] = []
    for i, t in enumerate(trades):
        given = [x for x in (t.future_option, t.fx_ndf) if x is not None]
        if len(given) != 1:
            raise ValueError(f"trades[{i}]: exactly one of futureOption, fxNdf must be given")
        if t.future_option is not None:
            result.append(_future_option_from_input(t.future_option))
        else:
            result.append(_fx_ndf_from_input(t.fx_ndf))
    return result


def measures_from_input(measures: list[str]) -> list[Measure]:
    if not measures:
        raise ValueError("measures must not be empty")
    return [Measure.of(m) for m in measures]


def market_data_from_input(m: MarketDataInput) -> ScenarioMarketData:
    """
    Build ScenarioMarketData from GraphQL MarketDataInput.

    A value list of length one is shared by every scenario; otherwise it must
    have one value per scenario.
    """
    scenario_values: dict[MarketDataKey, list[Any]] = {}
    shared_values: dict[MarketDataKey, Any] = {}

    def add(key: MarketDataKey, values: list[float]) -> None:
        if key in scenario_values or key in shared_values:
            raise ValueError(f"marketData: '{key}' given more than once")
        if not values:
            raise ValueError(f"marketData: '{key}' has no values")
        if len(values) == 1:
            shared_values[key] = values[0]
        else:
            scenario_values[key] = list(values)

    for q in m.quotes or []:
        add(QuoteKey(StandardId.parse(q.security_id)), q.values)
    for fx in m.fx_rates or []:
        add(FxRateKey(CurrencyPair.parse(fx.pair)), fx.values)
    for c in m.curves or []:
        ccy = Currency.of(c.currency)
        key = DiscountCurveKey(ccy)
        if key in shared_values:
            raise ValueError(f"marketData: '{key}' given more than once")
        shared_values[key] = ZeroRateCurve(ccy, list(c.pillars), list(c.zero_rates))
    return ScenarioMarketData(
        valuation_date=m.valuation_date,
        scenario_count=m.scenario_count,
        scenario_values=scenario_values,
        shared_values=shared_values,
    )


def _target_type_named(name: str) -> type:
    for target_type in TARGET_TYPES:
        if target_type.__name__ == name:
            return target_type
    known = ", ".join(t.__name__ for t in TARGET_TYPES)
    raise ValueError(f"Unknown target type '{name}'. Known target types: {known}")


def supported_measures(target_type: str) -> list[str]:
    """Names of the measures the function bound to `target_type` supports, sorted."""
    bound = _target_type_named(target_type)
    function = engine.registry.function_for_type(bound)
    return [m.name for m in sorted(function.supported_measures())]


def requirements_for(trades: list[TradeInput], measures: list[str]) -> RequirementsResult:
    reqs: FunctionRequirements = engine.requirements(trades_from_input(trades), measures_from_input(measures))
    return RequirementsResult(
        keys=sorted(str(k) for k in reqs.single_values),
        output_currencies=sorted(str(c) for c in reqs.output_currencies),
    )


def _cell(measure: Measure, result: Result[ScenarioResult[Any]]) -> CalculationCell:
    if result.is_failure:
        failure = result.failure_info
        return CalculationCell(
            measure=measure.name,
            failure=FailureInfo(reason=failure.reason.value, message=failure.message),
        )
    values = list(result.value)
    currencies = {v.currency for v in values if isinstance(v, CurrencyAmount)}
    if currencies:
        if len(currencies) > 1:
            raise ValueError(f"{measure}: mixed currencies across scenarios")
        return CalculationCell(
            measure=measure.name,
            values=[v.amount for v in values],
            currency=str(currencies.pop()),
        )
    return CalculationCell(measure=measure.name, values=[float(v) for v in values])


def _grid(results: CalculationResults, scenario_count: int) -> CalculationGrid:
    rows = [
        CalculationRow(
            trade_id=getattr(target, "trade_id", None),
            target_type=type(target).__name__,
            cells=[_cell(m, results.cell(i, m)) for m in results.measures],
        )
        for i, target in enumerate(results.targets)
    ]
    return CalculationGrid(
        measures=[m.name for m in results.measures],
        scenario_count=scenario_count,
        rows=rows,
    )


def calculate(
    trades: list[TradeInput],
    measures: list[str],
    market_data: MarketDataInput,
) -> CalculationGrid:
    """Calculate every measure for every trade across the scenarios of `market_data`."""
    md = market_data_from_input(market_data)
    targets = trades_from_input(trades)
    results = engine.calculate(targets, measures_from_input(measures), md)
    logger.debug("Returning grid with %d failed cells", len(results.failures()))
    return _grid(results, md.scenario_count)
