"""
Module-level `requirements()` and `calculate()` over the built-in trades.

Call `requirements(trades, measures)` first to learn which market data keys
and output currencies a batch needs. Build a `ScenarioMarketData` holding
those keys, then `calculate(trades, measures, market_data)` returns the
trade x measure grid of per-scenario results. Both delegate to one shared
`CalculationEngine`; build your own registry and engine for other targets.
"""

from typing import Iterable, Sequence, TypeAlias

from calc.engine import CalculationResults, create_default_engine
from calc.market import ScenarioMarketData
from calc.measure import Measure
from calc.products.future_option import GenericFutureOptionTrade
from calc.products.fx_ndf import FxNdfTrade
from calc.requirements import FunctionRequirements


Trade: TypeAlias = GenericFutureOptionTrade | FxNdfTrade

_default_engine = create_default_engine()


def requirements(trades: Iterable[Trade], measures: Iterable[Measure]) -> FunctionRequirements:
    """Market data needed to calculate `measures` for all `trades`."""
    return _default_engine.requirements(trades, measures)


def calculate(
    trades: Sequence[Trade],
    measures: Iterable[Measure],
    market_data: ScenarioMarketData,
) -> CalculationResults:
    """Results grid for `trades` x `measures` (via the default engine)."""
    return _default_engine.calculate(trades, measures, market_data)
