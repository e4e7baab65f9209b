"""
Protocol-based interfaces for the extension points of the calculation core.

Using typing.Protocol enables structural subtyping: a new curve type, target
type or calculation function only has to provide the methods below, without
inheriting from anything in this library.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from calc.basics import Currency, StandardId
    from calc.keys import MarketDataKey
    from calc.market import ScenarioMarketData
    from calc.measure import Measure
    from calc.requirements import FunctionRequirements
    from calc.result import Result
    from calc.scenario import ScenarioResult


@runtime_checkable
class Curve(Protocol):
    """Discount curve: discount factors by year fraction, plus parallel bumping."""

    def df(self, t: float) -> float:
        """Return discount factor to time t (year-fraction)."""
        ...

    def bumped(self, shift: float) -> Curve:
        """Return new curve with parallel additive rate shift."""
        ...


@runtime_checkable
class CalculationTarget(Protocol):
    """
    Something calculations are performed on, typically a trade.

    Targets are immutable data; the function handling a target is found
    from its runtime type.
    """

    @property
    def currency(self) -> Currency:
        """Currency the target is priced in."""
        ...


class MarketData(Protocol):
    """Market data of a single scenario."""

    @property
    def valuation_date(self) -> date:
        ...

    def value(self, key: MarketDataKey) -> Any:
        ...

    def quote(self, standard_id: StandardId) -> float:
        ...

    def discount_curve(self, currency: Currency) -> Curve:
        ...

    def fx_rate(self, base: Currency, counter: Currency) -> float:
        ...

    def with_value(self, key: MarketDataKey, value: Any) -> MarketData:
        ...


class CalculationFunction(Protocol):
    """
    Calculates measures for one target type across a set of scenarios.

    Exactly one function is bound to each target type by the FunctionRegistry.
    """

    def supported_measures(self) -> frozenset[Measure]:
        """The fixed set of measures this function can calculate."""
        ...

    def default_reporting_currency(self, target: Any) -> Optional[Currency]:
        """Currency to report results in when the caller gives none, or None."""
        ...

    def requirements(self, target: Any, measures: Iterable[Measure]) -> FunctionRequirements:
        """Market data needed to calculate all of `measures` for `target`."""
        ...

    def calculate(
        self,
        target: Any,
        measures: Iterable[Measure],
        market_data: ScenarioMarketData,
    ) -> Mapping[Measure, Result[ScenarioResult[Any]]]:
        """One result per requested measure."""
        ...
