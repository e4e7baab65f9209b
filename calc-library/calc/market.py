"""
Scenario market data.

`ScenarioMarketData` holds the market observations for N scenarios that a
calculation runs against. Each key maps either to one value per scenario or
to a single value shared by every scenario. Calculation functions only read
from it; "modifying" methods return new instances.

`MarketView` is the market of one scenario, as seen by single-scenario
pricing code. Its `with_value` is used by bump-and-reprice risk measures.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterator, Mapping, Sequence

from calc.basics import Currency, CurrencyPair, StandardId
from calc.interfaces import Curve
from calc.keys import DiscountCurveKey, FxRateKey, MarketDataKey, QuoteKey


class MarketDataNotFoundError(KeyError):
    """Raised when a requested market data key is not available."""

    def __init__(self, key: MarketDataKey) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No market data available for '{self.key}'"


class ScenarioMarketData:
    """
    Market data for `scenario_count` scenarios at one valuation date.

    - `scenario_values[key]` must contain exactly one value per scenario
    - `shared_values[key]` is used unchanged in every scenario
    """

    def __init__(
        self,
        valuation_date: date,
        scenario_count: int,
        scenario_values: Mapping[MarketDataKey, Sequence[Any]] | None = None,
        shared_values: Mapping[MarketDataKey, Any] | None = None,
    ) -> None:
        if scenario_count < 1:
            raise ValueError(f"scenario_count must be >= 1, got {scenario_count}")
        self._valuation_date = valuation_date
        self._scenario_count = scenario_count
        self._scenario_values: dict[MarketDataKey, tuple[Any, ...]] = {}
        for key, values in (scenario_values or {}).items():
            values = tuple(values)
            if len(values) != scenario_count:
                raise ValueError(
                    f"Market data for '{key}' has {len(values)} values, expected {scenario_count}"
                )
            self._scenario_values[key] = values
        self._shared_values: dict[MarketDataKey, Any] = dict(shared_values or {})
        overlap = self._scenario_values.keys() & self._shared_values.keys()
        if overlap:
            names = ", ".join(sorted(str(k) for k in overlap))
            raise ValueError(f"Keys given both per-scenario and shared values: {names}")

    @property
    def valuation_date(self) -> date:
        return self._valuation_date

    @property
    def scenario_count(self) -> int:
        return self._scenario_count

    def keys(self) -> frozenset[MarketDataKey]:
        return frozenset(self._scenario_values) | frozenset(self._shared_values)

    def contains(self, key: MarketDataKey) -> bool:
        return key in self._scenario_values or key in self._shared_values

    __contains__ = contains

    def value(self, key: MarketDataKey, scenario_index: int) -> Any:
        """Value of `key` in scenario `scenario_index`."""
        if not 0 <= scenario_index < self._scenario_count:
            raise IndexError(
                f"Scenario index {scenario_index} out of range for {self._scenario_count} scenarios"
            )
        if key in self._scenario_values:
            return self._scenario_values[key][scenario_index]
        if key in self._shared_values:
            return self._shared_values[key]
        raise MarketDataNotFoundError(key)

    def values(self, key: MarketDataKey) -> tuple[Any, ...]:
        """Value of `key` in every scenario, in scenario order."""
        if key in self._scenario_values:
            return self._scenario_values[key]
        if key in self._shared_values:
            return (self._shared_values[key],) * self._scenario_count
        raise MarketDataNotFoundError(key)

    def scenario(self, scenario_index: int) -> MarketView:
        if not 0 <= scenario_index < self._scenario_count:
            raise IndexError(
                f"Scenario index {scenario_index} out of range for {self._scenario_count} scenarios"
            )
        return MarketView(self, scenario_index)

    def scenarios(self) -> Iterator[MarketView]:
        """Views of every scenario, in scenario order."""
        for i in range(self._scenario_count):
            yield MarketView(self, i)

    def with_scenario_values(self, key: MarketDataKey, values: Sequence[Any]) -> ScenarioMarketData:
        """Return new market data with per-scenario values for `key` added/replaced."""
        scenario_values = dict(self._scenario_values)
        scenario_values[key] = tuple(values)
        shared = {k: v for k, v in self._shared_values.items() if k != key}
        return ScenarioMarketData(self._valuation_date, self._scenario_count, scenario_values, shared)

    def with_shared_value(self, key: MarketDataKey, value: Any) -> ScenarioMarketData:
        """Return new market data with a shared value for `key` added/replaced."""
        scenario_values = {k: v for k, v in self._scenario_values.items() if k != key}
        shared = dict(self._shared_values)
        shared[key] = value
        return ScenarioMarketData(self._valuation_date, self._scenario_count, scenario_values, shared)

    def __repr__(self) -> str:
        return (
            f"ScenarioMarketData(valuation_date={self._valuation_date}, "
            f"scenario_count={self._scenario_count}, keys={len(self.keys())})"
        )


class MarketView:
    """
    Market data of one scenario.

    Overrides (from `with_value`) take precedence over the underlying
    scenario data; the underlying data is never modified.
    """

    def __init__(
        self,
        market_data: ScenarioMarketData,
        scenario_index: int,
        overrides: Mapping[MarketDataKey, Any] | None = None,
    ) -> None:
        self._market_data = market_data
        self._scenario_index = scenario_index
        self._overrides: dict[MarketDataKey, Any] = dict(overrides or {})

    @property
    def valuation_date(self) -> date:
        return self._market_data.valuation_date

    @property
    def scenario_index(self) -> int:
        return self._scenario_index

    def value(self, key: MarketDataKey) -> Any:
        if key in self._overrides:
            return self._overrides[key]
        return self._market_data.value(key, self._scenario_index)

    def contains(self, key: MarketDataKey) -> bool:
        return key in self._overrides or self._market_data.contains(key)

    def quote(self, standard_id: StandardId) -> float:
        return float(self.value(QuoteKey(standard_id)))

    def discount_curve(self, currency: Currency) -> Curve:
        return self.value(DiscountCurveKey(currency))

    def fx_rate(self, base: Currency, counter: Currency) -> float:
        """Rate as `counter` per unit of `base`, using the inverse pair if needed."""
        if base == counter:
            return 1.0
        pair = CurrencyPair(base, counter)
        direct = FxRateKey(pair)
        if self.contains(direct):
            return float(self.value(direct))
        inverse = FxRateKey(pair.inverse())
        if self.contains(inverse):
            return 1.0 / float(self.value(inverse))
        raise MarketDataNotFoundError(direct)

    def with_value(self, key: MarketDataKey, value: Any) -> MarketView:
        """Return a new view with `key` overridden in this scenario."""
        overrides = dict(self._overrides)
        overrides[key] = value
        return MarketView(self._market_data, self._scenario_index, overrides)
