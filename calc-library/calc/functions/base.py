"""Base calculation function: per-measure dispatch over an immutable calculator table."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Generic, Iterable, Mapping, Optional, TypeVar

from calc.basics import Currency
from calc.interfaces import MarketData
from calc.market import ScenarioMarketData
from calc.measure import Measure
from calc.requirements import FunctionRequirements
from calc.result import FailureReason, Result
from calc.scenario import ScenarioResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Calculates one measure for one target across all scenarios.
SingleMeasureCalculation = Callable[[Any, ScenarioMarketData], ScenarioResult[Any]]


def per_scenario(fn: Callable[[Any, MarketData], Any]) -> SingleMeasureCalculation:
    """Lift a single-scenario calculation into one that returns a ScenarioResult."""

    def calculate(target: Any, market_data: ScenarioMarketData) -> ScenarioResult[Any]:
        return ScenarioResult.of(fn(target, market) for market in market_data.scenarios())

    calculate.__name__ = getattr(fn, "__name__", "calculate")
    calculate.__doc__ = fn.__doc__
    return calculate


class BaseCalculationFunction(ABC, Generic[T]):
    """
    Abstract base class for calculation functions.

    Subclasses bind a `target_type`, fill `calculators` (measure -> routine)
    once at class definition, and implement `requirements()`. The table is a
    read-only mapping, so instances are safe to share between threads.
    """

    target_type: ClassVar[type]
    calculators: ClassVar[Mapping[Measure, SingleMeasureCalculation]] = MappingProxyType({})

    def supported_measures(self) -> frozenset[Measure]:
        return frozenset(self.calculators)

    def default_reporting_currency(self, target: T) -> Optional[Currency]:
        return None

    @abstractmethod
    def requirements(self, target: T, measures: Iterable[Measure]) -> FunctionRequirements:
        """Union of the market data needed for all requested measures, plus output currencies."""
        ...

    def calculate(
        self,
        target: T,
        measures: Iterable[Measure],
        market_data: ScenarioMarketData,
    ) -> dict[Measure, Result[ScenarioResult[Any]]]:
        """
        Calculate each requested measure independently.

        Every requested measure gets exactly one entry. An unsupported measure
        or a failing calculator only affects its own entry.
        """
        return {
            measure: self._calculate(measure, target, market_data)
            for measure in sorted(set(measures))
        }

    def _calculate(
        self,
        measure: Measure,
        target: T,
        market_data: ScenarioMarketData,
    ) -> Result[ScenarioResult[Any]]:
        calculator = self.calculators.get(measure)
        if calculator is None:
            return Result.failure(FailureReason.INVALID_INPUT, f"Unsupported measure: {measure}")
        result = Result.of(lambda: calculator(target, market_data))
        if result.is_failure:
            return result
        value = result.value
        try:
            if not isinstance(value, ScenarioResult):
                raise ValueError(f"expected ScenarioResult, got {type(value).__name__}")
            value.check_scenario_count(market_data.scenario_count)
        except ValueError as exc:
            logger.error("Calculator for %s on %s is defective: %s", measure, type(target).__name__, exc)
            return Result.failure(FailureReason.CALCULATION_FAILED, f"{measure}: {exc}")
        return result
