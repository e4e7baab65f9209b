"""
Calculation engine: runs measures for many targets against scenario market data.

Design intent:
- Targets are **data only**; the function for each target is resolved from a
  `FunctionRegistry` by the target's type.
- Requirements of all (target, measures) pairs are aggregated first, so the
  caller can source market data once for the whole batch.
- Results form a complete grid: one row per target, one cell per measure,
  each cell a success or a labelled failure.
- A target without a configured function is a configuration defect; the
  MissingConfigurationError raised by the fallback aborts the whole step.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence

from calc.config import EngineConfig
from calc.interfaces import CalculationFunction, CalculationTarget
from calc.market import ScenarioMarketData
from calc.measure import Measure
from calc.products import TARGET_TYPES
from calc.registry import FunctionRegistry, create_default_registry
from calc.requirements import FunctionRequirements
from calc.result import Failure, FailureReason, MissingConfigurationError, Result
from calc.scenario import ScenarioResult

logger = logging.getLogger(__name__)

MarketDataSupplier = Callable[[FunctionRequirements], ScenarioMarketData]

@dataclass(frozen=True)
class CalculationResults:
    """Results grid: `rows[i][measure]` is the result for `targets[i]`."""

    targets: tuple[CalculationTarget, ...]
    measures: tuple[Measure, ...]
    rows: tuple[Mapping[Measure, Result[ScenarioResult[Any]]], ...]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.measures)

    def cell(self, row: int, measure: Measure) -> Result[ScenarioResult[Any]]:
        return self.rows[row][measure]

    def column(self, measure: Measure) -> tuple[Result[ScenarioResult[Any]], ...]:
        return tuple(row[measure] for row in self.rows)

    def failures(self) -> list[tuple[int, Measure, Failure]]:
        """(row, measure, failure) for every failed cell, in grid order."""
        return [
            (i, measure, row[measure].failure_info)
            for i, row in enumerate(self.rows)
            for measure in self.measures
            if row[measure].is_failure
        ]

class CalculationEngine:
    """
    Registry-based calculation engine.

    The registry is resolved once per target per call; nothing is cached or
    mutated between calls, so one engine may serve concurrent callers.
    """

    def __init__(
        self,
        registry: FunctionRegistry | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else create_default_registry()
        self._config = config if config is not None else EngineConfig()
        if self._config.validate_registry:
            self._registry.validate(TARGET_TYPES)

    @property
    def registry(self) -> FunctionRegistry:
        return self._registry

    @property
    def config(self) -> EngineConfig:
        return self._config

    def function_for(self, target: CalculationTarget) -> CalculationFunction:
        return self._registry.function_for(target)

    def supported_measures(self, target: CalculationTarget) -> frozenset[Measure]:
        return self.function_for(target).supported_measures()

    def requirements(self, targets: Iterable[CalculationTarget], measures: Iterable[Measure]) -> FunctionRequirements:
        """Union of the requirements of every target for the requested measures."""
        columns = _columns(measures)
        combined = FunctionRequirements.empty()
        for target in targets:
            combined = combined | self.function_for(target).requirements(target, columns)
        return combined

    def calculate(
        self,
        targets: Sequence[CalculationTarget],
        measures: Iterable[Measure],
        market_data: ScenarioMarketData,
    ) -> CalculationResults:
        """
        Calculate every measure for every target.

        Measures are deduplicated keeping the caller's order. Raises
        MissingConfigurationError if any target has no configured function.
        """
        targets = tuple(targets)
        columns = _columns(measures)

        def calculate_row(target: CalculationTarget) -> Mapping[Measure, Result[ScenarioResult[Any]]]:
            return self._calculate_row(target, columns, market_data)

        try:
            if self._config.max_workers > 1 and len(targets) > 1:
                with ThreadPoolExecutor(max_workers=self._config.max_workers) as pool:
                    rows = tuple(pool.map(calculate_row, targets))
            else:
                rows = tuple(calculate_row(t) for t in targets)
        except MissingConfigurationError as exc:
            logger.error("Calculation step aborted: %s", exc)
            raise

        results = CalculationResults(targets=targets, measures=columns, rows=rows)
        logger.info(
            "Calculated %d targets x %d measures over %d scenarios (%d failed cells)",
            results.row_count,
            results.column_count,
            market_data.scenario_count,
            len(results.failures()),
        )
        return results

    def run(
        self,
        targets: Sequence[CalculationTarget],
        measures: Iterable[Measure],
        market_data_supplier: MarketDataSupplier,
    ) -> CalculationResults:
        """Aggregate requirements, obtain market data from the supplier, then calculate."""
        targets = tuple(targets)
        columns = _columns(measures)
        requirements = self.requirements(targets, columns)
        logger.debug(
            "Requesting %d market data values for %d targets",
            len(requirements.single_values),
            len(targets),
        )
        market_data = market_data_supplier(requirements)
        return self.calculate(targets, columns, market_data)

    def _calculate_row(
        self,
        target: CalculationTarget,
        columns: tuple[Measure, ...],
        market_data: ScenarioMarketData,
    ) -> Mapping[Measure, Result[ScenarioResult[Any]]]:
        function = self.function_for(target)
        logger.debug("Calculating %s with %s", type(target).__name__, type(function).__name__)
        calculated = function.calculate(target, columns, market_data)
        row: dict[Measure, Result[ScenarioResult[Any]]] = {}
        for measure in columns:
            result = calculated.get(measure)
            if result is None:
                logger.error(
                    "%s returned no result for %s on %s",
                    type(function).__name__,
                    measure,
                    type(target).__name__,
                )
                result = Result.failure(
                    FailureReason.CALCULATION_FAILED,
                    f"No result returned for measure: {measure}",
                )
            row[measure] = result
        return row

def _columns(measures: Iterable[Measure]) -> tuple[Measure, ...]:
    return tuple(dict.fromkeys(measures))

def create_default_engine(config: EngineConfig | None = None) -> CalculationEngine:
    """Factory for an engine with all built-in functions registered."""
    return CalculationEngine(create_default_registry(), config)
