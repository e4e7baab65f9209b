"""Fallback function for targets that have no calculation function configured."""

from __future__ import annotations

from typing import Any, Iterable, NoReturn, Optional

from calc.basics import Currency
from calc.functions.base import BaseCalculationFunction
from calc.market import ScenarioMarketData
from calc.measure import Measure
from calc.requirements import FunctionRequirements
from calc.result import MissingConfigurationError


class MissingConfigCalculationFunction(BaseCalculationFunction[Any]):
    """
    Used when no function is registered for a target's type.

    Supports no measures and requires no market data, so a caller that checks
    `supported_measures()` never routes anything to it. Calling `calculate()`
    is therefore always a defect and raises MissingConfigurationError.
    """

    target_type = object

    def default_reporting_currency(self, target: Any) -> Optional[Currency]:
        return None

    def requirements(self, target: Any, measures: Iterable[Measure]) -> FunctionRequirements:
        return FunctionRequirements.empty()

    def calculate(
        self,
        target: Any,
        measures: Iterable[Measure],
        market_data: ScenarioMarketData,
    ) -> NoReturn:
        target_type = type(target)
        raise MissingConfigurationError(
            f"No function configured for measures on '{target_type.__name__}'",
            target_types=[target_type],
            measures=measures,
        )
