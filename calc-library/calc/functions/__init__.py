"""Calculation functions, one per target type, plus the missing-configuration fallback."""

from calc.functions.base import BaseCalculationFunction, SingleMeasureCalculation, per_scenario
from calc.functions.future_option import GenericFutureOptionCalculationFunction
from calc.functions.fx_ndf import FxNdfCalculationFunction
from calc.functions.missing import MissingConfigCalculationFunction, MissingConfigurationError

__all__ = [
    "BaseCalculationFunction",
    "FxNdfCalculationFunction",
    "GenericFutureOptionCalculationFunction",
    "MissingConfigCalculationFunction",
    "MissingConfigurationError",
    "SingleMeasureCalculation",
    "per_scenario",
]
