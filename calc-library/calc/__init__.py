"""Calculation library: measures, requirements, results, calculation functions and dispatch engine."""

from calc.basics import (
    BuySell,
    Currency,
    CurrencyAmount,
    CurrencyPair,
    FxIndex,
    FxRate,
    StandardId,
)
from calc.calculation import Trade, calculate, requirements
from calc.config import EngineConfig
from calc.curves import ZeroRateCurve
from calc.engine import CalculationEngine, CalculationResults, create_default_engine
from calc.functions import (
    BaseCalculationFunction,
    FxNdfCalculationFunction,
    GenericFutureOptionCalculationFunction,
    MissingConfigCalculationFunction,
    MissingConfigurationError,
)
from calc.interfaces import CalculationFunction, CalculationTarget, Curve, MarketData
from calc.keys import DiscountCurveKey, FxRateKey, MarketDataKey, QuoteKey
from calc.market import MarketDataNotFoundError, MarketView, ScenarioMarketData
from calc.measure import (
    BUILTIN_MEASURES,
    FX_DELTA,
    IMPLIED_VOLATILITY,
    PAR_RATE,
    PRESENT_VALUE,
    PV01,
    Measure,
)
from calc.products import (
    FxNdfTrade,
    FxNonDeliverableForward,
    GenericFutureOption,
    GenericFutureOptionTrade,
    PutCall,
)
from calc.registry import FunctionRegistry, create_default_registry
from calc.requirements import FunctionRequirements
from calc.result import Failure, FailureReason, Result
from calc.scenario import ScenarioResult

__all__ = [
    "BaseCalculationFunction",
    "BUILTIN_MEASURES",
    "BuySell",
    "CalculationEngine",
    "CalculationFunction",
    "CalculationResults",
    "CalculationTarget",
    "Currency",
    "CurrencyAmount",
    "CurrencyPair",
    "Curve",
    "DiscountCurveKey",
    "EngineConfig",
    "FX_DELTA",
    "Failure",
    "FailureReason",
    "FunctionRegistry",
    "FunctionRequirements",
    "FxIndex",
    "FxNdfCalculationFunction",
    "FxNdfTrade",
    "FxNonDeliverableForward",
    "FxRate",
    "FxRateKey",
    "GenericFutureOption",
    "GenericFutureOptionCalculationFunction",
    "GenericFutureOptionTrade",
    "IMPLIED_VOLATILITY",
    "MarketData",
    "MarketDataKey",
    "MarketDataNotFoundError",
    "MarketView",
    "Measure",
    "MissingConfigCalculationFunction",
    "MissingConfigurationError",
    "PAR_RATE",
    "PRESENT_VALUE",
    "PV01",
    "PutCall",
    "QuoteKey",
    "Result",
    "ScenarioMarketData",
    "ScenarioResult",
    "StandardId",
    "Trade",
    "ZeroRateCurve",
    "calculate",
    "create_default_engine",
    "create_default_registry",
    "requirements",
]
