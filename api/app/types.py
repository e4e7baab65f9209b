"""GraphQL types for the calculation API."""

from __future__ import annotations

from datetime import date
from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class FutureOptionTradeInput:
    """Generic future option position, valued from the market quote of `security_id` (scheme~value)."""

    security_id: str
    currency: str
    tick_size: float
    tick_value: float
    quantity: float
    trade_id: Optional[str] = None


@strawberry.input
class FxNdfTradeInput:
    """FX NDF: `agreed_fx_rate` is quoted on `currency_pair` (e.g. USD/INR), notional in settlement currency."""

    buy_sell: str
    settlement_currency: str
    notional: float
    currency_pair: str
    agreed_fx_rate: float
    payment_date: date
    index_name: Optional[str] = None
    trade_id: Optional[str] = None


@strawberry.input
class TradeInput:
    """Exactly one of the trade kinds must be given."""

    future_option: Optional[FutureOptionTradeInput] = None
    fx_ndf: Optional[FxNdfTradeInput] = None


@strawberry.input
class QuoteInput:
    """Market quote of a security: one value per scenario, or a single value shared by all."""

    security_id: str
    values: list[float]


@strawberry.input
class FxRateInput:
    """FX rate for a pair (e.g. USD/INR): counter units per base unit."""

    pair: str
    values: list[float]


@strawberry.input
class CurveInput:
    """Discount curve for a currency: pillars (year fractions), zero rates (continuously compounded)."""

    currency: str
    pillars: list[float]
    zero_rates: list[float]


@strawberry.input
class MarketDataInput:
    """Scenario market data. Curves are shared by every scenario."""

    valuation_date: date
    scenario_count: int = 1
    quotes: Optional[list[QuoteInput]] = None
    fx_rates: Optional[list[FxRateInput]] = None
    curves: Optional[list[CurveInput]] = None


# --- Output types (response payloads) ---


@strawberry.type
class RequirementsResult:
    """Market data keys needed for the request, and the currencies results are reported in."""

    keys: list[str]
    output_currencies: list[str]


@strawberry.type
class FailureInfo:
    reason: str
    message: str


@strawberry.type
class CalculationCell:
    """One measure for one trade: per-scenario `values`, or a `failure`."""

    measure: str
    values: Optional[list[float]] = None
    currency: Optional[str] = None
    failure: Optional[FailureInfo] = None


@strawberry.type
class CalculationRow:
    trade_id: Optional[str]
    target_type: str
    cells: list[CalculationCell]


@strawberry.type
class CalculationGrid:
    """Results grid: one row per trade (request order), one cell per measure."""

    measures: list[str]
    scenario_count: int
    rows: list[CalculationRow]
