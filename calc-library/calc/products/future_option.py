"""Generic future option product and trade (data only; calculations via CalculationFunction)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from calc.basics import Currency, StandardId


class PutCall(str, Enum):
    PUT = "PUT"
    CALL = "CALL"


@dataclass(frozen=True)
class GenericFutureOption:
    """
    Exchange-traded option on a future, described by its security and tick economics.

    Valued from its market price: one tick (`tick_size` in price terms) is
    worth `tick_value` in `currency` per contract.
    """

    security_id: StandardId
    currency: Currency
    tick_size: float
    tick_value: float
    put_call: Optional[PutCall] = None
    strike_price: Optional[float] = None
    expiry: Optional[date] = None

    def __post_init__(self) -> None:
        if not self.tick_size > 0:
            raise ValueError(f"tick_size must be positive, got {self.tick_size}")
        if not self.tick_value > 0:
            raise ValueError(f"tick_value must be positive, got {self.tick_value}")


@dataclass(frozen=True)
class GenericFutureOptionTrade:
    """A position of `quantity` contracts (negative when short) in a GenericFutureOption."""

    product: GenericFutureOption
    quantity: float
    trade_id: Optional[str] = None
    trade_date: Optional[date] = None

    @property
    def security_id(self) -> StandardId:
        return self.product.security_id

    @property
    def currency(self) -> Currency:
        return self.product.currency
