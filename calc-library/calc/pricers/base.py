"""Base pricer abstract class for single-scenario pricing implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from calc.basics import CurrencyAmount
from calc.interfaces import MarketData


class BasePricer(ABC):
    """Abstract base class for trade pricers.

    A pricer values one trade type against the market of a single scenario.
    Calculation functions loop pricers over scenarios; risk measures reprice
    with bumped market views.
    """

    @abstractmethod
    def present_value(self, trade: Any, market: MarketData) -> CurrencyAmount:
        """Compute present value in the trade's currency."""
        ...
