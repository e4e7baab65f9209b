"""Base class for bump-and-reprice sensitivities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from calc.interfaces import MarketData


class BaseRiskMeasure(ABC):
    """Sensitivity of a trade to one market data input, within a single scenario."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Label including the bumped input, e.g. PV01_USD."""
        ...

    @abstractmethod
    def compute(self, trade: Any, market: MarketData) -> Any:
        """PV change (or ratio) for the bump; the market view is left unchanged."""
        ...
