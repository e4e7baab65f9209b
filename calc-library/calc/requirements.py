"""Market data a calculation needs before it can run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from calc.basics import Currency
from calc.keys import MarketDataKey


@dataclass(frozen=True)
class FunctionRequirements:
    """
    Requirements of one function call (target + requested measures).

    - `single_values`: market data keys needed as single (non time-series) values
    - `output_currencies`: currencies the caller must be able to convert into
    """

    single_values: frozenset[MarketDataKey] = frozenset()
    output_currencies: frozenset[Currency] = frozenset()

    def __post_init__(self) -> None:
        # Accept any iterable but always store frozensets.
        object.__setattr__(self, "single_values", frozenset(self.single_values))
        object.__setattr__(self, "output_currencies", frozenset(self.output_currencies))

    @classmethod
    def empty(cls) -> FunctionRequirements:
        return cls()

    @classmethod
    def of(
        cls,
        *,
        single_values: Iterable[MarketDataKey] = (),
        output_currencies: Iterable[Currency] = (),
    ) -> FunctionRequirements:
        return cls(frozenset(single_values), frozenset(output_currencies))

    @property
    def is_empty(self) -> bool:
        return not self.single_values and not self.output_currencies

    def combined_with(self, other: FunctionRequirements) -> FunctionRequirements:
        """Union of both requirement sets."""
        return FunctionRequirements(
            self.single_values | other.single_values,
            self.output_currencies | other.output_currencies,
        )

    def __or__(self, other: FunctionRequirements) -> FunctionRequirements:
        if not isinstance(other, FunctionRequirements):
            return NotImplemented
        return self.combined_with(other)
