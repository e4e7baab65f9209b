"""Scenario-indexed results for a single measure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ScenarioResult(Generic[T]):
    """
    One value per scenario, index-aligned with the market data it came from.

    `values[i]` is the value computed from scenario `i`.
    """

    values: tuple[T, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def of(cls, values: Iterable[T]) -> ScenarioResult[T]:
        return cls(tuple(values))

    @property
    def scenario_count(self) -> int:
        return len(self.values)

    def check_scenario_count(self, expected: int) -> None:
        """Raise ValueError unless there is exactly one value per scenario."""
        if len(self.values) != expected:
            raise ValueError(
                f"Scenario result has {len(self.values)} values but market data has {expected} scenarios"
            )

    def map(self, fn: Callable[[T], U]) -> ScenarioResult[U]:
        return ScenarioResult(tuple(fn(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __getitem__(self, index: int) -> T:
        return self.values[index]
