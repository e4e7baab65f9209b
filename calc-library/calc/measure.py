"""Measures: identifiers for the outputs a caller can request for a target."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Measure:
    """
    Requestable output, e.g. present value.

    Equality and hashing are by name so measures can be used as dict keys.
    Ordering is by name, which gives reproducible iteration when several
    measures are requested together.
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or self.name != self.name.strip():
            raise ValueError(f"Invalid measure name: {self.name!r}")

    @classmethod
    def of(cls, name: str) -> Measure:
        """Return the built-in measure matching `name` (case-insensitive), else a new one."""
        key = name.strip()
        builtin = _BUILTIN_BY_LOWER_NAME.get(key.lower())
        return builtin if builtin is not None else cls(key)

    def __str__(self) -> str:
        return self.name


PRESENT_VALUE = Measure("PresentValue")
PAR_RATE = Measure("ParRate")
PV01 = Measure("PV01")
FX_DELTA = Measure("FxDelta")
IMPLIED_VOLATILITY = Measure("ImpliedVolatility")

BUILTIN_MEASURES: tuple[Measure, ...] = (
    PRESENT_VALUE,
    PAR_RATE,
    PV01,
    FX_DELTA,
    IMPLIED_VOLATILITY,
)

_BUILTIN_BY_LOWER_NAME = {m.name.lower(): m for m in BUILTIN_MEASURES}
