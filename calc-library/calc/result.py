"""
Result: success value or typed failure.

Expected, per-measure problems (unsupported measure, missing market data,
an exception raised by a calculator) are reported as `Result.failure(...)`
values so that one bad cell never hides the others. Programming and
configuration faults are exceptions and do not go through this type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, TypeVar

from calc.market import MarketDataNotFoundError
from calc.measure import Measure

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class FailureReason(str, Enum):
    """Fixed, process-wide set of failure categories."""

    INVALID_INPUT = "INVALID_INPUT"
    CALCULATION_FAILED = "CALCULATION_FAILED"
    MISSING_DATA = "MISSING_DATA"
    MISSING_CONFIGURATION = "MISSING_CONFIGURATION"


class MissingConfigurationError(RuntimeError):
    """
    No calculation function is configured for a target type.

    This is a configuration defect, not a per-measure failure: it is raised,
    never returned as a Result, and `Result.of` lets it propagate.
    """

    reason = FailureReason.MISSING_CONFIGURATION

    def __init__(
        self,
        message: str,
        target_types: Iterable[type] = (),
        measures: Iterable[Measure] = (),
    ) -> None:
        super().__init__(message)
        self.target_types = tuple(target_types)
        self.measures = tuple(sorted(set(measures)))


@dataclass(frozen=True)
class Failure:
    """Reason plus human-readable detail."""

    reason: FailureReason
    message: str

    def __str__(self) -> str:
        return f"{self.reason.value}: {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Tagged union: exactly one of a (non-None) value or a Failure is present.

    Use the `success`, `failure` and `of` constructors rather than the
    dataclass constructor.
    """

    _value: T | None = None
    _failure: Failure | None = None

    def __post_init__(self) -> None:
        if (self._value is None) == (self._failure is None):
            raise ValueError("Result must hold exactly one of a value or a failure")

    @classmethod
    def success(cls, value: T) -> Result[T]:
        if value is None:
            raise ValueError("Successful result value must not be None")
        return cls(_value=value)

    @classmethod
    def failure(cls, reason: FailureReason, message: str) -> Result[T]:
        return cls(_failure=Failure(reason, message))

    @classmethod
    def of(cls, supplier: Callable[[], T]) -> Result[T]:
        """
        Run `supplier` and wrap its return value.

        Missing market data becomes MISSING_DATA; any other exception becomes
        CALCULATION_FAILED. MissingConfigurationError is a configuration
        fault and propagates; no other exception does.
        """
        try:
            return cls.success(supplier())
        except MissingConfigurationError:
            raise
        except MarketDataNotFoundError as exc:
            logger.warning("Market data not found: %s", exc)
            return cls.failure(FailureReason.MISSING_DATA, str(exc))
        except Exception as exc:
            logger.warning("Calculation failed: %s: %s", type(exc).__name__, exc, exc_info=True)
            return cls.failure(FailureReason.CALCULATION_FAILED, f"{type(exc).__name__}: {exc}")

    @property
    def is_success(self) -> bool:
        return self._failure is None

    @property
    def is_failure(self) -> bool:
        return self._failure is not None

    @property
    def value(self) -> T:
        """The success value. Raises ValueError on a failure result."""
        if self._failure is not None:
            raise ValueError(f"Result is a failure: {self._failure}")
        return self._value  # type: ignore[return-value]

    @property
    def failure_info(self) -> Failure:
        """The failure. Raises ValueError on a success result."""
        if self._failure is None:
            raise ValueError("Result is a success, no failure available")
        return self._failure

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        """Apply `fn` to a success value (exceptions become failures); failures pass through."""
        if self._failure is not None:
            return Result(_failure=self._failure)
        value = self._value
        return Result.of(lambda: fn(value))  # type: ignore[arg-type]

    def flat_map(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        if self._failure is not None:
            return Result(_failure=self._failure)
        return fn(self._value)  # type: ignore[arg-type]

    def get_or_else(self, default: T) -> T:
        return default if self._failure is not None else self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._failure is not None:
            return f"Result.failure({self._failure.reason.value}, {self._failure.message!r})"
        return f"Result.success({self._value!r})"
