"""
Function registry: which calculation function handles which target type.

Resolution is by the runtime type of the target (exact type first, then its
base classes), never by value. Types without a binding resolve to the
missing-configuration fallback. The registry is immutable after
construction; `with_function` returns a new registry.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from calc.functions.base import BaseCalculationFunction
from calc.functions.missing import MissingConfigCalculationFunction
from calc.interfaces import CalculationFunction, CalculationTarget
from calc.result import MissingConfigurationError

logger = logging.getLogger(__name__)


class FunctionRegistry:
    """Immutable mapping of target type -> CalculationFunction, with a fallback."""

    def __init__(
        self,
        functions: Mapping[type, CalculationFunction],
        fallback: CalculationFunction | None = None,
    ) -> None:
        for target_type, function in functions.items():
            bound = getattr(function, "target_type", None)
            if bound is not None and not issubclass(target_type, bound):
                raise ValueError(
                    f"{type(function).__name__} handles {bound.__name__}, "
                    f"cannot be registered for {target_type.__name__}"
                )
        self._functions: Mapping[type, CalculationFunction] = MappingProxyType(dict(functions))
        self._fallback: CalculationFunction = fallback or MissingConfigCalculationFunction()

    @classmethod
    def of(cls, *functions: BaseCalculationFunction[Any]) -> FunctionRegistry:
        """Registry keyed by each function's `target_type`."""
        mapping: dict[type, CalculationFunction] = {}
        for function in functions:
            if function.target_type in mapping:
                raise ValueError(f"Duplicate function for {function.target_type.__name__}")
            mapping[function.target_type] = function
        return cls(mapping)

    @property
    def target_types(self) -> frozenset[type]:
        return frozenset(self._functions)

    @property
    def fallback(self) -> CalculationFunction:
        return self._fallback

    def function_for(self, target: CalculationTarget) -> CalculationFunction:
        """Function bound to the target's type (or nearest base class), else the fallback."""
        return self.function_for_type(type(target))

    def function_for_type(self, target_type: type) -> CalculationFunction:
        function = self._functions.get(target_type)
        if function is not None:
            return function
        for base in target_type.__mro__[1:]:
            function = self._functions.get(base)
            if function is not None:
                return function
        logger.debug("No function registered for %s, using fallback", target_type.__name__)
        return self._fallback

    def with_function(
        self,
        function: CalculationFunction,
        target_type: type | None = None,
    ) -> FunctionRegistry:
        """Return a new registry with `function` bound (replacing any existing binding)."""
        bound = target_type or getattr(function, "target_type", None)
        if bound is None:
            raise ValueError("target_type is required for functions without a target_type attribute")
        functions = dict(self._functions)
        functions[bound] = function
        return FunctionRegistry(functions, self._fallback)

    def validate(self, target_types: Iterable[type]) -> None:
        """
        Check every type in `target_types` has a registered function.

        Meant to run once at startup; raises MissingConfigurationError
        naming all unbound types.
        """
        missing = [
            t for t in target_types
            if not any(base in self._functions for base in t.__mro__)
        ]
        if missing:
            names = ", ".join(sorted(t.__name__ for t in missing))
            raise MissingConfigurationError(
                f"No function configured for target types: {names}",
                target_types=missing,
            )

    def __contains__(self, target_type: object) -> bool:
        return target_type in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        names = ", ".join(sorted(t.__name__ for t in self._functions))
        return f"FunctionRegistry({names})"


def create_default_registry() -> FunctionRegistry:
    """Factory for the registry with all built-in functions bound."""
    from calc.functions import FxNdfCalculationFunction, GenericFutureOptionCalculationFunction

    return FunctionRegistry.of(
        GenericFutureOptionCalculationFunction(),
        FxNdfCalculationFunction(),
    )
