"""Tests for Measure, market data keys and FunctionRequirements."""

import pytest

from calc.basics import Currency, CurrencyPair, StandardId
from calc.keys import DiscountCurveKey, FxRateKey, QuoteKey
from calc.measure import BUILTIN_MEASURES, IMPLIED_VOLATILITY, PRESENT_VALUE, PV01, Measure
from calc.requirements import FunctionRequirements

USD = Currency("USD")
INR = Currency("INR")


def test_measure_identity_and_ordering() -> None:
    assert Measure("PresentValue") == PRESENT_VALUE
    assert hash(Measure("PresentValue")) == hash(PRESENT_VALUE)
    assert str(IMPLIED_VOLATILITY) == "ImpliedVolatility"
    assert sorted([PV01, PRESENT_VALUE, IMPLIED_VOLATILITY]) == [IMPLIED_VOLATILITY, PV01, PRESENT_VALUE]


def test_measure_of_resolves_builtins_case_insensitively() -> None:
    assert Measure.of("presentvalue") is PRESENT_VALUE
    assert Measure.of("  PV01 ") is PV01
    assert Measure.of("Theta") == Measure("Theta")
    assert Measure("Theta") not in BUILTIN_MEASURES


def test_measure_name_validation() -> None:
    for bad in ("", " PV", "PV "):
        with pytest.raises(ValueError, match="Invalid measure name"):
            Measure(bad)


def test_keys_are_structural_values() -> None:
    sid = StandardId("OG-Ticker", "ABC")
    assert QuoteKey(sid) == QuoteKey(StandardId("OG-Ticker", "ABC"))
    assert len({QuoteKey(sid), QuoteKey(sid), DiscountCurveKey(USD)}) == 2
    assert str(QuoteKey(sid)) == "Quote:OG-Ticker~ABC"
    assert str(FxRateKey(CurrencyPair(USD, INR))) == "FxRate:USD/INR"
    assert str(DiscountCurveKey(INR)) == "DiscountCurve:INR"
    assert FxRateKey(CurrencyPair(USD, INR)) != FxRateKey(CurrencyPair(INR, USD))


def test_requirements_empty() -> None:
    empty = FunctionRequirements.empty()
    assert empty.is_empty
    assert empty.single_values == frozenset()
    assert empty.output_currencies == frozenset()
    assert empty == FunctionRequirements()


def test_requirements_store_frozensets() -> None:
    key = DiscountCurveKey(USD)
    reqs = FunctionRequirements.of(single_values=[key, key], output_currencies=[USD])
    assert reqs.single_values == frozenset({key})
    assert isinstance(reqs.single_values, frozenset)
    assert not reqs.is_empty
    # Any iterable is accepted through the constructor too.
    assert FunctionRequirements([key], {USD}) == reqs


def test_requirements_union() -> None:
    a = FunctionRequirements.of(single_values=[DiscountCurveKey(USD)], output_currencies=[USD])
    b = FunctionRequirements.of(single_values=[DiscountCurveKey(INR)], output_currencies=[USD, INR])
    combined = a | b
    assert combined == a.combined_with(b)
    assert combined.single_values == {DiscountCurveKey(USD), DiscountCurveKey(INR)}
    assert combined.output_currencies == {USD, INR}
    assert a | FunctionRequirements.empty() == a
