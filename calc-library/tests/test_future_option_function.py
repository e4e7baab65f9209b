"""Tests for the generic future option pricer and calculation function."""

from datetime import date

import pytest

from calc.basics import Currency, CurrencyAmount, StandardId
from calc.functions import GenericFutureOptionCalculationFunction
from calc.keys import QuoteKey
from calc.market import ScenarioMarketData
from calc.measure import IMPLIED_VOLATILITY, PRESENT_VALUE, PV01
from calc.pricers import GenericFutureOptionTradePricer
from calc.products import GenericFutureOption, GenericFutureOptionTrade
from calc.requirements import FunctionRequirements
from calc.result import FailureReason

USD = Currency("USD")
SID = StandardId("OG-Ticker", "ESH4C4800")


def _trade(quantity: float = 10) -> GenericFutureOptionTrade:
    product = GenericFutureOption(security_id=SID, currency=USD, tick_size=0.25, tick_value=12.5)
    return GenericFutureOptionTrade(product=product, quantity=quantity)


def _market_data(prices=(45.0, 47.5, 40.0)) -> ScenarioMarketData:
    return ScenarioMarketData(
        valuation_date=date(2024, 1, 15),
        scenario_count=len(prices),
        scenario_values={QuoteKey(SID): list(prices)},
    )


def test_product_validation() -> None:
    with pytest.raises(ValueError, match="tick_size"):
        GenericFutureOption(security_id=SID, currency=USD, tick_size=0.0, tick_value=12.5)
    with pytest.raises(ValueError, match="tick_value"):
        GenericFutureOption(security_id=SID, currency=USD, tick_size=0.25, tick_value=-1.0)


def test_pricer_ticks_times_tick_value_times_quantity() -> None:
    """PV = price / tick_size * tick_value * quantity."""
    pv = GenericFutureOptionTradePricer.present_value_from_price(_trade(), 45.0)
    assert pv == CurrencyAmount(USD, 45.0 / 0.25 * 12.5 * 10)
    short = GenericFutureOptionTradePricer.present_value_from_price(_trade(-2), 45.0)
    assert short.amount == pytest.approx(-4500.0)


def test_present_value_in_each_scenario() -> None:
    function = GenericFutureOptionCalculationFunction()
    results = function.calculate(_trade(), [PRESENT_VALUE], _market_data())
    assert list(results) == [PRESENT_VALUE]
    pv = results[PRESENT_VALUE]
    assert pv.is_success
    assert len(pv.value) == 3
    assert [v.amount for v in pv.value] == pytest.approx([22500.0, 23750.0, 20000.0])
    assert all(v.currency == USD for v in pv.value)


def test_requirements_for_present_value() -> None:
    function = GenericFutureOptionCalculationFunction()
    reqs = function.requirements(_trade(), [PRESENT_VALUE])
    assert reqs == FunctionRequirements.of(single_values=[QuoteKey(SID)], output_currencies=[USD])


def test_requirements_without_supported_measures_need_no_quote() -> None:
    function = GenericFutureOptionCalculationFunction()
    reqs = function.requirements(_trade(), [IMPLIED_VOLATILITY])
    assert reqs.single_values == frozenset()
    assert reqs.output_currencies == {USD}


def test_unsupported_measure_fails_alone() -> None:
    """An unsupported measure gets INVALID_INPUT; the other measures still succeed."""
    function = GenericFutureOptionCalculationFunction()
    results = function.calculate(_trade(), [PRESENT_VALUE, IMPLIED_VOLATILITY], _market_data())
    assert set(results) == {PRESENT_VALUE, IMPLIED_VOLATILITY}
    assert results[PRESENT_VALUE].is_success
    failure = results[IMPLIED_VOLATILITY].failure_info
    assert failure.reason is FailureReason.INVALID_INPUT
    assert "ImpliedVolatility" in failure.message


def test_missing_quote_is_missing_data() -> None:
    function = GenericFutureOptionCalculationFunction()
    empty = ScenarioMarketData(valuation_date=date(2024, 1, 15), scenario_count=2)
    results = function.calculate(_trade(), [PRESENT_VALUE], empty)
    failure = results[PRESENT_VALUE].failure_info
    assert failure.reason is FailureReason.MISSING_DATA
    assert "ESH4C4800" in failure.message


def test_supported_measures_and_reporting_currency() -> None:
    function = GenericFutureOptionCalculationFunction()
    assert function.supported_measures() == {PRESENT_VALUE}
    assert PV01 not in function.supported_measures()
    assert function.default_reporting_currency(_trade()) == USD


def test_duplicate_measures_give_one_entry() -> None:
    function = GenericFutureOptionCalculationFunction()
    results = function.calculate(_trade(), [PRESENT_VALUE, PRESENT_VALUE], _market_data())
    assert len(results) == 1
