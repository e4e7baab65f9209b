"""Tests for ScenarioMarketData and MarketView."""

from datetime import date

import pytest

from calc.basics import Currency, CurrencyPair, StandardId
from calc.curves import ZeroRateCurve
from calc.keys import DiscountCurveKey, FxRateKey, QuoteKey
from calc.market import MarketDataNotFoundError, MarketView, ScenarioMarketData

USD = Currency("USD")
INR = Currency("INR")
SID = StandardId("OG-Ticker", "OPT")
VAL_DATE = date(2024, 1, 15)


def _market_data() -> ScenarioMarketData:
    return ScenarioMarketData(
        valuation_date=VAL_DATE,
        scenario_count=3,
        scenario_values={QuoteKey(SID): [1.0, 2.0, 3.0]},
        shared_values={
            FxRateKey(CurrencyPair(USD, INR)): 80.0,
            DiscountCurveKey(USD): ZeroRateCurve(USD, [1.0], [0.05]),
        },
    )


def test_per_scenario_and_shared_values() -> None:
    md = _market_data()
    assert md.scenario_count == 3
    assert md.valuation_date == VAL_DATE
    assert md.value(QuoteKey(SID), 2) == 3.0
    assert md.values(QuoteKey(SID)) == (1.0, 2.0, 3.0)
    assert md.values(FxRateKey(CurrencyPair(USD, INR))) == (80.0, 80.0, 80.0)
    assert QuoteKey(SID) in md
    assert len(md.keys()) == 3


def test_missing_key_raises_market_data_not_found() -> None:
    md = _market_data()
    missing = QuoteKey(StandardId("OG-Ticker", "NOPE"))
    with pytest.raises(MarketDataNotFoundError) as excinfo:
        md.value(missing, 0)
    assert excinfo.value.key == missing
    assert "Quote:OG-Ticker~NOPE" in str(excinfo.value)
    # A KeyError, so generic dict-style handling keeps working.
    with pytest.raises(KeyError):
        md.values(missing)


def test_scenario_index_bounds() -> None:
    md = _market_data()
    with pytest.raises(IndexError):
        md.value(QuoteKey(SID), 3)
    with pytest.raises(IndexError):
        md.scenario(-1)


def test_construction_validation() -> None:
    with pytest.raises(ValueError, match="scenario_count"):
        ScenarioMarketData(VAL_DATE, 0)
    with pytest.raises(ValueError, match="has 2 values, expected 3"):
        ScenarioMarketData(VAL_DATE, 3, scenario_values={QuoteKey(SID): [1.0, 2.0]})
    with pytest.raises(ValueError, match="both per-scenario and shared"):
        ScenarioMarketData(
            VAL_DATE, 1, scenario_values={QuoteKey(SID): [1.0]}, shared_values={QuoteKey(SID): 1.0}
        )


def test_copy_on_write_updates() -> None:
    md = _market_data()
    updated = md.with_scenario_values(FxRateKey(CurrencyPair(USD, INR)), [80.0, 81.0, 82.0])
    assert updated.value(FxRateKey(CurrencyPair(USD, INR)), 1) == 81.0
    assert md.value(FxRateKey(CurrencyPair(USD, INR)), 1) == 80.0
    shared = md.with_shared_value(QuoteKey(SID), 9.0)
    assert shared.values(QuoteKey(SID)) == (9.0, 9.0, 9.0)
    assert md.values(QuoteKey(SID)) == (1.0, 2.0, 3.0)


def test_scenarios_are_index_aligned_views() -> None:
    md = _market_data()
    views = list(md.scenarios())
    assert [v.scenario_index for v in views] == [0, 1, 2]
    assert [v.quote(SID) for v in views] == [1.0, 2.0, 3.0]
    assert all(v.valuation_date == VAL_DATE for v in views)


def test_view_fx_rate_direct_inverse_and_identity() -> None:
    view = _market_data().scenario(0)
    assert view.fx_rate(USD, INR) == 80.0
    assert view.fx_rate(INR, USD) == pytest.approx(1 / 80.0)
    assert view.fx_rate(USD, USD) == 1.0
    with pytest.raises(MarketDataNotFoundError):
        view.fx_rate(USD, Currency("EUR"))


def test_view_with_value_overrides_without_mutating() -> None:
    md = _market_data()
    view = MarketView(md, 0)
    bumped = view.with_value(QuoteKey(SID), 10.0)
    assert bumped.quote(SID) == 10.0
    assert view.quote(SID) == 1.0
    assert md.value(QuoteKey(SID), 0) == 1.0
    assert bumped.discount_curve(USD).df(1.0) == view.discount_curve(USD).df(1.0)
