"""Integration tests for GraphQL measure, requirements and calculation queries."""

import pytest
from fastapi.testclient import TestClient

from app import services
from app.main import app
from calc.config import EngineConfig
from calc.engine import CalculationEngine
from calc.functions import FxNdfCalculationFunction
from calc.registry import FunctionRegistry


client = TestClient(app)

TRADES = """
trades: [
  { futureOption: {
      securityId: "OG-Ticker~ESH4C4800"
      currency: "USD"
      tickSize: 0.25
      tickValue: 12.5
      quantity: 10
      tradeId: "FOPT-1"
  } }
  { fxNdf: {
      buySell: "BUY"
      settlementCurrency: "USD"
      notional: 10000000
      currencyPair: "USD/INR"
      agreedFxRate: 83.5
      paymentDate: "2025-01-15"
      tradeId: "NDF-1"
  } }
]
"""

MARKET_DATA = """
marketData: {
  valuationDate: "2024-01-15"
  scenarioCount: 2
  quotes: [{ securityId: "OG-Ticker~ESH4C4800", values: [45.0, 47.5] }]
  fxRates: [{ pair: "USD/INR", values: [83.1] }]
  curves: [
    { currency: "USD", pillars: [0.5, 1.0, 2.0], zeroRates: [0.053, 0.050, 0.045] }
    { currency: "INR", pillars: [0.5, 1.0, 2.0], zeroRates: [0.068, 0.067, 0.066] }
  ]
}
"""


def _post(query: str) -> dict:
    response = client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    return response.json()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_version():
    data = _post("{ version }")
    assert data["data"]["version"] == "0.1.0"


def test_measures_per_target_type():
    data = _post('{ option: measures(targetType: "GenericFutureOptionTrade") ndf: measures(targetType: "FxNdfTrade") }')
    assert "errors" not in data
    assert data["data"]["option"] == ["PresentValue"]
    assert data["data"]["ndf"] == ["FxDelta", "PV01", "ParRate", "PresentValue"]


def test_measures_unknown_target_type_returns_error():
    data = _post('{ measures(targetType: "Swap") }')
    assert "errors" in data
    assert any("Unknown target type" in e["message"] for e in data["errors"])


def test_requirements_aggregate_all_trades():
    data = _post(f'{{ requirements({TRADES} measures: ["PresentValue"]) {{ keys outputCurrencies }} }}')
    assert "errors" not in data
    result = data["data"]["requirements"]
    assert result["keys"] == [
        "DiscountCurve:INR",
        "DiscountCurve:USD",
        "FxRate:USD/INR",
        "Quote:OG-Ticker~ESH4C4800",
    ]
    assert result["outputCurrencies"] == ["USD"]


def test_calculate_grid():
    """Option PV per scenario; unsupported measure reported per cell without failing the request."""
    query = f"""
    query {{
      calculate({TRADES} measures: ["PresentValue", "parrate"] {MARKET_DATA}) {{
        measures
        scenarioCount
        rows {{
          tradeId
          targetType
          cells {{ measure values currency failure {{ reason message }} }}
        }}
      }}
    }}
    """
    data = _post(query)
    assert "errors" not in data
    grid = data["data"]["calculate"]
    assert grid["measures"] == ["PresentValue", "ParRate"]
    assert grid["scenarioCount"] == 2

    option, ndf = grid["rows"]
    assert option["tradeId"] == "FOPT-1"
    assert option["targetType"] == "GenericFutureOptionTrade"
    pv, par = option["cells"]
    assert pv["values"] == pytest.approx([22_500.0, 23_750.0])
    assert pv["currency"] == "USD"
    assert pv["failure"] is None
    assert par["values"] is None
    assert par["failure"]["reason"] == "INVALID_INPUT"
    assert "ParRate" in par["failure"]["message"]

    ndf_pv, ndf_par = ndf["cells"]
    assert len(ndf_pv["values"]) == 2
    assert ndf_pv["currency"] == "USD"
    assert ndf_par["currency"] is None
    assert 84.0 < ndf_par["values"][0] < 85.0  # INR rates above USD rates


def test_calculate_missing_market_data_is_cell_failure():
    query = f"""
    query {{
      calculate({TRADES} measures: ["PresentValue"]
        marketData: {{ valuationDate: "2024-01-15", scenarioCount: 1 }}) {{
        rows {{ cells {{ failure {{ reason message }} }} }}
      }}
    }}
    """
    data = _post(query)
    assert "errors" not in data
    reasons = [row["cells"][0]["failure"]["reason"] for row in data["data"]["calculate"]["rows"]]
    assert reasons == ["MISSING_DATA", "MISSING_DATA"]


def test_calculate_invalid_trade_returns_error():
    query = """
    query {
      calculate(
        trades: [{ futureOption: { securityId: "OG-Ticker~X", currency: "USD", tickSize: 0, tickValue: 1, quantity: 1 } }]
        measures: ["PresentValue"]
        marketData: { valuationDate: "2024-01-15" }
      ) { measures }
    }
    """
    data = _post(query)
    assert "errors" in data
    assert any("tick_size" in e["message"] for e in data["errors"])


def test_calculate_trade_kind_must_be_given_once():
    data = _post('{ requirements(trades: [{}], measures: ["PresentValue"]) { keys } }')
    assert "errors" in data
    assert any("exactly one of futureOption, fxNdf" in e["message"] for e in data["errors"])


def test_calculate_scenario_count_mismatch_returns_error():
    query = """
    query {
      calculate(
        trades: [{ futureOption: { securityId: "OG-Ticker~X", currency: "USD", tickSize: 1, tickValue: 1, quantity: 1 } }]
        measures: ["PresentValue"]
        marketData: { valuationDate: "2024-01-15", scenarioCount: 3, quotes: [{ securityId: "OG-Ticker~X", values: [1.0, 2.0] }] }
      ) { measures }
    }
    """
    data = _post(query)
    assert "errors" in data
    assert any("expected 3" in e["message"] for e in data["errors"])


def test_missing_configuration_surfaces_as_error(monkeypatch):
    """A trade type without a configured function fails the whole request."""
    partial = CalculationEngine(
        FunctionRegistry.of(FxNdfCalculationFunction()),
        EngineConfig(validate_registry=False),
    )
    monkeypatch.setattr(services, "engine", partial)
    query = f"""
    query {{
      calculate({TRADES} measures: ["PresentValue"] {MARKET_DATA}) {{ measures }}
    }}
    """
    data = _post(query)
    assert "errors" in data
    assert any("No function configured" in e["message"] for e in data["errors"])
