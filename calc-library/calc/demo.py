"""Demo: a future option and an FX NDF calculated across three market data scenarios."""

from datetime import date

from calc.basics import BuySell, Currency, CurrencyPair, FxIndex, FxRate, StandardId
from calc.curves import ZeroRateCurve
from calc.engine import create_default_engine
from calc.keys import DiscountCurveKey, FxRateKey, QuoteKey
from calc.market import ScenarioMarketData
from calc.measure import FX_DELTA, IMPLIED_VOLATILITY, PAR_RATE, PRESENT_VALUE, PV01
from calc.products.future_option import GenericFutureOption, GenericFutureOptionTrade, PutCall
from calc.products.fx_ndf import FxNdfTrade, FxNonDeliverableForward

USD = Currency("USD")
INR = Currency("INR")
USD_INR = CurrencyPair(USD, INR)


def main() -> None:
    valuation_date = date(2024, 1, 15)
    pillars = [0.5, 1.0, 2.0, 5.0, 10.0]

    # 1) Option on a future, 10 contracts, USD
    option_id = StandardId("OG-Ticker", "ESH4C4800")
    option_trade = GenericFutureOptionTrade(
        product=GenericFutureOption(
            security_id=option_id,
            currency=USD,
            tick_size=0.25,
            tick_value=12.5,
            put_call=PutCall.CALL,
            strike_price=4800.0,
        ),
        quantity=10,
        trade_id="FOPT-1",
    )

    # 2) 1Y USD/INR NDF, buy 10M USD at 83.50
    ndf_trade = FxNdfTrade(
        product=FxNonDeliverableForward(
            buy_sell=BuySell.BUY,
            settlement_currency=USD,
            notional=10_000_000,
            agreed_fx_rate=FxRate(USD_INR, 83.50),
            payment_date=date(2025, 1, 15),
            index=FxIndex("USD/INR-FBIL", USD_INR),
        ),
        trade_id="NDF-1",
    )

    # Three scenarios: base, option price up, INR weaker
    market_data = ScenarioMarketData(
        valuation_date=valuation_date,
        scenario_count=3,
        scenario_values={
            QuoteKey(option_id): [45.0, 47.5, 45.0],
            FxRateKey(USD_INR): [83.10, 83.10, 84.00],
        },
        shared_values={
            DiscountCurveKey(USD): ZeroRateCurve(USD, pillars, [0.053, 0.050, 0.045, 0.041, 0.040]),
            DiscountCurveKey(INR): ZeroRateCurve(INR, pillars, [0.068, 0.067, 0.066, 0.066, 0.067]),
        },
    )

    engine = create_default_engine()
    trades = [option_trade, ndf_trade]
    measures = [PRESENT_VALUE, PAR_RATE, PV01, FX_DELTA, IMPLIED_VOLATILITY]

    reqs = engine.requirements(trades, measures)
    results = engine.calculate(trades, measures, market_data)

    print("=== Calculation Demo ===\n")
    print("Requirements:")
    for key in sorted(reqs.single_values, key=str):
        print(f"   {key}")
    print(f"   output currencies: {', '.join(sorted(str(c) for c in reqs.output_currencies))}\n")
    for i, trade in enumerate(results.targets):
        print(f"{trade.trade_id} ({type(trade).__name__})")
        for measure in results.measures:
            result = results.cell(i, measure)
            if result.is_success:
                values = ", ".join(_format(v) for v in result.value)
                print(f"   {measure!s:<18} [{values}]")
            else:
                print(f"   {measure!s:<18} {result.failure_info}")
        print()
    print("Done.")


def _format(value: object) -> str:
    amount = getattr(value, "amount", value)
    return f"{amount:,.4f}" if isinstance(amount, float) and abs(amount) < 1000 else f"{amount:,.2f}"


if __name__ == "__main__":
    main()
