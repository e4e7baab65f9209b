"""Single-scenario pricers used by the calculation functions."""

from calc.pricers.base import BasePricer
from calc.pricers.future_option_pricer import GenericFutureOptionTradePricer
from calc.pricers.fx_ndf_pricer import FxNdfTradePricer

__all__ = [
    "BasePricer",
    "FxNdfTradePricer",
    "GenericFutureOptionTradePricer",
]
