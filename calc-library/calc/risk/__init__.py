"""
Risk measures implemented via "bump and reprice".

Each measure wraps a pricer and reprices a trade against a single-scenario
market view with one input shifted.
"""

from calc.risk.base import BaseRiskMeasure
from calc.risk.fx_delta import FXDelta
from calc.risk.pv01 import PV01Parallel

__all__ = [
    "BaseRiskMeasure",
    "FXDelta",
    "PV01Parallel",
]
