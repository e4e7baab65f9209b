"""Products: generic future option, FX non-deliverable forward."""

from calc.products.future_option import GenericFutureOption, GenericFutureOptionTrade, PutCall
from calc.products.fx_ndf import FxNdfTrade, FxNonDeliverableForward

# Target types the built-in registry must cover.
TARGET_TYPES: tuple[type, ...] = (GenericFutureOptionTrade, FxNdfTrade)

__all__ = [
    "GenericFutureOption",
    "GenericFutureOptionTrade",
    "PutCall",
    "FxNonDeliverableForward",
    "FxNdfTrade",
    "TARGET_TYPES",
]
