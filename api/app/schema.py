"""GraphQL schema: measure discovery, requirements and calculation queries."""

import strawberry

from app import services
from app.types import (
    CalculationGrid,
    MarketDataInput,
    RequirementsResult,
    TradeInput,
)

VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return VERSION

    @strawberry.field
    def measures(self, target_type: str) -> list[str]:
        """Measures supported for a target type, e.g. "FxNdfTrade"."""
        return services.supported_measures(target_type)

    @strawberry.field
    def requirements(self, trades: list[TradeInput], measures: list[str]) -> RequirementsResult:
        """Market data needed to calculate `measures` for all `trades`."""
        return services.requirements_for(trades=trades, measures=measures)

    @strawberry.field
    def calculate(
        self,
        trades: list[TradeInput],
        measures: list[str],
        market_data: MarketDataInput,
    ) -> CalculationGrid:
        """Calculate each measure for each trade in every scenario. Per-cell failures are returned in the grid."""
        return services.calculate(trades=trades, measures=measures, market_data=market_data)


schema = strawberry.Schema(query=Query)
