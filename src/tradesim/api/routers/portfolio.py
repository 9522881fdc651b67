"""Portfolio valuation endpoints."""

from fastapi import APIRouter, Depends

from tradesim.api.deps import get_context, get_valuation_service
from tradesim.api.schemas import (
    PortfolioResponse,
    PositionValueResponse,
    AllocationResponse,
    ValueSampleResponse,
    ValueSeriesResponse,
)
from tradesim.app_context import AppContext
from tradesim.services import ValuationService

router = APIRouter(prefix="/accounts", tags=["portfolio"])


@router.get("/{user_id}/portfolio", response_model=PortfolioResponse)
def get_portfolio(
    user_id: str,
    valuation: ValuationService = Depends(get_valuation_service),
):
    """Positions valued at current prices, with totals."""
    view = valuation.portfolio(user_id)
    return PortfolioResponse(
        positions=[PositionValueResponse.model_validate(r) for r in view.positions],
        portfolio_value=view.portfolio_value,
        cash_balance=view.cash_balance,
        total_equity=view.total_equity,
    )


@router.get("/{user_id}/portfolio/allocation", response_model=AllocationResponse)
def get_allocation(
    user_id: str,
    valuation: ValuationService = Depends(get_valuation_service),
):
    """Allocation breakdown by market value."""
    return AllocationResponse.model_validate(valuation.allocation(user_id))


@router.get("/{user_id}/portfolio/value-series", response_model=ValueSeriesResponse)
def get_value_series(
    user_id: str,
    ctx: AppContext = Depends(get_context),
):
    """Rolling series of recent portfolio values, oldest first."""
    ctx.ledger.get_account(user_id)
    series = ctx.value_series(user_id)
    return ValueSeriesResponse(
        capacity=series.capacity,
        samples=[ValueSampleResponse.model_validate(s) for s in series.samples()],
    )
