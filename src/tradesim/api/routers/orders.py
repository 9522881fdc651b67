"""Order placement endpoint."""

import logging

from fastapi import APIRouter, Depends

from tradesim.api.deps import get_context
from tradesim.api.schemas import OrderRequest, OrderResponse
from tradesim.app_context import AppContext
from tradesim.core.exceptions import AppError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["orders"])


@router.post("/{user_id}/orders", response_model=OrderResponse, status_code=201)
def place_order(
    user_id: str,
    data: OrderRequest,
    ctx: AppContext = Depends(get_context),
):
    """Settle a market order at the current quote and refresh the value series."""
    result = ctx.ledger.place_order(
        user_id=user_id,
        symbol=data.symbol,
        quantity=data.quantity,
        side=data.side,
        company_name=data.company_name,
    )
    try:
        ctx.record_value(user_id)
    except AppError as e:
        # The order is already committed; a missed chart sample is not an order failure
        logger.warning("Order settled but value sample failed for %s: %s", user_id, e.message)
    return OrderResponse.model_validate(result)
