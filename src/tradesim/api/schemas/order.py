"""Pydantic schemas for order endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tradesim.domain.models.enums import OrderSide
from tradesim.api.schemas.account import AccountResponse, TransactionResponse


class OrderRequest(BaseModel):
    """Request schema for a market order."""

    symbol: str = Field(..., min_length=1, max_length=20, description="Stock symbol")
    quantity: int = Field(..., gt=0, description="Number of shares")
    side: OrderSide = Field(..., description="BUY or SELL")
    company_name: Optional[str] = Field(default=None, max_length=255)

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()


class PositionResponse(BaseModel):
    """Response schema for a position row."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: Optional[str] = None
    quantity: int
    average_cost: Decimal


class OrderResponse(BaseModel):
    """Response schema for a settled order."""

    model_config = {"from_attributes": True}

    account: AccountResponse
    position: Optional[PositionResponse] = None
    position_closed: bool
    transaction: TransactionResponse
