"""Pydantic schemas for portfolio and valuation endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class PositionValueResponse(BaseModel):
    """Response schema for a valued position row."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: Optional[str] = None
    quantity: int
    average_cost: Decimal
    market_price: Optional[Decimal] = None
    market_value: Decimal
    priced: bool
    unrealized_pnl: Decimal


class PortfolioResponse(BaseModel):
    """Response schema for the portfolio table."""

    positions: list[PositionValueResponse]
    portfolio_value: Decimal
    cash_balance: Decimal
    total_equity: Decimal


class AllocationItemResponse(BaseModel):
    """Response schema for one allocation slice."""

    model_config = {"from_attributes": True}

    symbol: str
    market_value: Decimal
    percentage: Decimal


class AllocationResponse(BaseModel):
    """Response schema for the allocation breakdown."""

    model_config = {"from_attributes": True}

    items: list[AllocationItemResponse]
    total_value: Decimal
    as_of: Optional[datetime] = None


class ValueSampleResponse(BaseModel):
    """Response schema for one sample of the value series."""

    model_config = {"from_attributes": True}

    sequence_index: int
    value: Decimal


class ValueSeriesResponse(BaseModel):
    """Response schema for the rolling value series."""

    capacity: int
    samples: list[ValueSampleResponse]
