"""Pydantic schemas for account endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from tradesim.domain.models.enums import TransactionKind


class AccountCreate(BaseModel):
    """Request schema for opening an account."""

    user_id: str = Field(..., min_length=1, max_length=64, description="Stable user identity")


class DepositRequest(BaseModel):
    """Request schema for a cash deposit."""

    amount: Decimal = Field(..., gt=0, description="Amount to add to the cash balance")


class AccountResponse(BaseModel):
    """Response schema for an account snapshot."""

    model_config = {"from_attributes": True}

    user_id: str
    cash_balance: Decimal
    created_at: Optional[datetime] = None


class TransactionResponse(BaseModel):
    """Response schema for a transaction log record."""

    model_config = {"from_attributes": True}

    txn_id: str
    kind: TransactionKind
    symbol: Optional[str] = None
    quantity: int
    unit_price: Decimal
    amount: Decimal
    timestamp: datetime


class TransactionListResponse(BaseModel):
    """Response schema for the transaction log, newest first."""

    transactions: list[TransactionResponse]
    count: int
