"""Account, deposit and transaction history endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradesim.api.deps import get_ledger_service
from tradesim.api.schemas import (
    AccountCreate,
    DepositRequest,
    AccountResponse,
    TransactionResponse,
    TransactionListResponse,
)
from tradesim.domain.models import TransactionKind
from tradesim.services import LedgerService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def open_account(
    data: AccountCreate,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Open a zero-balance account."""
    return AccountResponse.model_validate(ledger.open_account(data.user_id))


@router.get("/{user_id}", response_model=AccountResponse)
def get_account(
    user_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Get the current account snapshot."""
    return AccountResponse.model_validate(ledger.get_account(user_id))


@router.post("/{user_id}/deposits", response_model=AccountResponse)
def deposit(
    user_id: str,
    data: DepositRequest,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Add cash to the account."""
    return AccountResponse.model_validate(ledger.deposit(user_id, data.amount))


@router.get("/{user_id}/transactions", response_model=TransactionListResponse)
def list_transactions(
    user_id: str,
    kind: Optional[list[TransactionKind]] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    ledger: LedgerService = Depends(get_ledger_service),
):
    """List the transaction log, newest first."""
    records = ledger.list_transactions(user_id, kinds=kind, limit=limit)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(r) for r in records],
        count=len(records),
    )
