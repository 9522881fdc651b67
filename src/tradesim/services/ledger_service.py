"""Ledger service: deposits and order settlement."""

import logging
import uuid
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional, Union

from tradesim.core.timezone import now_eastern
from tradesim.core.exceptions import (
    ValidationError,
    NotFoundError,
    AccountExistsError,
    InvalidAmountError,
    InvalidQuantityError,
    InsufficientFundsError,
    InsufficientPositionError,
    QuoteUnavailableError,
)
from tradesim.domain.models import (
    Account,
    Position,
    TransactionRecord,
    TransactionKind,
    OrderSide,
)
from tradesim.domain.views import OrderResult
from tradesim.providers.quote_source import QuoteSource
from tradesim.repositories.protocols import AccountStore, StoreSession
from tradesim.services.retry import run_in_transaction

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
COST_PRECISION = Decimal("0.000001")


def to_money(value: Decimal) -> Decimal:
    """Round a cash amount to cents."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def weighted_average_cost(
    old_average: Decimal,
    old_quantity: int,
    price: Decimal,
    quantity: int,
) -> Decimal:
    """Average cost per share after buying quantity at price on top of an existing lot."""
    total_cost = old_average * old_quantity + price * quantity
    return (total_cost / (old_quantity + quantity)).quantize(COST_PRECISION, rounding=ROUND_HALF_UP)


class LedgerService:
    """
    Service owning every mutation of accounts, positions and the transaction log.

    Each deposit or order is validated and settled inside a single store
    transaction: the balance, the position and the appended record commit
    together or not at all. Write conflicts are retried a bounded number of
    times with fresh reads; every other failure propagates untouched.
    """

    def __init__(
        self,
        store: AccountStore,
        quote_source: QuoteSource,
        max_retries: int = 3,
    ):
        self._store = store
        self._quotes = quote_source
        self._max_retries = max_retries

    # Accounts

    def open_account(self, user_id: str) -> Account:
        """
        Create a zero-balance account for a user.

        Raises:
            ValidationError: user_id is blank
            AccountExistsError: the user already has an account
        """
        user_id = (user_id or "").strip()
        if not user_id:
            raise ValidationError("user_id is required")

        def work(uow: StoreSession) -> Account:
            if uow.accounts.get(user_id):
                raise AccountExistsError(user_id)
            return uow.accounts.create(
                Account(user_id=user_id, cash_balance=Decimal("0"), created_at=now_eastern())
            )

        account = run_in_transaction(self._store, work, self._max_retries, f"open_account {user_id}")
        logger.info("Opened account for %s", user_id)
        return account

    def get_account(self, user_id: str) -> Account:
        """Get account by user ID."""
        with self._store.transaction() as uow:
            return self._require_account(uow, user_id)

    # Cash

    def deposit(self, user_id: str, amount: Union[Decimal, int, str]) -> Account:
        """
        Add cash to an account and record a DEPOSIT.

        The record stores quantity=1 and unit_price=amount, so the deposited
        amount is recoverable from TransactionRecord.amount.
        """
        amount = self._parse_amount(amount)

        def work(uow: StoreSession) -> Account:
            account = self._require_account(uow, user_id)
            account.cash_balance = account.cash_balance + amount
            saved = uow.accounts.save(account)
            uow.transactions.append(
                self._new_record(user_id, TransactionKind.DEPOSIT, None, 1, amount)
            )
            return saved

        account = run_in_transaction(self._store, work, self._max_retries, f"deposit {user_id}")
        logger.info("Deposited %s for %s; balance %s", amount, user_id, account.cash_balance)
        return account

    # Orders

    def place_order(
        self,
        user_id: str,
        symbol: str,
        quantity: int,
        side: Union[OrderSide, str],
        price: Optional[Decimal] = None,
        company_name: Optional[str] = None,
    ) -> OrderResult:
        """
        Validate and settle a market order.

        The price is either passed explicitly or looked up once from the
        quote source before settlement starts; retries reuse that price.

        Raises:
            InvalidQuantityError: quantity is not a positive whole number
            ValidationError: unknown side, blank symbol or non-positive price
            QuoteUnavailableError: no price given and none quoted
            InsufficientFundsError: BUY costs more than the cash balance
            InsufficientPositionError: SELL exceeds the shares held
            StoreConflictError: conflicts persisted through every retry
        """
        symbol = (symbol or "").strip().upper()
        if not symbol:
            raise ValidationError("Order requires a symbol")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityError(quantity)
        side = self._parse_side(side)

        if price is None:
            price = self._quotes.current_price(symbol)
            if price is None:
                raise QuoteUnavailableError(symbol)
        price = self._parse_price(price)

        gross = to_money(price * quantity)

        def work(uow: StoreSession) -> OrderResult:
            account = self._require_account(uow, user_id)
            if side == OrderSide.BUY:
                return self._settle_buy(uow, account, symbol, quantity, price, gross, company_name)
            return self._settle_sell(uow, account, symbol, quantity, price, gross)

        result = run_in_transaction(
            self._store,
            work,
            self._max_retries,
            f"{side.value} {quantity} {symbol} for {user_id}",
        )
        logger.info(
            "Settled %s %d %s @ %s for %s; balance %s",
            side.value,
            quantity,
            symbol,
            price,
            user_id,
            result.account.cash_balance,
        )
        return result

    def _settle_buy(
        self,
        uow: StoreSession,
        account: Account,
        symbol: str,
        quantity: int,
        price: Decimal,
        cost: Decimal,
        company_name: Optional[str],
    ) -> OrderResult:
        if account.cash_balance < cost:
            raise InsufficientFundsError(str(cost), str(account.cash_balance))

        account.cash_balance = account.cash_balance - cost
        saved_account = uow.accounts.save(account)

        existing = uow.positions.get(account.user_id, symbol)
        if existing is None:
            position = Position(
                user_id=account.user_id,
                symbol=symbol,
                quantity=quantity,
                average_cost=price,
                company_name=company_name,
            )
        else:
            position = Position(
                user_id=account.user_id,
                symbol=symbol,
                quantity=existing.quantity + quantity,
                average_cost=weighted_average_cost(
                    existing.average_cost, existing.quantity, price, quantity
                ),
                company_name=existing.company_name or company_name,
                version=existing.version,
            )
        saved_position = uow.positions.save(position)

        record = uow.transactions.append(
            self._new_record(account.user_id, TransactionKind.BUY, symbol, quantity, price)
        )
        return OrderResult(account=saved_account, position=saved_position, transaction=record)

    def _settle_sell(
        self,
        uow: StoreSession,
        account: Account,
        symbol: str,
        quantity: int,
        price: Decimal,
        proceeds: Decimal,
    ) -> OrderResult:
        existing = uow.positions.get(account.user_id, symbol)
        held = existing.quantity if existing else 0
        if existing is None or held < quantity:
            raise InsufficientPositionError(symbol, quantity, held)

        account.cash_balance = account.cash_balance + proceeds
        saved_account = uow.accounts.save(account)

        remaining = existing.quantity - quantity
        saved_position: Optional[Position] = None
        if remaining <= 0:
            uow.positions.delete(account.user_id, symbol)
        else:
            # Cost basis of the remaining lot is unchanged by a sell
            existing.quantity = remaining
            saved_position = uow.positions.save(existing)

        record = uow.transactions.append(
            self._new_record(account.user_id, TransactionKind.SELL, symbol, quantity, price)
        )
        return OrderResult(
            account=saved_account,
            position=saved_position,
            transaction=record,
            position_closed=saved_position is None,
        )

    # Read projections

    def list_positions(self, user_id: str) -> list[Position]:
        """List the open positions of a user, ordered by symbol."""
        with self._store.transaction() as uow:
            self._require_account(uow, user_id)
            return uow.positions.list_by_user(user_id)

    def get_position(self, user_id: str, symbol: str) -> Optional[Position]:
        """Get the position in one symbol, or None when nothing is held."""
        with self._store.transaction() as uow:
            return uow.positions.get(user_id, symbol.upper())

    def list_transactions(
        self,
        user_id: str,
        kinds: Optional[list[TransactionKind]] = None,
        limit: Optional[int] = None,
    ) -> list[TransactionRecord]:
        """List the transaction log of a user, newest first."""
        if limit is not None and limit <= 0:
            raise ValidationError("limit must be positive")
        with self._store.transaction() as uow:
            self._require_account(uow, user_id)
            return uow.transactions.list_by_user(user_id, kinds=kinds, limit=limit)

    # Helpers

    @staticmethod
    def _require_account(uow: StoreSession, user_id: str) -> Account:
        account = uow.accounts.get(user_id)
        if not account:
            raise NotFoundError("Account", user_id)
        return account

    @staticmethod
    def _parse_amount(amount: Union[Decimal, int, str]) -> Decimal:
        if isinstance(amount, float):
            amount = str(amount)
        try:
            value = Decimal(amount)
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidAmountError(amount)
        if not value.is_finite() or value <= 0:
            raise InvalidAmountError(amount)
        value = to_money(value)
        if value <= 0:
            # Positive but below one cent
            raise InvalidAmountError(amount)
        return value

    @staticmethod
    def _parse_price(price: Union[Decimal, int, str]) -> Decimal:
        """Settlement price, held to the same precision as average cost."""
        if isinstance(price, float):
            price = str(price)
        try:
            value = Decimal(price)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError(f"Price must be a number, got {price!r}")
        if not value.is_finite() or value <= 0:
            raise ValidationError(f"Price must be positive, got {price}")
        value = value.quantize(COST_PRECISION, rounding=ROUND_HALF_UP)
        if value <= 0:
            raise ValidationError(f"Price must be at least {COST_PRECISION}, got {price}")
        return value

    @staticmethod
    def _parse_side(side: Union[OrderSide, str]) -> OrderSide:
        try:
            return OrderSide(side.upper() if isinstance(side, str) else side)
        except ValueError:
            raise ValidationError(f"Unknown order side: {side}")

    @staticmethod
    def _new_record(
        user_id: str,
        kind: TransactionKind,
        symbol: Optional[str],
        quantity: int,
        unit_price: Decimal,
    ) -> TransactionRecord:
        return TransactionRecord(
            txn_id=str(uuid.uuid4()),
            user_id=user_id,
            kind=kind,
            symbol=symbol,
            quantity=quantity,
            unit_price=unit_price,
            timestamp=now_eastern(),
        )
