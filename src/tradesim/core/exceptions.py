"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AccountExistsError(AppError):
    """Raised when opening an account for a user that already has one."""

    def __init__(self, user_id: str):
        super().__init__(f"Account already exists: {user_id}", code="ACCOUNT_EXISTS")


class InvalidAmountError(ValidationError):
    """Raised when a cash amount is zero or negative."""

    def __init__(self, amount: object):
        super().__init__(f"Amount must be positive, got {amount}", code="INVALID_AMOUNT")


class InvalidQuantityError(ValidationError):
    """Raised when an order quantity is not a positive whole number."""

    def __init__(self, quantity: object):
        super().__init__(
            f"Quantity must be a positive whole number, got {quantity}",
            code="INVALID_QUANTITY",
        )


class InsufficientFundsError(AppError):
    """Raised when a BUY costs more than the available cash."""

    def __init__(self, required: str, available: str):
        super().__init__(
            f"Insufficient funds: required {required}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )


class InsufficientPositionError(AppError):
    """Raised when attempting to sell more shares than owned."""

    def __init__(self, symbol: str, requested: int, available: int):
        super().__init__(
            f"Insufficient shares of {symbol}: requested {requested}, available {available}",
            code="INSUFFICIENT_POSITION",
        )


class QuoteUnavailableError(AppError):
    """Raised when an order cannot be priced."""

    def __init__(self, symbol: str):
        super().__init__(f"No current price for {symbol}", code="QUOTE_UNAVAILABLE")


class StoreConflictError(AppError):
    """Raised when a concurrent write invalidated the unit of work. Retryable."""

    def __init__(self, message: str = "Concurrent update detected"):
        super().__init__(message, code="STORE_CONFLICT")


class StoreUnavailableError(AppError):
    """Raised when the account store cannot complete a unit of work."""

    def __init__(self, message: str = "Account store unavailable"):
        super().__init__(message, code="STORE_UNAVAILABLE")
