"""Wallet domain specific exceptions."""

from agromove.core.errors import InvalidArgumentError, NotFoundError


class WalletNotFoundError(NotFoundError):
    """Raised when the calling user has no wallet."""

    def __init__(self, message: str = "Wallet not found for this user") -> None:
        super().__init__(message)


class TransactionNotFoundError(NotFoundError):
    """Raised when a ledger entry id does not exist."""

    def __init__(self, message: str = "Transaction not found") -> None:
        super().__init__(message)


class TransactionNotPendingError(InvalidArgumentError):
    """Raised when settling an entry that is not a pending credit."""
