"""Domain error hierarchy shared by every module.

Each error carries a client-facing message and the HTTP status class it maps
to. The HTTP layer turns any ``DomainError`` into a ``{"message": ...}`` body;
services never build responses themselves.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for failures that are reported back to the caller."""

    http_status: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, str]:
        return {"message": self.message}


class NotFoundError(DomainError):
    """Raised when a wallet, order or other record does not exist."""

    http_status = 404


class InvalidArgumentError(DomainError):
    """Raised when a request value fails validation."""

    http_status = 400


class InsufficientFundsError(InvalidArgumentError):
    """Raised when a debit exceeds the current wallet balance."""


class ConflictError(DomainError):
    """Raised when a concurrent writer changed the record first."""

    http_status = 409
