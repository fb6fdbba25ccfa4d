"""Order domain specific exceptions."""

from agromove.core.errors import InvalidArgumentError, NotFoundError


class OrderNotFoundError(NotFoundError):
    """Raised when the requested order cannot be found."""

    def __init__(self, message: str = "Order not found") -> None:
        super().__init__(message)


class InvalidOrderStatusError(InvalidArgumentError):
    """Raised when a status name does not match any known status."""


class InvalidStatusTransitionError(InvalidArgumentError):
    """Raised when the active transition policy forbids a status change."""
