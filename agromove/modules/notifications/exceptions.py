"""Notification domain specific exceptions."""

from agromove.core.errors import NotFoundError


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification is missing or belongs to someone else."""

    def __init__(self, message: str = "Notification not found") -> None:
        super().__init__(message)
