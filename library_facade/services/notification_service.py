"""
Notification channel interface.
"""
from abc import abstractmethod

from .base_service import BaseService


class NotificationService(BaseService):
    """Delivers messages to a single user.

    Implementations raise ``NotificationFailedError`` when a message
    cannot be delivered. Delivery is attempted once; retrying is left
    to the implementation.
    """

    @abstractmethod
    def notify_user(self, user_id: str, message: str) -> None:
        """Send a message to a user.

        Args:
            user_id: ID of the recipient
            message: Message text

        Raises:
            NotificationFailedError: If the message could not be delivered
        """
        pass
