"""
Data models for persistence and business logic.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from library_facade.utils.error_handling import IllegalStateError

if TYPE_CHECKING:
    from library_facade.services.notification_service import NotificationService


@dataclass
class Book:
    """Model representing a single copy of a book in the library."""

    isbn: Optional[str]
    title: Optional[str]
    author: Optional[str]
    borrowed: bool = False

    def borrow(self) -> None:
        """Mark the book as borrowed.

        Raises:
            IllegalStateError: If the book is already borrowed
        """
        if self.borrowed:
            raise IllegalStateError("Book is already borrowed.")
        self.borrowed = True

    def return_copy(self) -> None:
        """Mark the book as returned.

        Raises:
            IllegalStateError: If the book is not currently borrowed
        """
        if not self.borrowed:
            raise IllegalStateError("Book is not borrowed.")
        self.borrowed = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary."""
        return {
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "borrowed": self.borrowed
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Book':
        """Create a model from a dictionary."""
        return cls(
            isbn=data["isbn"],
            title=data.get("title"),
            author=data.get("author"),
            borrowed=data.get("borrowed", False)
        )


@dataclass
class User:
    """Model representing a registered library user."""

    name: Optional[str]
    id: Optional[str]
    notification_service: Optional['NotificationService'] = field(default=None, repr=False, compare=False)

    def notify(self, message: str) -> None:
        """Send a message to the user through their notification service.

        Failures raised by the notification service propagate unchanged.
        """
        self.notification_service.notify_user(self.id, message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary."""
        return {
            "id": self.id,
            "name": self.name
        }
