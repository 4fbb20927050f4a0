"""
Persistence interface consumed by the library facade.
"""
from abc import ABC, abstractmethod
from typing import Optional

from library_facade.data.models import Book, User


class DatabaseService(ABC):
    """Base class for all persistence implementations.

    This abstract class defines the operations the library facade needs
    from a backing store. The facade validates every argument before
    calling any of these methods, so implementations may assume
    well-formed ISBNs and user IDs. How and where the data is kept,
    including any locking against other clients, is up to the
    implementation.
    """

    @abstractmethod
    def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        """Retrieve a book by its ISBN.

        Args:
            isbn: Book identifier

        Returns:
            Optional[Book]: Book if found, None otherwise
        """
        pass

    @abstractmethod
    def add_book(self, isbn: str, book: Book) -> None:
        """Store a new book under its ISBN.

        Args:
            isbn: Book identifier
            book: Book to store
        """
        pass

    @abstractmethod
    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve a user by ID.

        Args:
            user_id: User identifier

        Returns:
            Optional[User]: User if found, None otherwise
        """
        pass

    @abstractmethod
    def register_user(self, user_id: str, user: User) -> None:
        """Store a new user under their ID.

        Args:
            user_id: User identifier
            user: User to store
        """
        pass

    @abstractmethod
    def borrow_book(self, isbn: str, user_id: str) -> None:
        """Record that a user has borrowed a book."""
        pass

    @abstractmethod
    def return_book(self, isbn: str) -> None:
        """Record that a borrowed book has been returned."""
        pass
