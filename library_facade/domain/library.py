"""
Library facade.

This module coordinates book inventory, user registration, borrowing and
review notifications. It validates every request before touching any
collaborator, applies entity transitions, and translates collaborator
failures into the library's error types.
"""

from contextlib import closing
from typing import Optional

from library_facade.config.logging_config import get_logger
from library_facade.data.base_repository import DatabaseService
from library_facade.data.models import Book, User
from library_facade.services.review_service import ReviewService
from library_facade.utils.error_handling import (
    BookAlreadyBorrowedError,
    BookNotBorrowedError,
    BookNotFoundError,
    InvalidArgumentError,
    NoReviewsFoundError,
    NotificationFailedError,
    ReviewServiceUnavailableError,
    UserNotRegisteredError,
    safe_execute,
)
from library_facade.utils.validation import (
    is_valid_isbn,
    is_valid_name,
    is_valid_title,
    is_valid_user_id,
)

logger = get_logger(__name__)


class Library:
    """
    Entry point for all library operations.

    The library owns no state of its own: books and users live in the
    database service, reviews come from the review service, and each user
    carries their own notification service.
    """

    def __init__(self, database_service: DatabaseService, review_service: ReviewService):
        """
        Initialize the library.

        Args:
            database_service: Persistence for books, users and loans
            review_service: Source of book reviews
        """
        self.database_service = database_service
        self.review_service = review_service

    def add_book(self, book: Optional[Book]) -> None:
        """
        Add a new book to the library.

        Args:
            book: Book to add; must not be borrowed

        Raises:
            InvalidArgumentError: If the book is malformed or already exists
        """
        if book is None:
            raise InvalidArgumentError("Invalid book.")
        if not is_valid_isbn(book.isbn):
            raise InvalidArgumentError("Invalid ISBN.")
        if not is_valid_title(book.title):
            raise InvalidArgumentError("Invalid title.")
        if not is_valid_name(book.author):
            raise InvalidArgumentError("Invalid author.")
        if book.borrowed:
            raise InvalidArgumentError("Book with invalid borrowed state.")

        if self.database_service.get_book_by_isbn(book.isbn) is not None:
            logger.debug(f"Rejected duplicate book {book.isbn}")
            raise InvalidArgumentError("Book already exists.")

        self.database_service.add_book(book.isbn, book)
        logger.info(f"Added book {book.isbn}")

    def register_user(self, user: Optional[User]) -> None:
        """
        Register a new user.

        Args:
            user: User to register; must carry a notification service

        Raises:
            InvalidArgumentError: If the user is malformed or already registered
        """
        if user is None:
            raise InvalidArgumentError("Invalid user.")
        if not is_valid_user_id(user.id):
            raise InvalidArgumentError("Invalid user Id.")
        if not is_valid_name(user.name):
            raise InvalidArgumentError("Invalid user name.")
        if user.notification_service is None:
            raise InvalidArgumentError("Invalid notification service.")

        if self.database_service.get_user_by_id(user.id) is not None:
            logger.debug(f"Rejected duplicate user {user.id}")
            raise InvalidArgumentError("User already exists.")

        self.database_service.register_user(user.id, user)
        logger.info(f"Registered user {user.id}")

    def borrow_book(self, isbn: str, user_id: str) -> None:
        """
        Lend a book to a registered user.

        The book is checked before the user: an unknown book is reported
        even when the user ID is also invalid.

        Args:
            isbn: ISBN of the book
            user_id: ID of the borrowing user

        Raises:
            InvalidArgumentError: If the ISBN or user ID is malformed
            BookNotFoundError: If the book does not exist
            UserNotRegisteredError: If the user does not exist
            BookAlreadyBorrowedError: If the book is already lent out
        """
        if not is_valid_isbn(isbn):
            raise InvalidArgumentError("Invalid ISBN.")
        book = self.database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError("Book not found!")

        if not is_valid_user_id(user_id):
            raise InvalidArgumentError("Invalid user Id.")
        if self.database_service.get_user_by_id(user_id) is None:
            raise UserNotRegisteredError("User not found!")

        if book.borrowed:
            raise BookAlreadyBorrowedError("Book is already borrowed!")

        book.borrow()
        self.database_service.borrow_book(isbn, user_id)
        logger.info(f"User {user_id} borrowed book {isbn}")

    def return_book(self, isbn: str) -> None:
        """
        Take back a borrowed book.

        Args:
            isbn: ISBN of the book

        Raises:
            InvalidArgumentError: If the ISBN is malformed
            BookNotFoundError: If the book does not exist
            BookNotBorrowedError: If the book is not lent out
        """
        if not is_valid_isbn(isbn):
            raise InvalidArgumentError("Invalid ISBN.")
        book = self.database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError("Book not found!")
        if not book.borrowed:
            raise BookNotBorrowedError("Book wasn't borrowed!")

        book.return_copy()
        self.database_service.return_book(isbn)
        logger.info(f"Book {isbn} returned")

    def notify_user_with_book_reviews(self, isbn: str, user_id: str) -> None:
        """
        Send a user the reviews of a book.

        The review service is closed exactly once per call, whichever way
        the call ends.

        Args:
            isbn: ISBN of the book
            user_id: ID of the user to notify

        Raises:
            InvalidArgumentError: If the ISBN or user ID is malformed
            BookNotFoundError: If the book does not exist
            UserNotRegisteredError: If the user does not exist
            ReviewServiceUnavailableError: If the reviews cannot be fetched
            NoReviewsFoundError: If the book has no reviews
            NotificationFailedError: If the user could not be notified
        """
        if not is_valid_isbn(isbn):
            raise InvalidArgumentError("Invalid ISBN.")
        if not is_valid_user_id(user_id):
            raise InvalidArgumentError("Invalid user Id.")

        book = self.database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError("Book not found!")
        user = self.database_service.get_user_by_id(user_id)
        if user is None:
            raise UserNotRegisteredError("User not found!")

        with closing(self.review_service) as review_service:
            try:
                reviews = review_service.get_reviews_for_book(isbn)
            except ReviewServiceUnavailableError as e:
                error = ReviewServiceUnavailableError("Review service unavailable!", cause=e)
                logger.error(str(error), extra={"error": error.to_dict()})
                raise error from e

            if not reviews:
                raise NoReviewsFoundError("No reviews found!")

            message = f"Reviews for '{book.title}':\n" + "\n".join(reviews)
            try:
                user.notify(message)
            except NotificationFailedError as e:
                error = NotificationFailedError("Notification failed!", cause=e)
                logger.error(str(error), extra={"error": error.to_dict()})
                raise error from e

        logger.info(f"Sent {len(reviews)} reviews of book {isbn} to user {user_id}")

    def get_book_by_isbn(self, isbn: str, user_id: str) -> Book:
        """
        Look up a book on behalf of a user.

        If the book is currently lent out, the user is told so on a best
        effort basis; a failed notification does not affect the result.

        Args:
            isbn: ISBN of the book
            user_id: ID of the requesting user

        Returns:
            Book: The stored book, borrowed or not

        Raises:
            InvalidArgumentError: If the ISBN or user ID is malformed
            BookNotFoundError: If the book does not exist
        """
        if not is_valid_isbn(isbn):
            raise InvalidArgumentError("Invalid ISBN.")
        if not is_valid_user_id(user_id):
            raise InvalidArgumentError("Invalid user Id.")

        book = self.database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError("Book not found!")

        if book.borrowed:
            safe_execute(
                self._notify_book_unavailable,
                book,
                user_id,
                error_message=f"Could not notify user {user_id} about book {isbn}",
                expected=(UserNotRegisteredError, NotificationFailedError),
            )

        return book

    def _notify_book_unavailable(self, book: Book, user_id: str) -> None:
        """Tell a user that a book is lent out and will be available on return."""
        user = self.database_service.get_user_by_id(user_id)
        if user is None:
            raise UserNotRegisteredError("User not found!")
        user.notify(
            f"The book '{book.title}' is currently borrowed. "
            "You will be able to borrow it once it has been returned."
        )
