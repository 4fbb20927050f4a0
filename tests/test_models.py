# tests/test_models.py
import pytest
from unittest.mock import MagicMock

from library_facade.data.models import Book, User
from library_facade.services.notification_service import NotificationService
from library_facade.utils.error_handling import IllegalStateError, NotificationFailedError


@pytest.fixture
def book():
    """Create an available book"""
    return Book("9780306406157", "Some Title", "Some Author")


def test_new_book_is_not_borrowed(book):
    """Test that books start out available"""
    assert book.borrowed is False


def test_borrow_then_return(book):
    """Test the borrow and return transitions"""
    book.borrow()
    assert book.borrowed is True

    book.return_copy()
    assert book.borrowed is False


def test_borrow_twice_fails(book):
    """Test that a borrowed book cannot be borrowed again"""
    book.borrow()

    with pytest.raises(IllegalStateError) as exc_info:
        book.borrow()

    assert str(exc_info.value) == "Book is already borrowed."
    assert book.borrowed is True


def test_return_without_borrow_fails(book):
    """Test that an available book cannot be returned"""
    with pytest.raises(IllegalStateError) as exc_info:
        book.return_copy()

    assert str(exc_info.value) == "Book is not borrowed."
    assert book.borrowed is False


def test_borrow_cycle_is_reentrant(book):
    """Test that a returned book can be borrowed again"""
    book.borrow()
    book.return_copy()
    book.borrow()

    assert book.borrowed is True


def test_book_dict_conversion(book):
    """Test converting a book to and from a dictionary"""
    book.borrow()
    data = book.to_dict()

    assert data == {
        "isbn": "9780306406157",
        "title": "Some Title",
        "author": "Some Author",
        "borrowed": True,
    }
    assert Book.from_dict(data) == book
    assert Book.from_dict({"isbn": "9780306406157"}).borrowed is False


def test_user_notify_forwards_to_service():
    """Test that notifying a user goes through their notification service"""
    notification_service = MagicMock(spec=NotificationService)
    user = User("Some Name", "123456789", notification_service)

    user.notify("Hello")

    notification_service.notify_user.assert_called_once_with("123456789", "Hello")


def test_user_notify_propagates_failure():
    """Test that notification failures are not swallowed by the user"""
    notification_service = MagicMock(spec=NotificationService)
    failure = NotificationFailedError("channel down")
    notification_service.notify_user.side_effect = failure
    user = User("Some Name", "123456789", notification_service)

    with pytest.raises(NotificationFailedError) as exc_info:
        user.notify("Hello")

    assert exc_info.value is failure


def test_user_dict_excludes_notification_service():
    """Test that the notification service is not serialised"""
    user = User("Some Name", "123456789", MagicMock(spec=NotificationService))

    assert user.to_dict() == {"id": "123456789", "name": "Some Name"}
