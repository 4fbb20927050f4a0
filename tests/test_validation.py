# tests/test_validation.py
import pytest

from library_facade.utils import validation
from library_facade.utils.validation import (
    is_valid_isbn,
    is_valid_name,
    is_valid_title,
    is_valid_user_id,
)


@pytest.mark.parametrize("isbn", [
    "9780306406157",
    "978-0-306-40615-7",
    "9783161484100",
    "978-3-16-148410-0",
])
def test_valid_isbn(isbn):
    """Test that well-formed ISBN-13s with a matching check digit pass"""
    assert is_valid_isbn(isbn) is True


@pytest.mark.parametrize("isbn", [
    None,
    "",
    "123",                  # too short
    "97803064061570",       # too long
    "97803064A06157",       # contains a letter
    "9780306406158",        # wrong check digit
    "978-0-306-40615-X",    # hyphen + invalid character
    "978 0 306 40615 7",    # spaces are not separators
    "---",
    "９７８０３０６４０６１５７",  # full-width digits
    9780306406157,          # not a string
])
def test_invalid_isbn(isbn):
    """Test that malformed ISBNs are rejected"""
    assert is_valid_isbn(isbn) is False


def test_isbn_check_digit_is_position_weighted():
    """Test that swapping two adjacent digits breaks the checksum"""
    assert is_valid_isbn("9780306406157")
    assert not is_valid_isbn("9780036406157")


def test_valid_user_id():
    """Test that an ID of exactly the configured number of digits passes"""
    assert is_valid_user_id("123456789") is True


@pytest.mark.parametrize("user_id", [
    None,
    "",
    "12345678",         # one digit short
    "1234567890",       # one digit long
    "12345678A",        # letter
    "1234 5678",
    "-12345678",
    "１２３４５６７８９",  # full-width digits
    123456789,          # not a string
])
def test_invalid_user_id(user_id):
    """Test that IDs of the wrong shape are rejected"""
    assert is_valid_user_id(user_id) is False


def test_user_id_explicit_length():
    """Test that an explicit length overrides the configured one"""
    assert is_valid_user_id("123456789012", length=12) is True
    assert is_valid_user_id("123456789", length=12) is False


def test_user_id_length_follows_settings(monkeypatch):
    """Test that the configured user ID length is read at call time"""
    monkeypatch.setattr(validation.settings.library, "user_id_length", 11)

    assert is_valid_user_id("12345678901") is True
    assert is_valid_user_id("123456789") is False


@pytest.mark.parametrize("name", [
    "John",
    "Some Author",
    "O'Connor",
    "Mary-Jane Watson",
    "St.Clair",
    "Jean-Luc d'Arcy",
    "Zoë Ødegård",
])
def test_valid_name(name):
    """Test names made of letter runs joined by single separators"""
    assert is_valid_name(name) is True


@pytest.mark.parametrize("name", [
    None,
    "",
    " ",
    "1John",            # starts with number
    "John2",            # ends with number
    "John@Doe",         # contains invalid symbol
    "John--Doe",        # consecutive hyphens
    "O''Connor",        # consecutive apostrophes
    "John  Doe",        # consecutive spaces
    "J. Doe",           # dot followed by space
    ".John",            # starts with dot
    "John.",            # ends with dot
    "-Mary",            # starts with hyphen
    "Mary-",            # ends with hyphen
    "''Alice",          # starts with consecutive apostrophes
    "Alice''",          # ends with consecutive apostrophes
    " Alice",           # starts with space
    "John_Doe",         # underscore
    "John#Doe",         # hash
    "John\n",           # trailing newline
    "John²",            # superscript digit
    "Ann½",             # vulgar fraction
    "Louis Ⅻ",         # roman numeral
    "Bob٣",             # arabic-indic digit
])
def test_invalid_name(name):
    """Test that names breaking the grammar are rejected"""
    assert is_valid_name(name) is False


@pytest.mark.parametrize("title, expected", [
    ("Some Title", True),
    ("1984", True),
    ("", False),
    ("   ", False),
    (None, False),
])
def test_title_validation(title, expected):
    """Test that titles only need to be non-blank text"""
    assert is_valid_title(title) is expected
