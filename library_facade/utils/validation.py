"""
Field validators for library entities.

All validators are pure predicates that fail closed: anything that is not a
well-formed string of the expected shape is rejected.
"""

import re
from typing import Optional

from library_facade.config import settings

ISBN_LENGTH = 13

_ISBN_CHARS = re.compile(r"[0-9-]+")
# Runs of letters joined by a single hyphen, apostrophe, space or dot
_NAME_PATTERN = re.compile(r"[^\W\d_]+(?:[-' .][^\W\d_]+)*")
_NAME_SEPARATORS = re.compile(r"[-' .]")


def is_valid_isbn(isbn: Optional[str]) -> bool:
    """Check an ISBN-13, ignoring hyphens.

    The digits are weighted 1, 3, 1, 3, ... and the weighted sum of all
    thirteen digits must be divisible by ten.

    Args:
        isbn: Candidate ISBN

    Returns:
        bool: True if the ISBN is well-formed and its check digit matches
    """
    if not isinstance(isbn, str) or not _ISBN_CHARS.fullmatch(isbn):
        return False

    digits = isbn.replace("-", "")
    if len(digits) != ISBN_LENGTH:
        return False

    total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(digits))
    return total % 10 == 0


def is_valid_user_id(user_id: Optional[str], length: Optional[int] = None) -> bool:
    """Check that a user ID is exactly ``length`` ASCII digits.

    Args:
        user_id: Candidate user ID
        length: Required number of digits, defaults to the configured length

    Returns:
        bool: True if the ID has the required shape
    """
    if length is None:
        length = settings.library.user_id_length
    if not isinstance(user_id, str) or len(user_id) != length:
        return False
    return user_id.isascii() and user_id.isdigit()


def is_valid_name(name: Optional[str]) -> bool:
    """Check a person's name or a book's author against the name grammar.

    Args:
        name: Candidate name

    Returns:
        bool: True if the name is letters separated by single ``-``, ``'``,
        space or ``.`` characters
    """
    if not isinstance(name, str) or not name:
        return False
    if _NAME_PATTERN.fullmatch(name) is None:
        return False
    # [^\W\d_] still admits numeric symbols such as superscripts and fractions
    return all(part.isalpha() for part in _NAME_SEPARATORS.split(name))


def is_valid_title(title: Optional[str]) -> bool:
    """Check that a title is present and not blank."""
    return isinstance(title, str) and bool(title.strip())
