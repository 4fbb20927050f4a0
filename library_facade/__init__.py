"""
Library facade: book inventory, user registration, borrowing and
review notifications over pluggable persistence, review and
notification services.
"""

from library_facade.data.models import Book, User
from library_facade.domain.library import Library

__version__ = "0.1.0"

__all__ = ["Book", "Library", "User"]
