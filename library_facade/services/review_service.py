"""
Review lookup service interface.
"""
from abc import abstractmethod
from typing import List, Optional

from .base_service import BaseService


class ReviewService(BaseService):
    """Source of free-text reviews for books.

    A review service may hold a connection or session for the duration of a
    lookup; callers must call ``close`` once they are done with each lookup,
    whether or not it succeeded.
    """

    @abstractmethod
    def get_reviews_for_book(self, isbn: str) -> Optional[List[str]]:
        """Fetch the reviews for a book.

        Args:
            isbn: ISBN of the book

        Returns:
            Optional[List[str]]: Reviews in display order, possibly empty

        Raises:
            ReviewServiceUnavailableError: If the reviews cannot be fetched
        """
        pass
