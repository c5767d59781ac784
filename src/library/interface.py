"""Abstract record store interface.

The graph engine never reads storage itself. Callers fetch a user's records
through a RecordStore and hand them to the engine.
"""

from abc import ABC, abstractmethod

from graph.models import Book, BookConnection, BookSuggestion

from .types import BookNotFoundError


class RecordStore(ABC):
    """Read access to one backend's library records, scoped by owner."""

    @abstractmethod
    def fetch_books(self, user_id: str) -> list[Book]:
        """Fetch a user's books with their analyses attached.

        Args:
            user_id: Library owner

        Returns:
            Books in store order; empty if the user has none

        Raises:
            StoreError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def fetch_connections(self, user_id: str) -> list[BookConnection]:
        """Fetch the AI connections between a user's books.

        Raises:
            StoreError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def fetch_suggestions(
        self, user_id: str, include_dismissed: bool = False
    ) -> list[BookSuggestion]:
        """Fetch AI book suggestions for a user.

        Args:
            user_id: Library owner
            include_dismissed: Also return suggestions the user dismissed

        Raises:
            StoreError: If the backend cannot be read
        """
        pass

    def get_book(self, user_id: str, book_id: str) -> Book:
        """Get a single book from a user's library.

        Raises:
            BookNotFoundError: If the user has no book with this id
        """
        for book in self.fetch_books(user_id):
            if book.id == book_id:
                return book
        raise BookNotFoundError(book_id)
