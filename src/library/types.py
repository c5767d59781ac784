"""Shared types and exceptions for the record store layer."""

from typing import Any


class StoreError(Exception):
    """Base exception for record store operations."""

    pass


class SnapshotFormatError(StoreError):
    """Snapshot file is unreadable or not shaped like a record dump."""

    pass


class BookNotFoundError(StoreError):
    """No book with the requested id exists in the user's library."""

    def __init__(self, book_id: str):
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id


# Type alias for record store rows
Row = dict[str, Any]
