"""Record store boundary for bookgraph.

This package maps stored rows into the records the graph engine consumes.

Example:
    >>> from library import create_store
    >>>
    >>> store = create_store("data/library.json")
    >>> books = store.fetch_books("user-1")
    >>> connections = store.fetch_connections("user-1")
"""

from .factory import create_store, get_store
from .interface import RecordStore
from .records import (
    analysis_from_row,
    attach_analyses,
    book_from_row,
    connection_from_row,
    normalize_connections,
    normalize_suggestions,
    suggestion_from_row,
)
from .snapshot_store import SnapshotStore
from .types import BookNotFoundError, Row, SnapshotFormatError, StoreError

__all__ = [
    # Factory
    "create_store",
    "get_store",
    # Interface and implementations
    "RecordStore",
    "SnapshotStore",
    # Row mapping
    "analysis_from_row",
    "attach_analyses",
    "book_from_row",
    "connection_from_row",
    "normalize_connections",
    "normalize_suggestions",
    "suggestion_from_row",
    # Types and exceptions
    "BookNotFoundError",
    "Row",
    "SnapshotFormatError",
    "StoreError",
]
