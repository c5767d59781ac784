"""Read-only record store backed by a JSON snapshot of the store tables.

Snapshot layout:

    {
      "books": [{"id": "...", "user_id": "...", "title": "...", ...}],
      "book_analyses": [{"book_id": "...", "user_id": "...", "ai_topics": [...]}],
      "book_connections": [{"book_a_id": "...", "book_b_id": "...", ...}],
      "book_suggestions": [{"id": "...", "related_book_ids": [...], ...}]
    }

Every row carries ``user_id``; rows of other users are never returned.
Missing tables are treated as empty.
"""

import json
from pathlib import Path

from common.logger import get_logger
from graph.models import Book, BookConnection, BookSuggestion

from .interface import RecordStore
from .records import (
    analysis_from_row,
    attach_analyses,
    book_from_row,
    connection_from_row,
    suggestion_from_row,
)
from .types import Row, SnapshotFormatError

logger = get_logger(__name__)

TABLES = ("books", "book_analyses", "book_connections", "book_suggestions")


class SnapshotStore(RecordStore):
    """Record store reading a JSON snapshot file once, on first access."""

    def __init__(self, snapshot_path: Path | str):
        """Initialize snapshot store.

        Args:
            snapshot_path: Path to the snapshot JSON file
        """
        self.snapshot_path = Path(snapshot_path)
        self._tables: dict[str, list[Row]] | None = None

    @classmethod
    def from_tables(cls, tables: dict[str, list[Row]]) -> "SnapshotStore":
        """Create a store over tables already in memory."""
        store = cls(Path("<memory>"))
        store._tables = _validate(tables, source="<memory>")
        return store

    def _load(self) -> dict[str, list[Row]]:
        if self._tables is not None:
            return self._tables

        if not self.snapshot_path.exists():
            raise SnapshotFormatError(f"Snapshot file not found: {self.snapshot_path}")

        try:
            with open(self.snapshot_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotFormatError(f"Invalid JSON in {self.snapshot_path}: {e}") from e

        self._tables = _validate(data, source=str(self.snapshot_path))
        logger.info(
            f"Loaded snapshot {self.snapshot_path}: "
            f"[bold]{len(self._tables['books'])}[/bold] books"
        )
        return self._tables

    def _rows(self, table: str, user_id: str) -> list[Row]:
        # Owner ids may be stored as numbers; callers always pass strings
        return [
            row
            for row in self._load()[table]
            if row.get("user_id") is not None and str(row["user_id"]) == str(user_id)
        ]

    def fetch_books(self, user_id: str) -> list[Book]:
        try:
            books = [book_from_row(row) for row in self._rows("books", user_id)]
            analyses = [analysis_from_row(row) for row in self._rows("book_analyses", user_id)]
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotFormatError(f"Malformed book row in {self.snapshot_path}: {e}") from e
        return attach_analyses(books, analyses)

    def fetch_connections(self, user_id: str) -> list[BookConnection]:
        try:
            return [connection_from_row(row) for row in self._rows("book_connections", user_id)]
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotFormatError(
                f"Malformed connection row in {self.snapshot_path}: {e}"
            ) from e

    def fetch_suggestions(
        self, user_id: str, include_dismissed: bool = False
    ) -> list[BookSuggestion]:
        try:
            suggestions = [
                suggestion_from_row(row) for row in self._rows("book_suggestions", user_id)
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotFormatError(
                f"Malformed suggestion row in {self.snapshot_path}: {e}"
            ) from e

        if include_dismissed:
            return suggestions
        return [suggestion for suggestion in suggestions if not suggestion.dismissed]

    def user_ids(self) -> list[str]:
        """Owners that have at least one book, in first-seen order."""
        return list(
            dict.fromkeys(
                str(row["user_id"])
                for row in self._load()["books"]
                if row.get("user_id") is not None
            )
        )


def _validate(data: object, source: str) -> dict[str, list[Row]]:
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"Snapshot {source} must be a JSON object")

    tables = {}
    for table in TABLES:
        rows = data.get(table, [])
        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            raise SnapshotFormatError(f"Table '{table}' in {source} must be a list of objects")
        tables[table] = rows
    return tables
