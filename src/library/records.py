"""Conversion of record store rows into library records.

Rows use the store's column names (``date_read``, ``ai_topics``, ...). Values
are taken as-is; only the shape is checked.
"""

import uuid
from collections.abc import Iterable

from common.constants import DEFAULT_CONNECTION_STRENGTH
from graph.models import Book, BookAnalysis, BookConnection, BookSuggestion, ConnectionType

from .types import Row


def _strings(row: Row, key: str) -> list[str]:
    return [str(value) for value in row.get(key) or []]


def book_from_row(row: Row) -> Book:
    """Build a Book from a ``books`` row (analysis is attached separately)."""
    return Book(
        id=str(row["id"]),
        title=row["title"],
        authors=_strings(row, "authors"),
        topics=_strings(row, "topics"),
        themes=_strings(row, "themes"),
        tags=_strings(row, "tags"),
        year=row.get("year"),
        rating=row.get("rating"),
        date_read=row.get("date_read"),
        notes=row.get("notes"),
    )


def analysis_from_row(row: Row) -> BookAnalysis:
    """Build a BookAnalysis from a ``book_analyses`` row."""
    return BookAnalysis(
        book_id=str(row["book_id"]),
        ai_topics=_strings(row, "ai_topics"),
        ai_themes=_strings(row, "ai_themes"),
        ai_tags=_strings(row, "ai_tags"),
        ai_summary=row.get("ai_summary"),
        model_used=row.get("model_used"),
        analyzed_at=row.get("analyzed_at"),
    )


def connection_from_row(row: Row) -> BookConnection:
    """Build a BookConnection from a ``book_connections`` row."""
    return BookConnection(
        id=row.get("id"),
        book_a_id=str(row["book_a_id"]),
        book_b_id=str(row["book_b_id"]),
        connection_type=_connection_type(row.get("connection_type")),
        strength=float(
            row["strength"] if row.get("strength") is not None else DEFAULT_CONNECTION_STRENGTH
        ),
        explanation=row.get("explanation"),
    )


def suggestion_from_row(row: Row) -> BookSuggestion:
    """Build a BookSuggestion from a ``book_suggestions`` row."""
    return BookSuggestion(
        id=str(row["id"]),
        title=row["title"],
        authors=_strings(row, "authors"),
        reason=row.get("reason"),
        related_book_ids=_strings(row, "related_book_ids"),
        dismissed=bool(row.get("dismissed", False)),
    )


def attach_analyses(books: Iterable[Book], analyses: Iterable[BookAnalysis]) -> list[Book]:
    """Attach each analysis to the book it belongs to.

    Analyses for unknown books are ignored. If a book has several analyses
    the last one wins.

    Returns:
        The books, in input order, with ``analysis`` populated
    """
    by_book = {analysis.book_id: analysis for analysis in analyses}
    merged = []
    for book in books:
        book.analysis = by_book.get(book.id)
        merged.append(book)
    return merged


def _connection_type(raw: object) -> ConnectionType:
    try:
        return ConnectionType(raw or ConnectionType.THEMATIC.value)
    except ValueError:
        return ConnectionType.THEMATIC


def _clamp_strength(raw: object) -> float:
    try:
        strength = float(raw) if raw else DEFAULT_CONNECTION_STRENGTH
    except (TypeError, ValueError):
        strength = DEFAULT_CONNECTION_STRENGTH
    return min(1.0, max(0.0, strength))


def normalize_connections(
    raw_connections: Iterable[Row], valid_book_ids: Iterable[str]
) -> list[BookConnection]:
    """Turn parsed library-analysis output into canonical connections.

    For each raw connection:
    - drop it if either id is unknown or both ids are the same book
    - order the pair so the smaller id comes first
    - default a missing type to thematic, and map unknown types to thematic
    - clamp strength into [0, 1], defaulting a missing or zero strength to 0.5

    At most one connection is kept per (pair, type); a later duplicate
    replaces the earlier one in place.

    Args:
        raw_connections: Dicts with ``book_a_id``, ``book_b_id`` and optional
            ``connection_type``, ``strength``, ``explanation``
        valid_book_ids: Ids of the books in the analysed library

    Returns:
        Canonical connections in first-seen order
    """
    valid = set(valid_book_ids)
    canonical: dict[tuple[str, str, ConnectionType], BookConnection] = {}

    for raw in raw_connections:
        book_a = str(raw.get("book_a_id") or "")
        book_b = str(raw.get("book_b_id") or "")
        if book_a not in valid or book_b not in valid or book_a == book_b:
            continue

        first, second = sorted((book_a, book_b))
        connection_type = _connection_type(raw.get("connection_type"))
        canonical[(first, second, connection_type)] = BookConnection(
            book_a_id=first,
            book_b_id=second,
            connection_type=connection_type,
            strength=_clamp_strength(raw.get("strength")),
            explanation=raw.get("explanation"),
        )

    return list(canonical.values())


def normalize_suggestions(
    raw_suggestions: Iterable[Row], valid_book_ids: Iterable[str]
) -> list[BookSuggestion]:
    """Turn parsed book-suggestion output into fresh, undismissed suggestions.

    Related book ids that are not in the library are dropped. Missing
    authors default to an empty list and a missing reason to None. Entries
    without a title are skipped. Suggestions without an id get a new one.

    Args:
        raw_suggestions: Dicts with ``title`` and optional ``id``,
            ``authors``, ``reason``, ``related_book_ids``
        valid_book_ids: Ids of the books in the library

    Returns:
        Suggestions in input order
    """
    valid = set(valid_book_ids)
    suggestions = []

    for raw in raw_suggestions:
        title = raw.get("title")
        if not title:
            continue

        suggestions.append(
            BookSuggestion(
                id=str(raw.get("id") or uuid.uuid4()),
                title=str(title),
                authors=_strings(raw, "authors"),
                reason=raw.get("reason") or None,
                related_book_ids=[
                    book_id for book_id in _strings(raw, "related_book_ids") if book_id in valid
                ],
                dismissed=False,
            )
        )

    return suggestions
