"""Relationship queries over the raw book collection.

These answer "what is related to X" directly from books, without building a
graph, and use the same merged-set matching the builder uses for edges.
"""

from collections.abc import Sequence

from .attributes import merged_values, parse_node_id, shares_value
from .models import AttributeKind, Book


def find_related_books(book: Book, all_books: Sequence[Book]) -> list[Book]:
    """
    Find every other book sharing at least one attribute value with ``book``.

    Kinds are checked in the order author, topic, theme, tag and a pair stops
    at its first match. Authors compare user values only since they have no
    AI-inferred form; the other kinds compare merged sets on both sides.

    Args:
        book: Book to find relations for
        all_books: Library to search

    Returns:
        Related books in ``all_books`` order, never including ``book`` itself
    """
    related_ids = set()
    for other in all_books:
        if other.id == book.id or other.id in related_ids:
            continue
        if any(shares_value(book, other, kind) for kind in AttributeKind):
            related_ids.add(other.id)

    return [other for other in all_books if other.id in related_ids]


def get_connected_books(attribute_id: str, books: Sequence[Book]) -> list[Book]:
    """
    Get the books linked to an attribute node.

    Args:
        attribute_id: Node identity such as ``"tag:sci-fi"``. Everything after
            the first colon is the value, colons included.
        books: Library to search

    Returns:
        Books whose merged values for the kind contain the value, in input
        order. Unknown kinds, identities without a colon and empty values
        yield an empty list.
    """
    parsed = parse_node_id(attribute_id)
    if parsed is None:
        return []

    kind_name, value = parsed
    if not value:
        return []

    try:
        kind = AttributeKind(kind_name)
    except ValueError:
        return []

    return [book for book in books if value in merged_values(book, kind)]
