"""Attribute identity and merged-set helpers shared by the builder and queries.

Node identities are content-addressed strings of the form ``"<kind>:<value>"``.
Both the graph builder and the relationship queries derive them here, so a
node produced by one build can be resolved again from the raw books alone.
"""

from .models import AttributeKind, Book

# Book fields holding user-entered values, per attribute kind
USER_FIELDS: dict[AttributeKind, str] = {
    AttributeKind.AUTHOR: "authors",
    AttributeKind.TOPIC: "topics",
    AttributeKind.THEME: "themes",
    AttributeKind.TAG: "tags",
}

# Analysis fields holding AI-inferred values. Authors are never inferred.
AI_FIELDS: dict[AttributeKind, str] = {
    AttributeKind.TOPIC: "ai_topics",
    AttributeKind.THEME: "ai_themes",
    AttributeKind.TAG: "ai_tags",
}


def node_id(kind: str, value: str) -> str:
    """Build the identity of a node.

    Args:
        kind: Node type, e.g. "topic" or "book"
        value: Attribute value or record id, used verbatim

    Returns:
        Identity string such as ``"topic:Space Travel"``
    """
    return f"{kind}:{value}"


def book_node_id(book_id: str) -> str:
    return node_id("book", book_id)


def parse_node_id(identity: str) -> tuple[str, str] | None:
    """Split an identity into kind and value.

    Only the first colon separates; the value may contain colons itself.

    Returns:
        (kind, value), or None when the identity has no colon
    """
    kind, sep, value = identity.partition(":")
    if not sep:
        return None
    return kind, value


def user_values(book: Book, kind: AttributeKind) -> list[str]:
    """Values the user entered for ``kind``, deduplicated in entry order."""
    return list(dict.fromkeys(getattr(book, USER_FIELDS[kind])))


def ai_values(book: Book, kind: AttributeKind) -> list[str]:
    """Values inferred by analysis for ``kind``, deduplicated in order."""
    if book.analysis is None or kind not in AI_FIELDS:
        return []
    return list(dict.fromkeys(getattr(book.analysis, AI_FIELDS[kind])))


def merged_values(book: Book, kind: AttributeKind) -> list[str]:
    """Union of user and AI values for ``kind``.

    User values come first in entry order, followed by AI-only values in
    inference order. Each value appears once.
    """
    return list(dict.fromkeys(user_values(book, kind) + ai_values(book, kind)))


def shares_value(book: Book, other: Book, kind: AttributeKind) -> bool:
    """Whether two books have at least one merged value of ``kind`` in common."""
    return not set(merged_values(book, kind)).isdisjoint(merged_values(other, kind))
