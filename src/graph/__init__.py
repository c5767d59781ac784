"""Graph construction and relationship queries for a book library.

Example:
    >>> from graph import Book, EdgeToggles, build_graph, get_connected_books
    >>>
    >>> books = [
    ...     Book(id="1", title="Dune", topics=["Space"]),
    ...     Book(id="2", title="Solaris", topics=["Space"]),
    ... ]
    >>> data = build_graph(books, EdgeToggles(), threshold=2)
    >>> [node.id for node in data.nodes]
    ['book:1', 'topic:Space', 'book:2']
    >>> [book.title for book in get_connected_books("topic:Space", books)]
    ['Dune', 'Solaris']
"""

from .attributes import merged_values, node_id, parse_node_id
from .builder import build_graph, count_attribute_books
from .models import (
    AttributeKind,
    Book,
    BookAnalysis,
    BookConnection,
    BookSuggestion,
    ConnectionType,
    EdgeToggles,
    GraphData,
    GraphLink,
    GraphNode,
    LinkType,
    NodeType,
    Provenance,
)
from .related import find_related_books, get_connected_books

__all__ = [
    # Engine
    "build_graph",
    "count_attribute_books",
    "find_related_books",
    "get_connected_books",
    # Identity helpers
    "merged_values",
    "node_id",
    "parse_node_id",
    # Models
    "AttributeKind",
    "Book",
    "BookAnalysis",
    "BookConnection",
    "BookSuggestion",
    "ConnectionType",
    "EdgeToggles",
    "GraphData",
    "GraphLink",
    "GraphNode",
    "LinkType",
    "NodeType",
    "Provenance",
]
