"""Graph query resolvers for a user's book library."""

import strawberry

from api.cache import GraphCache
from api.types import Book, EdgeTogglesInput, Graph
from common.env import env
from graph import find_related_books, get_connected_books
from library import BookNotFoundError, get_store

graph_cache = GraphCache(max_size=env.cache_size())


@strawberry.type
class Query:
    """GraphQL queries for the bookgraph API."""

    @strawberry.field
    def library_graph(
        self,
        user_id: str,
        toggles: EdgeTogglesInput | None = None,
        threshold: int | None = None,
        show_suggestions: bool = False,
    ) -> Graph:
        """
        Build the graph of a user's library.

        Returns a graph with:
        - Book nodes (every book, never pruned)
        - Attribute nodes shared by at least ``threshold`` books
        - Edges: book -> attribute, book -> book (AI connections)
        - If show_suggestions: suggestion nodes and edges to related books

        Args:
            user_id: Library owner
            toggles: Enabled edge sources (default: all)
            threshold: Minimum books per attribute (default: BOOKGRAPH_THRESHOLD)
            show_suggestions: Overlay non-dismissed AI suggestions

        Returns:
            Graph with nodes and edges for visualization
        """
        store = get_store()
        books = store.fetch_books(user_id)
        connections = store.fetch_connections(user_id)
        suggestions = store.fetch_suggestions(user_id) if show_suggestions else []

        data = graph_cache.get_or_build(
            books,
            (toggles or EdgeTogglesInput()).to_model(),
            threshold if threshold is not None else env.threshold(),
            connections=connections,
            suggestions=suggestions,
            show_suggestions=show_suggestions,
        )
        return Graph.from_model(data)

    @strawberry.field
    def related_books(self, user_id: str, book_id: str) -> list[Book]:
        """
        Get books sharing an author, topic, theme or tag with a book.

        Args:
            user_id: Library owner
            book_id: ID of the selected book

        Returns:
            Related books, or an empty list if the book does not exist
        """
        store = get_store()
        books = store.fetch_books(user_id)
        try:
            book = store.get_book(user_id, book_id)
        except BookNotFoundError:
            return []
        return [Book.from_model(related) for related in find_related_books(book, books)]

    @strawberry.field
    def connected_books(self, user_id: str, node_id: str) -> list[Book]:
        """
        Get the books linked to an attribute node.

        Args:
            user_id: Library owner
            node_id: Attribute node identity, e.g. "topic:Space Travel"

        Returns:
            Books carrying the attribute value
        """
        books = get_store().fetch_books(user_id)
        return [Book.from_model(book) for book in get_connected_books(node_id, books)]

    @strawberry.field
    def book(self, user_id: str, id: str) -> Book | None:
        """
        Get a single book by ID.

        Args:
            user_id: Library owner
            id: Book ID

        Returns:
            Book or None if not found
        """
        try:
            return Book.from_model(get_store().get_book(user_id, id))
        except BookNotFoundError:
            return None
