"""Build renderable graphs from a library of books."""

from collections import Counter
from collections.abc import Iterable, Sequence

from common.constants import (
    BOOK_NODE_WEIGHT,
    NODE_COLORS,
    SUGGESTION_LINK_STRENGTH,
    SUGGESTION_NODE_OPACITY,
    SUGGESTION_NODE_WEIGHT,
)
from common.logger import get_logger

from .attributes import book_node_id, merged_values, node_id, user_values
from .models import (
    AttributeKind,
    Book,
    BookConnection,
    BookSuggestion,
    EdgeToggles,
    GraphData,
    GraphLink,
    GraphNode,
    LinkType,
    NodeType,
    Provenance,
)

logger = get_logger(__name__)


def count_attribute_books(books: Sequence[Book], kinds: Iterable[AttributeKind]) -> Counter:
    """Count, per attribute identity, how many books carry the value.

    A book contributes at most once to each identity even when the value
    appears in both its own fields and its analysis.

    Args:
        books: Books to scan
        kinds: Attribute kinds to count

    Returns:
        Counter keyed by ``"<kind>:<value>"``
    """
    counts: Counter = Counter()
    for kind in kinds:
        for book in books:
            counts.update(node_id(kind.value, value) for value in merged_values(book, kind))
    return counts


def build_graph(
    books: Sequence[Book],
    edge_toggles: EdgeToggles,
    threshold: int,
    connections: Iterable[BookConnection] = (),
    suggestions: Iterable[BookSuggestion] = (),
    show_suggestions: bool = False,
) -> GraphData:
    """
    Build the library graph for one render pass.

    Produces:
    - One node per book (never pruned)
    - One node per attribute value shared by at least ``threshold`` books
    - Edges book -> attribute for every toggled kind
    - Edges book -> book for AI connections whose books are both present
    - Optionally, suggestion nodes linked to the books they relate to

    Attribute counting covers the whole library before any node is emitted,
    so the threshold always sees global counts.

    Args:
        books: Library books, each optionally carrying its analysis
        edge_toggles: Enabled edge sources
        threshold: Minimum number of books an attribute value must reach
        connections: AI connections between books
        suggestions: AI book suggestions
        show_suggestions: Whether to overlay non-dismissed suggestions

    Returns:
        GraphData with nodes and links in stable input order
    """
    kinds = edge_toggles.enabled_kinds()
    counts = count_attribute_books(books, kinds)
    valid_attributes = {identity for identity, count in counts.items() if count >= threshold}

    nodes: list[GraphNode] = []
    links: list[GraphLink] = []
    seen_attributes: set[str] = set()
    book_ids: set[str] = set()

    for book in books:
        book_node = book_node_id(book.id)
        book_ids.add(book.id)
        nodes.append(
            GraphNode(
                id=book_node,
                name=book.title,
                type=NodeType.BOOK,
                book_id=book.id,
                val=BOOK_NODE_WEIGHT,
                color=NODE_COLORS["book"],
            )
        )

        for kind in kinds:
            own_values = None
            for value in merged_values(book, kind):
                attribute = node_id(kind.value, value)
                if attribute not in valid_attributes:
                    continue

                if attribute not in seen_attributes:
                    # First book to reach this value fixes its provenance
                    seen_attributes.add(attribute)
                    if own_values is None:
                        own_values = set(user_values(book, kind))
                    nodes.append(
                        GraphNode(
                            id=attribute,
                            name=value,
                            type=NodeType(kind.value),
                            source=Provenance.USER if value in own_values else Provenance.AI,
                            val=counts[attribute],
                            color=NODE_COLORS[kind.value],
                        )
                    )

                links.append(GraphLink(source=book_node, target=attribute, type=LinkType(kind.value)))

    if edge_toggles.ai_connection:
        links.extend(_connection_links(connections, book_ids))

    if show_suggestions:
        suggestion_nodes, suggestion_links = _suggestion_overlay(suggestions, book_ids)
        nodes.extend(suggestion_nodes)
        links.extend(suggestion_links)

    logger.debug(
        f"Built graph: {len(books)} books, {len(seen_attributes)} attributes, "
        f"{len(nodes)} nodes, {len(links)} links (threshold {threshold})"
    )

    return GraphData(nodes=nodes, links=links)


def _connection_links(
    connections: Iterable[BookConnection], book_ids: set[str]
) -> list[GraphLink]:
    links = []
    for connection in connections:
        if connection.book_a_id not in book_ids or connection.book_b_id not in book_ids:
            continue
        links.append(
            GraphLink(
                source=book_node_id(connection.book_a_id),
                target=book_node_id(connection.book_b_id),
                type=LinkType.AI_CONNECTION,
                strength=connection.strength,
                explanation=connection.explanation,
            )
        )
    return links


def _suggestion_overlay(
    suggestions: Iterable[BookSuggestion], book_ids: set[str]
) -> tuple[list[GraphNode], list[GraphLink]]:
    nodes = []
    links = []
    for suggestion in suggestions:
        if suggestion.dismissed:
            continue

        suggestion_node = node_id(NodeType.SUGGESTION.value, suggestion.id)
        nodes.append(
            GraphNode(
                id=suggestion_node,
                name=suggestion.title,
                type=NodeType.SUGGESTION,
                suggestion_id=suggestion.id,
                val=SUGGESTION_NODE_WEIGHT,
                color=NODE_COLORS["suggestion"],
                opacity=SUGGESTION_NODE_OPACITY,
            )
        )

        for related_id in suggestion.related_book_ids:
            if related_id in book_ids:
                links.append(
                    GraphLink(
                        source=suggestion_node,
                        target=book_node_id(related_id),
                        type=LinkType.AI_CONNECTION,
                        strength=SUGGESTION_LINK_STRENGTH,
                        explanation=suggestion.reason,
                    )
                )
    return nodes, links
