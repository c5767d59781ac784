"""GraphQL type definitions for the bookgraph API."""

import strawberry

from graph import models


@strawberry.type
class Book:
    """Library book with its user-entered and AI-inferred attributes."""

    id: str
    title: str
    authors: list[str]
    topics: list[str]
    themes: list[str]
    tags: list[str]
    ai_topics: list[str]
    ai_themes: list[str]
    ai_tags: list[str]
    ai_summary: str | None = None
    year: int | None = None
    rating: int | None = None
    date_read: str | None = None
    notes: str | None = None

    @classmethod
    def from_model(cls, book: models.Book) -> "Book":
        analysis = book.analysis
        return cls(
            id=book.id,
            title=book.title,
            authors=list(book.authors),
            topics=list(book.topics),
            themes=list(book.themes),
            tags=list(book.tags),
            ai_topics=list(analysis.ai_topics) if analysis else [],
            ai_themes=list(analysis.ai_themes) if analysis else [],
            ai_tags=list(analysis.ai_tags) if analysis else [],
            ai_summary=analysis.ai_summary if analysis else None,
            year=book.year,
            rating=book.rating,
            date_read=book.date_read,
            notes=book.notes,
        )


@strawberry.type
class GraphNode:
    """Node in the graph visualization."""

    id: str
    name: str
    type: str  # book, author, topic, theme, tag or suggestion
    val: float
    color: str
    source: str | None = None  # "user" or "ai" for attribute nodes
    book_id: str | None = None
    suggestion_id: str | None = None
    opacity: float | None = None

    @classmethod
    def from_model(cls, node: models.GraphNode) -> "GraphNode":
        return cls(
            id=node.id,
            name=node.name,
            type=node.type.value,
            val=node.val,
            color=node.color,
            source=node.source.value if node.source else None,
            book_id=node.book_id,
            suggestion_id=node.suggestion_id,
            opacity=node.opacity,
        )


@strawberry.type
class GraphEdge:
    """Edge connecting two nodes in the graph."""

    source: str
    target: str
    type: str  # author, topic, theme, tag or ai_connection
    strength: float | None = None
    explanation: str | None = None

    @classmethod
    def from_model(cls, link: models.GraphLink) -> "GraphEdge":
        return cls(
            source=link.source,
            target=link.target,
            type=link.type.value,
            strength=link.strength,
            explanation=link.explanation,
        )


@strawberry.type
class Graph:
    """Complete graph structure with nodes and edges."""

    nodes: list[GraphNode]
    edges: list[GraphEdge]

    @classmethod
    def from_model(cls, data: models.GraphData) -> "Graph":
        return cls(
            nodes=[GraphNode.from_model(node) for node in data.nodes],
            edges=[GraphEdge.from_model(link) for link in data.links],
        )


@strawberry.input
class EdgeTogglesInput:
    """Edge sources to include in a graph build."""

    author: bool = True
    topic: bool = True
    theme: bool = True
    tag: bool = True
    ai_connection: bool = True

    def to_model(self) -> models.EdgeToggles:
        return models.EdgeToggles(
            author=self.author,
            topic=self.topic,
            theme=self.theme,
            tag=self.tag,
            ai_connection=self.ai_connection,
        )
