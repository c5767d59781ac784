"""Data models for library records and the graphs built from them."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class NodeType(str, Enum):
    """Kinds of graph vertices."""

    BOOK = "book"
    AUTHOR = "author"
    TOPIC = "topic"
    THEME = "theme"
    TAG = "tag"
    SUGGESTION = "suggestion"


class AttributeKind(str, Enum):
    """Book attributes that become shared graph nodes.

    Declaration order is the order the builder visits them.
    """

    AUTHOR = "author"
    TOPIC = "topic"
    THEME = "theme"
    TAG = "tag"


class LinkType(str, Enum):
    """Kinds of graph edges."""

    AUTHOR = "author"
    TOPIC = "topic"
    THEME = "theme"
    TAG = "tag"
    AI_CONNECTION = "ai_connection"


class Provenance(str, Enum):
    """Where an attribute node's value was first observed."""

    USER = "user"
    AI = "ai"


class ConnectionType(str, Enum):
    """Relationship categories produced by library analysis."""

    THEMATIC = "thematic"
    STYLISTIC = "stylistic"
    TOPICAL = "topical"
    INFLUENCE = "influence"
    AUTHOR = "author"


@dataclass
class BookAnalysis:
    """AI-inferred attributes for a single book."""

    book_id: str
    ai_topics: list[str] = field(default_factory=list)
    ai_themes: list[str] = field(default_factory=list)
    ai_tags: list[str] = field(default_factory=list)
    ai_summary: str | None = None
    model_used: str | None = None
    analyzed_at: str | None = None


@dataclass
class Book:
    """A catalogued book, optionally carrying its merged AI analysis."""

    id: str
    title: str
    authors: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    themes: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    year: int | None = None
    rating: int | None = None  # 1-5 stars
    date_read: str | None = None
    notes: str | None = None
    analysis: BookAnalysis | None = None


@dataclass
class BookConnection:
    """An AI-inferred undirected edge between two books of one library."""

    book_a_id: str
    book_b_id: str
    connection_type: ConnectionType = ConnectionType.THEMATIC
    strength: float = 0.5
    explanation: str | None = None
    id: str | None = None


@dataclass
class BookSuggestion:
    """A book the AI recommends adding to the library."""

    id: str
    title: str
    authors: list[str] = field(default_factory=list)
    reason: str | None = None
    related_book_ids: list[str] = field(default_factory=list)
    dismissed: bool = False


@dataclass
class EdgeToggles:
    """Which edge sources are enabled for a build."""

    author: bool = True
    topic: bool = True
    theme: bool = True
    tag: bool = True
    ai_connection: bool = True

    def enabled_kinds(self) -> list[AttributeKind]:
        """Return the toggled attribute kinds in visiting order."""
        return [kind for kind in AttributeKind if getattr(self, kind.value)]


@dataclass
class GraphNode:
    """A vertex ready for rendering."""

    id: str
    name: str
    type: NodeType
    val: float
    color: str
    source: Provenance | None = None  # attribute nodes only
    book_id: str | None = None
    suggestion_id: str | None = None
    opacity: float | None = None


@dataclass
class GraphLink:
    """An edge between two node identities."""

    source: str
    target: str
    type: LinkType
    strength: float | None = None
    explanation: str | None = None


@dataclass
class GraphData:
    """A complete graph snapshot for one render pass."""

    nodes: list[GraphNode] = field(default_factory=list)
    links: list[GraphLink] = field(default_factory=list)

    def node_ids(self) -> set[str]:
        """Identities of every node in the graph."""
        return {node.id for node in self.nodes}

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible representation, dropping unset fields."""

        def clean(item) -> dict[str, Any]:
            return {
                key: value.value if isinstance(value, Enum) else value
                for key, value in asdict(item).items()
                if value is not None
            }

        return {
            "nodes": [clean(node) for node in self.nodes],
            "links": [clean(link) for link in self.links],
        }
