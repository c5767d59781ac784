"""Memoization of graph builds keyed by a hash of their full input."""

import hashlib
import json
from collections import OrderedDict
from collections.abc import Sequence
from dataclasses import asdict
from enum import Enum

from common.logger import get_logger
from graph import Book, BookConnection, BookSuggestion, EdgeToggles, GraphData, build_graph

logger = get_logger(__name__)


def _default(value):
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Cannot hash value of type {type(value).__name__}")


def build_key(
    books: Sequence[Book],
    edge_toggles: EdgeToggles,
    threshold: int,
    connections: Sequence[BookConnection],
    suggestions: Sequence[BookSuggestion],
    show_suggestions: bool,
) -> str:
    """
    Generate a deterministic SHA256 key for a build input.

    Any change to a book, its analysis, a connection, a suggestion, the toggles
    or the threshold produces a different key.

    Returns:
        SHA256 hash prefixed with "sha256:"
    """
    canonical = json.dumps(
        {
            "books": [asdict(book) for book in books],
            "toggles": asdict(edge_toggles),
            "threshold": threshold,
            "connections": [asdict(connection) for connection in connections],
            "suggestions": [asdict(suggestion) for suggestion in suggestions],
            "show_suggestions": show_suggestions,
        },
        sort_keys=True,
        default=_default,
    )
    return f"sha256:{hashlib.sha256(canonical.encode('utf-8')).hexdigest()}"


class GraphCache:
    """Bounded LRU cache in front of ``build_graph``.

    Repeated requests for an unchanged library reuse the previous GraphData
    instead of rebuilding it.
    """

    def __init__(self, max_size: int = 32):
        self.max_size = max(1, max_size)
        self._entries: OrderedDict[str, GraphData] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_build(
        self,
        books: Sequence[Book],
        edge_toggles: EdgeToggles,
        threshold: int,
        connections: Sequence[BookConnection] = (),
        suggestions: Sequence[BookSuggestion] = (),
        show_suggestions: bool = False,
    ) -> GraphData:
        """Return the cached graph for this input, building it on a miss."""
        key = build_key(books, edge_toggles, threshold, connections, suggestions, show_suggestions)

        if key in self._entries:
            self.hits += 1
            self._entries.move_to_end(key)
            logger.debug(f"Graph cache hit {key[:19]}")
            return self._entries[key]

        self.misses += 1
        logger.debug(f"Graph cache miss {key[:19]}")
        data = build_graph(
            books,
            edge_toggles,
            threshold,
            connections=connections,
            suggestions=suggestions,
            show_suggestions=show_suggestions,
        )
        self._entries[key] = data
        if len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
        return data

    def clear(self) -> None:
        self._entries.clear()
