"""Shared constants for bookgraph.

For environment-based configuration use the env module:
    from common.env import env
    threshold = env.threshold()
"""

# Node fill colors by node type
NODE_COLORS: dict[str, str] = {
    "book": "#6366f1",
    "author": "#f59e0b",
    "topic": "#10b981",
    "theme": "#ec4899",
    "tag": "#8b5cf6",
    "suggestion": "#6366f1",
}

BOOK_NODE_WEIGHT = 3
SUGGESTION_NODE_WEIGHT = 2
SUGGESTION_NODE_OPACITY = 0.5

# Suggestion -> book edges are drawn weaker than any real AI connection
SUGGESTION_LINK_STRENGTH = 0.2

DEFAULT_CONNECTION_STRENGTH = 0.5
