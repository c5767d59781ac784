"""GraphQL schema for bookgraph.

Queries:
    libraryGraph    nodes and links for a user's library
    relatedBooks    books sharing an author, topic, theme or tag with a book
    connectedBooks  books linked to an attribute node such as "topic:Space"
    book            a single book with its merged attributes
"""

import strawberry

from api.resolvers.graph import Query

schema = strawberry.Schema(query=Query)


def schema_sdl() -> str:
    """Schema in GraphQL SDL, for clients generating typed queries."""
    return schema.as_str()
