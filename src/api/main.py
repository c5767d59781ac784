"""FastAPI application serving the library graph over GraphQL."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from strawberry.fastapi import GraphQLRouter

from api.resolvers.graph import graph_cache
from api.schema import schema, schema_sdl
from common.env import env
from graph.models import AttributeKind

VERSION = "0.1.0"

app = FastAPI(
    title="Bookgraph API",
    description="GraphQL API for exploring a book library as a graph of shared attributes",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=env.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/")
async def root():
    """Describe the service and the library it serves."""
    return {
        "name": "Bookgraph API",
        "version": VERSION,
        "graphql_endpoint": "/graphql",
        "schema": "/schema.graphql",
        "snapshot_path": str(env.snapshot_path()),
        "default_threshold": env.threshold(),
        "attribute_kinds": [kind.value for kind in AttributeKind],
    }


@app.get("/schema.graphql", response_class=PlainTextResponse)
async def graphql_schema():
    return schema_sdl()


@app.get("/health")
async def health():
    """Report whether the snapshot is readable and how many graphs are cached."""
    return {
        "status": "healthy",
        "snapshot_available": env.snapshot_path().is_file(),
        "cached_graphs": len(graph_cache),
    }
