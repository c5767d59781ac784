#!/usr/bin/env python3
"""CLI for building library graphs and querying relationships."""

import argparse
import json
from pathlib import Path

from rich.table import Table

from common.env import env
from common.logger import console, error, get_logger, setup_logging, success
from library import StoreError, create_store

from .builder import build_graph
from .models import Book, EdgeToggles, NodeType
from .related import find_related_books, get_connected_books

logger = get_logger(__name__)


def _resolve_user(args) -> str | None:
    user_id = args.user or env.user_id()
    if not user_id:
        error("No user given. Pass --user or set BOOKGRAPH_USER_ID.")
    return user_id


def _print_books(title: str, books: list[Book]) -> None:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Authors")
    for book in books:
        table.add_row(book.id, book.title, ", ".join(book.authors))
    console.print(table)


def _book_dicts(books: list[Book]) -> list[dict]:
    return [{"id": book.id, "title": book.title, "authors": book.authors} for book in books]


def cmd_build(args):
    """Build the graph for a user's library.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    user_id = _resolve_user(args)
    if not user_id:
        return 1

    toggles = EdgeToggles(
        author=not args.no_author,
        topic=not args.no_topic,
        theme=not args.no_theme,
        tag=not args.no_tag,
        ai_connection=not args.no_ai_connections,
    )
    threshold = args.threshold if args.threshold is not None else env.threshold()

    try:
        store = create_store(args.snapshot)
        books = store.fetch_books(user_id)
        connections = store.fetch_connections(user_id)
        suggestions = store.fetch_suggestions(user_id) if args.suggestions else []
    except StoreError as e:
        error(str(e))
        return 1

    data = build_graph(
        books,
        toggles,
        threshold,
        connections=connections,
        suggestions=suggestions,
        show_suggestions=args.suggestions,
    )

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(data.to_dict(), f, indent=2, ensure_ascii=False)
        success(f"Wrote {len(data.nodes)} nodes and {len(data.links)} links to {args.output}")
        return 0

    if args.format == "json":
        print(json.dumps(data.to_dict(), indent=2, ensure_ascii=False))
        return 0

    table = Table(title=f"Library graph for {user_id} (threshold {threshold})")
    table.add_column("Node type")
    table.add_column("Count", justify="right")
    for node_type in NodeType:
        count = sum(1 for node in data.nodes if node.type == node_type)
        if count:
            table.add_row(node_type.value, str(count))
    console.print(table)
    logger.info(f"Links: [bold]{len(data.links)}[/bold]")
    return 0


def cmd_related(args):
    """List books related to a book through shared attributes."""
    user_id = _resolve_user(args)
    if not user_id:
        return 1

    try:
        store = create_store(args.snapshot)
        books = store.fetch_books(user_id)
        book = store.get_book(user_id, args.book_id)
    except StoreError as e:
        error(str(e))
        return 1

    related = find_related_books(book, books)
    if args.format == "json":
        print(json.dumps(_book_dicts(related), indent=2, ensure_ascii=False))
    elif related:
        _print_books(f"Related to {book.title}", related)
    else:
        console.print("No related books found.")
    return 0


def cmd_connected(args):
    """List books linked to an attribute node such as "topic:Space"."""
    user_id = _resolve_user(args)
    if not user_id:
        return 1

    try:
        books = create_store(args.snapshot).fetch_books(user_id)
    except StoreError as e:
        error(str(e))
        return 1

    connected = get_connected_books(args.node_id, books)
    if args.format == "json":
        print(json.dumps(_book_dicts(connected), indent=2, ensure_ascii=False))
    elif connected:
        _print_books(args.node_id, connected)
    else:
        console.print("No connected books found.")
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Build and query book library graphs")
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=env.snapshot_path(),
        help="Record store snapshot (default: BOOKGRAPH_SNAPSHOT_PATH or ./data/library.json)",
    )
    parser.add_argument(
        "--user",
        default=None,
        help="Library owner (default: BOOKGRAPH_USER_ID)",
    )
    # Output options shared by every subcommand
    output_parser = argparse.ArgumentParser(add_help=False)
    output_parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Build command
    build_parser = subparsers.add_parser(
        "build", parents=[output_parser], help="Build the library graph"
    )
    build_parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Minimum books per attribute value (default: BOOKGRAPH_THRESHOLD or 1)",
    )
    build_parser.add_argument("--no-author", action="store_true", help="Drop author edges")
    build_parser.add_argument("--no-topic", action="store_true", help="Drop topic edges")
    build_parser.add_argument("--no-theme", action="store_true", help="Drop theme edges")
    build_parser.add_argument("--no-tag", action="store_true", help="Drop tag edges")
    build_parser.add_argument(
        "--no-ai-connections", action="store_true", help="Drop AI book-to-book edges"
    )
    build_parser.add_argument(
        "--suggestions", action="store_true", help="Overlay AI book suggestions"
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the graph as JSON to this file",
    )
    build_parser.set_defaults(func=cmd_build)

    # Related command
    related_parser = subparsers.add_parser(
        "related", parents=[output_parser], help="List books sharing an attribute with a book"
    )
    related_parser.add_argument("book_id", help="ID of the book")
    related_parser.set_defaults(func=cmd_related)

    # Connected command
    connected_parser = subparsers.add_parser(
        "connected", parents=[output_parser], help="List books linked to an attribute node"
    )
    connected_parser.add_argument("node_id", help='Node identity, e.g. "topic:Space Travel"')
    connected_parser.set_defaults(func=cmd_connected)

    args = parser.parse_args(argv)
    setup_logging()
    return args.func(args)


if __name__ == "__main__":
    exit(main())
