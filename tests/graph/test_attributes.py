"""Tests for attribute identity and merged-set helpers."""

from graph.attributes import (
    ai_values,
    merged_values,
    node_id,
    parse_node_id,
    shares_value,
    user_values,
)
from graph.models import AttributeKind, Book, BookAnalysis


class TestNodeIdentity:
    """Tests for node_id and parse_node_id."""

    def test_node_id_format(self):
        assert node_id("author", "Jane Doe") == "author:Jane Doe"
        assert node_id("topic", "Space Travel") == "topic:Space Travel"

    def test_parse_splits_on_first_colon(self):
        assert parse_node_id("topic:Rome: Empire") == ("topic", "Rome: Empire")
        assert parse_node_id("tag:a:b:c") == ("tag", "a:b:c")

    def test_parse_without_colon(self):
        assert parse_node_id("sci-fi") is None

    def test_parse_empty_value(self):
        assert parse_node_id("tag:") == ("tag", "")

    def test_round_trip_preserves_value(self):
        assert parse_node_id(node_id("theme", "  odd: spacing ")) == ("theme", "  odd: spacing ")


class TestMergedValues:
    """Tests for merged attribute sets."""

    def test_user_values_first_then_ai_only(self):
        book = Book(
            id="1",
            title="A",
            topics=["b", "a"],
            analysis=BookAnalysis(book_id="1", ai_topics=["c", "a", "d"]),
        )

        assert merged_values(book, AttributeKind.TOPIC) == ["b", "a", "c", "d"]

    def test_without_analysis(self):
        book = Book(id="1", title="A", tags=["x", "y", "x"])

        assert merged_values(book, AttributeKind.TAG) == ["x", "y"]
        assert ai_values(book, AttributeKind.TAG) == []

    def test_authors_have_no_ai_form(self):
        book = Book(id="1", title="A", authors=["X"], analysis=BookAnalysis(book_id="1"))

        assert ai_values(book, AttributeKind.AUTHOR) == []
        assert merged_values(book, AttributeKind.AUTHOR) == ["X"]

    def test_user_values_exclude_ai(self):
        book = Book(
            id="1",
            title="A",
            themes=["m"],
            analysis=BookAnalysis(book_id="1", ai_themes=["n"]),
        )

        assert user_values(book, AttributeKind.THEME) == ["m"]
        assert ai_values(book, AttributeKind.THEME) == ["n"]

    def test_shares_value_across_sources(self):
        book = Book(id="1", title="A", tags=["x"])
        other = Book(id="2", title="B", analysis=BookAnalysis(book_id="2", ai_tags=["x"]))

        assert shares_value(book, other, AttributeKind.TAG)
        assert not shares_value(book, other, AttributeKind.TOPIC)
