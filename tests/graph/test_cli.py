"""Tests for the graph CLI."""

import json

import pytest

from graph.cli import main


@pytest.fixture
def snapshot(tmp_path):
    """Write a small two-user snapshot and return its path."""
    data = {
        "books": [
            {"id": "1", "user_id": "u1", "title": "Dune", "topics": ["Space"], "tags": ["sci-fi"]},
            {"id": "2", "user_id": "u1", "title": "Solaris", "topics": ["Space"]},
            {"id": "3", "user_id": "u1", "title": "Walden", "themes": ["Solitude"]},
            {"id": "9", "user_id": "u2", "title": "Other", "topics": ["Space"]},
        ],
        "book_analyses": [
            {"book_id": "3", "user_id": "u1", "ai_tags": ["sci-fi"]},
        ],
        "book_connections": [
            {
                "book_a_id": "1",
                "book_b_id": "3",
                "user_id": "u1",
                "connection_type": "thematic",
                "strength": 0.4,
            }
        ],
        "book_suggestions": [
            {"id": "s1", "user_id": "u1", "title": "Hyperion", "related_book_ids": ["1"]},
        ],
    }
    path = tmp_path / "library.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestBuildCommand:
    """Tests for the build subcommand."""

    def test_json_output(self, snapshot, capsys):
        code = main(["--snapshot", str(snapshot), "--user", "u1", "build", "--format", "json"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        ids = [node["id"] for node in data["nodes"]]
        assert ids == ["book:1", "topic:Space", "tag:sci-fi", "book:2", "book:3", "theme:Solitude"]
        assert {"source": "book:1", "target": "book:3", "type": "ai_connection", "strength": 0.4} in (
            data["links"]
        )

    def test_format_mixed_with_build_options(self, snapshot, capsys):
        code = main(
            [
                "--snapshot",
                str(snapshot),
                "--user",
                "u1",
                "build",
                "--threshold",
                "2",
                "-f",
                "json",
                "--no-tag",
            ]
        )

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [node["id"] for node in data["nodes"]] == ["book:1", "topic:Space", "book:2", "book:3"]

    def test_format_before_subcommand_rejected(self, snapshot):
        with pytest.raises(SystemExit):
            main(["--snapshot", str(snapshot), "--user", "u1", "--format", "json", "build"])

    def test_threshold_and_toggles(self, snapshot, capsys):
        code = main(
            [
                "--snapshot",
                str(snapshot),
                "--user",
                "u1",
                "build",
                "--format",
                "json",
                "--threshold",
                "2",
                "--no-topic",
                "--no-ai-connections",
            ]
        )

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [node["id"] for node in data["nodes"]] == ["book:1", "tag:sci-fi", "book:2", "book:3"]
        assert all(link["type"] == "tag" for link in data["links"])

    def test_suggestions_flag(self, snapshot, capsys):
        main(
            ["--snapshot", str(snapshot), "--user", "u1", "build", "--format", "json", "--suggestions"]
        )

        data = json.loads(capsys.readouterr().out)
        assert "suggestion:s1" in [node["id"] for node in data["nodes"]]

    def test_output_file(self, snapshot, tmp_path):
        output = tmp_path / "out" / "graph.json"

        code = main(["--snapshot", str(snapshot), "--user", "u1", "build", "--output", str(output)])

        assert code == 0
        assert len(json.loads(output.read_text(encoding="utf-8"))["nodes"]) == 6

    def test_text_output(self, snapshot):
        assert main(["--snapshot", str(snapshot), "--user", "u1", "build"]) == 0

    def test_missing_snapshot(self, tmp_path):
        code = main(["--snapshot", str(tmp_path / "missing.json"), "--user", "u1", "build"])

        assert code == 1

    def test_missing_user(self, snapshot, monkeypatch):
        monkeypatch.delenv("BOOKGRAPH_USER_ID", raising=False)

        assert main(["--snapshot", str(snapshot), "build"]) == 1

    def test_user_from_environment(self, snapshot, monkeypatch, capsys):
        monkeypatch.setenv("BOOKGRAPH_USER_ID", "u2")

        main(["--snapshot", str(snapshot), "build", "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert [node["id"] for node in data["nodes"]] == ["book:9", "topic:Space"]


class TestQueryCommands:
    """Tests for the related and connected subcommands."""

    def test_related(self, snapshot, capsys):
        code = main(["--snapshot", str(snapshot), "--user", "u1", "related", "1", "--format", "json"])

        assert code == 0
        related = json.loads(capsys.readouterr().out)
        assert [book["id"] for book in related] == ["2", "3"]

    def test_related_unknown_book(self, snapshot):
        assert main(["--snapshot", str(snapshot), "--user", "u1", "related", "404"]) == 1

    def test_connected(self, snapshot, capsys):
        code = main(
            ["--snapshot", str(snapshot), "--user", "u1", "connected", "--format", "json", "tag:sci-fi"]
        )

        assert code == 0
        connected = json.loads(capsys.readouterr().out)
        assert [book["title"] for book in connected] == ["Dune", "Walden"]

    def test_connected_text_output_without_matches(self, snapshot):
        assert main(["--snapshot", str(snapshot), "--user", "u1", "connected", "genre:x"]) == 0
