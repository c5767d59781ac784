"""Tests for environment configuration interface."""

from pathlib import Path

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_snapshot_path_default(self, monkeypatch):
        """Test snapshot_path returns default value."""
        monkeypatch.delenv("BOOKGRAPH_SNAPSHOT_PATH", raising=False)
        assert Environment.snapshot_path() == Path("data/library.json")

    def test_snapshot_path_from_env(self, monkeypatch):
        """Test snapshot_path reads from environment."""
        monkeypatch.setenv("BOOKGRAPH_SNAPSHOT_PATH", "/tmp/snapshot.json")
        assert str(Environment.snapshot_path()) == "/tmp/snapshot.json"

    def test_user_id_default(self, monkeypatch):
        """Test user_id is None when unset."""
        monkeypatch.delenv("BOOKGRAPH_USER_ID", raising=False)
        assert Environment.user_id() is None

    def test_user_id_empty_is_none(self, monkeypatch):
        """Test an empty user_id counts as unset."""
        monkeypatch.setenv("BOOKGRAPH_USER_ID", "")
        assert Environment.user_id() is None

    def test_user_id_from_env(self, monkeypatch):
        """Test user_id reads from environment."""
        monkeypatch.setenv("BOOKGRAPH_USER_ID", "user-42")
        assert Environment.user_id() == "user-42"

    def test_threshold_default(self, monkeypatch):
        """Test threshold defaults to no pruning."""
        monkeypatch.delenv("BOOKGRAPH_THRESHOLD", raising=False)
        assert Environment.threshold() == 1

    def test_threshold_from_env(self, monkeypatch):
        """Test threshold reads from environment."""
        monkeypatch.setenv("BOOKGRAPH_THRESHOLD", "3")
        assert Environment.threshold() == 3

    def test_cache_size_default(self, monkeypatch):
        """Test cache_size returns default value."""
        monkeypatch.delenv("BOOKGRAPH_CACHE_SIZE", raising=False)
        assert Environment.cache_size() == 32

    def test_cache_size_from_env(self, monkeypatch):
        """Test cache_size reads from environment."""
        monkeypatch.setenv("BOOKGRAPH_CACHE_SIZE", "8")
        assert Environment.cache_size() == 8

    def test_cors_origins_default(self, monkeypatch):
        """Test cors_origins returns the local dev servers."""
        monkeypatch.delenv("BOOKGRAPH_CORS_ORIGINS", raising=False)
        assert Environment.cors_origins() == ["http://localhost:3000", "http://localhost:5173"]

    def test_cors_origins_from_env(self, monkeypatch):
        """Test cors_origins splits and trims a comma-separated list."""
        monkeypatch.setenv("BOOKGRAPH_CORS_ORIGINS", "https://a.example, https://b.example,")
        assert Environment.cors_origins() == ["https://a.example", "https://b.example"]


class TestEnvSingleton:
    """Tests for env singleton instance."""

    def test_env_is_environment_instance(self):
        """Test that env is an instance of Environment."""
        assert isinstance(env, Environment)

    def test_env_singleton_methods_work(self, monkeypatch):
        """Test that env singleton methods work."""
        monkeypatch.setenv("BOOKGRAPH_THRESHOLD", "5")
        assert env.threshold() == 5
