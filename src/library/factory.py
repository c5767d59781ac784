"""Record store factory."""

from pathlib import Path

from .interface import RecordStore
from .snapshot_store import SnapshotStore


def create_store(snapshot_path: Path | str) -> RecordStore:
    """Create a record store over a snapshot file.

    Args:
        snapshot_path: Path to the JSON snapshot

    Returns:
        Record store instance
    """
    return SnapshotStore(snapshot_path)


def get_store() -> RecordStore:
    """Get a record store using environment configuration.

    Reads BOOKGRAPH_SNAPSHOT_PATH.

    Example:
        >>> store = get_store()
        >>> books = store.fetch_books("user-1")
    """
    from common.env import env

    return create_store(env.snapshot_path())
