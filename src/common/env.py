"""Environment configuration for bookgraph.

All environment variable access goes through this module. A ``.env`` file in
the working directory is loaded on import.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def snapshot_path() -> Path:
        """Get the record store snapshot file.

        Returns:
            Path to the JSON snapshot, defaults to ./data/library.json
        """
        return Path(os.getenv("BOOKGRAPH_SNAPSHOT_PATH", "./data/library.json"))

    @staticmethod
    def user_id() -> str | None:
        """Get the library owner used when none is passed explicitly.

        Returns:
            User id, or None when unset
        """
        return os.getenv("BOOKGRAPH_USER_ID") or None

    @staticmethod
    def threshold() -> int:
        """Get the default minimum book count for attribute nodes.

        Returns:
            Threshold, defaults to 1 (no pruning)
        """
        return int(os.getenv("BOOKGRAPH_THRESHOLD", "1"))

    @staticmethod
    def cache_size() -> int:
        """Get the number of built graphs kept by the API cache.

        Returns:
            Cache capacity, defaults to 32
        """
        return int(os.getenv("BOOKGRAPH_CACHE_SIZE", "32"))

    @staticmethod
    def cors_origins() -> list[str]:
        """Get the origins allowed to call the API.

        Returns:
            List of origins, defaults to the local frontend dev servers
        """
        raw = os.getenv("BOOKGRAPH_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


env = Environment()
