"""
Configuration management for the catalog layer.

Loads configuration from environment variables and provides
a centralized Config dataclass for all settings. The TMDB credential
is optional: when it is missing the catalog features are disabled
rather than failing at startup.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Centralized configuration from environment variables."""

    # TMDB API
    api_key: Optional[str] = None
    base_url: str = "https://api.themoviedb.org/3"
    request_timeout: float = 10.0

    # Fan-out and cache settings
    max_workers: int = 4
    cache_max_entries: int = 512

    # Paths
    project_dir: Path = field(default_factory=Path.cwd)
    log_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")

    # CORS settings
    allowed_origins: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from environment variables.

        Args:
            env_path: Optional path to .env file. If not provided,
                     looks for .env in monorepo root, then current directory.

        Returns:
            Config instance with loaded values.

        Raises:
            ValueError: If a numeric environment variable is malformed.
        """
        if env_path:
            load_dotenv(env_path)
        else:
            # Try monorepo root first (../../.env from this file)
            root_env = Path(__file__).parent.parent.parent.parent / ".env"
            if root_env.exists():
                load_dotenv(root_env)
            else:
                load_dotenv()

        # Absence is a "feature disabled" condition, e.g. in CI
        api_key = os.getenv("TMDB_API_KEY") or None

        base_url = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
        request_timeout = float(os.getenv("TMDB_REQUEST_TIMEOUT", "10"))
        max_workers = int(os.getenv("CATALOG_MAX_WORKERS", "4"))
        cache_max_entries = int(os.getenv("CATALOG_CACHE_SIZE", "512"))

        project_dir = Path(os.getenv("PROJECT_DIR", Path.cwd()))
        log_dir = Path(os.getenv("CATALOG_LOG_DIR", project_dir / "logs"))

        # CORS settings
        origins_str = os.getenv("ALLOWED_ORIGINS", "")
        allowed_origins = [o.strip() for o in origins_str.split(",") if o.strip()]

        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            request_timeout=request_timeout,
            max_workers=max(1, max_workers),
            cache_max_entries=max(1, cache_max_entries),
            project_dir=project_dir,
            log_dir=log_dir,
            allowed_origins=allowed_origins,
        )

    @property
    def has_credential(self) -> bool:
        """Whether a TMDB credential has been provisioned."""
        return bool(self.api_key)

    def get_headers(self) -> Dict[str, str]:
        """Get headers for TMDB API requests."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "accept": "application/json",
        }
