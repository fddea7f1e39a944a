"""
TMDB API client for the catalog layer.

Handles all TMDB API interactions including:
- Authenticated GET requests with retry on transient failures
- A TTL response cache keyed by (endpoint, params)
- Normalizing every failure into UNAVAILABLE instead of raising
"""

import logging
from typing import Any, Mapping, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .cache import ResponseCache
from .config import Config
from .models import UNAVAILABLE, CatalogRequest, CategorySpec, Ok, Unavailable
from .utils import setup_logger

DAY_SECONDS = 60 * 60 * 24

# Query defaults shared by every movie list request
DEFAULT_LIST_PARAMS = {
    "include_adult": "false",
    "include_video": "false",
    "sort_by": "popularity.desc",
    "language": "en-US",
    "page": 1,
}


class CatalogClient:
    """
    Wraps the TMDB REST API behind a single recovery boundary.

    Responsibilities:
    - Attach the bearer credential and JSON accept header
    - Serve fresh cached payloads without a network round trip
    - Turn non-2xx statuses, transport faults and parse faults into UNAVAILABLE
    """

    DEFAULT_TTL = DAY_SECONDS

    def __init__(
        self,
        config: Config,
        session: Optional[requests.Session] = None,
        cache: Optional[ResponseCache] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.session = session or self._create_session()
        self.cache = cache if cache is not None else ResponseCache(config.cache_max_entries)
        self.logger = logger or setup_logger("catalog_client", config.log_dir)

    def _create_session(self) -> requests.Session:
        """Create requests session with retry configuration."""
        session = requests.Session()

        retry_strategy = Retry(
            total=2,
            backoff_factor=0.5,  # 0.5, 1 seconds
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,  # Final status is handled below
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("https://", adapter)
        session.mount("http://", adapter)

        return session

    def fetch_category(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        ttl_seconds: int = DEFAULT_TTL,
    ) -> Union[Ok, Unavailable]:
        """
        Issue one authenticated GET and return the parsed payload.

        Args:
            endpoint: API endpoint (e.g., '/movie/upcoming')
            params: Query parameters; None values are omitted
            ttl_seconds: How long a successful response may be reused

        Returns:
            Ok(payload) on a 2xx JSON response, otherwise UNAVAILABLE

        Raises:
            ValueError: If endpoint is empty or ttl_seconds is negative
        """
        request = CatalogRequest.build(endpoint, params, ttl_seconds)

        if not self.config.has_credential:
            self.logger.debug(f"No TMDB credential configured, skipping {request.endpoint}")
            return UNAVAILABLE

        ttl = request.cache_policy.ttl_seconds
        cached = self.cache.get(request.cache_key, ttl)
        if cached is not None:
            self.logger.debug(f"Cache hit for {request.endpoint}")
            return Ok(cached)

        url = f"{self.config.base_url}{request.endpoint}"

        try:
            response = self.session.get(
                url,
                params=request.query_params,
                headers=self.config.get_headers(),
                timeout=self.config.request_timeout,
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request error for {request.endpoint}: {e}")
            return UNAVAILABLE

        if not 200 <= response.status_code < 300:
            self.logger.warning(
                f"Failed to fetch {request.endpoint}: "
                f"{response.status_code} {getattr(response, 'reason', '')}".rstrip()
            )
            return UNAVAILABLE

        try:
            payload = response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON body for {request.endpoint}: {e}")
            return UNAVAILABLE

        if ttl > 0:
            self.cache.set(request.cache_key, payload)
        return Ok(payload)

    def test_connection(self) -> bool:
        """Test API connection by fetching the genre list uncached."""
        result = self.fetch_category("/genre/movie/list", {"language": "en"}, ttl_seconds=0)
        return isinstance(result, Ok)


# =============================================================================
# CATEGORY BUILDERS
# =============================================================================

def _list_params(**extra: Any) -> dict:
    params = dict(DEFAULT_LIST_PARAMS)
    params.update(extra)
    return params


def upcoming(label: str = "Upcoming", ttl_seconds: int = DAY_SECONDS) -> CategorySpec:
    return CategorySpec(label, "/movie/upcoming", _list_params(), ttl_seconds)


def top_rated(label: str = "Top Rated", ttl_seconds: int = DAY_SECONDS) -> CategorySpec:
    return CategorySpec(label, "/movie/top_rated", _list_params(), ttl_seconds)


def popular(label: str = "Popular", ttl_seconds: int = DAY_SECONDS) -> CategorySpec:
    return CategorySpec(label, "/movie/popular", _list_params(), ttl_seconds)


def discover(
    genre_id: Optional[Union[int, str]] = None,
    keywords: Optional[str] = None,
    label: str = "Discover",
    ttl_seconds: int = DAY_SECONDS,
) -> CategorySpec:
    """
    Discover movies by genre and/or keyword.

    Missing filters are left out of the query rather than sent empty.
    """
    params = _list_params(with_genres=genre_id, with_keywords=keywords)
    return CategorySpec(label, "/discover/movie", params, ttl_seconds)
