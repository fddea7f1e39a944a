"""
Shared fixtures for catalog layer tests.

Provides a mock HTTP session, configured catalog clients and sample TMDB payloads.
"""

import logging
import threading
import time
from typing import Dict, List, Optional, Union
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from tmdb_catalog.client import CatalogClient
from tmdb_catalog.config import Config


# =============================================================================
# SAMPLE DATA
# =============================================================================

def create_sample_result(
    movie_id: int,
    title: str,
    release_date: str = "2023-01-15",
    genre_ids: Optional[List[int]] = None,
    popularity: float = 50.0,
    vote_average: float = 7.5,
) -> dict:
    """Create a TMDB list result entry for testing."""
    return {
        "id": movie_id,
        "title": title,
        "original_title": title,
        "overview": f"This is the overview for {title}.",
        "backdrop_path": f"/backdrop_{movie_id}.jpg",
        "poster_path": f"/poster_{movie_id}.jpg",
        "popularity": popularity,
        "release_date": release_date,
        "vote_average": vote_average,
        "vote_count": 1000,
        "genre_ids": genre_ids or [28, 18],
        "adult": False,
        "original_language": "en",
        "video": False,
    }


def list_payload(*results: dict) -> dict:
    return {"page": 1, "results": list(results), "total_pages": 1, "total_results": len(results)}


SAMPLE_RESULTS = [
    create_sample_result(550, "Fight Club", "1999-10-15", [18, 53], 80.0, 8.4),
    create_sample_result(27205, "Inception", "2010-07-16", [28, 878, 53], 90.0, 8.8),
    create_sample_result(155, "The Dark Knight", "2008-07-18", [28, 80, 18], 95.0, 9.0),
    create_sample_result(680, "Pulp Fiction", "1994-10-14", [80, 53], 70.0, 8.9),
    create_sample_result(157336, "Interstellar", "2014-11-07", [12, 18, 878], 85.0, 8.6),
]

SAMPLE_GENRES = {
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 35, "name": "Comedy"},
        {"id": 10749, "name": "Romance"},
        {"id": 878, "name": "Science Fiction"},
    ]
}


def make_response(
    status_code: int = 200,
    json_data: Optional[dict] = None,
    reason: str = "OK",
    json_error: Optional[Exception] = None,
) -> MagicMock:
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


# =============================================================================
# MOCK SESSION
# =============================================================================

class MockSession:
    """
    Fake requests.Session that answers by endpoint.

    Routes map an endpoint path (e.g. '/movie/popular') to a response or an
    exception to raise. Unrouted endpoints answer 404.
    """

    def __init__(self, routes: Optional[Dict[str, Union[MagicMock, Exception]]] = None):
        self.routes: Dict[str, Union[MagicMock, Exception]] = dict(routes or {})
        self.delays: Dict[str, float] = {}
        self.calls: List[dict] = []
        self._lock = threading.Lock()

    def _endpoint(self, url: str) -> str:
        _, sep, rest = url.partition("/3/")
        return "/" + rest if sep else url

    def get(self, url, params=None, headers=None, timeout=None):
        endpoint = self._endpoint(url)
        with self._lock:
            self.calls.append({
                "url": url,
                "endpoint": endpoint,
                "params": dict(params or {}),
                "headers": dict(headers or {}),
                "timeout": timeout,
            })

        delay = self.delays.get(endpoint)
        if delay:
            time.sleep(delay)

        outcome = self.routes.get(endpoint)
        if outcome is None:
            return make_response(404, {"status_message": "not found"}, reason="Not Found")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def calls_for(self, endpoint: str) -> List[dict]:
        return [c for c in self.calls if c["endpoint"] == endpoint]


def default_routes() -> Dict[str, MagicMock]:
    return {
        "/movie/upcoming": make_response(200, list_payload(*SAMPLE_RESULTS[:2])),
        "/movie/top_rated": make_response(200, list_payload(*SAMPLE_RESULTS[2:4])),
        "/movie/popular": make_response(200, list_payload(*SAMPLE_RESULTS)),
        "/discover/movie": make_response(200, list_payload(SAMPLE_RESULTS[1], SAMPLE_RESULTS[2])),
        "/genre/movie/list": make_response(200, SAMPLE_GENRES),
    }


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def config(tmp_path):
    """Config with a credential and test-local log directory."""
    return Config(
        api_key="test-token",
        base_url="https://api.example.org/3",
        request_timeout=5.0,
        max_workers=4,
        project_dir=tmp_path,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def config_without_key(config):
    config.api_key = None
    return config


@pytest.fixture
def quiet_logger():
    logger = logging.getLogger("catalog_client.test")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.propagate = True
    return logger


@pytest.fixture
def mock_session():
    """Mock session with every catalog endpoint answering."""
    return MockSession(default_routes())


@pytest.fixture
def catalog_client(config, mock_session, quiet_logger):
    """CatalogClient backed by the mock session."""
    return CatalogClient(config, session=mock_session, logger=quiet_logger)


@pytest.fixture
def api_client(catalog_client):
    """Provide FastAPI test client with the catalog client mocked out."""
    from api.main import app
    from api import dependencies

    dependencies.get_config.cache_clear()
    dependencies.get_catalog_client.cache_clear()

    app.dependency_overrides[dependencies.get_config] = lambda: catalog_client.config
    app.dependency_overrides[dependencies.get_catalog_client] = lambda: catalog_client
    app.dependency_overrides[dependencies.get_aggregator] = (
        lambda: dependencies.CategoryAggregator(catalog_client)
    )
    app.dependency_overrides[dependencies.get_genre_catalog] = (
        lambda: dependencies.GenreCatalog(catalog_client)
    )

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
