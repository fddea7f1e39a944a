"""
Dependency injection for the API.

Provides the configuration and the catalog components built on it.
"""

from functools import lru_cache

from tmdb_catalog.aggregator import CategoryAggregator
from tmdb_catalog.client import CatalogClient
from tmdb_catalog.config import Config
from tmdb_catalog.genres import GenreCatalog


@lru_cache()
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()


@lru_cache()
def get_catalog_client() -> CatalogClient:
    """Get cached CatalogClient instance (shares one response cache)."""
    return CatalogClient(get_config())


def get_aggregator() -> CategoryAggregator:
    return CategoryAggregator(get_catalog_client())


def get_genre_catalog() -> GenreCatalog:
    return GenreCatalog(get_catalog_client())
