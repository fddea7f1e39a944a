"""
TMDB Catalog - Catalog integration layer for the movie browsing front-end.

This package provides:
- A TMDB client with response caching and failure normalization
- Concurrent assembly of category carousels for a page
- A day-cached genre list for drill-down links
- The search input state machine and destination route contracts
"""

from .config import Config
from .models import (
    FEATURE_ABSENT,
    REJECTED,
    UNAVAILABLE,
    CategoryBundle,
    CategorySpec,
    FeatureAbsent,
    GenreRef,
    MovieSummary,
    NavigationIntent,
    Ok,
    Rejected,
    Unavailable,
)
from .client import CatalogClient
from .aggregator import CategoryAggregator
from .genres import GenreCatalog
from .search import SearchController, SearchState
from .routes import NotFoundError, resolve_genre_route, resolve_search_route

__version__ = "1.0.0"
__all__ = [
    "Config",
    "FEATURE_ABSENT",
    "REJECTED",
    "UNAVAILABLE",
    "CategoryBundle",
    "CategorySpec",
    "FeatureAbsent",
    "GenreRef",
    "MovieSummary",
    "NavigationIntent",
    "Ok",
    "Rejected",
    "Unavailable",
    "CatalogClient",
    "CategoryAggregator",
    "GenreCatalog",
    "SearchController",
    "SearchState",
    "NotFoundError",
    "resolve_genre_route",
    "resolve_search_route",
]
