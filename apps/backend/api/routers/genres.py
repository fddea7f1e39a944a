"""
Genre endpoints for the public API.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_aggregator, get_genre_catalog
from api.schemas.genre import GenreListResponse, GenrePageResponse
from tmdb_catalog.aggregator import CategoryAggregator
from tmdb_catalog.genres import GenreCatalog
from tmdb_catalog.models import FeatureAbsent
from tmdb_catalog.routes import resolve_genre_route

router = APIRouter()


@router.get("/genres", response_model=GenreListResponse)
def list_genres(
    genres: GenreCatalog = Depends(get_genre_catalog),
):
    """
    Get list of all genres with drill-down links.

    ``data`` is null when the genre list is unavailable; clients omit the menu.
    """
    result = genres.list_genres()
    if isinstance(result, FeatureAbsent):
        return {"data": None}
    return {"data": [g.to_dict() for g in result]}


@router.get("/genre/{genre_id}", response_model=GenrePageResponse)
def get_genre_page(
    genre_id: str,
    genre: str = Query("", description="Genre name for display"),
    aggregator: CategoryAggregator = Depends(get_aggregator),
):
    """
    Get the carousels for one genre.
    """
    view = resolve_genre_route(genre_id, genre)
    bundles = aggregator.genre_page(view.id, view.genre or None)
    return {
        **view.to_dict(),
        "data": [b.to_dict() for b in bundles],
    }
