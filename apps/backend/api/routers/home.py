"""
Home page endpoint for the public API.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_aggregator
from api.schemas.movie import HomePageResponse
from tmdb_catalog.aggregator import CategoryAggregator

router = APIRouter()


@router.get("/home", response_model=HomePageResponse)
def get_home(
    aggregator: CategoryAggregator = Depends(get_aggregator),
):
    """
    Get the home page carousels.

    Categories that fail upstream come back with an empty movie list.
    """
    bundles = aggregator.home_page()
    return {"data": [b.to_dict() for b in bundles]}
