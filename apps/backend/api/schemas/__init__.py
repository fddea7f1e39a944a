"""Pydantic schemas for API request and response validation."""

from api.schemas.common import ErrorResponse
from api.schemas.movie import CategoryBundle, HomePageResponse, MovieSummary
from api.schemas.genre import Genre, GenreListResponse, GenrePageResponse
from api.schemas.search import SearchNavigation, SearchPageResponse, SearchSubmit

__all__ = [
    # Common
    "ErrorResponse",
    # Movie
    "CategoryBundle",
    "HomePageResponse",
    "MovieSummary",
    # Genre
    "Genre",
    "GenreListResponse",
    "GenrePageResponse",
    # Search
    "SearchNavigation",
    "SearchPageResponse",
    "SearchSubmit",
]
