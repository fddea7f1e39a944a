"""
Movie and carousel Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class MovieSummary(BaseModel):
    """Movie entry shown in a carousel."""

    id: int
    title: str
    overview: str = ""
    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    popularity: float = 0.0
    release_date: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    genre_ids: List[int] = []
    adult: bool = False
    original_language: str = ""
    original_title: str = ""
    video: bool = False


class CategoryBundle(BaseModel):
    """One labelled carousel. An empty list means the category was unavailable."""

    label: str
    movies: List[MovieSummary] = Field(default_factory=list)


class HomePageResponse(BaseModel):
    """Response for the home page endpoint."""

    data: List[CategoryBundle]
