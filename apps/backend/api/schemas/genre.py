"""
Genre-related Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel

from api.schemas.movie import CategoryBundle


class Genre(BaseModel):
    """Genre with its drill-down link."""

    id: int
    name: str
    href: str


class GenreListResponse(BaseModel):
    """Response for genres list endpoint. data is null when genres are unavailable."""

    data: Optional[List[Genre]] = None


class GenrePageResponse(BaseModel):
    """Response for a genre drill-down page."""

    id: str
    genre: str
    heading: str
    data: List[CategoryBundle]
