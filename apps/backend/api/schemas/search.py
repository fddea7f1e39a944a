"""
Search-related Pydantic schemas.
"""

from pydantic import BaseModel, Field


class SearchSubmit(BaseModel):
    """Raw search box contents."""

    query: str = Field(..., description="Text typed into the search box")


class SearchNavigation(BaseModel):
    """Route the client should navigate to."""

    path: str


class SearchPageResponse(BaseModel):
    """Response for the search destination page."""

    term: str
    heading: str
