"""
Destination route contracts for the search and genre pages.
"""

from dataclasses import dataclass
from urllib.parse import unquote


class NotFoundError(Exception):
    """The requested route has nothing to show."""

    def __init__(self, resource: str, identifier: str = ""):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


@dataclass(frozen=True)
class SearchRouteView:
    term: str

    @property
    def heading(self) -> str:
        return f"Welcome to the search page: {self.term}"

    def to_dict(self) -> dict:
        return {"term": self.term, "heading": self.heading}


@dataclass(frozen=True)
class GenreRouteView:
    id: str
    genre: str

    @property
    def heading(self) -> str:
        return f"Welcome to the genre with ID: {self.id} and name: {self.genre}"

    def to_dict(self) -> dict:
        return {"id": self.id, "genre": self.genre, "heading": self.heading}


def resolve_search_route(term: str) -> SearchRouteView:
    """
    Activate the search page for an encoded route segment.

    The term is decoded exactly once. Plain text passes through unchanged
    and malformed escapes are kept literally.

    Raises:
        NotFoundError: If the term is empty after decoding
    """
    term = term or ""
    try:
        decoded = unquote(term, errors="strict")
    except UnicodeDecodeError:
        decoded = term
    if not decoded:
        raise NotFoundError("Search term")
    return SearchRouteView(term=decoded)


def resolve_genre_route(genre_id: str, genre: str = "") -> GenreRouteView:
    return GenreRouteView(id=str(genre_id), genre=genre or "")
