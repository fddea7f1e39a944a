"""
Genre reference list, cached for a full day.
"""

from typing import List, Tuple, Union

from .client import DAY_SECONDS, CatalogClient
from .models import FEATURE_ABSENT, FeatureAbsent, GenreRef, Ok

GENRE_LIST_ENDPOINT = "/genre/movie/list"


class GenreCatalog:
    """Genre id -> name lookups for building drill-down links."""

    TTL_SECONDS = DAY_SECONDS

    def __init__(self, client: CatalogClient):
        self.client = client
        self.logger = client.logger

    def list_genres(self) -> Union[List[GenreRef], FeatureAbsent]:
        """
        Get the genre list.

        Returns:
            Genres in catalog order, or FEATURE_ABSENT when the list is
            unavailable (no credential, upstream failure, unusable payload)
        """
        result = self.client.fetch_category(
            GENRE_LIST_ENDPOINT,
            {"language": "en"},
            ttl_seconds=self.TTL_SECONDS,
        )
        if not isinstance(result, Ok):
            return FEATURE_ABSENT

        payload = result.payload
        raw = payload.get("genres") if isinstance(payload, dict) else None
        if not isinstance(raw, list):
            self.logger.error("Genre list payload has no 'genres' list")
            return FEATURE_ABSENT

        genres = []
        for entry in raw:
            try:
                genres.append(GenreRef.from_tmdb(entry))
            except (KeyError, TypeError, ValueError, OverflowError):
                self.logger.warning(f"Skipping malformed genre entry: {entry!r}")
        return genres

    def genre_links(self) -> Union[List[Tuple[str, str]], FeatureAbsent]:
        """(name, href) pairs for a genre menu."""
        genres = self.list_genres()
        if isinstance(genres, FeatureAbsent):
            return genres
        return [(g.name, g.href) for g in genres]
