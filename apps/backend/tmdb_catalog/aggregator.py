"""
Page assembly from independent catalog categories.

Every category is fetched concurrently and joined before assembly, so
bundle order always follows the requested order and one failing
category never takes down the rest of the page.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple, Union

from .client import CatalogClient, discover, popular, top_rated, upcoming
from .models import (
    CatalogRequest,
    CategoryBundle,
    CategorySpec,
    MovieSummary,
    Ok,
    movies_from_payload,
)


class CategoryAggregator:
    """Builds page-ready category bundles from a CatalogClient."""

    def __init__(self, client: CatalogClient, max_workers: Optional[int] = None):
        self.client = client
        self.max_workers = max_workers or client.config.max_workers
        self.logger = client.logger

    def _load_one(self, spec: CategorySpec) -> Tuple[MovieSummary, ...]:
        result = self.client.fetch_category(spec.endpoint, spec.params, spec.ttl_seconds)
        if not isinstance(result, Ok):
            return ()
        try:
            return tuple(movies_from_payload(result.payload))
        except ValueError as e:
            self.logger.error(f"Malformed results for category {spec.label!r}: {e}")
            return ()

    def load_page(self, categories: Sequence[CategorySpec]) -> List[CategoryBundle]:
        """
        Fetch all categories and return one bundle per category.

        Args:
            categories: Ordered categories to load

        Returns:
            Bundles in the same order as categories. A category that could
            not be loaded gets an empty movie list.

        Raises:
            ValueError: If a category has an empty endpoint or a negative TTL
        """
        if not categories:
            return []

        for spec in categories:
            CatalogRequest.build(spec.endpoint, spec.params, spec.ttl_seconds)

        workers = min(self.max_workers, len(categories))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self._load_one, spec) for spec in categories]

        bundles = [
            CategoryBundle(label=spec.label, movies=future.result())
            for spec, future in zip(categories, futures)
        ]

        loaded = sum(1 for b in bundles if b.movies)
        self.logger.info(f"Loaded {loaded}/{len(bundles)} categories with results")
        return bundles

    def home_page(self) -> List[CategoryBundle]:
        """Upcoming, top rated and popular carousels."""
        return self.load_page([upcoming(), top_rated(), popular()])

    def genre_page(
        self,
        genre_id: Union[int, str],
        genre_name: Optional[str] = None,
        keywords: Optional[str] = None,
    ) -> List[CategoryBundle]:
        """Carousels for a genre drill-down page."""
        label = f"{genre_name} Movies" if genre_name else "Results"
        return self.load_page([
            discover(genre_id=genre_id, keywords=keywords, label=label),
            popular(),
        ])
