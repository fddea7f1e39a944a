"""
TMDB Catalog REST API.

Exposes the catalog integration layer (home carousels, genre menu and
search routes) as JSON for the browsing front-end.
"""

from api.main import app

__all__ = ["app"]
