"""
Search endpoints for the public API.
"""

from fastapi import APIRouter, Request

from api.exceptions import NotFoundError, ValidationError
from api.schemas.search import SearchNavigation, SearchPageResponse, SearchSubmit
from tmdb_catalog import routes
from tmdb_catalog.models import NavigationIntent
from tmdb_catalog.search import (
    MAX_QUERY_LENGTH,
    MIN_QUERY_LENGTH,
    SEARCH_ROUTE_PREFIX,
    SearchController,
)

router = APIRouter()


@router.post("/search", response_model=SearchNavigation)
def submit_search(body: SearchSubmit):
    """
    Validate a search box submission and return the route to navigate to.
    """
    navigated = []
    controller = SearchController(navigate=navigated.append)
    controller.on_change(body.query)
    outcome = controller.on_submit()

    if not isinstance(outcome, NavigationIntent):
        raise ValidationError(
            f"Search must be between {MIN_QUERY_LENGTH} and {MAX_QUERY_LENGTH} characters",
            details={"min_length": MIN_QUERY_LENGTH, "max_length": MAX_QUERY_LENGTH},
        )
    return {"path": outcome.path}


def _raw_term(request: Request, term: str) -> str:
    """
    The still-encoded route segment.

    The router hands over an already-decoded path, so the segment is taken
    from the raw path to keep decoding to a single pass.
    """
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return term
    try:
        raw = raw_path.decode("utf-8")
    except UnicodeDecodeError:
        return term
    raw = raw.split("?", 1)[0]
    _, sep, segment = raw.partition(SEARCH_ROUTE_PREFIX)
    return segment if sep else term


@router.get("/search/{term:path}", response_model=SearchPageResponse)
def get_search_page(request: Request, term: str):
    """
    Search destination page. The term arrives encoded and is decoded once.
    """
    raw = _raw_term(request, term)
    try:
        view = routes.resolve_search_route(raw)
    except routes.NotFoundError:
        raise NotFoundError("Search term", raw)
    return view.to_dict()
