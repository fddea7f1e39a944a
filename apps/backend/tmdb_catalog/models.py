"""
Data models for the catalog layer.

Provides dataclasses for type-safe data handling between the TMDB client,
the category aggregator and the presentation boundary, plus the small
result types used instead of nullable returns.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar
from urllib.parse import urlencode

T = TypeVar("T")


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful fetch carrying the parsed payload."""

    payload: T

    @property
    def is_ok(self) -> bool:
        return True


class Unavailable:
    """No data: network fault, non-2xx status, parse fault or no credential."""

    _instance: Optional["Unavailable"] = None

    def __new__(cls) -> "Unavailable":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_ok(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNAVAILABLE"


class FeatureAbsent:
    """An optional feature could not be provided and should not be rendered."""

    _instance: Optional["FeatureAbsent"] = None

    def __new__(cls) -> "FeatureAbsent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FEATURE_ABSENT"


class Rejected:
    """A search submission that failed validation."""

    _instance: Optional["Rejected"] = None

    def __new__(cls) -> "Rejected":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "REJECTED"


UNAVAILABLE = Unavailable()
FEATURE_ABSENT = FeatureAbsent()
REJECTED = Rejected()


# =============================================================================
# CATALOG DATA
# =============================================================================

@dataclass(frozen=True)
class MovieSummary:
    """One movie entry from a TMDB list endpoint."""

    id: int
    title: str
    overview: str = ""
    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    popularity: float = 0.0
    release_date: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    genre_ids: Tuple[int, ...] = ()
    adult: bool = False
    original_language: str = ""
    original_title: str = ""
    video: bool = False

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "overview": self.overview,
            "backdrop_path": self.backdrop_path,
            "poster_path": self.poster_path,
            "popularity": self.popularity,
            "release_date": self.release_date,
            "vote_average": self.vote_average,
            "vote_count": self.vote_count,
            "genre_ids": list(self.genre_ids),
            "adult": self.adult,
            "original_language": self.original_language,
            "original_title": self.original_title,
            "video": self.video,
        }

    @classmethod
    def from_tmdb(cls, data: dict) -> "MovieSummary":
        """
        Create MovieSummary from a TMDB result entry.

        Raises:
            KeyError: If the entry has no id.
        """
        title = data.get("title") or data.get("original_title") or "Unknown"
        return cls(
            id=int(data["id"]),
            title=title,
            overview=data.get("overview") or "",
            backdrop_path=data.get("backdrop_path"),
            poster_path=data.get("poster_path"),
            popularity=float(data.get("popularity") or 0.0),
            release_date=data.get("release_date") or "",
            vote_average=float(data.get("vote_average") or 0.0),
            vote_count=int(data.get("vote_count") or 0),
            genre_ids=tuple(int(g) for g in data.get("genre_ids") or ()),
            adult=bool(data.get("adult", False)),
            original_language=data.get("original_language") or "",
            original_title=data.get("original_title") or title,
            video=bool(data.get("video", False)),
        )


@dataclass(frozen=True)
class GenreRef:
    """Genre id/name pair from the TMDB genre list."""

    id: int
    name: str

    @property
    def href(self) -> str:
        """Drill-down link for the genre page."""
        return f"/genre/{self.id}?{urlencode({'genre': self.name})}"

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "href": self.href}

    @classmethod
    def from_tmdb(cls, data: dict) -> "GenreRef":
        return cls(id=int(data["id"]), name=str(data.get("name", "")))


@dataclass(frozen=True)
class CategoryBundle:
    """One carousel worth of movies, labelled for display."""

    label: str
    movies: Tuple[MovieSummary, ...] = ()

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "movies": [m.to_dict() for m in self.movies],
        }


# =============================================================================
# REQUESTS
# =============================================================================

@dataclass(frozen=True)
class CachePolicy:
    """How long a successful response may be served from cache."""

    ttl_seconds: int

    def __post_init__(self):
        if self.ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class CatalogRequest:
    """A single outbound GET, built per call."""

    endpoint: str
    query_params: Dict[str, str]
    cache_policy: CachePolicy

    @classmethod
    def build(
        cls,
        endpoint: str,
        params: Optional[Mapping[str, Any]],
        ttl_seconds: int,
    ) -> "CatalogRequest":
        """
        Normalize an endpoint and params into a request.

        Params whose value is None are dropped entirely.

        Raises:
            ValueError: If the endpoint is empty or ttl_seconds is negative.
        """
        endpoint = (endpoint or "").strip()
        if not endpoint.strip("/"):
            raise ValueError("endpoint must be a non-empty path")
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint

        query_params = {
            str(key): _query_value(value)
            for key, value in (params or {}).items()
            if value is not None
        }
        return cls(
            endpoint=endpoint,
            query_params=query_params,
            cache_policy=CachePolicy(ttl_seconds),
        )

    @property
    def cache_key(self) -> Tuple[str, Tuple[Tuple[str, str], ...]]:
        return self.endpoint, tuple(sorted(self.query_params.items()))

    @property
    def query_string(self) -> str:
        return urlencode(self.query_params)


@dataclass(frozen=True)
class CategorySpec:
    """One category to load for a page."""

    label: str
    endpoint: str
    params: Dict[str, Any] = field(default_factory=dict)
    ttl_seconds: int = 60 * 60 * 24


# =============================================================================
# NAVIGATION
# =============================================================================

@dataclass(frozen=True)
class NavigationIntent:
    """A request to change the current route."""

    path: str


def movies_from_payload(payload: Any) -> List[MovieSummary]:
    """
    Parse the ``results`` list of a TMDB list payload.

    Entries without a usable id or with unconvertible numbers are skipped.

    Raises:
        ValueError: If the payload is not an object or has no results list
    """
    if not isinstance(payload, dict):
        raise ValueError("catalog payload is not an object")
    results = payload.get("results") or []
    if not isinstance(results, list):
        raise ValueError("catalog payload results is not a list")
    movies = []
    for entry in results:
        if not isinstance(entry, dict) or entry.get("id") is None:
            continue
        try:
            movies.append(MovieSummary.from_tmdb(entry))
        except (KeyError, TypeError, ValueError, OverflowError):
            continue
    return movies
