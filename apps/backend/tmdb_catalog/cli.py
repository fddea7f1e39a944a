"""
Command-line interface for the catalog layer.

Provides commands for:
- status: Show configuration and API connectivity
- home: Print the home page carousels
- genres: List genres with their drill-down links
- genre: Print the carousels for one genre
- search: Validate a search query and show the route it navigates to
"""

import argparse
import sys
from typing import List, Optional

from .aggregator import CategoryAggregator
from .client import CatalogClient
from .config import Config
from .genres import GenreCatalog
from .models import CategoryBundle, FeatureAbsent, NavigationIntent
from .routes import NotFoundError, resolve_genre_route, resolve_search_route
from .search import MAX_QUERY_LENGTH, MIN_QUERY_LENGTH, SEARCH_ROUTE_PREFIX, SearchController
from .utils import Timer, print_header, print_section, print_status_table, truncate_string


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands."""
    parser = argparse.ArgumentParser(
        prog="tmdb_catalog",
        description="TMDB Catalog - Browse categorized movie lists from TMDB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check configuration
  python -m tmdb_catalog status

  # Show home page carousels
  python -m tmdb_catalog home

  # Browse a genre
  python -m tmdb_catalog genre 28 --name Action

  # Submit a search
  python -m tmdb_catalog search "iron man"
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("status", help="Show configuration and API connectivity")

    home_parser = subparsers.add_parser("home", help="Show home page carousels")
    home_parser.add_argument(
        "--limit",
        type=int,
        default=5,
        help="Movies to show per carousel (default: 5)",
    )

    subparsers.add_parser("genres", help="List genres and their links")

    genre_parser = subparsers.add_parser("genre", help="Show carousels for a genre")
    genre_parser.add_argument("id", help="TMDB genre ID")
    genre_parser.add_argument("--name", default="", help="Genre name for display")
    genre_parser.add_argument(
        "--limit",
        type=int,
        default=5,
        help="Movies to show per carousel (default: 5)",
    )

    search_parser = subparsers.add_parser("search", help="Submit a search query")
    search_parser.add_argument("query", help="Search text")

    return parser


def print_bundles(bundles: List[CategoryBundle], limit: int) -> None:
    for bundle in bundles:
        print_section(f"{bundle.label} ({len(bundle.movies)})")
        if not bundle.movies:
            print("  (no movies)")
            continue
        for movie in bundle.movies[:limit]:
            year = movie.release_date[:4] or "----"
            print(f"  [{movie.id}] {truncate_string(movie.title, 45)} ({year}) - {movie.vote_average:.1f}")


def cmd_status(config: Config, client: CatalogClient) -> int:
    """Run status command."""
    print_header("TMDB Catalog Status")

    print_status_table(
        {
            "Base URL": config.base_url,
            "Credential": "configured" if config.has_credential else "missing (catalog disabled)",
            "Workers": config.max_workers,
            "Log dir": config.log_dir,
        },
        title="Configuration",
    )

    if not config.has_credential:
        print("Set TMDB_API_KEY in your .env file to enable the catalog.")
        return 0

    with Timer("Connection test") as timer:
        ok = client.test_connection()
    print(f"API connection: {'OK' if ok else 'FAILED'} ({timer})")
    return 0 if ok else 1


def cmd_home(aggregator: CategoryAggregator, args) -> int:
    """Run home command."""
    print_header("Home")
    with Timer("Page load") as timer:
        bundles = aggregator.home_page()
    print_bundles(bundles, args.limit)
    print(f"\n{timer}")
    return 0


def cmd_genres(genres: GenreCatalog) -> int:
    """Run genres command."""
    links = genres.genre_links()
    if isinstance(links, FeatureAbsent):
        # Genre browsing is optional; render nothing
        return 0

    print_header("Genres")
    for name, href in links:
        print(f"  {name:<20} {href}")
    return 0


def cmd_genre(aggregator: CategoryAggregator, args) -> int:
    """Run genre command."""
    view = resolve_genre_route(args.id, args.name)
    print_header(view.heading)
    bundles = aggregator.genre_page(view.id, view.genre or None)
    print_bundles(bundles, args.limit)
    return 0


def cmd_search(args) -> int:
    """Run search command."""
    navigated: List[str] = []
    controller = SearchController(navigate=navigated.append)
    controller.on_change(args.query)
    outcome = controller.on_submit()

    if not isinstance(outcome, NavigationIntent):
        print(
            f"Search must be between {MIN_QUERY_LENGTH} and "
            f"{MAX_QUERY_LENGTH} characters."
        )
        return 2

    print(f"Navigate to: {outcome.path}")
    try:
        view = resolve_search_route(outcome.path[len(SEARCH_ROUTE_PREFIX):])
    except NotFoundError:
        print("Not found")
        return 1
    print(view.heading)
    return 0


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1

    if parsed_args.command == "search":
        return cmd_search(parsed_args)

    client = CatalogClient(config)
    aggregator = CategoryAggregator(client)

    try:
        if parsed_args.command == "status":
            return cmd_status(config, client)
        elif parsed_args.command == "home":
            return cmd_home(aggregator, parsed_args)
        elif parsed_args.command == "genres":
            return cmd_genres(GenreCatalog(client))
        elif parsed_args.command == "genre":
            return cmd_genre(aggregator, parsed_args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
