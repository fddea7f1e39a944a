"""
Entry point for running the catalog layer as a module.

Usage:
    python -m tmdb_catalog <command>
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
