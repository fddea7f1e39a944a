"""
Utility functions for the catalog layer.

Provides logging setup, timing and the console display helpers used by the CLI.
"""

import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str,
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """
    Set up a logger with file and optional console handlers.

    Args:
        name: Logger name (used for both logger and log file)
        log_dir: Directory for log files (None disables the file handler)
        level: Logging level
        console_output: Whether to also log warnings to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{name}_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only warnings and above to console
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    return f"{seconds / 60:.1f}m"


def truncate_string(s: str, max_length: int = 50, suffix: str = "...") -> str:
    """Truncate string to max length, adding suffix if truncated."""
    if len(s) <= max_length:
        return s
    return s[: max_length - len(suffix)] + suffix


def print_header(text: str, char: str = "=", width: int = 60) -> None:
    """Print a header with decorative lines."""
    print(char * width)
    print(text.center(width))
    print(char * width)


def print_section(text: str, char: str = "-", width: int = 60) -> None:
    """Print a section divider with text."""
    print(f"\n{char * width}")
    print(text)
    print(char * width)


def print_status_table(data: dict, title: str = "Status") -> None:
    """Print a formatted status table."""
    print(f"\n{title}")
    print("-" * 40)
    max_key_len = max(len(str(k)) for k in data.keys()) if data else 10
    for key, value in data.items():
        print(f"  {key:<{max_key_len + 2}}: {value}")
    print()


class Timer:
    """Context manager for timing operations."""

    def __init__(self, description: str = "Operation"):
        self.description = description
        self.start_time: float = 0
        self.elapsed: float = 0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.elapsed = time.perf_counter() - self.start_time

    def __str__(self) -> str:
        return f"{self.description}: {format_duration(self.elapsed)}"
