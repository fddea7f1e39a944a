"""
Request-scoped logging for the catalog API.

Every record carries the id of the request that produced it, or "-" when
logged outside a request.
"""

import logging
import os
import sys
import uuid
from contextvars import ContextVar, Token
from datetime import datetime
from pathlib import Path
from typing import Optional

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

_request_id: ContextVar[str] = ContextVar("catalog_request_id", default="-")


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()
        return True


def setup_api_logger(
    name: str = "catalog_api",
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Set up the API logger with console and optional file handlers.

    Args:
        name: Logger name
        log_dir: Directory for log files (None logs to console only)
        level: Logging level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(request_id)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    request_filter = RequestIdFilter()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(log_dir / f"{name}_{datetime.now().strftime('%Y%m%d')}.log")
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(request_filter)
        logger.addHandler(handler)

    return logger


def bind_request_id(inbound: Optional[str] = None) -> Token:
    """
    Bind a request id to the current context.

    A client-supplied id is reused when it is non-empty and short enough,
    otherwise a fresh 8-character id is generated. Pass the returned token
    to ``reset_request_id`` when the request ends.
    """
    inbound = (inbound or "").strip()
    if inbound and len(inbound) <= MAX_REQUEST_ID_LENGTH:
        request_id = inbound
    else:
        request_id = uuid.uuid4().hex[:8]
    return _request_id.set(request_id)


def current_request_id() -> str:
    return _request_id.get()


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


_log_dir = os.getenv("CATALOG_LOG_DIR")
logger = setup_api_logger(log_dir=Path(_log_dir) if _log_dir else None)
