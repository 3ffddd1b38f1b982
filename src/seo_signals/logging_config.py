"""Logging setup for the signal extractor.

Reports are written to stdout, so log records always go to stderr (and
optionally a file) to keep ``analyze -o json`` output parseable.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Loggers of the page fetcher and broken-link checker HTTP stacks
HTTP_CLIENT_LOGGERS = ('urllib3', 'httpx', 'httpcore')


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))
    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Route log records to stderr and an optional file.

    HTTP client loggers are held at WARNING so one record per broken-link
    request does not flood the output; at DEBUG they follow the root level.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Also append records to this file, creating its directory
        format_string: Overrides LOG_FORMAT
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=format_string or LOG_FORMAT,
        handlers=_build_handlers(log_file),
        force=True
    )

    client_level = logging.NOTSET if numeric_level <= logging.DEBUG else logging.WARNING
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
