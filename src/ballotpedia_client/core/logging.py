"""Log sinks for the Ballotpedia client and CLI.

Request and failure logs from the client always go to stderr. When
``LOG_DIR`` is set they are also appended to ``ballotpedia-client.log`` in
that directory, rotated daily and kept for a week.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "ballotpedia-client.log"

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace loguru's default handler with the client's sinks.

    Args:
        log_level: Minimum level for every sink, case-insensitive.
        log_dir: Directory for ``ballotpedia-client.log``. Created if missing.
            Without it only the stderr sink is installed.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)

    if not log_dir:
        return

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    logger.add(
        directory / LOG_FILE_NAME,
        level=level,
        format=_LOG_FORMAT,
        rotation="24h",
        retention="7 days",
    )
