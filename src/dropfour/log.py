# src/dropfour/log.py

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from dropfour.config import LOG_LEVEL

# Library modules only emit through `logger`; entry points decide where it goes.
_stderr_sink_id: int | None = None
_file_sink_id: int | None = None


def configure_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """
    Replace loguru's default handler with a stderr sink at `level`
    (falls back to DROPFOUR_LOG_LEVEL) and optionally fan logs into a file.
    Safe to call more than once.
    """
    global _stderr_sink_id, _file_sink_id

    lvl = (level or LOG_LEVEL).upper()

    if _stderr_sink_id is None:
        logger.remove()
    else:
        logger.remove(_stderr_sink_id)
    _stderr_sink_id = logger.add(sys.stderr, level=lvl)

    if log_file is not None:
        if _file_sink_id is not None:
            logger.remove(_file_sink_id)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_sink_id = logger.add(log_file, rotation="10 MB", level=lvl)
