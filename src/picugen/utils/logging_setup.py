"""
Logging configuration for picugen.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "picugen"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[int, str] = logging.WARNING,
) -> logging.Logger:
    """Initialize the picugen logger and return it.

    Records go to stderr so stdout carries only digests. When ``log_dir`` is
    given, a dated master log and an error-only log are written there too.
    Each handler is attached once, so a later call can still add the files.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level)
    if not _has_handler(base_logger, "picugen.stream"):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.set_name("picugen.stream")
        stream_handler.setFormatter(formatter)
        base_logger.addHandler(stream_handler)

    if log_dir is not None and not _has_handler(base_logger, "picugen.master"):
        log_dir.mkdir(parents=True, exist_ok=True)
        date_stamp = datetime.now().strftime("%Y%m%d")
        master_log = log_dir / f"master_log_{date_stamp}.log"
        error_log = log_dir / f"error_log_{date_stamp}.log"

        file_handler = logging.FileHandler(master_log, encoding="utf-8")
        file_handler.set_name("picugen.master")
        file_handler.setFormatter(formatter)
        base_logger.addHandler(file_handler)

        error_handler = logging.FileHandler(error_log, encoding="utf-8")
        error_handler.set_name("picugen.error")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        base_logger.addHandler(error_handler)
    return base_logger
