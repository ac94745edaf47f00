"""
Logging configuration for pluralize.

The package only creates loggers ("pluralize", "pluralize.engine",
"pluralize.config"); it never attaches handlers on import. Host
applications either configure logging themselves or call setup_logging().

Log files go to <log_dir>/pluralize-YYYY-MM-DD.log (new file each day).
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    backup_count: int = 30,  # Keep 30 days of logs
    console: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the "pluralize" logger.

    Repeated calls do not add duplicate handlers.

    Args:
        log_dir: Directory for daily-rotated log files (no file logging if None)
        level: Logging level (default: INFO)
        backup_count: Number of daily backup files to keep (default: 30 days)
        console: If True, also log to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("pluralize")
    logger.setLevel(level)

    has_file_handler = any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler)
        for h in logger.handlers
    )
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
        for h in logger.handlers
    )

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir is not None and not has_file_handler:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"pluralize-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Logging to {log_file} (level {logging.getLevelName(level)})")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "pluralize") -> logging.Logger:
    """
    Get a pluralize logger instance.

    Args:
        name: Logger name (default: "pluralize")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
