# src/moneyproblem/shared/logging_conf.py
"""
Logging Configuration

Configures the root logger once for the command line. Stdout carries the
evaluation output, so log records go there only when asked for; a rotating
log file can be added next to it.

Files that USE this module:
- moneyproblem.app (setup_logging function for logging initialization)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_file: Union[str, Path], max_bytes: int, backup_count: int) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> None:
    """
    Configure application-wide logging settings.

    Args:
        level: Logging level or level name (default: logging.INFO)
        log_file: Optional path of a rotating log file
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        log_to_stdout: Log to stdout; read from MONEYPROBLEM_LOG_STDOUT when None
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if log_to_stdout is None:
        log_to_stdout = os.environ.get("MONEYPROBLEM_LOG_STDOUT", "true").lower() == "true"

    handlers: List[logging.Handler] = []
    if log_to_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(_file_handler(log_file, max_bytes, backup_count))
    if not handlers:
        handlers.append(logging.NullHandler())

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured: stdout=%s, file=%s, level=%s", log_to_stdout, log_file, level
    )
