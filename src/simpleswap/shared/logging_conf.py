# src/simpleswap/shared/logging_conf.py
"""
Logging Configuration

The library only creates module loggers; it never installs handlers.
Applications (and the bundled command line) call setup_logging() once.

Files that USE this module:
- simpleswap.app (configures logging before running a command)

Files that this module USES:
- None
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "simpleswap.log"

PathLike = Union[str, Path]


def _log_path(log_file: Optional[PathLike], log_dir: Optional[PathLike]) -> Optional[Path]:
    """log_dir wins over log_file; the parent directory is created."""
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    level=logging.INFO,
    log_file: Optional[PathLike] = None,
    log_dir: Optional[PathLike] = None,
    log_to_stdout: bool = True,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """
    Install root handlers for the simpleswap command line or an embedding app.

    Args:
        level: Root logging level
        log_file: Write to this file, rotated at max_bytes
        log_dir: Write to <log_dir>/simpleswap.log instead of log_file
        log_to_stdout: Also log to stdout
        max_bytes: Rotation size of the log file
        backup_count: Rotated files to keep

    With neither stdout nor a file selected, records go to stderr.
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    if log_to_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    path = _log_path(log_file, log_dir)
    if path is not None:
        handlers.append(RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8",
        ))

    if not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger(__name__).debug("Logging to %s at level %s", path or "console", level)
