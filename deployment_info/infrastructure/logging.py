"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path
import sys

from loguru import logger

LOG_FILE_PREFIX = "deployment_info_"


def init_logging(log_dir: str | Path | None = None, level: str = "INFO") -> None:
    """Log to stderr, plus rotating files under `log_dir` when given."""
    logger.remove()
    logger.add(sys.stderr, level=level, backtrace=False, diagnose=False)

    if log_dir is None:
        return
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_path / (LOG_FILE_PREFIX + "{time:YYYYMMDD}.log")),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        level=level,
    )


def get_log_directory() -> str:
    """Get the default log directory path."""
    return str(Path.home() / ".local" / "state" / "deployment-info" / "logs")


def find_latest_log_file(log_dir: str | Path | None = None) -> Path | None:
    """Find the latest log file in the specified directory."""
    if log_dir is None:
        log_dir = get_log_directory()

    try:
        log_path = Path(log_dir)
        if not log_path.exists():
            return None

        log_files = list(log_path.glob(LOG_FILE_PREFIX + "*.log"))
        if not log_files:
            return None

        # Most recently modified wins
        return max(log_files, key=lambda p: p.stat().st_mtime)
    except (OSError, ValueError):
        return None
