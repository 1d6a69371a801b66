"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path

from loguru import logger


def get_log_directory() -> str:
    """Get the main log directory path."""
    return str(Path.home() / ".photo_catalog" / "logs")


def init_logging(log_dir: str | None = None, level: str = "INFO") -> None:
    """Initialize rotating file logging under the given directory.

    The default stderr sink is removed so that the terminal only carries the
    catalog's own output.
    """
    if log_dir is None:
        log_dir = get_log_directory()
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        str(log_path / "catalog_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        level=level,
    )


def find_latest_log_file(log_dir: str | None = None) -> Path | None:
    """Find the latest log file in the specified directory."""
    if log_dir is None:
        log_dir = get_log_directory()

    try:
        log_path = Path(log_dir)
        if not log_path.exists():
            return None

        log_files = list(log_path.glob("catalog_*.log"))
        if not log_files:
            return None

        return max(log_files, key=lambda p: p.stat().st_mtime)
    except (OSError, ValueError):
        return None
