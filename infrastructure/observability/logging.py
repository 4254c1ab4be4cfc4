"""
Logging setup with contextvars-based metadata injection.

- Adds the current category and species into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_category = contextvars.ContextVar("category", default="-")
cv_species = contextvars.ContextVar("species", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.category = cv_category.get() or "-"
        record.species = cv_species.get() or "-"
        return True


def set_log_context(
    *,
    category: str | None = None,
    species: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if category is not None:
        cv_category.set(str(category))
    if species is not None:
        cv_species.set(str(species))


def clear_species_context() -> None:
    """Reset species context to default (keep category)."""
    cv_species.set("-")


def clear_log_context() -> None:
    cv_category.set("-")
    cv_species.set("-")


CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] c=%(category)s s=%(species)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | c=%(category)s s=%(species)s | %(message)s"


def _prepare(handler: logging.Handler, level: int, fmt: str, datefmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(ContextInjectFilter())
    return handler


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Route warnings and progress to stderr, and optionally to a rotating log file.

    Handlers are built before the root logger is touched, so an unusable
    log_file raises OSError and leaves the existing logging setup in place.

    Args:
        log_file: Path to log file (stderr only when None); its parent is created
        console_level: Minimum level for stderr (default: INFO)
        file_level: Minimum level for the log file (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of rotated files to keep
    """
    handlers = [_prepare(logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S")]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        handlers.append(_prepare(fh, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    # Root stays at DEBUG; each handler filters by its own level
    root.setLevel(logging.DEBUG)
    for handler in handlers:
        root.addHandler(handler)

    logging.getLogger(__name__).debug(
        "dicotodir logging ready (stderr=%s, log file=%s)",
        logging.getLevelName(console_level),
        log_file if log_file is not None else "-",
    )
