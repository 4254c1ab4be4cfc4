"""Run summary logging."""

import logging
from pathlib import Path

from application.materialize import MaterializeReport

logger = logging.getLogger(__name__)


def log_materialize_summary(report: MaterializeReport, root_path: Path) -> None:
    """Log a human-readable summary of a materialize run."""
    logger.info("=" * 60)
    logger.info("Key structure written under %s", root_path)
    logger.info(
        "Species: %d marker file(s) written, %d failed",
        report.markers_written,
        report.markers_failed,
    )
    logger.info(
        "Directories: %d created, %d already present",
        report.directories_created,
        report.directories_existing,
    )
    if report.skipped_entries:
        logger.warning("Skipped %d malformed entries (see warnings above)", report.skipped_entries)
    logger.info("=" * 60)
