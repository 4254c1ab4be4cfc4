"""Tree materialization: create the directory structure for a key document."""

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from domain.key import Skipped, SpeciesPath, walk_key
from infrastructure.config.models import RunConfig
from infrastructure.io import ensure_directory, write_marker
from infrastructure.observability.logging import clear_log_context, clear_species_context, set_log_context

logger = logging.getLogger(__name__)


class MaterializeReport(BaseModel):
    """Counters collected while materializing a key."""

    directories_created: int = 0
    directories_existing: int = 0
    markers_written: int = 0
    markers_failed: int = 0
    skipped_entries: int = 0


def materialize(document: Any, root_path: Path, cfg: RunConfig) -> MaterializeReport:
    """
    Create one directory per question/answer pair and one marker file per species.

    Malformed values are skipped with a warning and a failed marker file is
    logged and skipped. Directory creation failures other than "already
    exists" abort the run; directories created up to that point are kept.

    Args:
        document: Parsed JSON key document
        root_path: Directory the structure is created under (created if missing)
        cfg: Resolved run configuration

    Returns:
        MaterializeReport with counts for the summary

    Raises:
        OSError: If the root directory or any question directory cannot be created
    """
    report = MaterializeReport()

    if ensure_directory(root_path):
        logger.info("Created root directory %s", root_path)

    try:
        for event in walk_key(document, cfg):
            set_log_context(category=event.category or "-", species=event.species or "-")
            if isinstance(event, Skipped):
                report.skipped_entries += 1
                logger.warning("%s; skipping", event.describe())
                continue
            _materialize_species(event, root_path, report)
            clear_species_context()
    finally:
        clear_log_context()

    return report


def _materialize_species(path: SpeciesPath, root_path: Path, report: MaterializeReport) -> None:
    current = root_path
    for segment in path.segments:
        current = current / segment
        if ensure_directory(current):
            report.directories_created += 1
            logger.debug("Created directory %s", current)
        else:
            report.directories_existing += 1

    try:
        marker = write_marker(current, path.species)
    except (OSError, ValueError) as e:
        report.markers_failed += 1
        logger.error("Could not create species file for '%s' in %s: %s", path.species, current, e)
        return

    report.markers_written += 1
    if path.skipped_questions:
        logger.info("Created %s (%d question(s) left out)", marker, path.skipped_questions)
    else:
        logger.debug("Created %s", marker)
