import logging
from pathlib import Path

import pytest

from infrastructure.observability.logging import (
    ContextInjectFilter,
    clear_log_context,
    clear_species_context,
    configure_logging,
    set_log_context,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_log_context()


def test_clear_species_keeps_category() -> None:
    filt = ContextInjectFilter()
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    set_log_context(category="Birds", species="Sparrow")
    clear_species_context()
    filt.filter(record)
    assert (record.category, record.species) == ("Birds", "-")

    clear_log_context()
    filt.filter(record)
    assert (record.category, record.species) == ("-", "-")


def test_filter_injects_context() -> None:
    set_log_context(category="Fish", species="Trout")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)

    assert ContextInjectFilter().filter(record) is True
    assert record.category == "Fish"
    assert record.species == "Trout"
    clear_log_context()


def test_configure_logging_writes_file_with_context(tmp_path: Path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(log_file=log_file, console_level=logging.CRITICAL, file_level=logging.INFO)

    set_log_context(category="Birds", species="Sparrow")
    logging.getLogger("dicotodir.test").warning("hello %s", "world")
    for h in logging.getLogger().handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "hello world" in text
    assert "c=Birds s=Sparrow" in text
    assert "[WARNING]" in text


def test_configure_logging_replaces_handlers(restore_root_logger) -> None:
    configure_logging()
    configure_logging()

    assert len(logging.getLogger().handlers) == 1


def test_unusable_log_file_keeps_existing_handlers(tmp_path: Path, restore_root_logger) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    before = list(logging.getLogger().handlers)

    with pytest.raises(OSError):
        configure_logging(log_file=blocker / "run.log")

    assert logging.getLogger().handlers == before
