"""Tests for CLI logging setup."""

import logging

import pytest

from calmigrate.config import MigrationConfig
from cli import setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def console_handler(root):
    (handler,) = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
    return handler


@pytest.mark.parametrize(
    "verbose, quiet, level",
    [
        (False, False, logging.WARNING),
        (True, False, logging.INFO),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_console_level(tmp_path, root_logger, verbose, quiet, level):
    setup_logging(verbose=verbose, quiet=quiet, config=MigrationConfig(log_dir=tmp_path))

    assert console_handler(root_logger).level == level


def test_log_file_receives_debug_records(tmp_path, root_logger):
    config = MigrationConfig(log_dir=tmp_path / "logs", log_filename="run.log")
    setup_logging(config=config)

    logging.getLogger("calmigrate.test").debug("merged 3 objects")
    for handler in root_logger.handlers:
        handler.flush()

    assert "merged 3 objects" in (tmp_path / "logs" / "run.log").read_text()


def test_setup_logging_replaces_handlers(tmp_path, root_logger):
    config = MigrationConfig(log_dir=tmp_path)

    setup_logging(config=config)
    setup_logging(config=config)

    assert len(root_logger.handlers) == 2
