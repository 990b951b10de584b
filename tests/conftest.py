from pathlib import Path

import pytest

from calmigrate.config import MigrationConfig
from calmigrate.migrator import CalendarMigrator
from calmigrate.store.file_storage import LocalFileStorage
from tests.fake_store import FakeCalendarStore
from tests.helpers import RecordingSink


@pytest.fixture
def fake_store():
    """In-memory calendar store."""
    return FakeCalendarStore()


@pytest.fixture
def sink():
    """Output sink recording progress lines."""
    return RecordingSink()


@pytest.fixture
def config(tmp_path: Path):
    """Configuration rooted in a temporary directory."""
    return MigrationConfig(
        store_dir=tmp_path / "store",
        export_dir=tmp_path / "exports",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def migrator(fake_store, sink, config):
    """Migrator over the in-memory store and real local files."""
    return CalendarMigrator(fake_store, LocalFileStorage(), config, sink)
