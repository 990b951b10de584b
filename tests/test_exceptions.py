"""Tests for exception classes."""

import pytest

from calmigrate.exceptions import (
    CalendarError,
    CalendarNotFoundError,
    DuplicateObjectError,
    ExportError,
    ImportAbortedError,
    StorageIOError,
    ValidationError,
)


def test_calendar_error():
    """Test CalendarError base exception."""
    error = CalendarError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "error_class",
    [
        CalendarNotFoundError,
        ValidationError,
        DuplicateObjectError,
        ImportAbortedError,
        StorageIOError,
        ExportError,
    ],
)
def test_errors_derive_from_calendar_error(error_class):
    """Test every migration error can be caught as CalendarError."""
    error = error_class("failed")
    assert str(error) == "failed"
    assert isinstance(error, CalendarError)


def test_import_aborted_keeps_cause():
    """Test ImportAbortedError chains the store failure."""
    cause = RuntimeError("store unavailable")
    with pytest.raises(ImportAbortedError) as exc_info:
        try:
            raise cause
        except RuntimeError as e:
            raise ImportAbortedError("Import aborted") from e
    assert exc_info.value.__cause__ is cause
