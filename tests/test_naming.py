"""Tests for export file naming."""

import re
from datetime import date

from calmigrate.export.naming import export_filename, sanitize_name, unique_export_filename

FILENAME_PATTERN = re.compile(r"^[A-Za-z0-9\-_ ]+-\d{4}-\d{2}-\d{2}\.ics$")


def test_sanitize_name_removes_punctuation():
    assert sanitize_name("Team: Q1/Q2!") == "Team Q1Q2"


def test_sanitize_name_keeps_allowed_characters():
    assert sanitize_name("My_cal-2 x") == "My_cal-2 x"


def test_sanitize_name_drops_non_ascii():
    assert sanitize_name("Café ☕") == "Caf "


def test_export_filename_appends_date():
    filename = export_filename("Team: Q1/Q2!", on=date(2025, 3, 1))

    assert filename == "Team Q1Q2-2025-03-01.ics"
    assert FILENAME_PATTERN.match(filename)


def test_export_filename_defaults_to_today():
    filename = export_filename("Work")

    assert filename == f"Work-{date.today().isoformat()}.ics"


def test_export_filename_falls_back_when_name_sanitizes_to_nothing():
    filename = export_filename("日本語", on=date(2025, 1, 1), fallback="jp")

    assert filename == "jp-2025-01-01.ics"
    assert FILENAME_PATTERN.match(filename)


def test_export_filename_default_fallback():
    filename = export_filename("!!!", on=date(2025, 1, 1))

    assert filename == "calendar-2025-01-01.ics"


def test_export_filename_blank_name_uses_fallback():
    assert export_filename("   ", on=date(2025, 1, 1), fallback="work") == "work-2025-01-01.ics"


def test_unique_export_filename_free_name():
    filename = unique_export_filename("Personal", "personal", set(), on=date(2025, 1, 1))

    assert filename == "Personal-2025-01-01.ics"


def test_unique_export_filename_qualifies_with_uri():
    taken = {"Personal-2025-01-01.ics"}

    filename = unique_export_filename("Personal", "personal-old", taken, on=date(2025, 1, 1))

    assert filename == "Personal personal-old-2025-01-01.ics"
    assert FILENAME_PATTERN.match(filename)


def test_unique_export_filename_numbers_repeated_clashes():
    taken = {"Personal-2025-01-01.ics", "Personal home-2025-01-01.ics"}

    filename = unique_export_filename("Personal", "home", taken, on=date(2025, 1, 1))

    assert filename == "Personal home 2-2025-01-01.ics"


def test_unique_export_filename_unprintable_name_and_uri():
    taken = {"jp-2025-01-01.ics"}

    filename = unique_export_filename("日本語", "jp", taken, on=date(2025, 1, 1))

    assert filename == "jp jp-2025-01-01.ics"
    assert FILENAME_PATTERN.match(filename)
