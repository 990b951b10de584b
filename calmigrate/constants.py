"""Shared constants for calendar migration."""

# Principal namespace for user accounts
USERS_URI_ROOT = "principals/users/"

# Calendar home root used to build calendar paths
CALENDAR_ROOT = "calendars"

# Exported and imported calendar files
FILENAME_EXT = ".ics"

# RFC 7986 refresh interval used when a calendar has none (or an invalid one)
DEFAULT_REFRESH_INTERVAL = "PT4H"

DEFAULT_PRODID = "-//Calendar Migrate//EN"

# Components carried through a merge besides VTIMEZONE
OBJECT_COMPONENTS = ("VEVENT", "VTODO", "VJOURNAL")

# Envelope properties
PROP_CALNAME = "X-WR-CALNAME"
PROP_COLOR = "X-APPLE-CALENDAR-COLOR"
PROP_REFRESH_INTERVAL = "REFRESH-INTERVAL"
PROP_PUBLISHED_TTL = "X-PUBLISHED-TTL"
