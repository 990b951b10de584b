"""Import side of calendar migration."""

from calmigrate.importer.allocator import allocate_uri, candidate_base
from calmigrate.importer.loader import ImportLoader, referenced_tzids, wrap_event
from calmigrate.importer.parser import parse_calendar, validate_structure

__all__ = [
    "allocate_uri",
    "candidate_base",
    "ImportLoader",
    "referenced_tzids",
    "wrap_event",
    "parse_calendar",
    "validate_structure",
]
