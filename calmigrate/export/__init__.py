"""Export side of calendar migration."""

from calmigrate.export.merger import merge_objects
from calmigrate.export.naming import (
    export_filename,
    sanitize_name,
    unique_export_filename,
)
from calmigrate.export.objects import ObjectFetcher
from calmigrate.export.properties import PropertyResolver

__all__ = [
    "merge_objects",
    "export_filename",
    "sanitize_name",
    "unique_export_filename",
    "ObjectFetcher",
    "PropertyResolver",
]
