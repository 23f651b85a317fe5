"""Export-path resolution for monorepo library kinds."""

from exports.kinds import LibraryKind, LibraryKindConfig, Platform
from exports.lookup import (
    find_wildcard_overlaps,
    resolve_import_path,
    resolve_import_target,
)
from exports.merge import merge_all, merge_exports
from exports.models import (
    ExactKey,
    ExportEntry,
    ExportMap,
    ExportMapBuilder,
    ExportMapError,
    WildcardKey,
    parse_export_key,
)
from exports.resolver import resolve_exports
from exports.validation import validate_export_map

__all__ = [
    "ExactKey",
    "ExportEntry",
    "ExportMap",
    "ExportMapBuilder",
    "ExportMapError",
    "LibraryKind",
    "LibraryKindConfig",
    "Platform",
    "WildcardKey",
    "find_wildcard_overlaps",
    "merge_all",
    "merge_exports",
    "parse_export_key",
    "resolve_exports",
    "resolve_import_path",
    "resolve_import_target",
    "validate_export_map",
]
