"""Resolve requested import paths against an export map."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from exports.models import (
    ExportEntry,
    WildcardKey,
    find_wildcard_overlaps,
    parse_export_key,
    wildcard_patterns,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def resolve_import_path(
    export_map: Mapping[str, ExportEntry], requested_path: str
) -> str | None:
    """Return the export key that serves requested_path, or None.

    An exact key always wins. Otherwise wildcard keys are scanned in map
    order; if several match (only possible with overlapping wildcards, which
    builders reject) the first one is returned and a warning is logged.
    """
    if requested_path in export_map:
        return requested_path

    matches = [
        key
        for key, pattern in wildcard_patterns(export_map)
        if pattern.matches(requested_path)
    ]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "Import path %r matches overlapping wildcard keys %s; using %r",
            requested_path,
            matches,
            matches[0],
        )
    return matches[0]


def resolve_import_target(
    export_map: Mapping[str, ExportEntry], requested_path: str
) -> ExportEntry | None:
    """Return the concrete entry for requested_path with wildcards expanded."""
    key = resolve_import_path(export_map, requested_path)
    if key is None:
        return None

    entry = export_map[key]
    pattern = parse_export_key(key)
    if not isinstance(pattern, WildcardKey):
        return entry
    return ExportEntry(
        import_target=pattern.expand(entry.import_target, requested_path),
        types_target=pattern.expand(entry.types_target, requested_path),
    )


__all__ = ["find_wildcard_overlaps", "resolve_import_path", "resolve_import_target"]
