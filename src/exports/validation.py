"""Lint helpers for export maps."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from exports.models import ExportEntry


def validate_export_map(export_map: Mapping[str, ExportEntry]) -> list[str]:
    """Report entries with an empty import or types target.

    Returns one message per offending entry, in map order. The map is not
    modified and nothing is raised.
    """
    errors: list[str] = []
    for key, entry in export_map.items():
        missing: list[str] = []
        if not entry.import_target.strip():
            missing.append("importTarget")
        if not entry.types_target.strip():
            missing.append("typesTarget")
        if missing:
            errors.append(f'Export "{key}" missing {" and ".join(missing)}')
    return errors


__all__ = ["validate_export_map"]
