"""Export map merging with explicit override precedence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exports.models import ExportMap

if TYPE_CHECKING:
    from collections.abc import Mapping

    from exports.models import ExportEntry


def merge_exports(
    base: Mapping[str, ExportEntry], overrides: Mapping[str, ExportEntry]
) -> ExportMap:
    """Return a new map with every base key, then every override key on top.

    A key present in both takes the override entry whole; entries are never
    merged field by field.
    """
    return ExportMap([*base.items(), *overrides.items()])


def merge_all(*maps: Mapping[str, ExportEntry]) -> ExportMap:
    """Fold maps left to right; later maps override earlier ones."""
    merged = ExportMap()
    for export_map in maps:
        merged = merge_exports(merged, export_map)
    return merged


__all__ = ["merge_all", "merge_exports"]
