"""Package manifest ``exports`` table codec.

Each export entry maps to one condition pair in the manifest:
``{"import": <target>, "types": <target>}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import orjson

from exports.models import ExportEntry, ExportMap

if TYPE_CHECKING:
    from pathlib import Path


class ManifestError(ValueError):
    """Raised when a manifest exports table cannot be read as an export map."""


def to_package_exports(
    export_map: Mapping[str, ExportEntry],
) -> dict[str, dict[str, str]]:
    return {
        key: {"import": entry.import_target, "types": entry.types_target}
        for key, entry in export_map.items()
    }


def parse_package_exports(table: str | Mapping[str, Any]) -> ExportMap:
    """Build an export map from a manifest ``exports`` table.

    The table may be any mapping. Values are condition objects, ExportEntry
    instances, or strings; a string is shorthand for identical import and
    types targets.
    Missing conditions become empty targets, which validate_export_map
    reports.
    """
    if isinstance(table, str):
        return ExportMap([(".", ExportEntry.source(table))])
    if not isinstance(table, Mapping):
        msg = "exports must be a string or a mapping of sub-path -> conditions"
        raise ManifestError(msg)

    entries: list[tuple[str, ExportEntry]] = []
    for key, value in table.items():
        if isinstance(value, str):
            entries.append((key, ExportEntry.source(value)))
            continue
        if isinstance(value, ExportEntry):
            entries.append((key, value))
            continue
        if not isinstance(value, Mapping):
            msg = f'Export "{key}" must be a string or a conditions object'
            raise ManifestError(msg)
        import_target = value.get("import", "")
        types_target = value.get("types", "")
        if not isinstance(import_target, str) or not isinstance(types_target, str):
            msg = f'Export "{key}" conditions must be strings'
            raise ManifestError(msg)
        entries.append(
            (key, ExportEntry(import_target=import_target, types_target=types_target))
        )
    return ExportMap(entries)


def load_package_exports(path: Path) -> ExportMap:
    """Read the exports table of a package manifest file."""
    try:
        data = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        msg = f"Failed to read manifest {path}: {exc}"
        raise ManifestError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Expected JSON object in {path}"
        raise ManifestError(msg)
    if "exports" not in data:
        msg = f"No exports table in {path}"
        raise ManifestError(msg)

    return parse_package_exports(data["exports"])


def dumps_package_exports(export_map: Mapping[str, ExportEntry]) -> bytes:
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
    return orjson.dumps(to_package_exports(export_map), option=opts)


__all__ = [
    "ManifestError",
    "dumps_package_exports",
    "load_package_exports",
    "parse_package_exports",
    "to_package_exports",
]
