"""Export map data model.

An export map is the published set of sub-paths a library exposes. Keys are
either exact sub-paths (``"."``, ``"./types"``) or wildcard sub-paths ending
in ``/*`` whose targets carry a ``*`` placeholder.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

WILDCARD_SUFFIX = "/*"
TARGET_PLACEHOLDER = "*"


class ExportMapError(ValueError):
    """Raised when an export map is assembled with overlapping wildcard keys."""


class ExportEntry(BaseModel):
    """One published sub-path: a runtime import target and a type-only target."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    import_target: str = Field(alias="import")
    types_target: str = Field(alias="types")

    @classmethod
    def source(cls, target: str) -> ExportEntry:
        """Entry whose import and types targets are the same source file."""
        return cls(import_target=target, types_target=target)


@dataclass(frozen=True)
class ExactKey:
    path: str


@dataclass(frozen=True)
class WildcardKey:
    """A ``<prefix>/*`` key serving every path under ``<prefix>/``."""

    prefix: str

    def matches(self, requested: str) -> bool:
        return requested.startswith(f"{self.prefix}/")

    def suffix(self, requested: str) -> str:
        return requested[len(self.prefix) + 1 :]

    def expand(self, target: str, requested: str) -> str:
        """Substitute the matched suffix for the ``*`` placeholder in target."""
        return target.replace(TARGET_PLACEHOLDER, self.suffix(requested), 1)

    def overlaps(self, other: WildcardKey) -> bool:
        """True when some request could be served by both keys."""
        if self.prefix == other.prefix:
            return True
        return self.prefix.startswith(f"{other.prefix}/") or other.prefix.startswith(
            f"{self.prefix}/"
        )


ExportKey = ExactKey | WildcardKey


def parse_export_key(key: str) -> ExportKey:
    if key.endswith(WILDCARD_SUFFIX):
        return WildcardKey(prefix=key[: -len(WILDCARD_SUFFIX)])
    return ExactKey(path=key)


class ExportMap(Mapping[str, ExportEntry]):
    """Immutable mapping of export keys to entries.

    Duplicate keys on construction follow last-write-wins. Insertion order
    is preserved and is the only ordering any lookup relies on.
    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        entries: Mapping[str, ExportEntry]
        | Iterable[tuple[str, ExportEntry]]
        | None = None,
    ) -> None:
        data: dict[str, ExportEntry] = {}
        if entries is not None:
            items = entries.items() if isinstance(entries, Mapping) else entries
            for key, entry in items:
                data[key] = entry
        self._entries = data

    def __getitem__(self, key: str) -> ExportEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ExportMap({self._entries!r})"

    def exact_keys(self) -> list[str]:
        return [key for key in self._entries if not key.endswith(WILDCARD_SUFFIX)]

    def wildcard_keys(self) -> list[str]:
        return [key for key in self._entries if key.endswith(WILDCARD_SUFFIX)]


def wildcard_patterns(
    export_map: Mapping[str, ExportEntry],
) -> list[tuple[str, WildcardKey]]:
    """Wildcard keys of a map paired with their parsed patterns, in map order."""
    pairs: list[tuple[str, WildcardKey]] = []
    for key in export_map:
        pattern = parse_export_key(key)
        if isinstance(pattern, WildcardKey):
            pairs.append((key, pattern))
    return pairs


def find_wildcard_overlaps(
    export_map: Mapping[str, ExportEntry],
) -> list[tuple[str, str]]:
    """List pairs of wildcard keys that could serve the same request."""
    wildcards = wildcard_patterns(export_map)
    overlaps: list[tuple[str, str]] = []
    for index, (key, pattern) in enumerate(wildcards):
        for other_key, other in wildcards[index + 1 :]:
            if pattern.overlaps(other):
                overlaps.append((key, other_key))
    return overlaps


class ExportMapBuilder:
    """Assemble an export map, rejecting overlapping wildcard keys on build."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, ExportEntry]] = []

    def add(
        self, key: str, import_target: str, types_target: str | None = None
    ) -> ExportMapBuilder:
        entry = ExportEntry(
            import_target=import_target,
            types_target=import_target if types_target is None else types_target,
        )
        self._entries.append((key, entry))
        return self

    def build(self) -> ExportMap:
        export_map = ExportMap(self._entries)
        overlaps = find_wildcard_overlaps(export_map)
        if overlaps:
            pairs = ", ".join(f"{first!r} / {second!r}" for first, second in overlaps)
            msg = f"Overlapping wildcard export keys: {pairs}"
            raise ExportMapError(msg)
        return export_map


__all__ = [
    "ExactKey",
    "ExportEntry",
    "ExportKey",
    "ExportMap",
    "ExportMapBuilder",
    "ExportMapError",
    "WildcardKey",
    "find_wildcard_overlaps",
    "parse_export_key",
    "wildcard_patterns",
]
