"""Per-kind export map resolution.

Each library kind publishes a fixed set of sub-paths. Every branch builds its
own map from scratch; nothing is shared or mutated between branches.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from exports.kinds import LibraryKind, LibraryKindConfig
from exports.models import ExportMap, ExportMapBuilder

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

BARREL = "."
BARREL_TARGET = "./src/index.ts"
TYPES_TARGET = "./src/types.ts"


def _lib(path: str) -> str:
    return f"./src/lib/{path}"


def _base() -> ExportMapBuilder:
    return ExportMapBuilder().add(BARREL, BARREL_TARGET).add("./types", TYPES_TARGET)


def _contract_exports(config: LibraryKindConfig) -> ExportMap:
    builder = (
        _base()
        .add("./errors", _lib("errors.ts"))
        .add("./ports", _lib("ports.ts"))
    )
    if config.has_entities:
        builder.add("./entities", _lib("entities/index.ts"))
        builder.add("./entities/*", _lib("entities/*.ts"))
    builder.add("./events", _lib("events.ts"))
    return builder.build()


def _data_access_exports(config: LibraryKindConfig) -> ExportMap:
    return (
        _base()
        .add("./repository", _lib("repository/index.ts"))
        .add("./repository/operations", _lib("repository/operations/index.ts"))
        .add("./repository/operations/*", _lib("repository/operations/*.ts"))
        .add("./queries", _lib("queries/index.ts"))
        .add("./queries/*", _lib("queries/*.ts"))
        .add("./validation", _lib("validation/index.ts"))
        .add("./validation/*", _lib("validation/*.ts"))
        .add("./layers", _lib("layers/index.ts"))
        .add("./layers/*", _lib("layers/*.ts"))
        .build()
    )


def _feature_exports(config: LibraryKindConfig) -> ExportMap:
    # Platform flags are ignored here: client/server/edge code is reached
    # through the barrel and left to tree-shaking.
    builder = _base()
    if config.include_rpc:
        builder.add("./rpc/handlers", _lib("rpc/handlers/index.ts"))
        builder.add("./rpc/handlers/*", _lib("rpc/handlers/*.ts"))
    return builder.build()


def _infra_exports(config: LibraryKindConfig) -> ExportMap:
    return (
        _base()
        .add("./service", _lib("service/index.ts"))
        .add("./providers/*", _lib("providers/*.ts"))
        .add("./layers/*", _lib("layers/*.ts"))
        .build()
    )


def _provider_exports(config: LibraryKindConfig) -> ExportMap:
    return (
        _base()
        .add("./service", _lib("service/index.ts"))
        .add("./service/*", _lib("service/operations/*.ts"))
        .add("./errors", _lib("errors.ts"))
        .add("./validation", _lib("validation.ts"))
        .build()
    )


KIND_RESOLVERS: dict[LibraryKind, Callable[[LibraryKindConfig], ExportMap]] = {
    LibraryKind.CONTRACT: _contract_exports,
    LibraryKind.DATA_ACCESS: _data_access_exports,
    LibraryKind.FEATURE: _feature_exports,
    LibraryKind.INFRA: _infra_exports,
    LibraryKind.PROVIDER: _provider_exports,
}


def minimal_exports() -> ExportMap:
    """Barrel-only map returned for unsupported library kinds."""
    return ExportMapBuilder().add(BARREL, BARREL_TARGET).build()


def resolve_exports(config: LibraryKindConfig) -> ExportMap:
    """Compute the canonical export map for a library.

    Unsupported kinds degrade to the barrel-only map instead of raising; the
    result is still a valid map, so callers that need richer sub-paths should
    treat it as a sign of misconfiguration upstream.

    Raises:
        TypeError: If config is not a LibraryKindConfig.
    """
    if not isinstance(config, LibraryKindConfig):
        msg = f"Expected LibraryKindConfig, got {type(config).__name__}"
        raise TypeError(msg)

    kind = config.library_kind
    if kind is None:
        logger.warning(
            "Unsupported library kind %r; falling back to barrel-only exports",
            config.kind,
        )
        return minimal_exports()

    export_map = KIND_RESOLVERS[kind](config)
    logger.debug("Resolved %d export keys for %s library", len(export_map), kind.value)
    return export_map


__all__ = ["KIND_RESOLVERS", "minimal_exports", "resolve_exports"]
