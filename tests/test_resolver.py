from __future__ import annotations

import logging

import pytest

from exports.kinds import LibraryKind, LibraryKindConfig
from exports.lookup import find_wildcard_overlaps
from exports.models import ExportEntry
from exports.resolver import KIND_RESOLVERS, resolve_exports
from exports.validation import validate_export_map


def _config(kind: str | LibraryKind, **flags: object) -> LibraryKindConfig:
    return LibraryKindConfig.model_validate({"kind": kind, **flags})


_ALL_CONFIGS = [
    _config("contract"),
    _config("contract", has_entities=True, entity_names=["product"]),
    _config("data-access"),
    _config("feature"),
    _config("feature", include_rpc=True),
    _config("feature", include_client_server=True, include_edge=True),
    _config("infra"),
    _config("provider"),
]


def test_dispatch_table_covers_every_library_kind() -> None:
    assert set(KIND_RESOLVERS) == set(LibraryKind)


def test_contract_without_entities_has_core_keys_only() -> None:
    export_map = resolve_exports(_config("contract", has_entities=False))

    assert set(export_map) == {".", "./types", "./errors", "./ports", "./events"}
    assert "./entities" not in export_map
    assert "./entities/*" not in export_map


def test_contract_with_entities_adds_barrel_and_wildcard() -> None:
    export_map = resolve_exports(_config("contract", has_entities=True))

    assert export_map["./entities"] == ExportEntry.source(
        "./src/lib/entities/index.ts"
    )
    assert export_map["./entities/*"] == ExportEntry.source("./src/lib/entities/*.ts")
    assert {".", "./types", "./errors", "./ports", "./events"} <= set(export_map)


def test_data_access_exact_and_wildcard_keys() -> None:
    export_map = resolve_exports(_config("data-access"))

    assert set(export_map.exact_keys()) == {
        ".",
        "./types",
        "./repository",
        "./repository/operations",
        "./queries",
        "./validation",
        "./layers",
    }
    assert set(export_map.wildcard_keys()) == {
        "./repository/operations/*",
        "./queries/*",
        "./validation/*",
        "./layers/*",
    }
    assert export_map["./repository/operations/*"].import_target == (
        "./src/lib/repository/operations/*.ts"
    )


def test_feature_without_rpc_is_barrel_and_types_only() -> None:
    export_map = resolve_exports(_config("feature", include_rpc=False))

    assert set(export_map) == {".", "./types"}


def test_feature_with_rpc_adds_handler_paths() -> None:
    export_map = resolve_exports(_config("feature", include_rpc=True))

    assert set(export_map) == {".", "./types", "./rpc/handlers", "./rpc/handlers/*"}
    assert export_map["./rpc/handlers/*"].types_target == "./src/lib/rpc/handlers/*.ts"


@pytest.mark.parametrize("platform", ["node", "browser", "universal", "edge"])
def test_feature_never_emits_platform_keys(platform: str) -> None:
    export_map = resolve_exports(
        _config(
            "feature",
            platform=platform,
            include_client_server=True,
            include_edge=True,
        )
    )

    for key in export_map:
        assert not any(
            segment in key for segment in ("client", "server", "edge")
        ), key


def test_infra_keys() -> None:
    export_map = resolve_exports(_config("infra"))

    assert set(export_map) == {
        ".",
        "./types",
        "./service",
        "./providers/*",
        "./layers/*",
    }


def test_provider_service_wildcard_targets_operations_directory() -> None:
    export_map = resolve_exports(_config("provider"))

    assert set(export_map) == {
        ".",
        "./types",
        "./service",
        "./service/*",
        "./errors",
        "./validation",
    }
    assert export_map["./service/*"].import_target == (
        "./src/lib/service/operations/*.ts"
    )
    assert export_map["./validation"].import_target == "./src/lib/validation.ts"


def test_unsupported_kind_returns_barrel_only(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="exports.resolver"):
        export_map = resolve_exports(_config("unknown-kind"))

    assert list(export_map) == ["."]
    assert export_map["."] == ExportEntry.source("./src/index.ts")
    assert "unknown-kind" in caplog.text


def test_accepts_library_kind_member() -> None:
    config = _config(LibraryKind.DATA_ACCESS)

    assert config.kind == "data-access"
    assert "./queries/*" in resolve_exports(config)


def test_rejects_missing_config() -> None:
    with pytest.raises(TypeError, match="LibraryKindConfig"):
        resolve_exports(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("config", _ALL_CONFIGS)
def test_resolution_is_deterministic(config: LibraryKindConfig) -> None:
    first = resolve_exports(config)
    second = resolve_exports(config)

    assert first == second
    assert list(first) == list(second)
    assert first is not second


@pytest.mark.parametrize("config", _ALL_CONFIGS)
def test_kind_maps_have_no_wildcard_overlaps(config: LibraryKindConfig) -> None:
    assert find_wildcard_overlaps(resolve_exports(config)) == []


@pytest.mark.parametrize("config", _ALL_CONFIGS)
def test_kind_maps_validate_cleanly(config: LibraryKindConfig) -> None:
    assert validate_export_map(resolve_exports(config)) == []


@pytest.mark.parametrize("config", _ALL_CONFIGS)
def test_kind_map_keys_are_relative_subpaths(config: LibraryKindConfig) -> None:
    for key, entry in resolve_exports(config).items():
        assert key == "." or key.startswith("./")
        assert entry.import_target.startswith("./src/")
        assert entry.import_target.endswith(".ts")
        assert entry.import_target == entry.types_target
        assert key.endswith("/*") == ("*" in entry.import_target)
