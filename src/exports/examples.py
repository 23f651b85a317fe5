"""README import examples for each library kind."""

from __future__ import annotations

from exports.kinds import LibraryKind, LibraryKindConfig, Platform
from exports.utils import to_kebab_case

DEFAULT_SCOPE = "@myorg"

_DEFAULT_NAMES: dict[LibraryKind, str] = {
    LibraryKind.CONTRACT: "product",
    LibraryKind.DATA_ACCESS: "user",
    LibraryKind.FEATURE: "user",
    LibraryKind.INFRA: "database",
    LibraryKind.PROVIDER: "cache",
}

_CLIENT_PLATFORMS = frozenset({Platform.BROWSER, Platform.UNIVERSAL})
_SERVER_PLATFORMS = frozenset({Platform.NODE, Platform.UNIVERSAL})


def _package(scope: str, kind: LibraryKind, name: str) -> str:
    return f"{scope}/{kind.value}-{to_kebab_case(name)}"


def _contract_examples(package: str, config: LibraryKindConfig) -> list[str]:
    if not config.has_entities:
        return [
            "// Error and port imports",
            f"import {{ NotFoundError }} from '{package}/errors'",
            f"import {{ Repository }} from '{package}/ports'",
            "",
            "// Type-only import (zero runtime overhead)",
            f"import type * as Types from '{package}/types'",
        ]

    entities = config.entity_names or ["Product", "Category"]
    first = entities[0]
    return [
        "// Granular entity import (optimal tree-shaking)",
        f"import {{ {first} }} from '{package}/entities/{to_kebab_case(first)}'",
        "",
        "// Barrel import (convenience)",
        f"import {{ {', '.join(entities)} }} from '{package}/entities'",
        "",
        "// Type-only import (zero runtime overhead)",
        f"import type {{ {first} }} from '{package}/types'",
    ]


def _data_access_examples(package: str, config: LibraryKindConfig) -> list[str]:
    return [
        "// Granular operation import (only bundles create logic)",
        f"import {{ create }} from '{package}/repository/operations/create'",
        "",
        "// Specific query builder",
        f"import {{ buildFindByIdQuery }} from '{package}/queries/find-queries'",
        "",
        "// Type-only import",
        f"import type * as Types from '{package}/types'",
    ]


def _feature_examples(package: str, config: LibraryKindConfig) -> list[str]:
    lines: list[str] = []
    if config.platform in _CLIENT_PLATFORMS or config.include_client_server:
        lines.extend(
            [
                "// Client hooks via the barrel (tree-shaken per platform)",
                f"import {{ useUser }} from '{package}'",
                "",
                "// Type-only import",
                f"import type * as Types from '{package}/types'",
            ]
        )
    if config.platform in _SERVER_PLATFORMS or config.include_client_server:
        if lines:
            lines.append("")
        lines.extend(
            [
                "// Server service via the barrel",
                f"import {{ Service }} from '{package}'",
            ]
        )
    if config.include_rpc:
        if lines:
            lines.append("")
        lines.extend(
            [
                "// Single RPC handler",
                f"import {{ handlers }} from '{package}/rpc/handlers/create'",
            ]
        )
    return lines


def _infra_examples(package: str, config: LibraryKindConfig) -> list[str]:
    return [
        "// Service import",
        f"import {{ Service }} from '{package}/service'",
        "",
        "// Specific provider",
        f"import {{ PostgresProvider }} from '{package}/providers/postgres'",
        "",
        "// Type-only import",
        f"import type * as Types from '{package}/types'",
    ]


def _provider_examples(package: str, config: LibraryKindConfig) -> list[str]:
    return [
        "// Granular operation import",
        f"import {{ create }} from '{package}/service/create'",
        "",
        "// Type-only import",
        f"import type * as Types from '{package}/types'",
    ]


_EXAMPLE_BUILDERS = {
    LibraryKind.CONTRACT: _contract_examples,
    LibraryKind.DATA_ACCESS: _data_access_examples,
    LibraryKind.FEATURE: _feature_examples,
    LibraryKind.INFRA: _infra_examples,
    LibraryKind.PROVIDER: _provider_examples,
}


def generate_import_examples(
    config: LibraryKindConfig, scope: str = DEFAULT_SCOPE
) -> str:
    """Render import snippets for a library's README.

    Every import path in the output is served by the library's resolved
    export map. Unsupported kinds produce an empty string.
    """
    kind = config.library_kind
    if kind is None:
        return ""

    package = _package(scope, kind, config.name or _DEFAULT_NAMES[kind])
    return "\n".join(_EXAMPLE_BUILDERS[kind](package, config))


__all__ = ["DEFAULT_SCOPE", "generate_import_examples"]
