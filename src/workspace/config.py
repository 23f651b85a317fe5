from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from exports.examples import DEFAULT_SCOPE, generate_import_examples
from exports.kinds import LibraryKindConfig
from exports.merge import merge_exports
from exports.models import ExportEntry, ExportMap
from exports.resolver import resolve_exports

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "exportmap.toml"


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


class LibraryConfig(LibraryKindConfig):
    """One library entry: kind flags plus hand-authored export overrides."""

    overrides: dict[str, ExportEntry] = Field(
        default_factory=dict,
        description="Export entries applied on top of the resolved map",
    )

    def export_map(self) -> ExportMap:
        """Resolved exports with the hand-authored overrides merged on top."""
        return merge_exports(resolve_exports(self), self.overrides)


class WorkspaceConfig(BaseModel):
    """Configuration for export map resolution across a workspace."""

    model_config = ConfigDict(extra="forbid")

    scope: str = Field(
        default=DEFAULT_SCOPE,
        description="Package scope used in import examples (e.g. '@acme')",
    )
    library: list[LibraryConfig] = Field(
        default_factory=list,
        description="Libraries in the workspace",
    )

    @field_validator("scope")
    @classmethod
    def validate_scope(cls, v: str) -> str:
        if not v.startswith("@") or len(v) < 2 or "/" in v:
            msg = f"scope must look like '@name', got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("library")
    @classmethod
    def validate_unique_names(cls, v: list[LibraryConfig]) -> list[LibraryConfig]:
        seen: set[str] = set()
        for lib in v:
            if lib.name is None:
                continue
            if lib.name in seen:
                msg = f"Duplicate library name '{lib.name}'"
                raise ValueError(msg)
            seen.add(lib.name)
        return v

    def get_library(self, name: str) -> LibraryConfig | None:
        for lib in self.library:
            if lib.name == name:
                return lib
        return None

    def import_examples(self, name: str) -> str:
        """README import examples for one library under the workspace scope.

        Raises:
            KeyError: If no library with that name is configured.
        """
        lib = self.get_library(name)
        if lib is None:
            msg = f"No library named '{name}' in workspace config"
            raise KeyError(msg)
        return generate_import_examples(lib, scope=self.scope)


def load_config(root: Path) -> WorkspaceConfig:
    """Load configuration from exportmap.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug("No %s under %s; using defaults", CONFIG_FILENAME, root)
        return WorkspaceConfig()

    try:
        with config_path.open("rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        config = WorkspaceConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug("Loaded %d libraries from %s", len(config.library), config_path)
    return config
