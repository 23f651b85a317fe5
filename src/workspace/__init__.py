"""Workspace configuration for export map resolution."""

from workspace.config import (
    ConfigError,
    LibraryConfig,
    WorkspaceConfig,
    load_config,
)

__all__ = [
    "ConfigError",
    "LibraryConfig",
    "WorkspaceConfig",
    "load_config",
]
