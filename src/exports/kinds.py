"""Library kinds and the per-library flags that shape its export map."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LibraryKind(str, Enum):
    """Architectural role of a generated library."""

    CONTRACT = "contract"
    DATA_ACCESS = "data-access"
    FEATURE = "feature"
    INFRA = "infra"
    PROVIDER = "provider"

    @classmethod
    def parse(cls, value: str | LibraryKind) -> LibraryKind | None:
        """Return the matching kind, or None for an unsupported value."""
        try:
            return cls(value)
        except ValueError:
            return None


class Platform(str, Enum):
    """Runtime platform a library targets."""

    NODE = "node"
    BROWSER = "browser"
    UNIVERSAL = "universal"
    EDGE = "edge"


class LibraryKindConfig(BaseModel):
    """Kind and feature flags for one library.

    ``kind`` stays a plain string so that an unsupported value reaches the
    resolver, which degrades it to the barrel-only map.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str = Field(description="Library kind (contract, data-access, ...)")
    name: str | None = Field(
        default=None,
        description="Library name used in import examples",
    )
    platform: Platform = Field(
        default=Platform.UNIVERSAL,
        description="Target runtime platform",
    )
    has_entities: bool = Field(
        default=False,
        description="Contract libraries: publish ./entities and ./entities/*",
    )
    entity_names: list[str] = Field(
        default_factory=list,
        description="Contract libraries: entity names under ./entities",
    )
    include_rpc: bool = Field(
        default=False,
        description="Feature libraries: publish ./rpc/handlers",
    )
    include_client_server: bool = Field(
        default=False,
        description="Feature libraries: generate both client and server code",
    )
    include_edge: bool = Field(
        default=False,
        description="Feature libraries: generate edge runtime code",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: object) -> object:
        if isinstance(v, LibraryKind):
            return v.value
        return v

    @property
    def library_kind(self) -> LibraryKind | None:
        return LibraryKind.parse(self.kind)


__all__ = ["LibraryKind", "LibraryKindConfig", "Platform"]
