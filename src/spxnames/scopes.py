"""Read-only views of the containers that asset names must be unique within.

The editor owns the real project, sprite and stage objects. Anything exposing
the attributes below can be passed in; nothing here mutates it.
"""

from collections.abc import Sequence
from typing import Protocol


class NamedAsset(Protocol):
    """Any child entity with a name."""

    @property
    def name(self) -> str: ...


class ProjectScope(Protocol):
    """Project view: sprites and sounds share one namespace."""

    @property
    def sprites(self) -> Sequence[NamedAsset]: ...

    @property
    def sounds(self) -> Sequence[NamedAsset]: ...


class SpriteScope(Protocol):
    """Sprite view, the scope of costume names."""

    @property
    def costumes(self) -> Sequence[NamedAsset]: ...


class StageScope(Protocol):
    """Stage view, the scope of backdrop names."""

    @property
    def backdrops(self) -> Sequence[NamedAsset]: ...


def has_named(assets: Sequence[NamedAsset], name: str) -> bool:
    """Check whether any asset in the sequence has exactly this name."""
    return any(asset.name == name for asset in assets)
