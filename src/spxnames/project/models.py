"""Pydantic snapshot models of a project's named assets.

These satisfy the read-only scope protocols in :mod:`spxnames.scopes` and are
what the project file reader produces.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_assets(v: Any) -> Any:
    """Accept bare strings as shorthand for ``{"name": ...}``."""
    if v is None:
        return []
    if isinstance(v, list):
        return [{"name": item} if isinstance(item, str) else item for item in v]
    return v


class Asset(BaseModel):
    """A named child entity, such as a costume, sound or backdrop."""

    model_config = ConfigDict(frozen=True)

    name: str


class SpriteSnapshot(BaseModel):
    """A sprite and its costumes."""

    model_config = ConfigDict(frozen=True)

    name: str
    costumes: list[Asset] = Field(default_factory=list)

    @field_validator("costumes", mode="before")
    @classmethod
    def parse_costumes(cls, v: Any) -> Any:
        return _coerce_assets(v)


class StageSnapshot(BaseModel):
    """The stage and its backdrops."""

    model_config = ConfigDict(frozen=True)

    backdrops: list[Asset] = Field(default_factory=list)

    @field_validator("backdrops", mode="before")
    @classmethod
    def parse_backdrops(cls, v: Any) -> Any:
        return _coerce_assets(v)


class ProjectSnapshot(BaseModel):
    """A project's sprites, sounds and stage."""

    model_config = ConfigDict(frozen=True)

    sprites: list[SpriteSnapshot] = Field(default_factory=list)
    sounds: list[Asset] = Field(default_factory=list)
    stage: StageSnapshot = Field(default_factory=StageSnapshot)

    @field_validator("sprites", mode="before")
    @classmethod
    def parse_sprites(cls, v: Any) -> Any:
        # A sprite given as a bare string has no costumes
        return _coerce_assets(v)

    @field_validator("sounds", mode="before")
    @classmethod
    def parse_sounds(cls, v: Any) -> Any:
        return _coerce_assets(v)

    @field_validator("stage", mode="before")
    @classmethod
    def parse_stage(cls, v: Any) -> Any:
        return {} if v is None else v

    def get_sprite(self, name: str) -> Optional[SpriteSnapshot]:
        """Return the sprite with the given name, if any."""
        for sprite in self.sprites:
            if sprite.name == name:
                return sprite
        return None
