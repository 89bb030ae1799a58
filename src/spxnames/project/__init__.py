"""Project snapshots and the project file reader."""

from spxnames.project.models import Asset, ProjectSnapshot, SpriteSnapshot, StageSnapshot
from spxnames.project.reader import ProjectFileError, read_project

__all__ = [
    "Asset",
    "ProjectSnapshot",
    "SpriteSnapshot",
    "StageSnapshot",
    "ProjectFileError",
    "read_project",
]
