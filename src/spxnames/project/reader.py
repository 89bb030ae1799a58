"""Project file reader."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from spxnames.project.models import ProjectSnapshot

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class ProjectFileError(ValueError):
    """Raised when a project file cannot be read or parsed."""

    pass


def read_project(project_path: Path) -> ProjectSnapshot:
    """Read a project snapshot from a JSON or YAML file.

    The file lists the project's named assets:
    {
        "sprites": [{"name": "Hero", "costumes": ["idle", "run"]}],
        "sounds": ["jump"],
        "stage": {"backdrops": ["sky"]}
    }

    Args:
        project_path: Path to the project file. ``.yaml``/``.yml`` files are
            parsed as YAML, anything else as JSON.

    Returns:
        Parsed ProjectSnapshot.

    Raises:
        ProjectFileError: If the file cannot be read, parsed or validated.
    """
    try:
        content = project_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectFileError(f"Failed to read {project_path}: {e}") from e

    try:
        if project_path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ProjectFileError(f"Failed to parse {project_path}: {e}") from e

    # An empty YAML document is an empty project
    if data is None:
        data = {}

    try:
        project = ProjectSnapshot.model_validate(data)
    except ValidationError as e:
        raise ProjectFileError(f"Invalid project file {project_path}: {e}") from e

    logger.debug(
        f"Loaded project {project_path}: {len(project.sprites)} sprites, "
        f"{len(project.sounds)} sounds, {len(project.stage.backdrops)} backdrops"
    )
    return project
