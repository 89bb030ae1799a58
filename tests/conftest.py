"""
Pytest configuration and shared fixtures for spxnames tests.
"""

import json
import logging

import pytest

from spxnames.config.settings import reset_settings
from spxnames.project.models import ProjectSnapshot

SETTINGS_ENV_VARS = ("DEBUG_MODE", "SPXNAMES_LOCALE", "SPXNAMES_PROJECT", "SPXNAMES_RESERVED")

PROJECT_DATA = {
    "sprites": [
        {"name": "Foo", "costumes": ["idle", "walk"]},
        {"name": "Sprite", "costumes": []},
    ],
    "sounds": ["jump", "Boing"],
    "stage": {"backdrops": ["sky", "backdrop"]},
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate settings and the package logger between tests."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()

    yield

    reset_settings()
    logger = logging.getLogger("spxnames")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def project():
    """A project with two sprites, two sounds and two backdrops."""
    return ProjectSnapshot.model_validate(PROJECT_DATA)


@pytest.fixture
def sprite(project):
    """The sprite named Foo, with costumes idle and walk."""
    return project.get_sprite("Foo")


@pytest.fixture
def stage(project):
    """The stage, with backdrops sky and backdrop."""
    return project.stage


@pytest.fixture
def project_file(tmp_path):
    """The sample project written as a JSON file."""
    path = tmp_path / "project.json"
    path.write_text(json.dumps(PROJECT_DATA), encoding="utf-8")
    return path
