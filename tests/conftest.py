"""Shared pytest fixtures for the projo test suite.

Provides reusable fixtures for:
- Output directories under ``tmp_path``
- A ``ProjectConfig`` factory for every archetype
- Template renderers backed by a throwaway template directory
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from projo.config import Archetype, ProjectConfig
from projo.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory projects are generated into (auto-cleanup)."""
    out = tmp_path / "work"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config(output_dir: Path) -> Callable[..., ProjectConfig]:
    """Factory building a valid ``ProjectConfig`` rooted in ``output_dir``."""

    def _make(
        archetype: Archetype | str = Archetype.API,
        name: str = "widget",
        module: str = "github.com/acme/widget",
        **overrides: object,
    ) -> ProjectConfig:
        fields: dict[str, object] = {
            "name": name,
            "module": module,
            "archetype": archetype,
            "description": "A sample widget service.",
            "author": "Ada Lovelace",
            "go_version": "1.24",
            "output_path": output_dir,
        }
        fields.update(overrides)
        return ProjectConfig(**fields)

    return _make


@pytest.fixture
def api_config(make_config) -> ProjectConfig:
    return make_config(Archetype.API)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """An empty template directory tests can fill with their own ``.j2`` files."""
    directory = tmp_path / "templates"
    directory.mkdir()
    return directory


@pytest.fixture
def custom_renderer(template_dir: Path) -> TemplateRenderer:
    """Renderer reading from ``template_dir`` instead of the packaged catalog."""
    return TemplateRenderer(template_dir)
