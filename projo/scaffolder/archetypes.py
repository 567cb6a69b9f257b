"""Per-archetype project layouts.

Each archetype maps to a fixed ``ProjectStructure``: the directories to create
and the files to render, keyed by path relative to the project root.  File
values are template names under ``projo/scaffolder/templates/``.  File paths
may contain placeholders themselves (``{{ name }}.go``); the generator renders
those before writing.

The catalog is plain data so adding an archetype means adding a table entry,
not a code path.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from projo.config import Archetype
from projo.errors import ConfigurationError


# ---------------------------------------------------------------------------
# Structure model
# ---------------------------------------------------------------------------


class ProjectStructure(BaseModel):
    """Directories and file templates making up one project layout."""

    model_config = ConfigDict(frozen=True)

    directories: tuple[str, ...] = Field(default=(), description="Directories relative to the project root")
    files: dict[str, str] = Field(
        default_factory=dict,
        description="Relative file path (may contain placeholders) -> template name",
    )

    @field_validator("directories")
    @classmethod
    def _relative_directories(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for path in value:
            _check_relative(path)
        return value

    @field_validator("files")
    @classmethod
    def _relative_files(cls, value: dict[str, str]) -> dict[str, str]:
        for path in value:
            _check_relative(path)
        return value


def _check_relative(path: str) -> None:
    pure = PurePosixPath(path)
    if not path or pure.is_absolute() or ".." in pure.parts:
        raise ValueError(f"path must be relative and stay inside the project: {path!r}")


# ---------------------------------------------------------------------------
# Shared file sets
# ---------------------------------------------------------------------------

_COMMON_FILES: dict[str, str] = {
    "go.mod": "common/go.mod.j2",
    "README.md": "common/README.md.j2",
    ".gitignore": "common/gitignore.j2",
}

_LAYERED_FILES: dict[str, str] = {
    "internal/config/config.go": "shared/config.go.j2",
    "internal/handler/handler.go": "shared/handler.go.j2",
    "internal/service/service.go": "shared/service.go.j2",
    "internal/repository/repository.go": "shared/repository.go.j2",
    "internal/model/model.go": "shared/model.go.j2",
}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

ARCHETYPE_CATALOG: dict[Archetype, ProjectStructure] = {
    Archetype.API: ProjectStructure(
        directories=(
            "cmd/api",
            "internal/handler",
            "internal/service",
            "internal/repository",
            "internal/model",
            "internal/middleware",
            "internal/config",
            "pkg/response",
            "pkg/validator",
            "migrations",
            "docs",
            "scripts",
        ),
        files={
            **_COMMON_FILES,
            "Makefile": "api/Makefile.j2",
            "cmd/api/main.go": "api/main.go.j2",
            **_LAYERED_FILES,
            "internal/middleware/middleware.go": "shared/middleware.go.j2",
            "pkg/response/response.go": "shared/response.go.j2",
            "docs/API.md": "api/API.md.j2",
        },
    ),
    Archetype.CLI: ProjectStructure(
        directories=(
            "cmd",
            "internal/command",
            "internal/config",
            "pkg/utils",
            "docs",
        ),
        files={
            **_COMMON_FILES,
            "Makefile": "cli/Makefile.j2",
            "cmd/main.go": "cli/main.go.j2",
            "internal/command/root.go": "cli/root.go.j2",
            "internal/config/config.go": "shared/config.go.j2",
        },
    ),
    Archetype.MICROSERVICE: ProjectStructure(
        directories=(
            "cmd/server",
            "internal/handler",
            "internal/service",
            "internal/repository",
            "internal/model",
            "internal/middleware",
            "internal/config",
            "pkg/grpc",
            "pkg/http",
            "proto",
            "migrations",
            "deployments/docker",
            "deployments/k8s",
            "scripts",
        ),
        files={
            **_COMMON_FILES,
            "Makefile": "microservice/Makefile.j2",
            "Dockerfile": "microservice/Dockerfile.j2",
            "cmd/server/main.go": "microservice/main.go.j2",
            **_LAYERED_FILES,
            "deployments/k8s/deployment.yaml": "microservice/deployment.yaml.j2",
            "deployments/k8s/service.yaml": "microservice/service.yaml.j2",
        },
    ),
    Archetype.LIBRARY: ProjectStructure(
        directories=(
            "internal",
            "examples",
            "docs",
        ),
        files={
            **_COMMON_FILES,
            "Makefile": "library/Makefile.j2",
            "{{ name }}.go": "library/library.go.j2",
            "examples/main.go": "library/example_main.go.j2",
            "docs/USAGE.md": "library/USAGE.md.j2",
        },
    ),
}

ARCHETYPE_DESCRIPTIONS: dict[Archetype, str] = {
    Archetype.API: "REST API server with HTTP handlers",
    Archetype.CLI: "Command-line tool",
    Archetype.MICROSERVICE: "Microservice with HTTP/gRPC and Docker/K8s configs",
    Archetype.LIBRARY: "Reusable Go library package",
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve(archetype: Archetype | str) -> ProjectStructure:
    """Return the structure for *archetype*.

    Only canonical tags are accepted; synonyms must be mapped beforehand
    (see ``projo.config.parse_archetype``).  The returned structure is a deep
    copy, so callers cannot alter the catalog.

    Raises:
        ConfigurationError: If *archetype* is not a canonical archetype tag.
    """
    try:
        key = Archetype(archetype)
    except ValueError:
        raise ConfigurationError(f"unknown archetype: {archetype!r}") from None
    return ARCHETYPE_CATALOG[key].model_copy(deep=True)


def available_archetypes() -> dict[str, str]:
    """Return ``{tag: description}`` for every archetype."""
    return {a.value: ARCHETYPE_DESCRIPTIONS[a] for a in Archetype}
