"""projo configuration.

Typed configuration for a single generation run.  ``ProjectConfig`` is the
immutable record every template is rendered against; ``Defaults`` holds the
values the CLI falls back to when a flag is omitted.  All models use Pydantic
v2 so invalid input is rejected at construction time.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from projo.errors import ConfigurationError, PathResolutionError


DEFAULT_GO_VERSION = "1.24"


# ---------------------------------------------------------------------------
# Archetypes
# ---------------------------------------------------------------------------


class Archetype(str, Enum):
    """The kinds of project the generator knows how to lay out."""

    API = "api"
    CLI = "cli"
    MICROSERVICE = "microservice"
    LIBRARY = "library"


ARCHETYPE_ALIASES: dict[str, Archetype] = {
    "api": Archetype.API,
    "cli": Archetype.CLI,
    "microservice": Archetype.MICROSERVICE,
    "micro": Archetype.MICROSERVICE,
    "library": Archetype.LIBRARY,
    "lib": Archetype.LIBRARY,
}


def parse_archetype(value: str | Archetype) -> Archetype:
    """Map free-text archetype input (including synonyms) to an ``Archetype``.

    Raises:
        ConfigurationError: If *value* names no known archetype.
    """
    if isinstance(value, Archetype):
        return value
    key = str(value).strip().lower()
    try:
        return ARCHETYPE_ALIASES[key]
    except KeyError:
        choices = ", ".join(a.value for a in Archetype)
        raise ConfigurationError(
            f"invalid project type {value!r}. Must be one of: {choices}"
        ) from None


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Everything needed to generate one project.

    Constructed once from user input and never mutated.  The field names are
    the placeholder names available to every template.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name; also the project root directory name")
    module: str = Field(..., description="Go module path, e.g. github.com/user/project")
    archetype: Archetype = Field(default=Archetype.API, description="Project archetype")
    description: str = Field(default="", description="Free-text project description")
    author: str = Field(default="", description="Author name")
    go_version: str = Field(default=DEFAULT_GO_VERSION, description="Target Go toolchain version")
    output_path: Path = Field(..., description="Absolute directory the project is created in")

    @field_validator("name", "module")
    @classmethod
    def _require_non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("name", "module", "description", "author", "go_version")
    @classmethod
    def _require_utf8(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text") from None
        return value

    @field_validator("name")
    @classmethod
    def _single_path_component(cls, value: str) -> str:
        if "/" in value or "\\" in value or "\x00" in value or value in (".", ".."):
            raise ValueError("must be a single directory name")
        return value

    @field_validator("archetype", mode="before")
    @classmethod
    def _canonical_archetype(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Archetype):
            return ARCHETYPE_ALIASES.get(value.strip().lower(), value)
        return value

    @field_validator("go_version")
    @classmethod
    def _default_go_version(cls, value: str) -> str:
        return value.strip() or DEFAULT_GO_VERSION

    @field_validator("output_path")
    @classmethod
    def _require_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError("must be an absolute path")
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def project_root(self) -> Path:
        """Directory the project tree is generated into."""
        return self.output_path / self.name

    def template_context(self) -> dict[str, str]:
        """Return the fields as plain strings for template substitution."""
        return self.model_dump(mode="json")


# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------


class Defaults(BaseModel):
    """Fallback values for optional CLI flags."""

    archetype: str = Field(default=Archetype.API.value)
    go_version: str = Field(default=DEFAULT_GO_VERSION)
    output_dir: str = Field(default=".")
    author: str = Field(default="")

    @classmethod
    def from_env(cls) -> "Defaults":
        """Build ``Defaults`` from environment variables.

        Recognised variables (all optional):
            PROJO_ARCHETYPE, PROJO_GO_VERSION, PROJO_OUTPUT_DIR, PROJO_AUTHOR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PROJO_ARCHETYPE"):
            kwargs["archetype"] = os.environ["PROJO_ARCHETYPE"]
        if os.environ.get("PROJO_GO_VERSION"):
            kwargs["go_version"] = os.environ["PROJO_GO_VERSION"]
        if os.environ.get("PROJO_OUTPUT_DIR"):
            kwargs["output_dir"] = os.environ["PROJO_OUTPUT_DIR"]
        if os.environ.get("PROJO_AUTHOR"):
            kwargs["author"] = os.environ["PROJO_AUTHOR"]
        return cls(**kwargs)


# ---------------------------------------------------------------------------
# Construction boundary
# ---------------------------------------------------------------------------


def resolve_output_path(path: str | Path) -> Path:
    """Expand ``~`` and make *path* absolute against the working directory.

    Raises:
        PathResolutionError: If the working directory cannot be determined.
    """
    try:
        return Path(os.path.abspath(os.path.expanduser(str(path))))
    except OSError as exc:
        raise PathResolutionError(path, exc) from exc


def build_project_config(
    name: str,
    module: str,
    archetype: str | Archetype = Archetype.API,
    description: str = "",
    author: str = "",
    go_version: str = DEFAULT_GO_VERSION,
    output_path: str | Path = ".",
) -> ProjectConfig:
    """Validate raw user input and return a canonical ``ProjectConfig``.

    Raises:
        ConfigurationError: On a missing required field or unknown archetype.
        PathResolutionError: If *output_path* cannot be made absolute.
    """
    if not name.strip():
        raise ConfigurationError("project name is required")
    if not module.strip():
        raise ConfigurationError("module path is required")

    canonical = parse_archetype(archetype)
    absolute = resolve_output_path(output_path)

    try:
        return ProjectConfig(
            name=name,
            module=module,
            archetype=canonical,
            description=description,
            author=author,
            go_version=go_version,
            output_path=absolute,
        )
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc


def _format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ``ValidationError`` into one readable line."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "config"
        parts.append(f"{loc}: {error['msg']}")
    return "invalid project configuration: " + "; ".join(parts)
