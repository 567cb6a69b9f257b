"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and a ``ProjectStructure`` and materializes the
project on disk: the project root first, then every directory, then every
rendered file.  The first failure aborts the run; anything already written
stays on disk.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from jinja2 import TemplateError as JinjaTemplateError
from pydantic import BaseModel, ConfigDict, Field

from projo.config import ProjectConfig
from projo.errors import FileSystemError, TemplateError

from .archetypes import ProjectStructure, resolve
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """Summary of a successful generation run."""

    model_config = ConfigDict(frozen=True)

    project_root: Path
    directories: tuple[Path, ...] = Field(default=())
    files: tuple[Path, ...] = Field(default=())

    @property
    def directory_count(self) -> int:
        return len(self.directories)

    @property
    def file_count(self) -> int:
        return len(self.files)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materializes a project structure for one configuration.

    The structure defaults to the catalog entry for ``config.archetype`` and
    is resolved fresh for every generator instance.
    """

    def __init__(
        self,
        config: ProjectConfig,
        structure: ProjectStructure | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.structure = structure if structure is not None else resolve(config.archetype)
        self.renderer = renderer or TemplateRenderer()

    @property
    def project_root(self) -> Path:
        return self.config.project_root

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Generate the project structure on disk.

        Returns:
            A ``GenerationResult`` listing what was created.

        Raises:
            FileSystemError: A directory or file could not be created.
            TemplateError: A file path or body failed to parse or render.
        """
        context = self.config.template_context()
        root = self.project_root

        _make_directory(root)

        # 1. Directories, including ones no file lives in
        directories = []
        for rel in self.structure.directories:
            path = root / rel
            _make_directory(path)
            directories.append(path)

        # 2. Files
        files = []
        for rel_pattern, template_name in sorted(self.structure.files.items()):
            rel_path = self._resolve_file_path(rel_pattern, context)
            content = self._render_body(template_name, rel_path, context)
            path = root / rel_path
            _write_file(path, content)
            files.append(path)

        return GenerationResult(
            project_root=root,
            directories=tuple(directories),
            files=tuple(files),
        )

    def describe(self) -> dict[str, str]:
        """Return a label -> value summary of what will be generated."""
        return {
            "Project": self.config.name,
            "Module": self.config.module,
            "Type": self.config.archetype.value,
            "Go Version": self.config.go_version,
            "Output Path": str(self.project_root),
            "Directories": str(len(self.structure.directories)),
            "Files": str(len(self.structure.files)),
        }

    # -- Rendering ---------------------------------------------------------

    def _resolve_file_path(self, pattern: str, context: dict[str, str]) -> str:
        """Substitute placeholders embedded in a file path."""
        if "{" not in pattern:
            return pattern
        try:
            rel_path = self.renderer.render_string(pattern, context)
        except JinjaTemplateError as exc:
            raise TemplateError(pattern, exc) from exc
        pure = PurePosixPath(rel_path)
        if not rel_path or pure.is_absolute() or ".." in pure.parts:
            raise TemplateError(pattern, ValueError(f"resolved path {rel_path!r} escapes the project root"))
        return rel_path

    def _render_body(self, template_name: str, rel_path: str, context: dict[str, str]) -> str:
        """Parse and render the template for *rel_path*."""
        try:
            return self.renderer.render(template_name, context)
        except JinjaTemplateError as exc:
            raise TemplateError(rel_path, exc) from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _make_directory(path: Path) -> None:
    """Create *path* and its parents; an existing directory is fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise FileSystemError("create directory", path, exc) from exc


def _write_file(path: Path, content: str) -> None:
    """Create or truncate *path* and write *content*."""
    try:
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
    except (OSError, UnicodeError) as exc:
        raise FileSystemError("write file", path, exc) from exc
