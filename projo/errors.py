"""Exception hierarchy for projo.

Every failure the generator can report derives from ``ScaffoldError`` so that
the CLI has a single type to catch and turn into a nonzero exit status.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all projo errors."""


class ConfigurationError(ScaffoldError):
    """Raised when the project configuration is incomplete or invalid."""


class PathResolutionError(ScaffoldError):
    """Raised when the output path cannot be made absolute."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"invalid output path {self.path!r}: {cause}")


class FileSystemError(ScaffoldError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, action: str, path: Path, cause: BaseException) -> None:
        self.action = action
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"failed to {action} {self.path}: {cause}")


class TemplateError(ScaffoldError):
    """Raised when a file's template fails to parse or render."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to render template for {path}: {cause}")
