"""projo -- Go project structure generator.

Scaffolds new Go projects from a fixed catalog of per-archetype directory
layouts and Jinja2 file templates.

Modules:
- ``config``: builds the immutable ``ProjectConfig`` from user input
- ``scaffolder``: archetype catalog, template renderer and the generator
- ``cli``: ``projo gen`` / ``projo version`` command-line front end
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "1.0.0"
