"""projo scaffolder -- resolves archetype layouts and generates projects.

Quick usage::

    from projo.config import build_project_config
    from projo.scaffolder import ProjectGenerator

    config = build_project_config(
        name="orders",
        module="example.com/orders",
        archetype="cli",
        output_path="/tmp/work",
    )
    result = ProjectGenerator(config).generate()
"""

from projo.scaffolder.archetypes import ProjectStructure, available_archetypes, resolve
from projo.scaffolder.generator import GenerationResult, ProjectGenerator
from projo.scaffolder.templates import TemplateRenderer

__all__ = [
    "GenerationResult",
    "ProjectGenerator",
    "ProjectStructure",
    "TemplateRenderer",
    "available_archetypes",
    "resolve",
]
