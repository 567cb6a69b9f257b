"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``projo/scaffolder/templates/`` directory and renders them against a project's
configuration.  Placeholders bind by exact field name: rendering a template
that references an unknown name raises ``jinja2.UndefinedError`` rather than
producing an empty string, and malformed placeholder syntax raises
``jinja2.TemplateSyntaxError`` when the template is parsed.

``TemplateRenderer.list_templates`` enumerates the packaged catalog so the
archetype tables can be audited against the templates that actually ship.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Output is byte-for-byte what the template says apart
    from substituted placeholders: no autoescaping, trailing newlines kept.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    # -- Loading -----------------------------------------------------------

    def load(self, template_name: str) -> Template:
        """Load and parse the template at *template_name*.

        Raises:
            jinja2.TemplateNotFound: If no such template exists.
            jinja2.TemplateSyntaxError: If the template is malformed.
        """
        return self.env.get_template(template_name)

    # -- Rendering ---------------------------------------------------------

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_name: Path relative to the template directory (e.g.
                ``"common/README.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        return self.load(template_name).render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Used for file paths that embed placeholders, e.g. ``{{ name }}.go``.
        """
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and use forward
        slashes, matching the names accepted by :meth:`render`.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )
