"""Tests for the Jinja2 TemplateRenderer.

Covers:
- Placeholder substitution against a project context
- Strict binding: unknown placeholders fail instead of rendering empty
- Parse-time detection of malformed placeholder syntax
- Trailing newline and literal-text preservation
- Template discovery via list_templates
"""

from __future__ import annotations

import jinja2
import pytest

from projo.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# render_string
# ---------------------------------------------------------------------------


class TestRenderString:
    def test_name_placeholder(self):
        out = TemplateRenderer().render_string("{{ name }}", {"name": "widget"})
        assert out == "widget"
        assert "{{" not in out

    def test_multiple_fields(self):
        out = TemplateRenderer().render_string(
            "module {{ module }}\n\ngo {{ go_version }}\n",
            {"module": "example.com/widget", "go_version": "1.24"},
        )
        assert out == "module example.com/widget\n\ngo 1.24\n"

    def test_unknown_placeholder_raises(self):
        with pytest.raises(jinja2.UndefinedError):
            TemplateRenderer().render_string("{{ nickname }}", {"name": "widget"})

    def test_malformed_placeholder_raises(self):
        with pytest.raises(jinja2.TemplateSyntaxError):
            TemplateRenderer().render_string("{{ name ", {"name": "widget"})

    def test_no_autoescape(self):
        out = TemplateRenderer().render_string("{{ description }}", {"description": "<a & b>"})
        assert out == "<a & b>"

    def test_go_syntax_left_alone(self):
        body = 'fmt.Printf("%+v\\n", client)\nmap[string]string{\n\t"k": "v",\n}\n'
        assert TemplateRenderer().render_string(body, {}) == body


# ---------------------------------------------------------------------------
# render (file-backed)
# ---------------------------------------------------------------------------


class TestRender:
    def test_renders_from_template_dir(self, template_dir, custom_renderer):
        (template_dir / "hello.txt.j2").write_text("hello {{ name }}\n", encoding="utf-8")
        assert custom_renderer.render("hello.txt.j2", {"name": "orders"}) == "hello orders\n"

    def test_keeps_trailing_newline(self, template_dir, custom_renderer):
        (template_dir / "two.j2").write_text("a\n\n", encoding="utf-8")
        assert custom_renderer.render("two.j2", {}) == "a\n\n"

    def test_missing_template(self, custom_renderer):
        with pytest.raises(jinja2.TemplateNotFound):
            custom_renderer.render("nope.j2", {})

    def test_load_detects_syntax_error(self, template_dir, custom_renderer):
        (template_dir / "bad.j2").write_text("{% if %}", encoding="utf-8")
        with pytest.raises(jinja2.TemplateSyntaxError):
            custom_renderer.load("bad.j2")

    def test_packaged_readme(self):
        out = TemplateRenderer().render(
            "common/README.md.j2",
            {
                "name": "orders",
                "module": "example.com/orders",
                "description": "Order intake",
                "author": "Ada",
                "go_version": "1.24",
            },
        )
        assert out.startswith("# orders\n\nOrder intake\n")
        assert "go get example.com/orders" in out
        assert "- Go 1.24 or higher" in out


# ---------------------------------------------------------------------------
# list_templates
# ---------------------------------------------------------------------------


class TestListTemplates:
    def test_sorted_relative_posix_paths(self, template_dir, custom_renderer):
        (template_dir / "b").mkdir()
        (template_dir / "b" / "x.j2").write_text("", encoding="utf-8")
        (template_dir / "a.j2").write_text("", encoding="utf-8")
        (template_dir / "ignored.txt").write_text("", encoding="utf-8")
        assert custom_renderer.list_templates() == ["a.j2", "b/x.j2"]

    def test_prefix(self, template_dir, custom_renderer):
        (template_dir / "b").mkdir()
        (template_dir / "b" / "x.j2").write_text("", encoding="utf-8")
        (template_dir / "a.j2").write_text("", encoding="utf-8")
        assert custom_renderer.list_templates("b") == ["b/x.j2"]

    def test_missing_prefix(self, custom_renderer):
        assert custom_renderer.list_templates("nothing-here") == []

    def test_packaged_catalog(self):
        names = TemplateRenderer().list_templates("common")
        assert names == ["common/README.md.j2", "common/gitignore.j2", "common/go.mod.j2"]
