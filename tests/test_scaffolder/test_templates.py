"""Tests for the Jinja2 template renderer.

Covers:
- Lenient rendering: unknown tokens survive verbatim
- Strict rendering: unresolved tokens raise and are all listed
- Values are inserted without escaping or re-rendering
- Determinism
- Every bundled template renders strictly with a full mapping
- render_to_file / list_templates / referenced_placeholders
"""

from __future__ import annotations

from pathlib import Path

import pytest

from phjvgen.scaffolder.errors import TemplateSyntaxError, UnresolvedPlaceholderError
from phjvgen.scaffolder.generator import ProjectConfig
from phjvgen.scaffolder.templates import Placeholder, TemplateRenderer, substitute
from phjvgen.scaffolder.writer import TreeWriter


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def custom_renderer(tmp_path: Path) -> TemplateRenderer:
    """Renderer over a throwaway template directory."""
    template_dir = tmp_path / "templates"
    (template_dir / "nested").mkdir(parents=True)
    (template_dir / "hello.txt.j2").write_text(
        "Hello {{PROJECT_NAME}} from {{GROUP_ID}}\n", encoding="utf-8"
    )
    (template_dir / "nested" / "partial.txt.j2").write_text(
        "{{GROUP_ID}} / {{MISSING_ONE}} / {{MISSING_TWO}}\n", encoding="utf-8"
    )
    return TemplateRenderer(template_dir)


@pytest.fixture
def full_mapping(project_config: ProjectConfig) -> dict[str, str]:
    return project_config.module_placeholders("user-profile")


# ---------------------------------------------------------------------------
# Placeholder enum
# ---------------------------------------------------------------------------


class TestPlaceholder:
    def test_token_form(self):
        assert Placeholder.GROUP_ID.token == "{{GROUP_ID}}"
        assert Placeholder.MODULE_CLASS.token == "{{MODULE_CLASS}}"

    def test_enum_keys_accepted_in_mapping(self):
        out = TemplateRenderer().render_string(
            "{{GROUP_ID}}", {Placeholder.GROUP_ID: "com.acme"}
        )
        assert out == "com.acme"


# ---------------------------------------------------------------------------
# Lenient rendering
# ---------------------------------------------------------------------------


class TestLenientRendering:
    def test_substitutes_known_tokens(self):
        out = TemplateRenderer().render_string(
            "<groupId>{{GROUP_ID}}</groupId>", {"GROUP_ID": "com.example"}
        )
        assert out == "<groupId>com.example</groupId>"

    def test_unknown_token_left_verbatim(self):
        out = TemplateRenderer().render_string(
            "{{GROUP_ID}}:{{UNKNOWN_TOKEN}}", {"GROUP_ID": "com.example"}
        )
        assert out == "com.example:{{UNKNOWN_TOKEN}}"

    def test_empty_mapping_returns_input(self):
        text = "package {{PACKAGE_NAME}};\n"
        assert TemplateRenderer().render_string(text, {}) == text

    def test_repeated_token_replaced_everywhere(self):
        out = TemplateRenderer().render_string(
            "{{ARTIFACT_ID}}-{{ARTIFACT_ID}}", {"ARTIFACT_ID": "app"}
        )
        assert out == "app-app"

    def test_value_is_not_escaped(self):
        out = TemplateRenderer().render_string(
            "{{PROJECT_DESCRIPTION}}", {"PROJECT_DESCRIPTION": "R&D <tools> \"x\""}
        )
        assert out == "R&D <tools> \"x\""

    def test_value_that_looks_like_token_is_not_rerendered(self):
        out = TemplateRenderer().render_string(
            "{{PROJECT_NAME}}",
            {"PROJECT_NAME": "{{GROUP_ID}}", "GROUP_ID": "com.example"},
        )
        assert out == "{{GROUP_ID}}"

    @pytest.mark.parametrize(
        "text",
        [
            "a {# note #} b",
            "a {{FOO-BAR}} b",
            "a {{foo.bar}} b",
            "a {{ b",
            "a {% x %} b",
            "a {{ GROUP_ID }} b",
            "a }} {{ b {%",
        ],
    )
    def test_other_text_left_verbatim(self, text):
        assert TemplateRenderer().render_string(text, {"GROUP_ID": "x"}) == text

    def test_known_token_beside_jinja_syntax(self):
        out = TemplateRenderer().render_string(
            "{% raw %}{{GROUP_ID}}{# c #}", {"GROUP_ID": "com.acme"}
        )
        assert out == "{% raw %}com.acme{# c #}"

    def test_substitute_function(self):
        assert substitute("{{A}}{{AB}}{{B}}", {"A": "1", "AB": "2"}) == "12{{B}}"

    def test_deterministic(self, renderer, project_config):
        mapping = project_config.placeholders()
        first = renderer.render("pom/parent.xml.j2", mapping)
        second = renderer.render("pom/parent.xml.j2", mapping)
        assert first == second

    def test_trailing_newline_kept(self, custom_renderer):
        out = custom_renderer.render(
            "hello.txt.j2", {"PROJECT_NAME": "Demo", "GROUP_ID": "com.example"}
        )
        assert out == "Hello Demo from com.example\n"


# ---------------------------------------------------------------------------
# Strict rendering
# ---------------------------------------------------------------------------


class TestStrictRendering:
    def test_missing_tokens_raise(self, custom_renderer):
        with pytest.raises(UnresolvedPlaceholderError) as exc_info:
            custom_renderer.render("nested/partial.txt.j2", {"GROUP_ID": "com.example"})
        assert exc_info.value.tokens == ["{{MISSING_ONE}}", "{{MISSING_TWO}}"]
        assert "nested/partial.txt.j2" in str(exc_info.value)

    def test_lenient_file_render_keeps_tokens(self, custom_renderer):
        out = custom_renderer.render(
            "nested/partial.txt.j2", {"GROUP_ID": "com.example"}, strict=False
        )
        assert out == "com.example / {{MISSING_ONE}} / {{MISSING_TWO}}\n"

    def test_strict_string(self):
        with pytest.raises(UnresolvedPlaceholderError):
            TemplateRenderer().render_string("{{PACKAGE_PATH}}/x", {}, strict=True)

    def test_strict_string_syntax_error(self):
        with pytest.raises(TemplateSyntaxError, match="<string>"):
            TemplateRenderer().render_string("{{PACKAGE_PATH", {"PACKAGE_PATH": "x"}, strict=True)

    def test_every_bundled_template_renders_strictly(self, renderer, full_mapping):
        templates = renderer.list_templates()
        assert templates, "no bundled templates found"
        for template_path in templates:
            out = renderer.render(template_path, full_mapping)
            assert "{{" not in out, template_path


# ---------------------------------------------------------------------------
# Files and discovery
# ---------------------------------------------------------------------------


class TestRenderToFile:
    def test_creates_parents(self, custom_renderer, tmp_path):
        out = tmp_path / "out" / "deep" / "hello.txt"
        result = custom_renderer.render_to_file(
            "hello.txt.j2", out, {"PROJECT_NAME": "Demo", "GROUP_ID": "com.example"}
        )
        assert result == out
        assert out.read_text(encoding="utf-8") == "Hello Demo from com.example\n"

    def test_with_writer_is_tracked(self, custom_renderer, tmp_path):
        out = tmp_path / "tracked.txt"
        with TreeWriter() as writer:
            custom_renderer.render_to_file(
                "hello.txt.j2",
                out,
                {"PROJECT_NAME": "Demo", "GROUP_ID": "com.example"},
                writer=writer,
            )
        assert writer.written == [out]


class TestListTemplates:
    def test_lists_relative_posix_paths(self, custom_renderer):
        assert custom_renderer.list_templates() == ["hello.txt.j2", "nested/partial.txt.j2"]

    def test_prefix(self, custom_renderer):
        assert custom_renderer.list_templates("nested") == ["nested/partial.txt.j2"]

    def test_missing_prefix(self, custom_renderer):
        assert custom_renderer.list_templates("nope") == []

    def test_bundled_pom_templates(self, renderer):
        poms = renderer.list_templates("pom")
        assert "pom/parent.xml.j2" in poms
        assert "pom/application-module.xml.j2" in poms

    def test_bundled_templates_use_known_placeholders(self, renderer):
        known = {p.value for p in Placeholder}
        for template_path in renderer.list_templates():
            assert renderer.referenced_placeholders(template_path) <= known, template_path


class TestReferencedPlaceholders:
    def test_parent_pom(self, renderer):
        names = renderer.referenced_placeholders("pom/parent.xml.j2")
        assert {"GROUP_ID", "ARTIFACT_ID", "VERSION"} <= names
        assert "MODULE_NAME" not in names

    def test_module_service(self, renderer):
        names = renderer.referenced_placeholders("java/module/Service.java.j2")
        assert names == {"PACKAGE_NAME", "MODULE_PACKAGE", "MODULE_CLASS"}
