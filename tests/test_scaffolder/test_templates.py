"""Tests for the Jinja2 TemplateRenderer and its filters."""

from __future__ import annotations

import json

import pytest
from jinja2 import UndefinedError

from stackgen.scaffolder.templates import TemplateRenderer, has_unresolved_markers

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestRenderString:
    def test_substitutes_variables(self, renderer):
        assert renderer.render_string("# {{ project_name }}", {"project_name": "svc"}) == "# svc"

    def test_no_html_escaping(self, renderer):
        result = renderer.render_string('"{{ value }}"', {"value": 'a&b<"c">'})
        assert result == '"a&b<"c">"'

    def test_keeps_trailing_newline(self, renderer):
        assert renderer.render_string("x\n", {}) == "x\n"

    def test_undefined_variable_raises(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render_string("{{ missing }}", {})

    def test_block_tags_leave_no_blank_lines(self, renderer):
        source = "(\n{% for item in items %}\n  {{ item }}\n{% endfor %}\n)\n"
        assert renderer.render_string(source, {"items": ["a", "b"]}) == "(\n  a\n  b\n)\n"


class TestJsonObjectFilter:
    def test_indents_nested_object(self, renderer):
        source = '{\n  "deps": {{ deps | json_object(2) }}\n}\n'
        result = renderer.render_string(source, {"deps": [("a", "1"), ("b", "2")]})
        assert result == '{\n  "deps": {\n    "a": "1",\n    "b": "2"\n  }\n}\n'
        assert json.loads(result) == {"deps": {"a": "1", "b": "2"}}

    def test_empty(self, renderer):
        assert renderer.render_string("{{ deps | json_object(2) }}", {"deps": []}) == "{}"

    def test_preserves_order(self, renderer):
        result = renderer.render_string("{{ deps | json_object }}", {"deps": [("z", "1"), ("a", "2")]})
        assert list(json.loads(result)) == ["z", "a"]


class TestMarkers:
    @pytest.mark.parametrize("text", ["{{ x }}", "a }} b", "{% if %}", "50%}"])
    def test_detects_markers(self, text):
        assert has_unresolved_markers(text)

    @pytest.mark.parametrize("text", ["", "plain", "struct{}", "{ a: { b: 1 } }", "100%"])
    def test_clean_text(self, text):
        assert not has_unresolved_markers(text)
