"""Tests for blueprint building blocks.

Covers:
- Option predicates and their combination
- Fragment concatenation order
- The ``blueprint`` shorthand
- TemplateCatalog selection and render context
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from stackgen.models import ProjectOptions, TemplateType
from stackgen.scaffolder.blueprints import (
    DependencyGroup,
    FileBlueprint,
    Fragment,
    TemplateCatalog,
    all_of,
    always,
    blueprint,
    when_linter,
    when_tests,
)

pytestmark = pytest.mark.unit


class TestPredicates:
    def test_always(self, any_options):
        assert always(any_options) is True

    def test_when_tests(self, any_options):
        assert when_tests(any_options) is any_options.include_tests

    def test_when_linter(self, any_options):
        assert when_linter(any_options) is any_options.include_linter

    def test_all_of(self, any_options):
        both = all_of(when_tests, when_linter)
        expected = any_options.include_tests and any_options.include_linter
        assert both(any_options) is expected


class TestFileBlueprint:
    def test_shorthand_wraps_strings(self):
        bp = blueprint("a.txt", "one", Fragment("two", when=when_tests))
        assert isinstance(bp, FileBlueprint)
        assert bp.content[0] == Fragment("one")
        assert bp.content[1].when is when_tests
        assert bp.when is always
        assert bp.language is None

    def test_fragments_concatenate_in_order(self):
        bp = blueprint(
            "a.txt",
            "base\n",
            Fragment("tests\n", when=when_tests),
            Fragment("lint\n", when=when_linter),
        )
        assert bp.content_source(ProjectOptions()) == "base\n"
        assert bp.content_source(ProjectOptions(include_linter=True)) == "base\nlint\n"
        assert (
            bp.content_source(ProjectOptions(include_tests=True, include_linter=True))
            == "base\ntests\nlint\n"
        )

    def test_applies_to(self):
        bp = blueprint("a.txt", "x", when=when_linter)
        assert not bp.applies_to(ProjectOptions(include_tests=True))
        assert bp.applies_to(ProjectOptions(include_linter=True))

    def test_frozen(self):
        bp = blueprint("a.txt", "x")
        with pytest.raises(FrozenInstanceError):
            bp.path = "b.txt"  # type: ignore[misc]


class TestTemplateCatalog:
    @pytest.fixture
    def catalog(self) -> TemplateCatalog:
        return TemplateCatalog(
            template=TemplateType.CLI_TOOL,
            blueprints=(
                blueprint("base.txt", "b"),
                blueprint("tests.txt", "t", when=when_tests),
                blueprint("lint.txt", "l", when=when_linter),
            ),
            dependencies={
                "deps": (
                    DependencyGroup((("core", "1"),)),
                    DependencyGroup((("tester", "2"),), when=when_tests),
                    DependencyGroup((("linter", "3"),), when=when_linter),
                ),
            },
        )

    def test_select_keeps_declaration_order(self, catalog, all_options):
        assert [bp.path for bp in catalog.select(all_options)] == [
            "base.txt",
            "tests.txt",
            "lint.txt",
        ]

    def test_select_filters(self, catalog):
        selected = catalog.select(ProjectOptions(include_linter=True))
        assert [bp.path for bp in selected] == ["base.txt", "lint.txt"]

    def test_context_composes_groups_independently(self, catalog):
        context = catalog.context("svc", ProjectOptions(include_linter=True))
        assert context["project_name"] == "svc"
        assert context["include_tests"] is False
        assert context["include_linter"] is True
        assert context["deps"] == [("core", "1"), ("linter", "3")]

        full = catalog.context("svc", ProjectOptions(include_tests=True, include_linter=True))
        assert full["deps"] == [("core", "1"), ("tester", "2"), ("linter", "3")]

    def test_context_is_fresh_per_call(self, catalog, no_options):
        first = catalog.context("svc", no_options)
        first["deps"].append(("extra", "9"))
        assert catalog.context("svc", no_options)["deps"] == [("core", "1")]

    def test_dependencies_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.dependencies["other"] = ()  # type: ignore[index]
