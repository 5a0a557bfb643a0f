"""Static building blocks of the template catalog.

A template is an ordered tuple of ``FileBlueprint`` objects.  Each blueprint
carries a Jinja2 path template, a content template split into ``Fragment``
pieces, an optional language tag, and a predicate deciding whether the file
belongs to a given ``ProjectOptions``.  Option-dependent descriptor entries
(package dependencies, npm scripts) are expressed as ``DependencyGroup``
objects so that each switch contributes its entries independently.

Everything here is immutable; catalog modules build their blueprints once at
import time and never touch them again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from stackgen.models import ProjectOptions, TemplateType

Predicate = Callable[[ProjectOptions], bool]


# ---------------------------------------------------------------------------
# Option predicates
# ---------------------------------------------------------------------------

def always(options: ProjectOptions) -> bool:
    return True


def when_tests(options: ProjectOptions) -> bool:
    return options.include_tests


def when_linter(options: ProjectOptions) -> bool:
    return options.include_linter


def all_of(*predicates: Predicate) -> Predicate:
    """Combine predicates; the result holds only if every one of them does."""

    def _all(options: ProjectOptions) -> bool:
        return all(predicate(options) for predicate in predicates)

    return _all


# ---------------------------------------------------------------------------
# Blueprint types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Fragment:
    """A piece of content template text, emitted only when *when* holds."""

    text: str
    when: Predicate = always


@dataclass(frozen=True)
class DependencyGroup:
    """Ordered ``(name, value)`` entries contributed by one option switch."""

    entries: tuple[tuple[str, str], ...]
    when: Predicate = always


@dataclass(frozen=True)
class FileBlueprint:
    """Definition of a single candidate file within a template."""

    path: str
    content: tuple[Fragment, ...]
    language: str | None = None
    when: Predicate = always

    def applies_to(self, options: ProjectOptions) -> bool:
        return self.when(options)

    def content_source(self, options: ProjectOptions) -> str:
        """Concatenate the active fragments in declaration order."""
        return "".join(f.text for f in self.content if f.when(options))


def blueprint(
    path: str,
    *parts: str | Fragment,
    language: str | None = None,
    when: Predicate = always,
) -> FileBlueprint:
    """Shorthand for declaring a ``FileBlueprint``.

    Plain strings become unconditional fragments, so a file with no
    option-dependent content is just ``blueprint("path", "body")``.
    """
    fragments = tuple(p if isinstance(p, Fragment) else Fragment(p) for p in parts)
    return FileBlueprint(path=path, content=fragments, language=language, when=when)


# ---------------------------------------------------------------------------
# Per-template catalog entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateCatalog:
    """The complete, ordered blueprint set of one template.

    Attributes:
        template: The template this catalog belongs to.
        blueprints: Candidate files in output order.
        dependencies: Named lists of ``DependencyGroup`` objects.  Each name
            becomes a render-context variable holding the concatenated
            entries of the groups active for the current options.
    """

    template: TemplateType
    blueprints: tuple[FileBlueprint, ...]
    dependencies: Mapping[str, tuple[DependencyGroup, ...]] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "dependencies", MappingProxyType(dict(self.dependencies))
        )

    def select(self, options: ProjectOptions) -> list[FileBlueprint]:
        """Single filter pass: the blueprints whose predicate holds."""
        return [bp for bp in self.blueprints if bp.applies_to(options)]

    def context(self, project_name: str, options: ProjectOptions) -> dict[str, Any]:
        """Build the render context for *project_name* under *options*."""
        context: dict[str, Any] = {
            "project_name": project_name,
            "include_tests": options.include_tests,
            "include_linter": options.include_linter,
        }
        for key, groups in self.dependencies.items():
            context[key] = list(_active_entries(groups, options))
        return context


def _active_entries(
    groups: Iterable[DependencyGroup], options: ProjectOptions
) -> Iterable[tuple[str, str]]:
    for group in groups:
        if group.when(options):
            yield from group.entries
