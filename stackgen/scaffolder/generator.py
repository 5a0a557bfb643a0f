"""Main scaffolding engine.

Takes a project name, a ``TemplateType`` and a ``ProjectOptions`` record and
produces an ordered, in-memory ``ProjectStructure``.  Nothing is written to
disk; preview and export are left to the caller.

Generation is a pure function of its inputs:

1. Resolve the template identifier against the closed catalog.
2. Filter the template's blueprints with a single predicate pass.
3. Render each kept blueprint's path and active content fragments with the
   project name and the option-dependent dependency lists.
4. Tag each file with its declared or inferred language.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from typing import Any

from jinja2 import TemplateError

from stackgen.errors import CatalogError, InvalidProjectNameError
from stackgen.models import GeneratedFile, ProjectOptions, ProjectStructure, TemplateType

from .blueprints import FileBlueprint, TemplateCatalog
from .catalog import CATALOG
from .languages import infer_language, normalize_language
from .templates import TemplateRenderer, has_unresolved_markers

logger = logging.getLogger(__name__)

# Name used when rendering every blueprint during catalog validation
SENTINEL_PROJECT_NAME = "stackgen-sentinel"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Renders a template's blueprints into a ``ProjectStructure``.

    The generator holds only read-only collaborators (the catalog mapping and
    a Jinja2 renderer), so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        catalog: Mapping[TemplateType, TemplateCatalog] | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.catalog = CATALOG if catalog is None else catalog
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(
        self,
        project_name: str,
        template: TemplateType | str,
        options: ProjectOptions | Mapping[str, Any] | None = None,
    ) -> ProjectStructure:
        """Generate the complete project structure.

        Args:
            project_name: Substituted verbatim into every path and content
                position that references it.  Must contain at least one
                non-whitespace character.
            template: A ``TemplateType`` member, slug or display label.
            options: Option switches; ``None`` means every switch is off.

        Returns:
            A frozen ``ProjectStructure`` whose files follow the catalog's
            declaration order.

        Raises:
            UnknownTemplateError: If *template* is not a supported template.
            InvalidProjectNameError: If *project_name* is empty.
            CatalogError: If a blueprint fails to render cleanly.
        """
        template_type = TemplateType.parse(template)
        _check_project_name(project_name)
        resolved = _coerce_options(options)

        catalog = self.catalog.get(template_type)
        if catalog is None:
            raise CatalogError("No blueprints registered", template=template_type.value)

        context = catalog.context(project_name, resolved)
        # Brace or percent characters in the name could form or mask a
        # delimiter, so such names are checked against a sentinel render
        if _may_touch_markers(project_name):
            check_context = catalog.context(SENTINEL_PROJECT_NAME, resolved)
        else:
            check_context = context
        files = [
            self._render_file(catalog, bp, context, check_context, resolved)
            for bp in catalog.select(resolved)
        ]
        _check_unique_paths(catalog, files)

        logger.debug(
            "generated template=%s tests=%s linter=%s files=%d",
            template_type.value,
            resolved.include_tests,
            resolved.include_linter,
            len(files),
        )
        return ProjectStructure(
            project_name=project_name,
            template=template_type,
            files=tuple(files),
        )

    # -- Rendering ---------------------------------------------------------

    def _render_file(
        self,
        catalog: TemplateCatalog,
        blueprint: FileBlueprint,
        context: dict[str, Any],
        check_context: dict[str, Any],
        options: ProjectOptions,
    ) -> GeneratedFile:
        path = self._render_text(catalog, blueprint, blueprint.path, context, check_context)
        content = self._render_text(
            catalog, blueprint, blueprint.content_source(options), context, check_context
        )
        if blueprint.language:
            language = normalize_language(blueprint.language)
        else:
            language = infer_language(blueprint.path)
        return GeneratedFile(path=path, content=content, language=language)

    def _render_text(
        self,
        catalog: TemplateCatalog,
        blueprint: FileBlueprint,
        source: str,
        context: dict[str, Any],
        check_context: dict[str, Any],
    ) -> str:
        try:
            rendered = self.renderer.render_string(source, context)
            if check_context is context:
                checked = rendered
            else:
                checked = self.renderer.render_string(source, check_context)
        except TemplateError as exc:
            raise CatalogError(
                f"Blueprint failed to render: {exc}",
                template=catalog.template.value,
                path=blueprint.path,
            ) from exc

        if has_unresolved_markers(checked):
            raise CatalogError(
                "Unresolved template markers in output",
                template=catalog.template.value,
                path=blueprint.path,
            )
        return rendered


# ---------------------------------------------------------------------------
# Module-level convenience API
# ---------------------------------------------------------------------------

_default_generator = ProjectGenerator()


def generate_project(
    project_name: str,
    template: TemplateType | str,
    options: ProjectOptions | Mapping[str, Any] | None = None,
) -> ProjectStructure:
    """Generate a ``ProjectStructure`` with the built-in catalog."""
    return _default_generator.generate(project_name, template, options)


def generate_files(
    project_name: str,
    template: TemplateType | str,
    options: ProjectOptions | Mapping[str, Any] | None = None,
) -> list[GeneratedFile]:
    """Generate the ordered file list for *template*.

    The returned list is freshly allocated and owned by the caller.
    """
    return list(generate_project(project_name, template, options).files)


def validate_catalog(
    catalog: Mapping[TemplateType, TemplateCatalog] | None = None,
) -> None:
    """Render every template under every option combination.

    Every ``TemplateType`` must have an entry, every blueprint must render
    without leftover markers, and no option combination may produce
    duplicate paths.

    Raises:
        CatalogError: On the first defect found.
    """
    generator = ProjectGenerator(catalog=catalog)
    for template_type in TemplateType:
        for options in ProjectOptions.combinations():
            generator.generate(SENTINEL_PROJECT_NAME, template_type, options)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _check_project_name(project_name: object) -> None:
    if not isinstance(project_name, str) or not project_name.strip():
        raise InvalidProjectNameError("Project name must be a non-empty string")


def _may_touch_markers(project_name: str) -> bool:
    return any(char in project_name for char in "{}%")


def _coerce_options(
    options: ProjectOptions | Mapping[str, Any] | None,
) -> ProjectOptions:
    if options is None:
        return ProjectOptions()
    if isinstance(options, ProjectOptions):
        return options
    return ProjectOptions.model_validate(dict(options))


def _check_unique_paths(catalog: TemplateCatalog, files: list[GeneratedFile]) -> None:
    duplicates = sorted(p for p, n in Counter(f.path for f in files).items() if n > 1)
    if duplicates:
        raise CatalogError(
            f"Duplicate paths: {', '.join(duplicates)}",
            template=catalog.template.value,
        )
