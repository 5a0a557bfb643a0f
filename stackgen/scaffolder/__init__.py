"""stackgen scaffolder -- renders starter projects from a fixed catalog.

This package holds the blueprint catalog for every supported template and
the engine that filters and renders it into an in-memory project tree.

Quick usage::

    from stackgen.scaffolder import ProjectOptions, TemplateType, generate_project

    structure = generate_project(
        "user-api",
        TemplateType.TYPESCRIPT_EXPRESS,
        ProjectOptions(include_tests=True),
    )
    for generated in structure.files:
        print(generated.path, generated.language)
"""

from stackgen.models import ProjectOptions, TemplateType
from stackgen.scaffolder.generator import (
    ProjectGenerator,
    generate_files,
    generate_project,
    validate_catalog,
)
from stackgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "ProjectOptions",
    "TemplateRenderer",
    "TemplateType",
    "generate_files",
    "generate_project",
    "validate_catalog",
]
