"""stackgen -- deterministic starter-project generator.

Scaffolds microservice and CLI-tool skeletons for a closed set of templates,
substituting a project name into paths and contents and toggling optional
test and lint file groups.
"""

from stackgen.errors import (
    CatalogError,
    GenerationError,
    InvalidProjectNameError,
    UnknownTemplateError,
)
from stackgen.models import GeneratedFile, ProjectOptions, ProjectStructure, TemplateType
from stackgen.scaffolder import generate_files, generate_project, validate_catalog

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "GeneratedFile",
    "GenerationError",
    "InvalidProjectNameError",
    "ProjectOptions",
    "ProjectStructure",
    "TemplateType",
    "UnknownTemplateError",
    "generate_files",
    "generate_project",
    "validate_catalog",
]
