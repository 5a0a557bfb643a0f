"""Pydantic v2 models for the stackgen generation engine.

Defines the closed set of supported templates, the option switches a caller
may toggle, and the immutable output types handed to preview and export
collaborators.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from itertools import product

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stackgen.errors import UnknownTemplateError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TemplateType(str, Enum):
    """Closed set of project templates the engine can scaffold."""
    TYPESCRIPT_EXPRESS = "typescript-express"
    GO_CLEAN_ARCH = "go-clean-arch"
    CLI_TOOL = "cli-tool"

    @property
    def label(self) -> str:
        """Human-readable name shown in template pickers."""
        return _TEMPLATE_LABELS[self][0]

    @property
    def description(self) -> str:
        """One-line summary of the stack behind the template."""
        return _TEMPLATE_LABELS[self][1]

    @classmethod
    def parse(cls, value: TemplateType | str) -> TemplateType:
        """Resolve a member, slug or display label to a ``TemplateType``.

        Raises:
            UnknownTemplateError: If *value* names no supported template.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value in (member.value, member.label):
                    return member
        raise UnknownTemplateError(value, (m.value for m in cls))


_TEMPLATE_LABELS: dict[TemplateType, tuple[str, str]] = {
    TemplateType.TYPESCRIPT_EXPRESS: ("TypeScript/Express", "Express + Inversify + DDD"),
    TemplateType.GO_CLEAN_ARCH: ("Go/Clean-Arch", "Golang + Wire + Clean Architecture"),
    TemplateType.CLI_TOOL: ("Node.js CLI (temp-gen)", "Node.js + Commander + Inquirer"),
}


# ---------------------------------------------------------------------------
# Generation options
# ---------------------------------------------------------------------------

class ProjectOptions(BaseModel):
    """Independent boolean switches gating optional file groups."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    include_tests: bool = Field(
        default=False, alias="includeTests", description="Add the test file group"
    )
    include_linter: bool = Field(
        default=False, alias="includeLinter", description="Add the lint config group"
    )

    @classmethod
    def combinations(cls) -> list[ProjectOptions]:
        """Every possible option set, in a fixed order."""
        return [
            cls(include_tests=tests, include_linter=linter)
            for tests, linter in product((False, True), repeat=2)
        ]


# ---------------------------------------------------------------------------
# Output models
# ---------------------------------------------------------------------------

class GeneratedFile(BaseModel):
    """A fully resolved file: project name substituted, options applied."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Relative, forward-slash delimited path")
    content: str = Field(default="", description="File body, written verbatim on export")
    language: str = Field(..., description="Lower-case syntax tag for display")

    @property
    def size(self) -> int:
        return len(self.content.encode("utf-8"))


class ProjectStructure(BaseModel):
    """The ordered result of one generation call."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    template: TemplateType
    files: tuple[GeneratedFile, ...] = ()

    @model_validator(mode="after")
    def _check_unique_paths(self) -> ProjectStructure:
        duplicates = sorted(p for p, n in Counter(f.path for f in self.files).items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate file paths: {', '.join(duplicates)}")
        return self

    def __len__(self) -> int:
        return len(self.files)

    def paths(self) -> list[str]:
        """File paths in generation order."""
        return [f.path for f in self.files]

    def get(self, path: str) -> GeneratedFile | None:
        """Return the file at *path*, or ``None`` if it was not generated."""
        for generated in self.files:
            if generated.path == path:
                return generated
        return None
