"""Exception hierarchy for stackgen.

Every failure raised by the generation engine derives from
``GenerationError`` so callers can surface it as a single terminal message
without inspecting the concrete type.
"""

from __future__ import annotations

from collections.abc import Iterable


class GenerationError(Exception):
    """Base class for all generation failures."""


class UnknownTemplateError(GenerationError, ValueError):
    """Raised when a template identifier is outside the supported set."""

    def __init__(self, value: object, supported: Iterable[str]) -> None:
        self.value = value
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown template: {value!r}. Supported: {', '.join(self.supported)}"
        )


class InvalidProjectNameError(GenerationError, ValueError):
    """Raised when the project name is empty or whitespace-only."""


class CatalogError(GenerationError):
    """Raised when a blueprint renders to something unusable.

    This is a defect in the built-in catalog, not a user error.
    """

    def __init__(
        self,
        message: str,
        *,
        template: str | None = None,
        path: str | None = None,
    ) -> None:
        self.template = template
        self.path = path
        prefix = f"[{template}] " if template else ""
        suffix = f" ({path})" if path else ""
        super().__init__(f"{prefix}{message}{suffix}")
