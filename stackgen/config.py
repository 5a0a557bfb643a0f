"""stackgen configuration.

Typed defaults for the command-line front end.  Settings use a Pydantic v2
model so they are validated at construction time and can be populated from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

from stackgen.models import ProjectOptions, TemplateType

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseModel):
    """Global stackgen configuration.

    Holds the defaults used when the caller does not pass an explicit
    template or option switch.  Constructing it directly with an unknown
    ``default_template`` raises a pydantic ``ValidationError`` wrapping the
    ``UnknownTemplateError``; ``from_env`` raises ``UnknownTemplateError``
    itself.
    """

    default_template: TemplateType = Field(default=TemplateType.TYPESCRIPT_EXPRESS)
    include_tests: bool = Field(default=False)
    include_linter: bool = Field(default=False)
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")

    @field_validator("default_template", mode="before")
    @classmethod
    def _parse_template(cls, value: Any) -> TemplateType:
        return TemplateType.parse(value)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def options(self) -> ProjectOptions:
        """Return the default switches as a ``ProjectOptions``."""
        return ProjectOptions(
            include_tests=self.include_tests,
            include_linter=self.include_linter,
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STACKGEN_TEMPLATE, STACKGEN_INCLUDE_TESTS,
            STACKGEN_INCLUDE_LINTER, STACKGEN_LOG_LEVEL.

        Raises:
            UnknownTemplateError: If ``STACKGEN_TEMPLATE`` names no template.
            ValueError: If a boolean variable has an unrecognised value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STACKGEN_TEMPLATE"):
            # Parsed here so an unknown value raises UnknownTemplateError
            # instead of a pydantic ValidationError.
            kwargs["default_template"] = TemplateType.parse(os.environ["STACKGEN_TEMPLATE"])
        if os.environ.get("STACKGEN_INCLUDE_TESTS"):
            kwargs["include_tests"] = _parse_bool(
                "STACKGEN_INCLUDE_TESTS", os.environ["STACKGEN_INCLUDE_TESTS"]
            )
        if os.environ.get("STACKGEN_INCLUDE_LINTER"):
            kwargs["include_linter"] = _parse_bool(
                "STACKGEN_INCLUDE_LINTER", os.environ["STACKGEN_INCLUDE_LINTER"]
            )
        if os.environ.get("STACKGEN_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["STACKGEN_LOG_LEVEL"]
        return cls(**kwargs)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
