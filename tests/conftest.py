"""Shared pytest fixtures for the stackgen test suite.

Provides reusable fixtures for:
- Option records (none, tests-only, linter-only, everything)
- Parametrised template identifiers
- A clean environment for configuration tests
"""

from __future__ import annotations

import pytest

from stackgen.models import ProjectOptions, TemplateType


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def no_options() -> ProjectOptions:
    """Every optional group switched off."""
    return ProjectOptions()


@pytest.fixture
def all_options() -> ProjectOptions:
    """Both optional groups switched on."""
    return ProjectOptions(include_tests=True, include_linter=True)


@pytest.fixture(params=ProjectOptions.combinations(), ids=lambda o: f"tests={o.include_tests}-linter={o.include_linter}")
def any_options(request) -> ProjectOptions:
    """Each of the four option combinations in turn."""
    return request.param


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

@pytest.fixture(params=list(TemplateType), ids=lambda t: t.value)
def template(request) -> TemplateType:
    """Each supported template in turn."""
    return request.param


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every STACKGEN_* variable so defaults apply."""
    for name in (
        "STACKGEN_TEMPLATE",
        "STACKGEN_INCLUDE_TESTS",
        "STACKGEN_INCLUDE_LINTER",
        "STACKGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
