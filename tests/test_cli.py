"""Tests for the command-line front end (stackgen.cli).

Covers:
- Default generation and file table output
- Template and option flags, environment defaults
- --show and --list-templates
- Warning for names with whitespace or path separators
- Error exits for unknown templates, blank names and missing files
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from stackgen.cli import build_parser, main
from stackgen.utils import console

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring the root logger during tests."""
    with patch("stackgen.cli.configure_logging") as configure:
        yield configure


def _run(argv: list[str]) -> str:
    with console.capture() as capture:
        main(argv)
    return capture.get()


class TestParser:
    def test_flags(self):
        args = build_parser().parse_args(["svc", "-t", "cli-tool", "--tests", "--no-linter"])
        assert args.project_name == "svc"
        assert args.template == "cli-tool"
        assert args.tests is True
        assert args.linter is False

    def test_unset_flags_are_none(self):
        args = build_parser().parse_args(["svc"])
        assert args.template is None
        assert args.tests is None
        assert args.linter is None


class TestMain:
    def test_default_generation(self, clean_env):
        output = _run(["user-api"])
        assert "user-api/package.json" in output
        assert "user-api/jest.config.js" not in output
        assert "TypeScript/Express" in output

    def test_template_and_options(self, clean_env):
        output = _run(["svc", "--template", "go-clean-arch", "--tests", "--linter"])
        assert "svc/go.mod" in output
        assert "svc/.golangci.yml" in output
        assert "handler_test.go" in output

    def test_environment_defaults(self, clean_env):
        clean_env.setenv("STACKGEN_TEMPLATE", "cli-tool")
        clean_env.setenv("STACKGEN_INCLUDE_TESTS", "true")
        output = _run(["my-tool"])
        assert "my-tool/tests/files.test.js" in output
        assert "Dockerfile" not in output

    def test_flag_overrides_environment(self, clean_env):
        clean_env.setenv("STACKGEN_INCLUDE_TESTS", "true")
        output = _run(["svc", "-t", "cli-tool", "--no-tests"])
        assert "svc/tests/files.test.js" not in output

    def test_show_relative_path(self, clean_env):
        output = _run(["svc", "-t", "go-clean-arch", "--show", "go.mod"])
        assert "module github.com/example/svc" in output

    def test_warns_on_name_with_spaces(self, clean_env):
        output = _run(["my service"])
        assert "Warning: project name" in output
        assert "my service/package.json" in output

    def test_no_warning_for_plain_name(self, clean_env):
        assert "Warning" not in _run(["svc"])

    def test_list_templates(self, clean_env):
        output = _run(["--list-templates"])
        assert "typescript-express" in output
        assert "go-clean-arch" in output
        assert "cli-tool" in output

    def test_verbose_enables_debug_logging(self, clean_env, no_logging_setup):
        _run(["svc", "--verbose"])
        no_logging_setup.assert_called_once_with("DEBUG")

    def test_log_level_from_environment(self, clean_env, no_logging_setup):
        clean_env.setenv("STACKGEN_LOG_LEVEL", "info")
        _run(["svc"])
        no_logging_setup.assert_called_once_with("INFO")


class TestErrors:
    def test_unknown_template(self, clean_env):
        with console.capture() as capture, pytest.raises(SystemExit) as exc_info:
            main(["svc", "--template", "rust-actix"])
        assert exc_info.value.code == 1
        output = capture.get()
        assert "Unknown template" in output
        assert "svc/" not in output

    def test_blank_name(self, clean_env):
        with console.capture() as capture, pytest.raises(SystemExit) as exc_info:
            main(["  "])
        assert exc_info.value.code == 1
        assert "non-empty" in capture.get()

    def test_missing_show_path(self, clean_env):
        with console.capture() as capture, pytest.raises(SystemExit) as exc_info:
            main(["svc", "--show", "nope.txt"])
        assert exc_info.value.code == 1
        assert "no generated file" in capture.get()

    def test_missing_project_name(self, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_bad_environment(self, clean_env):
        clean_env.setenv("STACKGEN_TEMPLATE", "rust-actix")
        with console.capture() as capture, pytest.raises(SystemExit) as exc_info:
            main(["svc"])
        assert exc_info.value.code == 1
        assert "invalid environment configuration" in capture.get()
