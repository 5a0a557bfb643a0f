"""Unit tests for console helpers (stackgen.utils).

Tests cover:
- format_size
- configure_logging
- Rich output helpers (tables, file preview, success, error and warning messages)
"""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from stackgen.models import GeneratedFile, ProjectStructure, TemplateType
from stackgen.utils import (
    configure_logging,
    console,
    format_size,
    print_error,
    print_file,
    print_file_table,
    print_success,
    print_summary_table,
    print_warning,
)


@pytest.fixture
def structure() -> ProjectStructure:
    return ProjectStructure(
        project_name="svc",
        template=TemplateType.CLI_TOOL,
        files=(
            GeneratedFile(path="svc/package.json", content='{"name": "svc"}\n', language="json"),
            GeneratedFile(path="svc/[odd].md", content="# svc\n", language="markdown"),
        ),
    )


class TestFormatSize:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("num_bytes", "expected"),
        [(0, "0 B"), (512, "512 B"), (1023, "1023 B"), (1024, "1.0 KB"), (2560, "2.5 KB")],
    )
    def test_format_size(self, num_bytes, expected):
        assert format_size(num_bytes) == expected


class TestConfigureLogging:
    @pytest.mark.unit
    def test_installs_rich_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            root.handlers = []
            configure_logging("debug")
            assert root.level == logging.DEBUG
            assert any(isinstance(h, RichHandler) for h in root.handlers)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_file_table(self, structure):
        with console.capture() as capture:
            print_file_table(structure)
        output = capture.get()
        assert "svc/package.json" in output
        assert "svc/[odd].md" in output
        assert "json" in output
        assert "2 files" in output

    @pytest.mark.unit
    def test_print_summary_table(self):
        with console.capture() as capture:
            print_summary_table({"Project": "[svc]", "Files": "3"}, title="Generation")
        output = capture.get()
        assert "[svc]" in output
        assert "Generation" in output

    @pytest.mark.unit
    def test_print_file(self, structure):
        with console.capture() as capture:
            print_file(structure.files[0])
        output = capture.get()
        assert "svc/package.json" in output
        assert '"name"' in output

    @pytest.mark.unit
    def test_status_messages_escape_markup(self):
        with console.capture() as capture:
            print_success("done [cli-tool]")
            print_error("failed [bold]")
            print_warning("careful [dim]")
        output = capture.get()
        assert "done [cli-tool]" in output
        assert "failed [bold]" in output
        assert "careful [dim]" in output
