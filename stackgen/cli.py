"""Command-line front end for stackgen.

Generates a project in memory and prints its file tree.  Nothing is written
to disk.

Usage::

    python -m stackgen user-api
    python -m stackgen user-api --template go-clean-arch --tests --linter
    python -m stackgen my-tool -t cli-tool --show bin/my-tool.js
    python -m stackgen --list-templates
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.table import Table

from stackgen.config import Config
from stackgen.errors import GenerationError
from stackgen.models import ProjectOptions, TemplateType
from stackgen.scaffolder import generate_project
from stackgen.utils import (
    configure_logging,
    console,
    print_error,
    print_file,
    print_file_table,
    print_success,
    print_summary_table,
    print_warning,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``python -m stackgen``."""
    parser = argparse.ArgumentParser(
        prog="stackgen",
        description="stackgen -- scaffold starter projects from built-in templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  stackgen user-api\n"
            "  stackgen user-api --template go-clean-arch --tests --linter\n"
            "  stackgen my-tool -t cli-tool --show bin/my-tool.js\n"
        ),
    )

    parser.add_argument(
        "project_name",
        nargs="?",
        help="Name substituted into generated paths and files",
    )
    parser.add_argument(
        "--template", "-t",
        default=None,
        help=(
            "Template slug or label "
            f"({', '.join(t.value for t in TemplateType)}; default from STACKGEN_TEMPLATE)"
        ),
    )
    parser.add_argument(
        "--tests",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include the test file group",
    )
    parser.add_argument(
        "--linter",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include the lint configuration group",
    )
    parser.add_argument(
        "--show",
        metavar="PATH",
        default=None,
        help="Print one generated file (path relative to the project root)",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List the supported templates and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def print_templates() -> None:
    """Print the supported templates as a table."""
    table = Table(title="Templates", show_header=True, header_style="bold cyan")
    table.add_column("Slug", no_wrap=True)
    table.add_column("Name")
    table.add_column("Stack", style="dim")
    for template in TemplateType:
        table.add_row(template.value, template.label, template.description)
    console.print(table)


def _warn_on_unusual_name(project_name: str) -> None:
    """Warn when the name will produce awkward paths; it is still used verbatim."""
    if any(c.isspace() or c in "/\\" for c in project_name):
        print_warning(
            f"Warning: project name {project_name!r} contains whitespace or path "
            "separators and is used verbatim in file paths."
        )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m stackgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except (GenerationError, ValueError) as exc:
        print_error(f"Error: invalid environment configuration: {exc}")
        sys.exit(1)

    configure_logging("DEBUG" if args.verbose else config.log_level)

    if args.list_templates:
        print_templates()
        return

    if args.project_name is None:
        parser.error("project_name is required unless --list-templates is given")

    defaults = config.options()
    options = ProjectOptions(
        include_tests=defaults.include_tests if args.tests is None else args.tests,
        include_linter=defaults.include_linter if args.linter is None else args.linter,
    )
    template = args.template or config.default_template

    try:
        structure = generate_project(args.project_name, template, options)
    except GenerationError as exc:
        logger.debug("generation failed", exc_info=True)
        print_error(f"Error: {exc}")
        sys.exit(1)

    _warn_on_unusual_name(structure.project_name)

    if args.show:
        generated = structure.get(args.show) or structure.get(
            f"{structure.project_name}/{args.show}"
        )
        if generated is None:
            print_error(f"Error: no generated file at {args.show}")
            sys.exit(1)
        print_file(generated)
        return

    print_summary_table(
        {
            "Project": structure.project_name,
            "Template": structure.template.label,
            "Include tests": "yes" if options.include_tests else "no",
            "Include linter": "yes" if options.include_linter else "no",
            "Files": str(len(structure)),
        },
        title="Generation",
    )
    print_file_table(structure)
    print_success(f"Generated {structure.project_name!r} with {structure.template.label}.")


if __name__ == "__main__":
    main()
