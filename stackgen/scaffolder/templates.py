"""Jinja2 template rendering for blueprint paths and contents.

Provides the TemplateRenderer class which renders the inline template strings
stored in the blueprint catalog.  The environment uses ``StrictUndefined`` so
a blueprint that references a variable missing from the context fails loudly
instead of silently rendering an empty string.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from jinja2 import Environment, StrictUndefined

# Delimiters that must never survive rendering
TEMPLATE_MARKERS: tuple[str, ...] = ("{{", "}}", "{%", "%}")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders inline Jinja2 templates for project scaffolding.

    Templates are rendered with a context dictionary holding the project name,
    the option flags and any dependency lists the template declares.  The
    renderer keeps no per-call state, so a single instance can be shared.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["json_object"] = _json_object_filter

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Raises:
            jinja2.UndefinedError: If the template references a name missing
                from *context*.
            jinja2.TemplateSyntaxError: If the template is malformed.
        """
        template = self.env.from_string(template_string)
        return template.render(**context)


def has_unresolved_markers(text: str) -> bool:
    """Return ``True`` if *text* still contains Jinja2 delimiters."""
    return any(marker in text for marker in TEMPLATE_MARKERS)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _json_object_filter(entries: Iterable[tuple[str, str]], indent: int = 0) -> str:
    """Render ``(key, value)`` pairs as a pretty-printed JSON object.

    *indent* is the column of the line holding the opening brace, so nested
    objects line up with the surrounding document.  An empty sequence
    renders as ``{}``.
    """
    text = json.dumps(dict(entries), indent=2)
    return text.replace("\n", "\n" + " " * indent)
