"""Language-tag inference for generated files.

Tags are the lower-case identifiers syntax highlighters understand
(``typescript``, ``go``, ``json``...).  They are used for display only and
are never checked against the actual file content.
"""

from __future__ import annotations

from pathlib import PurePosixPath

DEFAULT_LANGUAGE = "plaintext"

# Exact file names that carry no useful extension
_FILENAME_LANGUAGES: dict[str, str] = {
    "Dockerfile": "dockerfile",
    "Makefile": "makefile",
    "go.mod": "go",
    ".eslintrc": "json",
    ".prettierrc": "json",
}

_EXTENSION_LANGUAGES: dict[str, str] = {
    ".ts": "typescript",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".go": "go",
    ".json": "json",
    ".yml": "yaml",
    ".yaml": "yaml",
    ".md": "markdown",
}


def normalize_language(tag: str) -> str:
    """Lower-case *tag* and drop ``/`` separators (``"TypeScript/JS"`` -> ``"typescriptjs"``)."""
    return tag.strip().lower().replace("/", "")


def infer_language(path: str) -> str:
    """Guess the display language of *path* from its file name.

    Examples::

        infer_language("svc/src/app.ts")   -> "typescript"
        infer_language("svc/Dockerfile")   -> "dockerfile"
        infer_language("svc/.gitignore")   -> "plaintext"
    """
    name = PurePosixPath(path).name
    if name in _FILENAME_LANGUAGES:
        return _FILENAME_LANGUAGES[name]
    suffix = PurePosixPath(name).suffix.lower()
    return _EXTENSION_LANGUAGES.get(suffix, DEFAULT_LANGUAGE)
