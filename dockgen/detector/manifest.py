"""package.json parsing and framework detection.

Turns raw manifest bytes into a ``Manifest`` and infers the framework
from its dependency keys.  Only key presence matters, never versions.
"""

from __future__ import annotations

import json
from typing import Optional

from .models import AppCategory, Manifest

MANIFEST_FILENAME = "package.json"

# Maps dependency names to categories.
# Order matters: first match wins, so react outranks the server frameworks.
FRAMEWORK_INDICATORS: list[tuple[str, AppCategory]] = [
    ("react", AppCategory.REACT),
    ("express", AppCategory.NODE_GENERIC),
    ("koa", AppCategory.NODE_GENERIC),
    ("hapi", AppCategory.NODE_GENERIC),
    ("fastify", AppCategory.NODE_GENERIC),
]


class ManifestParseError(ValueError):
    """Raised when a manifest exists but is not a well-formed JSON object."""

    def __init__(self, reason: str, source: str = MANIFEST_FILENAME) -> None:
        self.reason = reason
        self.source = source
        super().__init__(f"Failed to parse {source}: {reason}")


def parse_manifest(raw: bytes | str, source: str = MANIFEST_FILENAME) -> Manifest:
    """Parse manifest content into a ``Manifest``.

    Args:
        raw: File content, bytes (decoded as UTF-8) or text.
        source: Label used in error messages.

    Raises:
        ManifestParseError: Content is not UTF-8, not valid JSON, or its
            top-level value is not an object.
    """
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ManifestParseError(f"not valid UTF-8 ({exc.reason})", source) from exc
    else:
        text = raw

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(
            f"{exc.msg} (line {exc.lineno}, column {exc.colno})", source
        ) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"expected a JSON object, got {type(data).__name__}", source
        )

    return Manifest.model_validate(data)


def detect_framework(manifest: Manifest) -> Optional[tuple[str, AppCategory]]:
    """Return the first ``(dependency, category)`` indicator present, if any.

    Checks both ``dependencies`` and ``devDependencies``.
    """
    names = manifest.dependency_names()
    for dep_name, category in FRAMEWORK_INDICATORS:
        if dep_name in names:
            return dep_name, category
    return None
