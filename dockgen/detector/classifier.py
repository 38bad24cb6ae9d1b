"""Project classifier: maps a directory listing to an application category.

Decision flow (first match wins):
  package.json present  → parse it (malformed is fatal)
      react dependency                → react
      express / koa / hapi / fastify  → node
      anything else                   → node
  *.py entry or requirements.txt → python
  otherwise                      → generic

The classifier is pure: the caller reads the listing and the manifest bytes
and hands them in, nothing here touches the file system.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .manifest import MANIFEST_FILENAME, detect_framework, parse_manifest
from .models import AppCategory, DetectionResult

PYTHON_REQUIREMENTS = "requirements.txt"
PYTHON_SUFFIX = ".py"


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def classify(
    listing: Iterable[str],
    manifest_bytes: Optional[bytes | str] = None,
) -> DetectionResult:
    """Classify a project from its shallow listing and optional manifest.

    Args:
        listing: Names of the immediate entries of the project directory.
        manifest_bytes: Raw ``package.json`` content, or ``None`` when the
            project has no manifest.

    Returns:
        A frozen ``DetectionResult``.

    Raises:
        ManifestParseError: The manifest is present but malformed.
    """
    if manifest_bytes is not None:
        return _classify_manifest(manifest_bytes)

    names = list(listing)
    python_evidence = _python_evidence(names)
    if python_evidence:
        return DetectionResult(category=AppCategory.PYTHON, evidence=python_evidence)

    return DetectionResult(
        category=AppCategory.GENERIC,
        evidence=("no package.json, Python sources or requirements.txt found",),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _classify_manifest(manifest_bytes: bytes | str) -> DetectionResult:
    manifest = parse_manifest(manifest_bytes)
    evidence = [f"{MANIFEST_FILENAME} present"]

    indicator = detect_framework(manifest)
    if indicator:
        dep_name, category = indicator
        evidence.append(f"{MANIFEST_FILENAME} dependency: {dep_name}")
    else:
        category = AppCategory.NODE_GENERIC
        evidence.append("no known framework dependency (default Node.js)")

    return DetectionResult(category=category, manifest=manifest, evidence=tuple(evidence))


def _python_evidence(names: list[str]) -> tuple[str, ...]:
    evidence: list[str] = []
    sources = [name for name in names if name.endswith(PYTHON_SUFFIX)]
    if sources:
        evidence.append(f"Python sources: {', '.join(sorted(sources)[:3])}")
    if PYTHON_REQUIREMENTS in names:
        evidence.append(f"{PYTHON_REQUIREMENTS} present")
    return tuple(evidence)
