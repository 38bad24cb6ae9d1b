"""dockgen detector -- classifies a project directory.

Quick usage::

    from dockgen.detector import classify

    result = classify(["package.json", "src"], manifest_bytes)
    result.category  # AppCategory.REACT
"""

from dockgen.detector.classifier import classify
from dockgen.detector.manifest import ManifestParseError, parse_manifest
from dockgen.detector.models import AppCategory, DetectionResult, Manifest

__all__ = [
    "AppCategory",
    "DetectionResult",
    "Manifest",
    "ManifestParseError",
    "classify",
    "parse_manifest",
]
