"""dockgen -- Dockerfile, .dockerignore and Compose generator.

Classifies a project directory (React, Node.js, Python or generic) and
renders the matching Docker artifacts.
"""

from dockgen.detector import AppCategory, DetectionResult, ManifestParseError, classify
from dockgen.scaffolder import (
    DockerfileGenerator,
    MissingInputError,
    RenderedArtifacts,
    render,
)

__version__ = "0.1.0"

__all__ = [
    "AppCategory",
    "DetectionResult",
    "DockerfileGenerator",
    "ManifestParseError",
    "MissingInputError",
    "RenderedArtifacts",
    "classify",
    "render",
]
