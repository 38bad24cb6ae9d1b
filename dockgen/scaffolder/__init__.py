"""dockgen scaffolder -- renders and writes the Docker artifacts.

Takes a ``DetectionResult`` and renders ``Dockerfile``, ``.dockerignore``
and ``docker-compose.yml`` from the Jinja2 templates in ``templates/``.

Quick usage::

    from dockgen.scaffolder import DockerfileGenerator

    report = await DockerfileGenerator().generate("/path/to/app")
    report.result.category   # AppCategory.NODE_GENERIC
    report.written           # {"Dockerfile": Path(...), ...}
"""

from dockgen.scaffolder.docker_gen import DockerGenerator, RenderedArtifacts, render
from dockgen.scaffolder.generator import (
    DockerfileGenerator,
    GenerationReport,
    MissingInputError,
)
from dockgen.scaffolder.params import RenderParameters, derive_parameters
from dockgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "DockerGenerator",
    "DockerfileGenerator",
    "GenerationReport",
    "MissingInputError",
    "RenderParameters",
    "RenderedArtifacts",
    "TemplateRenderer",
    "derive_parameters",
    "render",
]
