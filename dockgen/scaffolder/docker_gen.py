"""Dockerfile, .dockerignore and Compose file generation.

Uses the Jinja2 templates under ``templates/`` (one Dockerfile per
category plus the shared ``dockerignore.j2`` and ``docker-compose.yml.j2``)
to turn a ``DetectionResult`` into the three text artifacts.  Rendering is
pure; writing them to disk is a separate async step.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from dockgen.config import Config
from dockgen.detector.models import AppCategory, DetectionResult

from .params import RenderParameters, derive_parameters
from .templates import TemplateRenderer, write_text


class RenderedArtifacts(BaseModel):
    """The three generated documents, in memory."""

    model_config = ConfigDict(frozen=True)

    build_file: str
    ignore_file: str
    compose_file: str


class DockerGenerator:
    """Renders the Docker artifacts for a classified project."""

    # Category -> Dockerfile template
    _DOCKERFILES: dict[AppCategory, str] = {
        AppCategory.REACT: "dockerfiles/react.Dockerfile.j2",
        AppCategory.NODE_GENERIC: "dockerfiles/node.Dockerfile.j2",
        AppCategory.PYTHON: "dockerfiles/python.Dockerfile.j2",
        AppCategory.GENERIC: "dockerfiles/generic.Dockerfile.j2",
    }
    _IGNORE_TEMPLATE = "dockerignore.j2"
    _COMPOSE_TEMPLATE = "docker-compose.yml.j2"

    def __init__(
        self,
        renderer: Optional[TemplateRenderer] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.config = config or Config()

    def parameters(self, result: DetectionResult, base_name: str) -> RenderParameters:
        """Derive the template parameters for *result*."""
        return derive_parameters(result, base_name, self.config)

    def render(self, result: DetectionResult, base_name: str) -> RenderedArtifacts:
        """Render all three artifacts for *result*.

        Args:
            result: Classification of the project.
            base_name: Base name of the project directory.

        Returns:
            The rendered ``RenderedArtifacts``.
        """
        return self.render_parameters(self.parameters(result, base_name))

    def render_parameters(self, params: RenderParameters) -> RenderedArtifacts:
        """Render all three artifacts from already derived *params*."""
        context = params.template_context(self.config)
        return RenderedArtifacts(
            build_file=self.renderer.render(self._DOCKERFILES[params.category], context),
            ignore_file=self.renderer.render(self._IGNORE_TEMPLATE, context),
            compose_file=self.renderer.render(self._COMPOSE_TEMPLATE, context),
        )

    async def write_all(
        self,
        output_dir: Path,
        artifacts: RenderedArtifacts,
    ) -> dict[str, Path]:
        """Write the rendered artifacts to *output_dir*.

        Existing files of the same name are overwritten.

        Returns:
            Mapping of file name to written path, in write order
            (``Dockerfile``, ``.dockerignore``, ``docker-compose.yml`` by
            default).
        """
        names = self.config.output
        written: dict[str, Path] = {}
        for filename, content in (
            (names.build_file, artifacts.build_file),
            (names.ignore_file, artifacts.ignore_file),
            (names.compose_file, artifacts.compose_file),
        ):
            written[filename] = await write_text(Path(output_dir) / filename, content)
        return written


def render(
    result: DetectionResult,
    base_name: str,
    config: Optional[Config] = None,
) -> RenderedArtifacts:
    """Render the three artifacts with the stock templates."""
    return DockerGenerator(config=config).render(result, base_name)
