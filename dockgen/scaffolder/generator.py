"""Generation orchestrator.

Resolves the project directory, reads its shallow listing and manifest,
runs the classifier once and the renderer once per artifact, then writes
``Dockerfile``, ``.dockerignore`` and ``docker-compose.yml``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dockgen.config import Config
from dockgen.detector import DetectionResult, classify
from dockgen.detector.manifest import MANIFEST_FILENAME
from dockgen.utils import list_directory

from .docker_gen import DockerGenerator, RenderedArtifacts
from .params import RenderParameters


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MissingInputError(Exception):
    """Raised when no project directory was given or it does not exist."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


# ---------------------------------------------------------------------------
# Report model
# ---------------------------------------------------------------------------


class GenerationReport(BaseModel):
    """Everything one generator run produced."""

    model_config = ConfigDict(frozen=True)

    project_dir: Path
    result: DetectionResult
    parameters: RenderParameters
    artifacts: RenderedArtifacts
    written: dict[str, Path] = Field(default_factory=dict)

    @property
    def dry_run(self) -> bool:
        return not self.written


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class DockerfileGenerator:
    """Inspects a project directory and generates its Docker artifacts."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self.docker_gen = DockerGenerator(config=self.config)

    # -- Public API --------------------------------------------------------

    @staticmethod
    def resolve(project_dir: str | Path | None) -> Path:
        """Return the absolute project path, or raise ``MissingInputError``."""
        if project_dir is None or str(project_dir).strip() == "":
            raise MissingInputError("Please provide a path to your application.")
        path = Path(project_dir).expanduser().resolve()
        if not path.exists():
            raise MissingInputError(f"Directory does not exist: {path}", path)
        if not path.is_dir():
            raise MissingInputError(f"Not a directory: {path}", path)
        return path

    async def inspect(self, project_dir: str | Path | None) -> DetectionResult:
        """Classify *project_dir*.

        Raises:
            MissingInputError: The path is missing or not a directory.
            ManifestParseError: ``package.json`` exists but is malformed.
        """
        return await self._inspect_resolved(self.resolve(project_dir))

    async def generate(
        self,
        project_dir: str | Path | None,
        output_dir: str | Path | None = None,
        *,
        dry_run: bool = False,
    ) -> GenerationReport:
        """Generate the three artifacts for *project_dir*.

        Args:
            project_dir: Directory to inspect.
            output_dir: Where to write the files. Defaults to *project_dir*.
            dry_run: Render only, write nothing.

        Returns:
            A ``GenerationReport``; ``written`` is empty on a dry run.
        """
        path = self.resolve(project_dir)
        result = await self._inspect_resolved(path)

        params = self.docker_gen.parameters(result, path.name)
        artifacts = self.docker_gen.render_parameters(params)

        written: dict[str, Path] = {}
        if not dry_run:
            target = Path(output_dir).expanduser().resolve() if output_dir else path
            written = await self.docker_gen.write_all(target, artifacts)

        return GenerationReport(
            project_dir=path,
            result=result,
            parameters=params,
            artifacts=artifacts,
            written=written,
        )

    # -- Internals ---------------------------------------------------------

    async def _inspect_resolved(self, path: Path) -> DetectionResult:
        listing = await asyncio.to_thread(list_directory, path)
        manifest_bytes = None
        if MANIFEST_FILENAME in listing and (path / MANIFEST_FILENAME).is_file():
            manifest_bytes = await asyncio.to_thread((path / MANIFEST_FILENAME).read_bytes)
        return classify(listing, manifest_bytes)
