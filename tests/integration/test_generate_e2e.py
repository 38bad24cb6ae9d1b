"""Integration tests for the inspect-then-render pipeline.

These tests run the real classifier, renderer and writer end-to-end against
project directories on disk and verify that the generated files are
well-formed.

No external services (Docker, registries) are required.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from dockgen.detector import AppCategory
from dockgen.scaffolder import DockerfileGenerator


def _instructions(dockerfile: str) -> list[str]:
    """Return the live (non-comment, non-blank) Dockerfile lines."""
    return [line for line in dockerfile.splitlines() if line and not line.startswith("#")]


@pytest.mark.integration
class TestEndToEnd:
    async def test_requirements_only_project(self, make_project):
        project = make_project("ml-service", {"requirements.txt": "fastapi\n"})
        report = await DockerfileGenerator().generate(project)

        assert report.result.category is AppCategory.PYTHON
        dockerfile = (project / "Dockerfile").read_text(encoding="utf-8")
        assert "EXPOSE 8000" in _instructions(dockerfile)
        ignore = (project / ".dockerignore").read_text(encoding="utf-8").splitlines()
        assert "venv/" in ignore

    async def test_react_project(self, react_project):
        report = await DockerfileGenerator().generate(react_project)

        assert report.result.category is AppCategory.REACT
        instructions = _instructions((react_project / "Dockerfile").read_text(encoding="utf-8"))
        assert instructions[0] == "FROM node:16-alpine AS build"
        assert "RUN npm run react-scripts" in instructions
        assert instructions[-1] == 'CMD ["nginx", "-g", "daemon off;"]'

    async def test_node_project(self, node_project):
        await DockerfileGenerator().generate(node_project)
        instructions = _instructions((node_project / "Dockerfile").read_text(encoding="utf-8"))
        assert "EXPOSE 4000" in instructions
        assert instructions[-1] == 'CMD ["npm", "run", "node"]'

    @pytest.mark.parametrize(
        ("fixture_name", "service", "port"),
        [
            ("react_project", "storefront", "80:80"),
            ("node_project", "orders-api", "4000:4000"),
            ("python_project", "flask-app", "8000:8000"),
            ("generic_project", "static-site", "3000:3000"),
        ],
    )
    async def test_compose_is_valid_yaml(self, request, fixture_name, service, port):
        project: Path = request.getfixturevalue(fixture_name)
        await DockerfileGenerator().generate(project)

        compose = yaml.safe_load((project / "docker-compose.yml").read_text(encoding="utf-8"))
        assert compose["version"] == "3"
        assert list(compose["services"]) == [service]
        svc = compose["services"][service]
        assert svc["build"] == "."
        assert svc["ports"] == [port]
        assert svc["volumes"] == [".:/app"]
        assert "environment" not in svc

    async def test_degenerate_directory_name(self, make_project):
        project = make_project("___", {"index.html": ""})
        await DockerfileGenerator().generate(project)
        compose = yaml.safe_load((project / "docker-compose.yml").read_text(encoding="utf-8"))
        assert list(compose["services"]) == ["app"]

    async def test_generic_project_has_no_language_block(self, generic_project):
        await DockerfileGenerator().generate(generic_project)
        ignore = (generic_project / ".dockerignore").read_text(encoding="utf-8").splitlines()
        assert ignore[-1] == "!README.md"
