"""Shared pytest fixtures for the dockgen test suite.

Provides reusable fixtures for:
- Sample package.json manifests (React, Express, bare)
- Project directories on disk for each application category
- A factory for ad-hoc project layouts
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------

@pytest.fixture
def react_manifest() -> dict[str, Any]:
    """A create-react-app style package.json."""
    return {
        "name": "storefront",
        "version": "0.1.0",
        "private": True,
        "dependencies": {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "react-scripts": "5.0.1",
        },
        "scripts": {
            "start": "react-scripts start",
            "build": "react-scripts build",
            "test": "react-scripts test",
        },
    }


@pytest.fixture
def express_manifest() -> dict[str, Any]:
    """An Express API with a PORT hint in its dev script."""
    return {
        "name": "orders-api",
        "version": "1.0.0",
        "main": "index.js",
        "dependencies": {"express": "^4.18.2"},
        "devDependencies": {"nodemon": "^3.0.1"},
        "scripts": {
            "dev": "PORT=4000 nodemon index.js",
            "start": "node index.js",
        },
    }


# ---------------------------------------------------------------------------
# Project directories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a project directory with the given files.

    ``files`` maps relative names to content; a ``dict`` value is written as
    JSON.  Returns the project path.
    """

    def _make(name: str = "test-project", files: dict[str, Any] | None = None) -> Path:
        project = tmp_path / name
        project.mkdir()
        for rel, content in (files or {}).items():
            target = project / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, dict):
                content = json.dumps(content, indent=2)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return project

    return _make


@pytest.fixture
def react_project(make_project, react_manifest) -> Path:
    return make_project(
        "storefront",
        {"package.json": react_manifest, "src/App.js": "export default () => null;\n"},
    )


@pytest.fixture
def node_project(make_project, express_manifest) -> Path:
    return make_project(
        "orders-api",
        {"package.json": express_manifest, "index.js": "require('express')();\n"},
    )


@pytest.fixture
def python_project(make_project) -> Path:
    return make_project("flask-app", {"requirements.txt": "flask==3.0.0\n"})


@pytest.fixture
def generic_project(make_project) -> Path:
    return make_project("static-site", {"index.html": "<html></html>\n", "start.sh": "#!/bin/sh\n"})
