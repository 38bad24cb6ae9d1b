"""dockgen configuration.

Typed configuration for the generator. All settings use Pydantic v2 models
so they can be validated at construction time and loaded from JSON or
environment variables without boiler-plate.  The defaults reproduce the
stock output byte-for-byte; overriding them only changes the substituted
values, never the shape of the generated files.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ImageConfig(BaseModel):
    """Base images used by the Dockerfile templates."""

    node: str = Field(default="node:16-alpine")
    nginx: str = Field(default="nginx:alpine")
    python: str = Field(default="python:3.9-slim")
    generic: str = Field(default="ubuntu:20.04")


class PortConfig(BaseModel):
    """Default port per application category.

    ``node`` is only a fallback: a ``PORT=<digits>`` hint in the manifest
    scripts always wins.  ``generic`` is used by the compose file alone,
    the generic Dockerfile never exposes a live port.
    """

    react: int = Field(default=80, ge=1, le=65535)
    node: int = Field(default=3000, ge=1, le=65535)
    python: int = Field(default=8000, ge=1, le=65535)
    generic: int = Field(default=3000, ge=1, le=65535)

    def as_dict(self) -> dict[str, int]:
        """Return a plain ``{category: port}`` mapping."""
        return {
            "react": self.react,
            "node": self.node,
            "python": self.python,
            "generic": self.generic,
        }


class OutputConfig(BaseModel):
    """File names the three artifacts are written under."""

    build_file: str = Field(default="Dockerfile")
    ignore_file: str = Field(default=".dockerignore")
    compose_file: str = Field(default="docker-compose.yml")


class Config(BaseModel):
    """Global dockgen configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``DockerfileGenerator`` / ``DockerGenerator``.
    """

    images: ImageConfig = Field(default_factory=ImageConfig)
    ports: PortConfig = Field(default_factory=PortConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    fallback_service_name: str = Field(default="app", pattern=r"^[a-z0-9][a-z0-9-]*$")

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from a JSON file.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Config`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DOCKGEN_NODE_IMAGE, DOCKGEN_NGINX_IMAGE, DOCKGEN_PYTHON_IMAGE,
            DOCKGEN_GENERIC_IMAGE, DOCKGEN_NODE_PORT, DOCKGEN_PYTHON_PORT,
            DOCKGEN_SERVICE_NAME.
        """
        image_kwargs: dict[str, Any] = {}
        for key in ("node", "nginx", "python", "generic"):
            value = os.environ.get(f"DOCKGEN_{key.upper()}_IMAGE")
            if value:
                image_kwargs[key] = value

        port_kwargs: dict[str, Any] = {}
        if os.environ.get("DOCKGEN_NODE_PORT"):
            port_kwargs["node"] = int(os.environ["DOCKGEN_NODE_PORT"])
        if os.environ.get("DOCKGEN_PYTHON_PORT"):
            port_kwargs["python"] = int(os.environ["DOCKGEN_PYTHON_PORT"])

        return cls(
            images=ImageConfig(**image_kwargs),
            ports=PortConfig(**port_kwargs),
            fallback_service_name=os.environ.get("DOCKGEN_SERVICE_NAME", "app"),
        )
