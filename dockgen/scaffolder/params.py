"""Rendering parameters derived from a detection result.

Every parameter has a hard-coded default, so derivation cannot fail: a
manifest without scripts, a blank start script or a script set without any
``PORT=`` hint all fall back to the stock values.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from dockgen.config import Config
from dockgen.detector.models import AppCategory, DetectionResult, Manifest
from dockgen.utils import first_token, to_service_name

DEFAULT_BUILD_COMMAND = "react-scripts build"
DEFAULT_START_COMMAND = "node server.js"

_PORT_HINT = re.compile(r"PORT=(\d+)")


class RenderParameters(BaseModel):
    """Values substituted into the templates for one project."""

    model_config = ConfigDict(frozen=True)

    category: AppCategory
    service_name: str
    compose_port: int
    port: Optional[int] = Field(default=None, description="EXPOSE port; None for generic")
    start_token: Optional[str] = Field(default=None, description="npm script run by node images")
    build_token: Optional[str] = Field(default=None, description="npm script run by react builds")

    def template_context(self, config: Config) -> dict[str, Any]:
        """Flatten into the dict handed to the Jinja2 templates."""
        return {
            "category": self.category.value,
            "service_name": self.service_name,
            "compose_port": self.compose_port,
            "port": self.port,
            "start_token": self.start_token,
            "build_token": self.build_token,
            "images": config.images.model_dump(),
        }


def derive_parameters(
    result: DetectionResult,
    base_name: str,
    config: Optional[Config] = None,
) -> RenderParameters:
    """Compute the rendering parameters for *result*.

    Args:
        result: Classification of the project.
        base_name: Base name of the project directory (service name source).
        config: Port defaults and fallback service name. Defaults to stock.
    """
    config = config or Config()
    ports = config.ports
    manifest = result.manifest or Manifest()
    service_name = to_service_name(base_name, fallback=config.fallback_service_name)

    if result.category is AppCategory.REACT:
        return RenderParameters(
            category=result.category,
            service_name=service_name,
            compose_port=ports.react,
            port=ports.react,
            build_token=first_token(manifest.script("build"), DEFAULT_BUILD_COMMAND),
        )

    if result.category is AppCategory.NODE_GENERIC:
        port = extract_port(manifest, default=ports.node)
        return RenderParameters(
            category=result.category,
            service_name=service_name,
            compose_port=port,
            port=port,
            start_token=first_token(manifest.script("start"), DEFAULT_START_COMMAND),
        )

    if result.category is AppCategory.PYTHON:
        return RenderParameters(
            category=result.category,
            service_name=service_name,
            compose_port=ports.python,
            port=ports.python,
        )

    return RenderParameters(
        category=AppCategory.GENERIC,
        service_name=service_name,
        compose_port=ports.generic,
    )


def extract_port(manifest: Manifest, default: int) -> int:
    """Return the first ``PORT=<digits>`` value across all scripts.

    Scripts are scanned in manifest order.  Hints outside ``1..65535`` are
    ignored and the search continues.
    """
    joined = " ".join(manifest.scripts.values())
    for match in _PORT_HINT.finditer(joined):
        port = int(match.group(1))
        if 0 < port <= 65535:
            return port
    return default
