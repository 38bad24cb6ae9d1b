"""Pydantic v2 models for project classification.

Defines the closed set of application categories, the partial schema read
from a ``package.json`` manifest, and the immutable detection result that
the renderer consumes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AppCategory(str, Enum):
    """Detected application type. ``GENERIC`` is the universal fallback."""
    REACT = "react"
    NODE_GENERIC = "node"
    PYTHON = "python"
    GENERIC = "generic"


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

class Manifest(BaseModel):
    """The subset of ``package.json`` the generator reads.

    Every field is optional.  A field that is missing or has the wrong shape
    (e.g. ``"scripts": []``) is treated as an empty mapping; other keys are
    kept but never looked at.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    @field_validator("scripts", "dependencies", "dev_dependencies", mode="before")
    @classmethod
    def _coerce_mapping(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(k): "" if v is None else str(v) for k, v in value.items()}

    def dependency_names(self) -> set[str]:
        """Union of ``dependencies`` and ``devDependencies`` keys."""
        return set(self.dependencies) | set(self.dev_dependencies)

    def script(self, name: str) -> Optional[str]:
        """Return the command line for script *name*, or ``None``."""
        return self.scripts.get(name)


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

class DetectionResult(BaseModel):
    """Classification of one project directory.

    ``manifest`` is only set for the manifest-bearing categories
    (``REACT`` and ``NODE_GENERIC``).  ``evidence`` lists the signals that
    decided the category, in the order they were checked.
    """

    model_config = ConfigDict(frozen=True)

    category: AppCategory = Field(default=AppCategory.GENERIC)
    manifest: Optional[Manifest] = Field(default=None)
    evidence: tuple[str, ...] = Field(default=())

    @property
    def label(self) -> str:
        """Short category label shown to the user, e.g. ``"node"``."""
        return self.category.value
