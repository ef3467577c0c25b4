"""Pydantic v2 models for the service create workflow.

Defines the values handed from one pipeline step to the next: the raw
options, the validated identity, the parsed templates, the environment
document, and the results of a scaffold run.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

SERVICE_NAME_PATTERN = r"^[a-zA-Z][0-9a-zA-Z-]+$"
SERVICE_NAME_RE = re.compile(SERVICE_NAME_PATTERN)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class CreateOptions(BaseModel):
    """Options as supplied by the user; any of them may still be missing."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Service name")
    stage: Optional[str] = Field(default=None, description="Deployment stage, e.g. 'dev'")
    region: Optional[str] = Field(default=None, description="Deployment region")

    def missing_fields(self) -> list[str]:
        """Return the names of the fields that are ``None`` or empty."""
        return [
            field
            for field in ("name", "stage", "region")
            if not getattr(self, field)
        ]


class ServiceIdentity(BaseModel):
    """A validated name/stage/region triple. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=SERVICE_NAME_PATTERN)
    stage: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)


class ResolvedService(BaseModel):
    """Output of the validate step: the identity and where it will live."""
    model_config = ConfigDict(frozen=True)

    identity: ServiceIdentity
    service_path: Path


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

class TemplatePair(BaseModel):
    """The two parsed templates. Each parse produces a fresh pair."""
    manifest: dict[str, Any]
    package: dict[str, Any]


class RegionVariables(BaseModel):
    """Variables of every region configured for one stage."""
    regions: dict[str, dict[str, Any]] = Field(default_factory=dict)


class EnvironmentDocument(BaseModel):
    """Per-stage/per-region deployment variables (``serverless.env.yaml``)."""
    stages: dict[str, RegionVariables] = Field(default_factory=dict)

    @classmethod
    def seed(cls, identity: ServiceIdentity) -> "EnvironmentDocument":
        """Create a document with an empty object for *identity*'s stage/region."""
        return cls(stages={identity.stage: RegionVariables(regions={identity.region: {}})})


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class ScaffoldResult(BaseModel):
    """Files written by one scaffold run, in write order."""
    service_path: Path
    files: list[Path] = Field(default_factory=list)


class PipelineOutcome(BaseModel):
    """Outcome of a full create run.

    On failure ``failed_step`` names the step that stopped the run and
    ``error`` holds the exception it raised; the steps listed in
    ``completed_steps`` already took effect.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool = False
    completed_steps: list[str] = Field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[Exception] = None
    resolved: Optional[ResolvedService] = None
    result: Optional[ScaffoldResult] = None

    def raise_for_error(self) -> None:
        """Re-raise the error that stopped the run, if any."""
        if self.error is not None:
            raise self.error
