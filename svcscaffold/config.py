"""svcscaffold configuration.

Typed settings for the create workflow. Uses a Pydantic v2 model so values are
validated at construction time and can be overridden from the environment
without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from .templates import DEFAULT_TEMPLATE_DIR

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings consumed by :class:`~svcscaffold.creator.ServiceCreator`.

    Instances are typically created once by the CLI entry point and passed to
    the creator.  ``cwd`` is resolved lazily so that a ``Config`` built at
    import time still follows later ``chdir`` calls.
    """

    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    handler_filename: str = Field(default="handler.js")
    manifest_filename: str = Field(default="serverless.yaml")
    package_filename: str = Field(default="package.json")
    env_filename: str = Field(default="serverless.env.yaml")

    interactive: bool = Field(default=False, description="Prompt for missing options")
    cwd: Optional[Path] = Field(
        default=None, description="Parent of new services (defaults to the process cwd)"
    )
    default_stage: str = Field(default="dev", min_length=1)
    default_region: str = Field(default="us-east-1", min_length=1)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def base_dir(self) -> Path:
        """Directory new services are created in."""
        return self.cwd if self.cwd is not None else Path.cwd()

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SVC_TEMPLATE_DIR, SVC_INTERACTIVE, SVC_DEFAULT_STAGE,
            SVC_DEFAULT_REGION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SVC_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["SVC_TEMPLATE_DIR"])
        if os.environ.get("SVC_INTERACTIVE"):
            kwargs["interactive"] = os.environ["SVC_INTERACTIVE"].strip().lower() in _TRUTHY
        if os.environ.get("SVC_DEFAULT_STAGE"):
            kwargs["default_stage"] = os.environ["SVC_DEFAULT_STAGE"]
        if os.environ.get("SVC_DEFAULT_REGION"):
            kwargs["default_region"] = os.environ["SVC_DEFAULT_REGION"]
        return cls(**kwargs)
