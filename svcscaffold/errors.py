"""Exception hierarchy for the service scaffolding pipeline.

Every failure raised by :mod:`svcscaffold.creator` derives from
:class:`ScaffoldError` and records the pipeline step that produced it, so the
CLI (or any other host) can report where the run stopped.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    step: str = "scaffold"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# ---------------------------------------------------------------------------
# Validate
# ---------------------------------------------------------------------------


class MissingFieldError(ScaffoldError):
    """Raised when ``name``, ``stage`` or ``region`` is absent or empty."""

    step = "validate"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required option: {field}")


class InvalidNameError(ScaffoldError):
    """Raised when the service name does not match the naming grammar."""

    step = "validate"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid service name {name!r}: it must start with a letter and "
            "contain only alphanumeric characters and hyphens"
        )


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------


class TemplateLoadError(ScaffoldError):
    """Raised when a template is missing, malformed, or empty."""

    step = "parse"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not load template {self.path}: {reason}")


# ---------------------------------------------------------------------------
# Scaffold
# ---------------------------------------------------------------------------


class DirectoryCreateError(ScaffoldError):
    """Raised when the service directory cannot be created."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Could not create directory {self.path}")


class FileWriteError(ScaffoldError):
    """Raised when a scaffold artifact cannot be written."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Could not write file {self.path}")
