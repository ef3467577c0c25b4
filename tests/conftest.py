"""Shared pytest fixtures for the svcscaffold test suite.

Provides reusable fixtures for:
- Configs rooted in a temporary directory
- Fake host sessions (interactive and non-interactive)
- Valid create options and a resolved service
- A throw-away template directory that tests may break on purpose
"""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from svcscaffold.config import Config
from svcscaffold.creator import ServiceCreator
from svcscaffold.models import CreateOptions, ResolvedService, ServiceIdentity

BUNDLED_TEMPLATES = Path(__file__).resolve().parent.parent / "svcscaffold" / "templates"


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_svc_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's SVC_* variables never leak into the tests."""
    for var in ("SVC_TEMPLATE_DIR", "SVC_INTERACTIVE", "SVC_DEFAULT_STAGE", "SVC_DEFAULT_REGION"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_session() -> MagicMock:
    """Non-interactive session double recording greeting/log/ask calls."""
    session = MagicMock()
    session.interactive = False
    session.ask.return_value = "answer"
    return session


@pytest.fixture
def interactive_session(fake_session: MagicMock) -> MagicMock:
    fake_session.interactive = True
    return fake_session


# ---------------------------------------------------------------------------
# Config & creator
# ---------------------------------------------------------------------------

@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Copy of the bundled templates that a test may modify or delete."""
    target = tmp_path / "templates"
    shutil.copytree(BUNDLED_TEMPLATES, target)
    return target


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory new services are created in."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def config(workspace: Path) -> Config:
    return Config(cwd=workspace)


@pytest.fixture
def creator(config: Config, fake_session: MagicMock) -> ServiceCreator:
    return ServiceCreator(config, fake_session)


# ---------------------------------------------------------------------------
# Options & identities
# ---------------------------------------------------------------------------

@pytest.fixture
def valid_options() -> CreateOptions:
    return CreateOptions(name="valid-service-name", stage="dev", region="aws_useast1")


@pytest.fixture
def resolved_service(workspace: Path) -> ResolvedService:
    """The ``new-service`` / ``dev`` / ``aws_useast1`` scenario, already validated."""
    return ResolvedService(
        identity=ServiceIdentity(name="new-service", stage="dev", region="aws_useast1"),
        service_path=workspace / "new-service",
    )
