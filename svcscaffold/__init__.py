"""svcscaffold -- creates new serverless service projects.

Validates a service name/stage/region, loads the bundled ``serverless.yaml``
and ``package.json`` templates, and writes a ready-to-edit service directory
containing a handler stub, the rendered manifest and package descriptor, and a
``serverless.env.yaml`` seeded for the requested stage and region.

Quick usage::

    from svcscaffold import Config, CliSession, CreateOptions, ServiceCreator

    creator = ServiceCreator(Config(), CliSession())
    outcome = await creator.run(
        CreateOptions(name="my-service", stage="dev", region="us-east-1")
    )
    outcome.raise_for_error()
"""

from svcscaffold.config import Config
from svcscaffold.creator import ServiceCreator
from svcscaffold.errors import (
    DirectoryCreateError,
    FileWriteError,
    InvalidNameError,
    MissingFieldError,
    ScaffoldError,
    TemplateLoadError,
)
from svcscaffold.models import (
    CreateOptions,
    EnvironmentDocument,
    PipelineOutcome,
    ResolvedService,
    ScaffoldResult,
    ServiceIdentity,
    TemplatePair,
)
from svcscaffold.session import CliSession
from svcscaffold.templates import TemplateLoader, render_document

__all__ = [
    "CliSession",
    "Config",
    "CreateOptions",
    "DirectoryCreateError",
    "EnvironmentDocument",
    "FileWriteError",
    "InvalidNameError",
    "MissingFieldError",
    "PipelineOutcome",
    "ResolvedService",
    "ScaffoldError",
    "ScaffoldResult",
    "ServiceCreator",
    "ServiceIdentity",
    "TemplateLoadError",
    "TemplateLoader",
    "TemplatePair",
    "render_document",
]
