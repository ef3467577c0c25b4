"""Service create workflow.

Implements the five steps that turn a name/stage/region into a new service
directory:

Step 1: PROMPT    -- greet and collect missing options (interactive only).
Step 2: VALIDATE  -- check the options and resolve the service path.
Step 3: PARSE     -- load the manifest and package descriptor templates.
Step 4: SCAFFOLD  -- write handler, manifest, package descriptor, env document.
Step 5: FINISH    -- print a short summary.

Each step takes the previous step's output and returns its own; nothing is
shared through mutable state.  Scaffold writes are atomic per file but the run
as a whole is not transactional: if a later write fails, files written by
earlier steps stay on disk.

Usage::

    creator = ServiceCreator(Config(), CliSession())
    outcome = await creator.run(CreateOptions(name="my-service", stage="dev",
                                              region="us-east-1"))
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

from .codec import detect_format, dump_document
from .config import Config
from .errors import (
    DirectoryCreateError,
    FileWriteError,
    InvalidNameError,
    MissingFieldError,
    ScaffoldError,
)
from .models import (
    SERVICE_NAME_RE,
    CreateOptions,
    EnvironmentDocument,
    PipelineOutcome,
    ResolvedService,
    ScaffoldResult,
    ServiceIdentity,
    TemplatePair,
)
from .session import Session
from .templates import TemplateLoader, render_document
from .utils import ensure_dir, write_text_atomic


class ServiceCreator:
    """Creates a new service directory from the bundled templates.

    Attributes:
        config: Filenames, template location and defaults.
        session: Host session used for greeting, questions and log lines.
        loader: Template loader bound to ``config.template_dir``.
    """

    def __init__(self, config: Config, session: Session) -> None:
        self.config = config
        self.session = session
        self.loader = TemplateLoader(config.template_dir)

    # ------------------------------------------------------------------
    # Step 1: PROMPT
    # ------------------------------------------------------------------

    async def prompt(self, options: CreateOptions) -> CreateOptions:
        """Greet the user and ask for any missing option.

        Non-interactive sessions get the options back untouched and see no
        output.  Missing options are *not* an error here; validation reports
        them.
        """
        if not self.session.interactive:
            return options

        self.session.display_greeting()

        answers: dict[str, Any] = {}
        defaults = {
            "name": None,
            "stage": self.config.default_stage,
            "region": self.config.default_region,
        }
        for field in options.missing_fields():
            label = f"Service {field}"
            try:
                answers[field] = await asyncio.to_thread(
                    self.session.ask, label, defaults[field]
                )
            except EOFError:
                # Input closed; leave the rest for validation to report.
                break
        if not answers:
            return options
        return options.model_copy(update=answers)

    # ------------------------------------------------------------------
    # Step 2: VALIDATE
    # ------------------------------------------------------------------

    def validate(self, options: CreateOptions) -> ResolvedService:
        """Check the options and resolve where the service will be created.

        Raises:
            MissingFieldError: ``name``, ``stage`` or ``region`` is missing.
            InvalidNameError: ``name`` does not match the naming grammar.
        """
        for field in ("name", "stage", "region"):
            if not getattr(options, field):
                raise MissingFieldError(field)

        name = options.name or ""
        if not SERVICE_NAME_RE.fullmatch(name):
            raise InvalidNameError(name)

        identity = ServiceIdentity(
            name=name, stage=options.stage, region=options.region
        )
        return ResolvedService(
            identity=identity,
            service_path=self.config.base_dir / identity.name,
        )

    # ------------------------------------------------------------------
    # Step 3: PARSE
    # ------------------------------------------------------------------

    async def parse(self) -> TemplatePair:
        """Load fresh copies of the manifest and package descriptor templates."""
        return await self.loader.load_pair(
            self.config.manifest_filename, self.config.package_filename
        )

    # ------------------------------------------------------------------
    # Step 4: SCAFFOLD
    # ------------------------------------------------------------------

    async def scaffold(
        self,
        resolved: ResolvedService,
        manifest_template: dict[str, Any],
        package_template: dict[str, Any],
    ) -> ScaffoldResult:
        """Write the service artifacts into ``resolved.service_path``.

        The templates are rendered into new documents; the arguments are left
        unchanged.  Existing files are overwritten.

        Raises:
            DirectoryCreateError: The service directory cannot be created.
            FileWriteError: One of the artifacts cannot be written.
            TemplateLoadError: The handler stub cannot be read.
        """
        identity = resolved.identity
        root = resolved.service_path
        result = ScaffoldResult(service_path=root)

        # 1. Service directory
        try:
            await asyncio.to_thread(ensure_dir, root)
        except OSError as exc:
            raise DirectoryCreateError(root) from exc

        # 2. Handler stub (static)
        handler = await asyncio.to_thread(
            self.loader.read_static, self.config.handler_filename
        )
        result.files.append(
            await self._write(root / self.config.handler_filename, handler)
        )

        # 3. Manifest
        manifest = render_document(manifest_template, {"service": identity.name})
        result.files.append(
            await self._write_document(root / self.config.manifest_filename, manifest)
        )

        # 4. Package descriptor
        package = render_document(package_template, {"name": identity.name})
        result.files.append(
            await self._write_document(root / self.config.package_filename, package)
        )

        # 5. Environment document
        env = EnvironmentDocument.seed(identity).model_dump()
        result.files.append(
            await self._write_document(root / self.config.env_filename, env)
        )

        return result

    async def _write_document(self, path: Path, document: dict[str, Any]) -> Path:
        return await self._write(path, dump_document(document, detect_format(path)))

    async def _write(self, path: Path, content: str) -> Path:
        try:
            return await asyncio.to_thread(write_text_atomic, path, content)
        except OSError as exc:
            raise FileWriteError(path) from exc

    # ------------------------------------------------------------------
    # Step 5: FINISH
    # ------------------------------------------------------------------

    def finish(self, resolved: ResolvedService) -> None:
        """Log the five-line completion summary."""
        identity = resolved.identity
        files = ", ".join(
            (
                self.config.handler_filename,
                self.config.manifest_filename,
                self.config.package_filename,
                self.config.env_filename,
            )
        )
        for line in (
            f'Successfully created service "{identity.name}" in {resolved.service_path}',
            f"  stage: {identity.stage}, region: {identity.region}",
            f"  files: {files}",
            f"Next: cd {identity.name}",
            f"Then edit {self.config.handler_filename} and deploy your new service.",
        ):
            self.session.log(line)

    # ------------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------------

    async def run(self, options: CreateOptions) -> PipelineOutcome:
        """Run all five steps in order and report how far the run got.

        A :class:`ScaffoldError` stops the run and is stored on the returned
        outcome together with the name of the step that raised it.  Any other
        exception propagates unchanged.
        """
        outcome = PipelineOutcome()
        step: Optional[str] = None
        try:
            step = "prompt"
            options = await self.prompt(options)
            outcome.completed_steps.append(step)

            step = "validate"
            resolved = self.validate(options)
            outcome.resolved = resolved
            outcome.completed_steps.append(step)

            step = "parse"
            templates = await self.parse()
            outcome.completed_steps.append(step)

            step = "scaffold"
            outcome.result = await self.scaffold(
                resolved, templates.manifest, templates.package
            )
            outcome.completed_steps.append(step)

            step = "finish"
            self.finish(resolved)
            outcome.completed_steps.append(step)
        except ScaffoldError as exc:
            outcome.failed_step = step
            outcome.error = exc
            return outcome

        outcome.success = True
        return outcome
