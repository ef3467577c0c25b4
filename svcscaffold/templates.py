"""Template loading and rendering for service scaffolding.

Provides the TemplateLoader class which reads the template artifacts shipped in
``svcscaffold/templates/`` (or a configured override directory) and the
:func:`render_document` function which produces a new document from a template
and a small substitution record.
"""

from __future__ import annotations

import asyncio
import copy
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .codec import load_document
from .errors import TemplateLoadError
from .models import TemplatePair
from .utils import file_exists, read_text

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateLoader
# ---------------------------------------------------------------------------


class TemplateLoader:
    """Loads the manifest, package descriptor and handler stub templates.

    Documents are parsed from disk on every call; nothing is cached, so the
    caller always receives its own mutable copy.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)

    # -- Structured documents ----------------------------------------------

    def load(self, filename: str) -> dict[str, Any]:
        """Parse a single YAML/JSON template.

        Raises:
            TemplateLoadError: If the file is missing, malformed, or does not
                contain a non-empty mapping.
        """
        path = self.template_dir / filename
        if not file_exists(path):
            raise TemplateLoadError(path, "file not found")
        try:
            document = load_document(path)
        except (yaml.YAMLError, json.JSONDecodeError, ValueError) as exc:
            raise TemplateLoadError(path, f"malformed document ({exc})") from exc
        except OSError as exc:
            raise TemplateLoadError(path, str(exc)) from exc

        if not isinstance(document, dict) or not document:
            raise TemplateLoadError(path, "expected a non-empty mapping")
        return document

    async def load_pair(self, manifest_filename: str, package_filename: str) -> TemplatePair:
        """Load the manifest and package descriptor templates, in that order."""
        manifest = await asyncio.to_thread(self.load, manifest_filename)
        package = await asyncio.to_thread(self.load, package_filename)
        return TemplatePair(manifest=manifest, package=package)

    # -- Static files --------------------------------------------------------

    def read_static(self, filename: str) -> str:
        """Return the raw content of a non-templated file (e.g. the handler stub)."""
        path = self.template_dir / filename
        try:
            return read_text(path)
        except OSError as exc:
            raise TemplateLoadError(path, str(exc)) from exc


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_document(
    template: Mapping[str, Any], substitutions: Mapping[str, Any]
) -> dict[str, Any]:
    """Return a copy of *template* with the top-level *substitutions* applied.

    The template is deep-copied first; neither argument is modified.

    Examples::

        render_document({"service": "", "provider": "aws"}, {"service": "api"})
        -> {"service": "api", "provider": "aws"}
    """
    rendered = copy.deepcopy(dict(template))
    for key, value in substitutions.items():
        rendered[key] = copy.deepcopy(value)
    return rendered
