"""Jinja2 template rendering for project scaffolding.

Provides :class:`TemplateRenderer`, which turns the raw bytes of an embedded
template into rendered bytes for a given :class:`SubstitutionContext`.
Rendering is strict: an unknown variable or a syntax error raises
:class:`~gyatt.errors.RenderError` instead of producing partial output.
"""

from __future__ import annotations

import re
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError
from pydantic import BaseModel, ConfigDict, Field

from gyatt.errors import RenderError


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


class SubstitutionContext(BaseModel):
    """Values available to every template during one command invocation."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Name passed to `init`")

    def as_template_vars(self) -> dict[str, Any]:
        return self.model_dump()


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates held in memory.

    Templates are never looked up by the renderer itself; callers read the
    bytes from a :class:`~gyatt.scaffolder.store.ResourceStore` and pass them
    in, which keeps the renderer independent of where blobs live.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["slugify"] = _slugify_filter

    def render(
        self,
        template_bytes: bytes,
        context: SubstitutionContext,
        name: str = "<template>",
    ) -> bytes:
        """Render *template_bytes* with *context*.

        Args:
            template_bytes: UTF-8 encoded Jinja2 source.
            context: Values substituted into the template.
            name: Label used in error messages.

        Returns:
            The rendered output, UTF-8 encoded.

        Raises:
            RenderError: If the source is not valid UTF-8, does not parse, or
                references a variable the context does not define.
        """
        try:
            source = template_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RenderError(name, f"template is not valid UTF-8 ({exc})") from exc

        try:
            template = self.env.from_string(source)
            rendered = template.render(**context.as_template_vars())
        except TemplateError as exc:
            raise RenderError(name, str(exc)) from exc

        return rendered.encode("utf-8")


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _slugify_filter(value: str) -> str:
    """Convert a string to a URL/filename-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")
