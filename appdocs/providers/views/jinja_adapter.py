"""Jinja2 view renderer.

Renders HTML templates addressed by a file:// URI or a filesystem path.
The view model is exposed to templates as ``model``. Output is
autoescaped; undefined variables are errors.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

import structlog
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from appdocs.providers.base import ViewRenderer
from appdocs.providers.errors import TemplateNotFoundError, ViewRenderError

logger = structlog.get_logger()


def format_money(value: Decimal | int | float) -> str:
    """Format an amount with thousands separators and two decimals."""
    return f"{Decimal(value):,.2f}"


def format_date(value: Any) -> str:
    """Format a date as 'DD Month YYYY'."""
    return value.strftime("%d %B %Y")


def template_file_path(full_path: str) -> Path:
    """Convert a file:// URI or plain path to a filesystem Path.

    Raises:
        TemplateNotFoundError: For URI schemes other than file://.
    """
    parsed = urlparse(full_path)
    if parsed.scheme == "file":
        return Path(url2pathname(unquote(parsed.path)))
    # Single-letter schemes are Windows drive letters, not URIs.
    if parsed.scheme and len(parsed.scheme) > 1:
        raise TemplateNotFoundError(
            full_path, f"Unsupported template URI scheme '{parsed.scheme}'"
        )
    return Path(full_path)


@lru_cache(maxsize=32)
def _environment(directory: str) -> Environment:
    env = Environment(
        loader=FileSystemLoader(directory),
        autoescape=select_autoescape(["html", "htm"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["money"] = format_money
    env.filters["long_date"] = format_date
    return env


class JinjaViewRenderer(ViewRenderer):
    """Renders jinja2 templates from the filesystem."""

    def render(self, full_path: str, view_model: Any) -> str:
        path = template_file_path(full_path)
        env = _environment(str(path.parent))

        try:
            markup = env.get_template(path.name).render(model=view_model)
        except TemplateNotFound as e:
            logger.error("view_template_missing", path=full_path, name=e.name)
            raise TemplateNotFoundError(full_path) from e
        except TemplateError as e:
            logger.error(
                "view_render_failed",
                path=full_path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ViewRenderError(f"Failed to render '{full_path}': {e}") from e

        logger.debug("view_render_complete", path=full_path, length=len(markup))
        return markup
