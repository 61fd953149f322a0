"""View renderers."""

from appdocs.providers.views.jinja_adapter import JinjaViewRenderer

__all__ = ["JinjaViewRenderer"]
