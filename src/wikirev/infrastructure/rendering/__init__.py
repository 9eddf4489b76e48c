"""Rendering adapters."""

from wikirev.infrastructure.rendering.http_renderer import HttpRenderer

__all__ = ["HttpRenderer"]
