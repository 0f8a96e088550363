"""Renderer factory."""

from __future__ import annotations

from repoimport.contracts.renderer import DescriptionRenderer
from repoimport.renderers.html import HtmlRenderer

RENDERERS: dict[str, type[DescriptionRenderer]] = {"html": HtmlRenderer}


def create_renderer(name: str, **kwargs: object) -> DescriptionRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    return renderer_cls(**kwargs)
