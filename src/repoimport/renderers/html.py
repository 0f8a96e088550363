"""Markdown to HTML description renderer."""

from __future__ import annotations

import markdown

from repoimport.contracts.renderer import DescriptionRenderer

_EXTENSIONS = ("fenced_code", "tables", "sane_lists")


class HtmlRenderer(DescriptionRenderer):
    """Renders README markdown to HTML for the rich-text description field.

    Python-Markdown keeps mid-word underscores literal (``snake_case_name``
    is not emphasized); the ``legacy_em`` extension, which would change that,
    is never enabled.
    """

    def __init__(self, extensions: tuple[str, ...] = _EXTENSIONS) -> None:
        if "legacy_em" in extensions:
            raise ValueError("legacy_em would emphasize mid-word underscores")
        self._extensions = list(extensions)

    def render(self, text: str) -> str:
        if not text.strip():
            return ""
        return markdown.markdown(text, extensions=self._extensions, output_format="html")
