"""Description renderers."""

from repoimport.renderers.factory import create_renderer
from repoimport.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer", "create_renderer"]
