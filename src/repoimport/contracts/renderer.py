"""Description renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DescriptionRenderer(ABC):
    @abstractmethod
    def render(self, text: str) -> str:
        """Render README *text* for display in the project description field."""
