"""Import engine."""

from repoimport.engine.engine import ImportEngine
from repoimport.engine.mapping import map_collaborators, map_project

__all__ = ["ImportEngine", "map_collaborators", "map_project"]
