"""Base project store interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.project import SavedProject


class ProjectStore(ABC):
    """Abstract persistence port for saved projects, keyed by project id."""

    @abstractmethod
    def get_all(self) -> List[SavedProject]:
        """Return every stored project."""
        pass

    @abstractmethod
    def get_by_id(self, project_id: str) -> Optional[SavedProject]:
        """Return the project with ``project_id``, or None."""
        pass

    @abstractmethod
    def save(self, project: SavedProject) -> None:
        """Insert a new project."""
        pass

    @abstractmethod
    def update(self, project: SavedProject) -> None:
        """Replace an existing project with the same id."""
        pass

    @abstractmethod
    def delete(self, project_id: str) -> bool:
        """Remove a project; return whether it existed."""
        pass
