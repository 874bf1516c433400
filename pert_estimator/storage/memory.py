"""In-memory project store."""

from typing import Dict, List, Optional

from ..exceptions import ProjectNotFoundError
from ..models.project import SavedProject
from .base import ProjectStore


class InMemoryProjectStore(ProjectStore):
    """Dict-backed store, useful for sessions and tests."""

    def __init__(self):
        self._projects: Dict[str, SavedProject] = {}

    def get_all(self) -> List[SavedProject]:
        return list(self._projects.values())

    def get_by_id(self, project_id: str) -> Optional[SavedProject]:
        return self._projects.get(project_id)

    def save(self, project: SavedProject) -> None:
        if project.id in self._projects:
            raise ValueError(f"Project already exists: {project.id}")
        self._projects[project.id] = project

    def update(self, project: SavedProject) -> None:
        if project.id not in self._projects:
            raise ProjectNotFoundError(project.id)
        self._projects[project.id] = project

    def delete(self, project_id: str) -> bool:
        return self._projects.pop(project_id, None) is not None
