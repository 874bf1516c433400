"""Project operations on top of an injected store."""

import dataclasses
import logging
import uuid
from typing import List, Optional, Sequence

from ..exceptions import ProjectNotFoundError
from ..models.project import ImportResult, SavedProject
from ..models.task import Task
from ..utils.datetime_utils import to_iso_timestamp
from .base import ProjectStore

logger = logging.getLogger(__name__)


def _require_name(name: str) -> str:
    if not name or not name.strip():
        raise ValueError("Project name must not be blank")
    return name.strip()


class ProjectManager:
    """Save, load, list, update, delete and duplicate named task collections."""

    def __init__(self, store: ProjectStore):
        self.store = store

    def save_project(self, name: str, tasks: Sequence[Task]) -> SavedProject:
        """Store tasks under a new project id."""
        now = to_iso_timestamp()
        project = SavedProject(
            id=str(uuid.uuid4()),
            name=_require_name(name),
            tasks=list(tasks),
            created_at=now,
            updated_at=now,
        )
        self.store.save(project)
        logger.info("Saved project %s (%s) with %d task(s)", project.id, project.name, len(project.tasks))
        return project

    def load_project(self, project_id: str) -> SavedProject:
        project = self.store.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def list_projects(self) -> List[SavedProject]:
        """Projects ordered by most recent update first."""
        return sorted(self.store.get_all(), key=lambda p: p.updated_at, reverse=True)

    def update_project(
        self,
        project_id: str,
        name: Optional[str] = None,
        tasks: Optional[Sequence[Task]] = None,
    ) -> SavedProject:
        """Rename a project and/or replace its tasks."""
        project = self.load_project(project_id)
        updated = dataclasses.replace(
            project,
            name=_require_name(name) if name is not None else project.name,
            tasks=list(tasks) if tasks is not None else project.tasks,
            updated_at=to_iso_timestamp(),
        )
        self.store.update(updated)
        logger.info("Updated project %s", project_id)
        return updated

    def delete_project(self, project_id: str) -> bool:
        deleted = self.store.delete(project_id)
        if deleted:
            logger.info("Deleted project %s", project_id)
        return deleted

    def duplicate_project(self, project_id: str, new_name: Optional[str] = None) -> SavedProject:
        """Copy a project under a fresh id, named "<name> (Copy)" by default."""
        source = self.load_project(project_id)
        return self.save_project(new_name or f"{source.name} (Copy)", source.tasks)

    def merge_import(self, project_id: str, result: ImportResult) -> SavedProject:
        """Append imported tasks to a project, re-keying any id it already holds."""
        project = self.load_project(project_id)
        seen = {task.id for task in project.tasks}

        merged = list(project.tasks)
        for task in result.tasks:
            if task.id in seen:
                task = dataclasses.replace(task, id=str(uuid.uuid4()))
            seen.add(task.id)
            merged.append(task)

        return self.update_project(project_id, tasks=merged)
