"""Project store persisted to a single local JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from ..exceptions import InvalidEstimateError, MalformedInputError, ProjectNotFoundError
from ..formats.json_format import task_from_input
from ..models.inputs import SavedProjectInput, describe_validation_error
from ..models.project import SavedProject
from .base import ProjectStore

logger = logging.getLogger(__name__)


def project_from_dict(data: Any) -> SavedProject:
    """Rebuild a saved project, validating every stored task."""
    try:
        record = SavedProjectInput.model_validate(data)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid stored project: {describe_validation_error(e)}") from e

    try:
        tasks = [task_from_input(item) for item in record.tasks]
    except InvalidEstimateError as e:
        raise MalformedInputError(f"Stored project {record.id}: {e}") from e

    return SavedProject(
        id=record.id,
        name=record.name,
        tasks=tasks,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class JsonFileProjectStore(ProjectStore):
    """Keeps all projects as a JSON array in one file, rewritten on each change."""

    def __init__(self, path: str, indent: int = 2):
        self.path = Path(path)
        self.indent = indent

    def _read(self) -> List[SavedProject]:
        if not self.path.exists():
            return []

        with open(self.path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise MalformedInputError(f"Corrupt project file {self.path}: {e}") from e

        if not isinstance(data, list):
            raise MalformedInputError(f"Project file {self.path} must contain a list")
        return [project_from_dict(item) for item in data]

    def _write(self, projects: List[SavedProject]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump([p.to_dict() for p in projects], f, indent=self.indent, ensure_ascii=False)
        logger.debug("Wrote %d project(s) to %s", len(projects), self.path)

    def get_all(self) -> List[SavedProject]:
        return self._read()

    def get_by_id(self, project_id: str) -> Optional[SavedProject]:
        return next((p for p in self._read() if p.id == project_id), None)

    def save(self, project: SavedProject) -> None:
        projects = self._read()
        if any(p.id == project.id for p in projects):
            raise ValueError(f"Project already exists: {project.id}")
        projects.append(project)
        self._write(projects)

    def update(self, project: SavedProject) -> None:
        projects = self._read()
        for index, existing in enumerate(projects):
            if existing.id == project.id:
                projects[index] = project
                self._write(projects)
                return
        raise ProjectNotFoundError(project.id)

    def delete(self, project_id: str) -> bool:
        projects = self._read()
        remaining = [p for p in projects if p.id != project_id]
        if len(remaining) == len(projects):
            return False
        self._write(remaining)
        return True
