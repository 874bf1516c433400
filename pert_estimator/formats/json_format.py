"""JSON export envelope and import of envelope or bare task arrays."""

import json
import logging
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..engine.pert import create_task, validate_estimate
from ..exceptions import MalformedInputError
from ..models.inputs import EnvelopeTaskInput, TaskItemInput, describe_validation_error
from ..models.project import FORMAT_VERSION, ExportData, ImportResult
from ..models.task import ProjectSummary, Task
from ..utils.datetime_utils import to_iso_timestamp

logger = logging.getLogger(__name__)


def build_export_data(
    tasks: Sequence[Task],
    summary: ProjectSummary,
    project_name: Optional[str] = None,
    exported_at: Optional[datetime] = None,
) -> ExportData:
    """Assemble the versioned export envelope."""
    return ExportData(
        tasks=list(tasks),
        project_summary=summary,
        exported_at=to_iso_timestamp(exported_at),
        project_name=project_name,
        version=FORMAT_VERSION,
    )


def export_to_json(
    tasks: Sequence[Task],
    summary: ProjectSummary,
    project_name: Optional[str] = None,
    exported_at: Optional[datetime] = None,
    indent: int = 2,
) -> str:
    """Serialize tasks and their summary as a JSON export envelope."""
    envelope = build_export_data(tasks, summary, project_name, exported_at)
    return json.dumps(envelope.to_dict(), indent=indent, ensure_ascii=False)


def parse_task_item(item: Any, with_id: bool = False) -> TaskItemInput:
    """Validate a task-like object's shape.

    Envelope items (``with_id=True``) may carry a string id; bare-array items
    have any id ignored. Raises MalformedInputError when the item is
    structurally invalid. The ordering invariant is not checked here.
    """
    model = EnvelopeTaskInput if with_id else TaskItemInput
    try:
        return model.model_validate(item)
    except ValidationError as e:
        raise MalformedInputError(describe_validation_error(e)) from e


def task_from_input(item: TaskItemInput) -> Task:
    """Build a task from a validated item, recomputing derived fields."""
    return create_task(item.name, item.estimate.to_estimate(), item.task_id)


def task_from_dict(data: Any, keep_id: bool = True) -> Task:
    """Rebuild a task from its wire shape, recomputing derived fields.

    Raises MalformedInputError or InvalidEstimateError.
    """
    return task_from_input(parse_task_item(data, with_id=keep_id))


def _extract_items(payload: Any) -> Tuple[Optional[str], List[Any], bool]:
    """Return (project_name, items, keep_ids) for a recognised top-level shape."""
    if isinstance(payload, dict) and 'version' in payload and isinstance(payload.get('tasks'), list):
        project_name = payload.get('projectName')
        if not isinstance(project_name, str):
            project_name = None
        return project_name, payload['tasks'], True

    if isinstance(payload, list):
        return None, payload, False

    raise MalformedInputError(
        "Invalid format: expected an export envelope with 'version' and 'tasks', "
        "or an array of tasks"
    )


def import_from_json(content: str) -> ImportResult:
    """Parse JSON text into tasks, collecting per-item errors instead of aborting."""
    try:
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Invalid JSON: {e}") from e
        project_name, items, keep_ids = _extract_items(payload)
    except MalformedInputError as e:
        return ImportResult.failure(str(e))

    result = ImportResult(project_name=project_name)

    for index, item in enumerate(items, start=1):
        try:
            parsed = parse_task_item(item, with_id=keep_ids)
        except MalformedInputError as e:
            logger.debug("Skipping JSON task %d: %s", index, e)
            result.errors.append(f"Task {index}: invalid task structure ({e})")
            continue

        if not validate_estimate(parsed.estimate.to_estimate()):
            logger.debug("Skipping JSON task %d: estimate ordering violated", index)
            result.errors.append(
                f"Task {index}: invalid estimates "
                f"(optimistic <= nominal <= pessimistic and all values > 0)"
            )
            continue

        result.tasks.append(task_from_input(parsed))

    return result
