"""CSV export and error-tolerant CSV import."""

import csv
import io
import logging
import math
import re
from typing import List, Optional, Sequence

from ..engine.pert import create_task, validate_estimate
from ..exceptions import MalformedInputError
from ..models.project import ImportResult
from ..models.task import Task, TaskEstimate, TimeUnit, TimeValue

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    'Task Name',
    'Optimistic Value',
    'Optimistic Unit',
    'Nominal Value',
    'Nominal Unit',
    'Pessimistic Value',
    'Pessimistic Unit',
    'Expected Duration (hours)',
    'Standard Deviation (hours)',
]

HEADER_MARKER = 'Task Name'
UNIT_NAMES = frozenset(unit.value for unit in TimeUnit)

_QUOTED_PROJECT_LINE = re.compile(r'^"Project: ((?:[^"]|"")*)"$')
_BARE_PROJECT_LINE = re.compile(r'^Project: ([^",]*)$')
# A field is either a double-quoted run (with "" escapes) or a run of non-comma, non-whitespace characters.
_FIELD = re.compile(r'"(?:[^"]|"")*"|[^,\s]+')


def task_to_row(task: Task, position: int) -> List[str]:
    """Flatten a task into the nine CSV fields."""
    estimate = task.estimate
    return [
        task.display_name(position),
        f"{estimate.optimistic.value:.2f}",
        estimate.optimistic.unit.value,
        f"{estimate.nominal.value:.2f}",
        estimate.nominal.unit.value,
        f"{estimate.pessimistic.value:.2f}",
        estimate.pessimistic.unit.value,
        f"{task.expected_duration:.2f}",
        f"{task.standard_deviation:.2f}",
    ]


def export_to_csv(tasks: Sequence[Task], project_name: Optional[str] = None) -> str:
    """Render tasks as CSV, optionally preceded by a project name line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')

    if project_name:
        writer.writerow([f"Project: {project_name}"])
        buffer.write('\n')

    buffer.write(','.join(CSV_HEADERS) + '\n')
    for position, task in enumerate(tasks, start=1):
        writer.writerow(task_to_row(task, position))

    return buffer.getvalue().rstrip('\n')


def tokenize_line(line: str) -> List[str]:
    """Split a CSV line into trimmed fields, honouring double quotes."""
    tokens = []
    for match in _FIELD.finditer(line):
        token = match.group(0)
        if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
            token = token[1:-1].replace('""', '"')
        tokens.append(token.strip())
    return tokens


def parse_project_line(line: str) -> Optional[str]:
    """Return the project name when the line is a lone "Project: ..." field, else None.

    A quoted line must be one quoted field from end to end, so a data row whose
    first field starts with "Project: " is not mistaken for the project line.
    """
    match = _QUOTED_PROJECT_LINE.match(line)
    if match:
        return match.group(1).replace('""', '"')
    match = _BARE_PROJECT_LINE.match(line)
    return match.group(1) if match else None


def _parse_row(tokens: List[str], row_number: int) -> Task:
    """Turn one tokenized row into a task, raising MalformedInputError with a row message."""
    if len(tokens) < len(CSV_HEADERS):
        raise MalformedInputError(
            f"Row {row_number}: insufficient columns "
            f"(expected {len(CSV_HEADERS)}, got {len(tokens)})"
        )

    name = tokens[0] or None
    raw_values = (tokens[1], tokens[3], tokens[5])
    raw_units = (tokens[2], tokens[4], tokens[6])

    try:
        values = [float(raw) for raw in raw_values]
    except ValueError:
        values = []
    if len(values) != 3 or not all(math.isfinite(value) for value in values):
        raise MalformedInputError(
            f"Row {row_number}: invalid numeric value in {', '.join(raw_values)}"
        )

    invalid_units = [raw for raw in raw_units if raw not in UNIT_NAMES]
    if invalid_units:
        raise MalformedInputError(
            f"Row {row_number}: invalid time unit {', '.join(repr(u) for u in invalid_units)}"
        )
    units = [TimeUnit(raw) for raw in raw_units]

    estimate = TaskEstimate(
        optimistic=TimeValue(values[0], units[0]),
        nominal=TimeValue(values[1], units[1]),
        pessimistic=TimeValue(values[2], units[2]),
    )
    if not validate_estimate(estimate):
        raise MalformedInputError(
            f"Row {row_number}: invalid estimates "
            f"(optimistic <= nominal <= pessimistic and all values > 0)"
        )

    return create_task(name, estimate)


def import_from_csv(content: str) -> ImportResult:
    """Parse CSV text into tasks, collecting per-row errors instead of aborting."""
    lines = [line.rstrip() for line in content.rstrip().splitlines()]
    if sum(1 for line in lines if line.strip()) < 2:
        return ImportResult.failure(
            "CSV file must contain a header row and at least one data row"
        )

    result = ImportResult()
    start = 0

    project_name = parse_project_line(lines[0].strip())
    if project_name is not None:
        result.project_name = project_name.strip() or None
        start = 2

    header_index = next(
        (index for index in range(start, len(lines)) if HEADER_MARKER in lines[index]),
        None,
    )
    if header_index is None:
        logger.warning("No '%s' header found; parsing from line %d", HEADER_MARKER, start + 1)
    else:
        start = header_index + 1

    for index in range(start, len(lines)):
        line = lines[index]
        if not line.strip():
            continue

        row_number = index + 1
        try:
            task = _parse_row(tokenize_line(line), row_number)
        except MalformedInputError as e:
            logger.debug("Skipping CSV row %d: %s", row_number, e)
            result.errors.append(str(e))
            continue

        result.tasks.append(task)

    return result
