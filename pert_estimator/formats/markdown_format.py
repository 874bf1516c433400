"""Markdown report export."""

from datetime import datetime
from typing import Optional, Sequence

from ..models.task import ProjectSummary, Task, TimeUnit
from ..utils.datetime_utils import to_iso_timestamp
from ..utils.formatting import format_duration
from .csv_format import CSV_HEADERS, task_to_row


def _escape_cell(text: str) -> str:
    return text.replace('|', '\\|')


def export_to_markdown(
    tasks: Sequence[Task],
    summary: ProjectSummary,
    project_name: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Generate a human-readable PERT report."""
    title = "PERT Estimation Report"
    if project_name:
        title = f"{title}: {project_name}"

    lines = [
        f"# {title}",
        "",
        "## Tasks",
        "",
        "| " + " | ".join(CSV_HEADERS) + " |",
        "|" + "|".join("---" for _ in CSV_HEADERS) + "|",
    ]

    for position, task in enumerate(tasks, start=1):
        cells = [_escape_cell(cell) for cell in task_to_row(task, position)]
        lines.append("| " + " | ".join(cells) + " |")

    lines.extend([
        "",
        "## Project Summary",
        "",
        f"- **Total Expected Duration:** {summary.total_expected_duration:.2f} hours",
        f"- **Total Standard Deviation:** {summary.total_standard_deviation:.2f} hours",
        f"- **Total Variance:** {summary.total_variance:.4f} hours²",
        f"- **Number of Tasks:** {len(tasks)}",
        "",
        "## Converted Results",
        "",
    ])

    for unit in TimeUnit:
        label = unit.value.capitalize()
        lines.append(f"- **{label}:** {format_duration(summary.total_expected_duration, unit)}")

    lines.extend([
        "",
        f"_Generated on {to_iso_timestamp(generated_at)}_",
    ])

    return "\n".join(lines) + "\n"
