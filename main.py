"""Main entry point for the PERT Estimator."""

import argparse
import logging
import sys
from pathlib import Path

from pert_estimator.engine.pert import calculate_project_summary, create_task
from pert_estimator.exceptions import PertEstimatorError
from pert_estimator.formats.csv_format import export_to_csv, import_from_csv
from pert_estimator.formats.json_format import export_to_json, import_from_json
from pert_estimator.formats.markdown_format import export_to_markdown
from pert_estimator.models.project import ImportResult
from pert_estimator.models.task import TaskEstimate, TimeUnit, TimeValue
from pert_estimator.storage.json_file import JsonFileProjectStore
from pert_estimator.storage.manager import ProjectManager
from pert_estimator.utils.config import resolve_config
from pert_estimator.utils.formatting import format_duration, generate_filename

logger = logging.getLogger(__name__)

UNIT_CHOICES = [unit.value for unit in TimeUnit]
EXTENSIONS = {'csv': 'csv', 'json': 'json', 'markdown': 'md'}


def read_tasks(file_path: str) -> ImportResult:
    """Import tasks from a CSV or JSON file, chosen by suffix."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")

    content = path.read_text(encoding='utf-8')
    if path.suffix.lower() == '.json':
        return import_from_json(content)
    if path.suffix.lower() == '.csv':
        return import_from_csv(content)
    raise ValueError(f"Unsupported input format: {path.suffix}")


def print_import_errors(result: ImportResult):
    """Report skipped rows on stderr."""
    if result.is_valid:
        return
    print(f"Skipped {len(result.errors)} invalid entr{'y' if len(result.errors) == 1 else 'ies'}:", file=sys.stderr)
    for error in result.errors:
        print(f"  {error}", file=sys.stderr)


def run_estimate(args, config: dict):
    """Compute PERT statistics for a single estimate."""
    units = args.units or [args.unit] * 3
    estimate = TaskEstimate(
        optimistic=TimeValue(args.optimistic, TimeUnit(units[0])),
        nominal=TimeValue(args.nominal, TimeUnit(units[1])),
        pessimistic=TimeValue(args.pessimistic, TimeUnit(units[2])),
    )
    task = create_task(args.name, estimate)
    display_unit = config['display']['unit']

    print(f"\n{task.display_name(1)}")
    print(f"  Expected duration:  {format_duration(task.expected_duration, display_unit)}")
    print(f"  Standard deviation: {format_duration(task.standard_deviation, display_unit)}")
    print(f"  Variance:           {task.variance:.4f} hours²")


def run_summarize(args, config: dict):
    """Import a task file and print its project summary."""
    result = read_tasks(args.file)
    print_import_errors(result)

    summary = calculate_project_summary(result.tasks)
    display_unit = config['display']['unit']

    print(f"\nProject: {result.project_name or '(unnamed)'}")
    print(f"{'Task':<40} {'Expected':<18} {'Std. dev.':<18}")
    print("-" * 76)
    for position, task in enumerate(summary.tasks, start=1):
        print(
            f"{task.display_name(position):<40} "
            f"{format_duration(task.expected_duration, display_unit):<18} "
            f"{format_duration(task.standard_deviation, display_unit):<18}"
        )
    print("-" * 76)
    print(f"{'Total expected duration':<40} {format_duration(summary.total_expected_duration, display_unit)}")
    print(f"{'Total standard deviation':<40} {format_duration(summary.total_standard_deviation, display_unit)}")
    print(f"{'Total variance (hours²)':<40} {summary.total_variance:.4f}")

    return result


def run_export(args, config: dict):
    """Import a task file and re-export it in the requested format."""
    result = read_tasks(args.file)
    print_import_errors(result)

    project_name = args.project_name or result.project_name
    summary = calculate_project_summary(result.tasks)

    if args.format == 'csv':
        content = export_to_csv(summary.tasks, project_name)
    elif args.format == 'json':
        content = export_to_json(
            summary.tasks, summary, project_name,
            indent=config['export'].get('json_indent', 2),
        )
    else:
        content = export_to_markdown(summary.tasks, summary, project_name)

    output_dir = Path(args.output_dir or config['export']['output_dir'])
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / generate_filename(project_name, EXTENSIONS[args.format])
    output_path.write_text(content, encoding='utf-8')

    print(f"Exported {len(summary.tasks)} task(s) to: {output_path}")
    return output_path


def run_project(args, config: dict):
    """Manage saved projects in the local project file."""
    manager = ProjectManager(JsonFileProjectStore(
        config['storage']['path'],
        indent=config['export'].get('json_indent', 2),
    ))

    if args.action == 'list':
        projects = manager.list_projects()
        if not projects:
            print("No saved projects")
        for project in projects:
            print(f"{project.id}  {project.name:<30} {len(project.tasks):>4} task(s)  updated {project.updated_at}")
    elif args.action == 'save':
        result = read_tasks(args.target)
        print_import_errors(result)
        name = args.name or result.project_name
        if not name:
            raise ValueError("A project name is required (--name)")
        project = manager.save_project(name, result.tasks)
        print(f"Saved project {project.name} as {project.id}")
    elif args.action == 'show':
        project = manager.load_project(args.target)
        summary = calculate_project_summary(project.tasks)
        print(export_to_markdown(summary.tasks, summary, project.name))
    elif args.action == 'delete':
        if manager.delete_project(args.target):
            print(f"Deleted project {args.target}")
        else:
            print(f"No project with id {args.target}")
    elif args.action == 'duplicate':
        project = manager.duplicate_project(args.target, args.name)
        print(f"Duplicated as {project.name} ({project.id})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PERT three-point estimation tool"
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    estimate = subparsers.add_parser('estimate', help='Estimate a single task')
    estimate.add_argument('optimistic', type=float)
    estimate.add_argument('nominal', type=float)
    estimate.add_argument('pessimistic', type=float)
    estimate.add_argument('--unit', choices=UNIT_CHOICES, default='hours',
                          help='Unit for all three values (default: hours)')
    estimate.add_argument('--units', nargs=3, choices=UNIT_CHOICES, metavar='UNIT',
                          help='Separate units for optimistic, nominal and pessimistic')
    estimate.add_argument('--name', type=str, default=None)

    summarize = subparsers.add_parser('summarize', help='Summarize a CSV or JSON task file')
    summarize.add_argument('file')

    export = subparsers.add_parser('export', help='Convert a task file to CSV, JSON or Markdown')
    export.add_argument('file')
    export.add_argument('--format', choices=sorted(EXTENSIONS), default='json')
    export.add_argument('--project-name', type=str, default=None)
    export.add_argument('--output-dir', type=str, default=None)

    project = subparsers.add_parser('project', help='Manage saved projects')
    project.add_argument('action', choices=['list', 'save', 'show', 'delete', 'duplicate'])
    project.add_argument('target', nargs='?',
                         help='Task file for save; project id for show, delete, duplicate')
    project.add_argument('--name', type=str, default=None)

    return parser


COMMANDS = {
    'estimate': run_estimate,
    'summarize': run_summarize,
    'export': run_export,
    'project': run_project,
}


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'project' and args.action != 'list' and not args.target:
        parser.error(f"project {args.action} requires a target")

    config = resolve_config(args.config)
    level = 'DEBUG' if args.verbose else config['logging'].get('level', 'WARNING')
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        COMMANDS[args.command](args, config)
    except (PertEstimatorError, FileNotFoundError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
