"""Tests for the Markdown report."""

from __future__ import annotations

from conftest import make_estimate
from pert_estimator.engine.pert import calculate_project_summary, create_task
from pert_estimator.formats.csv_format import CSV_HEADERS
from pert_estimator.formats.markdown_format import export_to_markdown


class TestExportToMarkdown:
    def test_report_sections(self, sample_tasks, fixed_time):
        summary = calculate_project_summary(sample_tasks)
        report = export_to_markdown(sample_tasks, summary, "Q3 Plan", generated_at=fixed_time)

        assert report.startswith("# PERT Estimation Report: Q3 Plan\n")
        assert "## Tasks" in report
        assert "## Project Summary" in report
        assert "## Converted Results" in report
        assert report.rstrip().endswith("_Generated on 2024-08-10T12:30:00.000Z_")

    def test_heading_without_project_name(self, sample_task):
        report = export_to_markdown([sample_task], calculate_project_summary([sample_task]))
        assert report.startswith("# PERT Estimation Report\n")

    def test_task_table(self, sample_tasks):
        report = export_to_markdown(sample_tasks, calculate_project_summary(sample_tasks))
        lines = report.splitlines()

        header_index = lines.index("| " + " | ".join(CSV_HEADERS) + " |")
        assert lines[header_index + 1] == "|" + "|".join(["---"] * 9) + "|"
        assert lines[header_index + 2] == (
            "| Design | 2.00 | hours | 4.00 | hours | 12.00 | hours | 5.00 | 1.67 |"
        )
        assert lines[header_index + 4].startswith("| Task 3 |")

    def test_summary_precision(self, sample_task):
        report = export_to_markdown([sample_task], calculate_project_summary([sample_task]))

        assert "- **Total Expected Duration:** 5.00 hours" in report
        assert "- **Total Standard Deviation:** 1.67 hours" in report
        assert "- **Total Variance:** 2.7778 hours²" in report

    def test_converted_results_in_every_unit(self):
        task = create_task("Week", make_estimate(40, 40, 40))
        report = export_to_markdown([task], calculate_project_summary([task]))

        assert "- **Minutes:** 2400.00 minutes" in report
        assert "- **Hours:** 40.00 hours" in report
        assert "- **Days:** 5.00 days" in report
        assert "- **Weeks:** 1.00 weeks" in report

    def test_pipes_in_names_are_escaped(self):
        task = create_task("A | B", make_estimate(1, 2, 3))
        report = export_to_markdown([task], calculate_project_summary([task]))

        assert "| A \\| B | 1.00 |" in report

    def test_empty_collection(self):
        report = export_to_markdown([], calculate_project_summary([]))

        assert "- **Number of Tasks:** 0" in report
        assert "- **Hours:** 0.00 hours" in report
