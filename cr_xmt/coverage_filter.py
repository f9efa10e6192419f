"""Skip mutants that the test suite cannot kill.

A pending work item is marked SKIPPED when its operator does not come from
the cr_xmt provider, or when none of the lines it mutates was executed
according to a coverage.json report, e.g. one produced by

    pytest --cov=checkout --cov-report=json:coverage.json test
"""
import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Mapping

from cosmic_ray.tools.filters.filter_app import FilterApp
from cosmic_ray.work_db import WorkDB
from cosmic_ray.work_item import WorkResult, WorkerOutcome

log = logging.getLogger()

DEFAULT_OPERATOR_PREFIX = "cr_xmt/"


def body_lines(start_pos, end_pos) -> tuple[int, int]:
    """Line range of a mutated function body, without the def line it starts on.

    A suite starts at the newline after the colon and ends at column 0 of the
    line following its last statement.
    """
    last_line = end_pos[0] - 1 if end_pos[1] == 0 else end_pos[0]
    return start_pos[0] + 1, last_line


def is_covered(coverage_json: Mapping[str, Any], module_path, first_line: int, last_line: int) -> bool:
    """True if any executed line of module_path lies in [first_line, last_line]."""
    file_report = coverage_json.get('files', {}).get(str(Path(module_path)))
    if not file_report:
        # files missing from the report were never imported by the tests
        return False
    return any(first_line <= line <= last_line for line in file_report.get('executed_lines', []))


class CoverageFilter(FilterApp):
    """Implements the coverage filter."""

    def description(self):
        return __doc__

    def _skip_reason(self, mutation, coverage_json, operator_prefix):
        if not mutation.operator_name.startswith(operator_prefix):
            return "no match operator_name"
        # def lines run at import time, only body lines count
        first_line, last_line = body_lines(mutation.start_pos, mutation.end_pos)
        if not is_covered(coverage_json, mutation.module_path, first_line, last_line):
            return "no covered function"
        return None

    def _skip_filtered(self, work_db: WorkDB, coverage_json, operator_prefix):
        skip_job_ids = []
        for item in work_db.pending_work_items:
            for mutation in item.mutations:
                reason = self._skip_reason(mutation, coverage_json, operator_prefix)
                if reason is None:
                    continue
                log.info(
                    "%s skipping %s %s %s %s %s %s",
                    reason,
                    item.job_id,
                    mutation.operator_name,
                    mutation.occurrence,
                    mutation.module_path,
                    mutation.start_pos,
                    mutation.end_pos,
                )
                skip_job_ids.append(item.job_id)
                break

        if skip_job_ids:
            work_db.set_multiple_results(
                skip_job_ids,
                WorkResult(
                    output="Filtered no covered.",
                    worker_outcome=WorkerOutcome.SKIPPED,
                ),
            )
        return skip_job_ids

    def filter(self, work_db: WorkDB, args: Namespace):
        """Mark as skipped all work item that is not covered code."""
        if not args.coverage_json:
            raise ValueError("coverage_json is not found.")
        with open(args.coverage_json) as fp:
            coverage_json = json.load(fp)

        self._skip_filtered(work_db, coverage_json, args.operator_prefix)

    def add_args(self, parser):
        parser.add_argument("coverage_json", help="coverage.json path (created by pytest --cov=checkout --cov-report=json:coverage.json)")
        parser.add_argument(
            "--operator-prefix",
            default=DEFAULT_OPERATOR_PREFIX,
            help=f"only mutants from operators with this prefix are kept (default: {DEFAULT_OPERATOR_PREFIX})",
        )


def main(argv=None):
    """Run the coverage filter with the specified command line arguments."""
    return CoverageFilter().main(argv)


if __name__ == "__main__":
    sys.exit(main())
