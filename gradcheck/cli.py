"""
Command-Line Interface for the Graduation Checker.

    gradcheck                                   # default syllabus files
    gradcheck --catalog data/syllabus_j.csv     # specific file(s) or URL(s)
    gradcheck --set J1001=credit-earned         # record a status, then check
    gradcheck --failed-only                     # only unmet requirements

Exit status: 0 when every requirement is satisfied, 1 when at least one is
not, 2 when the catalog or status file cannot be used.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m gradcheck
"""

import argparse
import logging
from typing import List, Optional

from .checker import GraduationChecker
from .data import CatalogLoader, StatusStore, parse_status
from .errors import GradcheckError
from .models import CourseStatus
from .ui import TerminalDisplay


def _status_change(text: str) -> tuple:
    """Parse a --set argument of the form CODE=STATUS."""
    code, sep, value = text.partition("=")
    code, value = code.strip(), value.strip()
    if not sep or not code or not value:
        raise argparse.ArgumentTypeError(f"expected CODE=STATUS, got {text!r}")
    try:
        return code, parse_status(value)
    except GradcheckError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    statuses = ", ".join(s.value for s in CourseStatus)
    parser = argparse.ArgumentParser(
        prog="gradcheck",
        description="Check graduation requirements against a syllabus catalog.",
    )
    parser.add_argument(
        "--catalog", action="append", metavar="PATH_OR_URL",
        help="syllabus CSV file or http(s) URL; repeat for several (default: bundled files)",
    )
    parser.add_argument(
        "--statuses", metavar="FILE",
        help="JSON file with saved course statuses (default: data/course_statuses.json)",
    )
    parser.add_argument(
        "--set", dest="changes", action="append", type=_status_change, default=[],
        metavar="CODE=STATUS",
        help=f"save a course status before checking; STATUS is one of: {statuses}",
    )
    parser.add_argument(
        "--failed-only", action="store_true",
        help="only list requirements that are not satisfied",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log loading and evaluation details",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns the exit status (0 satisfied, 1 not satisfied, 2 error).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    checker = GraduationChecker(
        loader=CatalogLoader(),
        store=StatusStore(args.statuses) if args.statuses else StatusStore(),
    )

    try:
        result = checker.run(
            sources=args.catalog,
            changes=dict(args.changes),
            failed_only=args.failed_only,
        )
    except (GradcheckError, FileNotFoundError) as exc:
        TerminalDisplay.print_error(str(exc))
        return 2

    return 0 if result.all_satisfied else 1


if __name__ == "__main__":
    raise SystemExit(main())
