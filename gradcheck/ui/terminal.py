"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gradcheck package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

import sys

from ..models import AggregateResult, CourseStatus, RequirementResult


class TerminalDisplay:
    """
    Pretty terminal output for requirement check results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Convert AggregateResult with dataclasses.asdict() and return JSON.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    # Courses listed per group before the rest is summarized
    MAX_LISTED = 10

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool) -> str:
        """Return a colored pass/fail badge."""
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ PASS {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ FAIL {cls.RESET}"

    @classmethod
    def print_course_summary(cls, catalog, ledger):
        """Print how many catalog courses are in each status."""
        counts = {status: 0 for status in CourseStatus}
        for course in catalog:
            counts[ledger.get(course.code, CourseStatus.NOT_TAKEN)] += 1

        cls.print_subheader("Course Summary")
        print(f"  {cls.BOLD}Courses in catalog:{cls.RESET} {len(catalog)}")
        print(f"  {cls.GREEN}Credit earned:{cls.RESET} {counts[CourseStatus.CREDIT_EARNED]}")
        print(f"  {cls.YELLOW}Planned:{cls.RESET} {counts[CourseStatus.PLANNED_ENROLLMENT]}")
        print(f"  {cls.YELLOW}Planned, expected fail:{cls.RESET} "
              f"{counts[CourseStatus.PLANNED_ENROLLMENT_EXPECTED_FAIL]}")
        if counts[CourseStatus.FAILED_NO_CREDIT]:
            print(f"  {cls.RED}Failed (no credit):{cls.RESET} {counts[CourseStatus.FAILED_NO_CREDIT]}")

    @classmethod
    def print_report(cls, aggregate: AggregateResult, failed_only: bool = False):
        """Print the overall verdict followed by every requirement."""
        cls.print_verdict(aggregate)

        cls.print_subheader("Requirements Detail")
        for i, result in enumerate(aggregate.results, 1):
            if failed_only and result.satisfied:
                continue
            cls.print_requirement(i, result)

    @classmethod
    def print_verdict(cls, aggregate: AggregateResult):
        cls.print_header("GRADUATION REQUIREMENTS")
        print(f"\n  {cls.BOLD}Overall Status:{cls.RESET} {cls.status_badge(aggregate.all_satisfied)}")
        print(f"  {cls.BOLD}Passed:{cls.RESET} {aggregate.passed_count}/{aggregate.total_count} requirements")

    @classmethod
    def print_requirement(cls, num: int, result: RequirementResult):
        """
        Print a single requirement with its message and course lists.

        Shows "(completed/total)" when the result carries details, then the
        courses that count and the courses that do not count yet.
        """
        color = cls.GREEN if result.satisfied else cls.RED
        mark = "✓" if result.satisfied else "✗"

        progress = ""
        if result.details is not None:
            progress = f" {cls.DIM}({result.details.completed}/{result.details.total}){cls.RESET}"

        print()
        print(f"  {color}{mark}{cls.RESET} {cls.BOLD}{num}. {result.name}{cls.RESET}{progress}")
        print(f"     {result.message}")

        if result.details is None:
            return

        if result.details.completed_items:
            print(f"     {cls.GREEN}Completed / planned:{cls.RESET} "
                  f"{cls._course_list(result.details.completed_items)}")
        if result.details.incomplete_items:
            print(f"     {cls.RED}Not completed:{cls.RESET} "
                  f"{cls._course_list(result.details.incomplete_items)}")

    @classmethod
    def _course_list(cls, courses) -> str:
        """Format courses as "name (N credits)", truncated to MAX_LISTED."""
        shown = [f"{c.name} ({c.credits})" for c in courses[:cls.MAX_LISTED]]
        text = ", ".join(shown)
        if len(courses) > cls.MAX_LISTED:
            text += f" {cls.DIM}... and {len(courses) - cls.MAX_LISTED} more{cls.RESET}"
        return text

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}", file=sys.stderr)
