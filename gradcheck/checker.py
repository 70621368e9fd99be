"""
Graduation Checker - Main Orchestrator.

This module contains the GraduationChecker class that connects the
rule engine to the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m gradcheck
"""

import logging
from typing import Iterable, Mapping, Optional, Sequence

from .data import CatalogLoader, StatusStore, update, with_defaults
from .engines import RequirementAggregator, RuleEvaluator
from .models import AggregateResult, CourseRecord, CourseStatus, StatusLedger
from .rules import default_rules
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class GraduationChecker:
    """
    Main interface for the graduation requirement checker.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the engine layer to the presentation layer:

    1. Loads the syllabus catalog and the saved course statuses
    2. Runs every requirement rule through the aggregator (pure data)
    3. Passes the aggregate result to the presentation layer for display

    TO CHANGE THE RULES:
    --------------------
    Pass your own list:  GraduationChecker(rules=[...])

    TO CHANGE THE UI:
    -----------------
    Pass a different display object, or call evaluate() and use the returned
    AggregateResult directly without displaying anything.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        checker = GraduationChecker()

        # Load, evaluate and print the report
        result = checker.run()

        # Or evaluate without printing
        catalog = checker.load_catalog(["data/syllabus_j.csv"])
        ledger = checker.load_statuses(catalog)
        result = checker.evaluate(catalog, ledger)
    """

    def __init__(self, rules: Optional[Sequence[RuleEvaluator]] = None,
                 loader: Optional[CatalogLoader] = None,
                 store: Optional[StatusStore] = None,
                 display=None,
                 max_workers: Optional[int] = None):
        self.rules = list(default_rules() if rules is None else rules)
        self.loader = loader if loader is not None else CatalogLoader()
        self.store = store if store is not None else StatusStore()
        self.display = display if display is not None else TerminalDisplay()
        self.aggregator = RequirementAggregator(self.rules, max_workers=max_workers)

    def load_catalog(self, sources: Optional[Iterable] = None) -> tuple:
        """Load the syllabus catalog (default: config.CSV_FILES)."""
        return self.loader.load(sources)

    def load_statuses(self, catalog: Iterable[CourseRecord]) -> dict:
        """Restore saved statuses, with every catalog course present."""
        return with_defaults(self.store.load(), catalog)

    def set_statuses(self, changes: Mapping[str, CourseStatus]) -> dict:
        """
        Apply status changes to the saved ledger and write it back.

        Args:
            changes: Course code -> new status

        Returns:
            The saved ledger
        """
        ledger = self.store.load()
        for code, status in changes.items():
            ledger = update(ledger, code, status)
        if changes:
            self.store.save(ledger)
            logger.info("Updated %d course status(es)", len(changes))
        return ledger

    def evaluate(self, catalog: Sequence[CourseRecord], ledger: StatusLedger) -> AggregateResult:
        """Run every rule against the catalog and ledger. Prints nothing."""
        return self.aggregator.evaluate(catalog, ledger)

    def run(self, sources: Optional[Iterable] = None,
            changes: Optional[Mapping[str, CourseStatus]] = None,
            failed_only: bool = False) -> AggregateResult:
        """
        Run a complete check and display the report.

        This is the main entry point. It:
        1. Loads the syllabus catalog
        2. Applies and saves any status changes
        3. Restores the status ledger
        4. Evaluates every requirement
        5. Displays the report

        Args:
            sources: Syllabus files and/or URLs (default: config.CSV_FILES)
            changes: Course code -> status updates to save before checking
            failed_only: Only list requirements that are not satisfied

        Returns:
            The AggregateResult that was displayed
        """
        # STEP 1: Load catalog
        catalog = self.load_catalog(sources)

        # STEP 2: Save status changes
        if changes:
            self.set_statuses(changes)

        # STEP 3: Restore statuses
        ledger = self.load_statuses(catalog)
        self.display.print_course_summary(catalog, ledger)

        # STEP 4: Evaluate
        result = self.evaluate(catalog, ledger)

        # STEP 5: Display
        self.display.print_report(result, failed_only=failed_only)

        return result
