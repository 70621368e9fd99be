"""
Requirement aggregator.

Runs a list of requirement rules against one catalog and status ledger and
combines their results into a single verdict.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Optional, Sequence

from ..models import AggregateResult, CourseRecord, StatusLedger
from .factories import RuleEvaluator

logger = logging.getLogger(__name__)


def evaluate_all(rules: Sequence[RuleEvaluator], catalog: Sequence[CourseRecord],
                 ledger: StatusLedger) -> AggregateResult:
    """
    Evaluate every rule and AND the results together.

    Every rule runs, even after a failure, because each rule's detail is
    shown to the user. An empty rule list is satisfied.
    """
    return RequirementAggregator(rules).evaluate(catalog, ledger)


class RequirementAggregator:
    """
    Evaluates an explicit, ordered list of requirement rules.

    The rule list is injected rather than looked up globally, so a test or a
    different program can pass its own rule set:

        aggregator = RequirementAggregator(default_rules())
        result = aggregator.evaluate(catalog, ledger)
        result.all_satisfied      # overall verdict
        result.results            # one RequirementResult per rule, in order

    ISOLATION:
    ----------
    Rules receive the catalog as a tuple of frozen records and the ledger as
    a read-only mapping, so no rule can change what another rule sees.
    Because rules are independent, they may run on a thread pool
    (max_workers > 1); results are still returned in rule order.
    """

    def __init__(self, rules: Sequence[RuleEvaluator], max_workers: Optional[int] = None):
        self.rules = list(rules)
        self.max_workers = max_workers

    def evaluate(self, catalog: Sequence[CourseRecord], ledger: StatusLedger) -> AggregateResult:
        catalog = tuple(catalog)
        ledger = MappingProxyType(dict(ledger))

        if self.max_workers and self.max_workers > 1 and len(self.rules) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                # map() yields in submission order regardless of completion order
                results = tuple(pool.map(lambda rule: rule(catalog, ledger), self.rules))
        else:
            results = tuple(rule(catalog, ledger) for rule in self.rules)

        all_satisfied = all(r.satisfied for r in results)

        logger.debug(
            "Evaluated %d requirements against %d courses: %d satisfied",
            len(results), len(catalog), sum(1 for r in results if r.satisfied),
        )

        return AggregateResult(results=results, all_satisfied=all_satisfied)
