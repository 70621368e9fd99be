"""
All-of-required-set rules.

These rules pass only when every course of a fixed set counts toward the
requirement. The set is given either as a list of course names (program
required courses, experiment/practice courses) or as a catalog filter
(courses flagged as mandatory enrollment).

MISSING VS INCOMPLETE:
----------------------
A required name that does not appear in the catalog at all is a data
problem, not a student problem. It fails the rule with a message listing
the missing names, and is never reported as "not completed".
"""

from typing import Sequence

from ..models import CourseRecord, RequirementDetails, RequirementResult, StatusLedger
from .factories import RuleEvaluator
from .predicates import CoursePredicate, partition_counted


def missing_names(required_names: Sequence[str], catalog: Sequence[CourseRecord]) -> list:
    """Required names with no matching course in the catalog, in list order."""
    present = {c.name for c in catalog}
    return [n for n in required_names if n not in present]


def _required_set_result(name: str, label: str, total: int, completed: int,
                         counted: list, not_counted: list,
                         missing: list) -> RequirementResult:
    satisfied = not missing and completed == total

    if missing:
        message = f"Required {label} courses missing from the catalog: {', '.join(missing)}"
    elif not satisfied:
        message = (f"Not all required {label} courses completed "
                   f"(current: {completed}, required: {total})")
    else:
        message = f"All required {label} courses completed ({completed} courses)"

    return RequirementResult(
        name=name,
        satisfied=satisfied,
        message=message,
        details=RequirementDetails(
            total=total,
            completed=completed,
            completed_items=tuple(counted),
            incomplete_items=tuple(not_counted),
        ),
    )


def required_set_rule(name: str, required_names: Sequence[str], label: str) -> RuleEvaluator:
    """
    Build a rule requiring every named course to be present and counted.

    A name is completed when at least one catalog course with that name
    counts; `completed` is the number of completed names, so the rule passes
    when it equals the number of required names.
    """
    required = list(dict.fromkeys(required_names))
    name_set = frozenset(required)

    def check(catalog: Sequence[CourseRecord], ledger: StatusLedger) -> RequirementResult:
        selected = [c for c in catalog if c.name in name_set]
        missing = missing_names(required, selected)
        counted, not_counted = partition_counted(selected, ledger)
        completed_names = {c.name for c in counted}
        # A name completed through one row is not listed as incomplete via another
        not_counted = [c for c in not_counted if c.name not in completed_names]
        return _required_set_result(
            name, label, len(required), len(completed_names), counted, not_counted, missing
        )

    check.requirement_name = name
    return check


def selected_set_rule(name: str, predicate: CoursePredicate, label: str) -> RuleEvaluator:
    """
    Build a rule requiring every catalog course matching `predicate` to count.

    The required set comes from the catalog itself, so nothing can be
    missing from it. An empty selection is satisfied.
    """
    def check(catalog: Sequence[CourseRecord], ledger: StatusLedger) -> RequirementResult:
        selected = [c for c in catalog if predicate(c)]
        counted, not_counted = partition_counted(selected, ledger)
        return _required_set_result(
            name, label, len(selected), len(counted), counted, not_counted, []
        )

    check.requirement_name = name
    return check
