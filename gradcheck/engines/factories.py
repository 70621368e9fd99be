"""
Threshold rule factories.

Most graduation rules have the same shape:

    select courses -> split counted / not counted -> sum or count -> compare

The two factories here build that shape once. A concrete rule is then just
data: a predicate, a threshold and a label.

    general = credit_threshold_rule(
        "Advanced program general subjects",
        by_subject_kind("一般科目"),
        6,
        "general subject",
    )
    result = general(catalog, ledger)
"""

from typing import Callable, Sequence

from ..models import CourseRecord, RequirementDetails, RequirementResult, StatusLedger
from .predicates import CoursePredicate, partition_counted

RuleEvaluator = Callable[[Sequence[CourseRecord], StatusLedger], RequirementResult]


def total_credits(courses: Sequence[CourseRecord]) -> int:
    """Sum of credit values. Raises InvalidCreditValue on a malformed record."""
    return sum(c.credit_value for c in courses)


def credit_threshold_rule(name: str, predicate: CoursePredicate, min_credits: int,
                          label: str) -> RuleEvaluator:
    """
    Build a rule satisfied when counted courses reach `min_credits` credits.

    Args:
        name: Requirement name shown in results
        predicate: Selects the courses this rule is about
        min_credits: Minimum credit total
        label: Short description of the selected courses, used in messages

    An empty selection totals 0 credits, so the rule is satisfied only if
    `min_credits` is 0.
    """
    def check(catalog: Sequence[CourseRecord], ledger: StatusLedger) -> RequirementResult:
        selected = [c for c in catalog if predicate(c)]
        counted, not_counted = partition_counted(selected, ledger)
        earned = total_credits(counted)
        satisfied = earned >= min_credits

        if satisfied:
            message = f"{earned} {label} credits earned (required: {min_credits})"
        else:
            message = (f"Not enough {label} credits "
                       f"(current: {earned}, required: {min_credits})")

        return RequirementResult(
            name=name,
            satisfied=satisfied,
            message=message,
            details=RequirementDetails(
                total=min_credits,
                completed=earned,
                completed_items=tuple(counted),
                incomplete_items=tuple(not_counted),
            ),
        )

    check.requirement_name = name
    return check


def count_threshold_rule(name: str, predicate: CoursePredicate, min_count: int,
                         label: str) -> RuleEvaluator:
    """
    Build a rule satisfied when at least `min_count` selected courses count.

    Same shape as credit_threshold_rule, but aggregates the number of
    counted courses instead of their credits.
    """
    def check(catalog: Sequence[CourseRecord], ledger: StatusLedger) -> RequirementResult:
        selected = [c for c in catalog if predicate(c)]
        counted, not_counted = partition_counted(selected, ledger)
        completed = len(counted)
        satisfied = completed >= min_count

        if satisfied:
            message = f"{completed} {label} courses completed (required: {min_count} or more)"
        else:
            message = (f"Not enough {label} courses "
                       f"(current: {completed}, required: {min_count} or more)")

        return RequirementResult(
            name=name,
            satisfied=satisfied,
            message=message,
            details=RequirementDetails(
                total=min_count,
                completed=completed,
                completed_items=tuple(counted),
                incomplete_items=tuple(not_counted),
            ),
        )

    check.requirement_name = name
    return check
