"""
Enrollment-plus-count rules.

A stricter variant of the required-set rule used by the JABEE system
programming requirement: the student must be enrolled in EVERY course of a
named set, and at least N of those courses must count toward the
requirement.

    Example: take "アルゴリズムとデータ構造", "プログラミング言語論" and
    "ソフトウェア設計", and earn the credit for two or more of them.

ENROLLED vs COUNTED:
--------------------
- Enrolled: CREDIT_EARNED, PLANNED_ENROLLMENT or
  PLANNED_ENROLLMENT_EXPECTED_FAIL (see config.ENROLLED_STATUSES)
- Counted: CREDIT_EARNED or PLANNED_ENROLLMENT

A course the student is taking but expects to fail satisfies the enrollment
condition without adding to the count.
"""

from typing import Sequence

from ..models import CourseRecord, RequirementDetails, RequirementResult, StatusLedger
from .factories import RuleEvaluator
from .predicates import is_enrolled, partition_counted
from .required_set import missing_names


def enrollment_count_rule(name: str, required_names: Sequence[str], min_count: int,
                          label: str) -> RuleEvaluator:
    """
    Build a rule requiring enrollment in every named course and at least
    `min_count` counted courses among them.

    If a named course is not in the catalog the rule fails immediately,
    before enrollment or count is looked at.
    """
    required = list(dict.fromkeys(required_names))
    name_set = frozenset(required)

    def check(catalog: Sequence[CourseRecord], ledger: StatusLedger) -> RequirementResult:
        selected = [c for c in catalog if c.name in name_set]

        missing = missing_names(required, selected)
        if missing:
            return RequirementResult(
                name=name,
                satisfied=False,
                message=f"Required {label} courses missing from the catalog: {', '.join(missing)}",
                details=RequirementDetails(total=min_count, completed=0),
            )

        enrolled_names = {c.name for c in selected if is_enrolled(c, ledger)}
        not_enrolled = [n for n in required if n not in enrolled_names]

        counted, not_counted = partition_counted(selected, ledger)
        completed_names = {c.name for c in counted}
        not_counted = [c for c in not_counted if c.name not in completed_names]
        completed = len(completed_names)

        all_enrolled = not not_enrolled
        enough_counted = completed >= min_count
        satisfied = all_enrolled and enough_counted

        if satisfied:
            message = (f"Enrolled in all {label} courses and completed {completed} "
                       f"(required: all enrolled and {min_count} or more completed)")
        elif not all_enrolled:
            message = f"Not yet enrolled in {label} courses: {', '.join(not_enrolled)}"
        else:
            message = (f"Enrolled in all {label} courses but only {completed} completed "
                       f"(required: {min_count} or more)")

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
