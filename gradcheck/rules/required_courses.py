"""
Mandatory and required course rules.

- Mandatory enrollment: every course flagged 必履修 must count.
- Required course credits: every credit of the advanced program's required
  (必修) courses must be earned.
"""

from ..config import CATEGORY_REQUIRED, PROGRAM_ADVANCED
from ..engines import (
    all_of,
    by_category2,
    by_program,
    credit_threshold_rule,
    is_mandatory_enrollment,
    selected_set_rule,
    total_credits,
)

MANDATORY_ENROLLMENT_NAME = "Mandatory enrollment courses"
REQUIRED_CREDITS_NAME = "Required course credits"


def mandatory_enrollment_rule():
    """All courses flagged as mandatory enrollment must be completed."""
    return selected_set_rule(
        MANDATORY_ENROLLMENT_NAME, is_mandatory_enrollment, "mandatory enrollment"
    )


def required_course_credits_rule():
    """
    The advanced program's required courses must be completed in full.

    The threshold is not a fixed number: it is the total credit value of the
    required courses present in the catalog, computed on every evaluation.
    """
    predicate = all_of(by_program(PROGRAM_ADVANCED), by_category2(CATEGORY_REQUIRED))

    def check(catalog, ledger):
        required_total = total_credits([c for c in catalog if predicate(c)])
        rule = credit_threshold_rule(
            REQUIRED_CREDITS_NAME, predicate, required_total, "required course"
        )
        return rule(catalog, ledger)

    check.requirement_name = REQUIRED_CREDITS_NAME
    return check
