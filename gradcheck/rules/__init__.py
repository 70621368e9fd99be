"""
Concrete graduation requirements.

This package declares the rules of the Toyota KOSEN advanced program
checker using the builders in gradcheck.engines. To add a requirement,
declare it in one of the modules here and add it to default_rules().
"""

from .required_courses import mandatory_enrollment_rule, required_course_credits_rule
from .credit_rules import (
    advanced_completion_rule,
    advanced_general_credits_rule,
    advanced_specialty_related_credits_rule,
    advanced_specialty_credits_rule,
)
from .jabee import jabee_rules
from .information_science import check_information_science_required


def default_rules() -> list:
    """
    Build the full, ordered requirement list.

    A new list is returned on every call, so callers can add, remove or
    reorder rules without affecting anyone else.
    """
    return [
        mandatory_enrollment_rule(),
        required_course_credits_rule(),
        advanced_completion_rule(),
        advanced_general_credits_rule(),
        advanced_specialty_related_credits_rule(),
        advanced_specialty_credits_rule(),
        *jabee_rules(),
        check_information_science_required,
    ]


__all__ = [
    "default_rules",
    "mandatory_enrollment_rule",
    "required_course_credits_rule",
    "advanced_completion_rule",
    "advanced_general_credits_rule",
    "advanced_specialty_related_credits_rule",
    "advanced_specialty_credits_rule",
    "jabee_rules",
    "check_information_science_required",
]
