"""
Advanced program (専攻科) credit rules.

Each rule selects advanced program courses by subject kind and compares
the counted credits against the completion requirement in config.
"""

from ..config import (
    ADVANCED_COMPLETION_CREDITS,
    ADVANCED_GENERAL_CREDITS,
    ADVANCED_SPECIALTY_CREDITS,
    ADVANCED_SPECIALTY_RELATED_CREDITS,
    PROGRAM_ADVANCED,
    SUBJECT_KIND_GENERAL,
    SUBJECT_KIND_SPECIALTY,
    SUBJECT_KIND_SPECIALTY_RELATED,
)
from ..engines import all_of, by_program, by_subject_kind, credit_threshold_rule

_advanced = by_program(PROGRAM_ADVANCED)


def advanced_completion_rule():
    return credit_threshold_rule(
        "Advanced program completion",
        _advanced,
        ADVANCED_COMPLETION_CREDITS,
        "advanced program",
    )


def advanced_general_credits_rule():
    return credit_threshold_rule(
        "Advanced program general subjects",
        all_of(_advanced, by_subject_kind(SUBJECT_KIND_GENERAL)),
        ADVANCED_GENERAL_CREDITS,
        "general subject",
    )


def advanced_specialty_related_credits_rule():
    return credit_threshold_rule(
        "Advanced program specialty-related subjects",
        all_of(_advanced, by_subject_kind(SUBJECT_KIND_SPECIALTY_RELATED)),
        ADVANCED_SPECIALTY_RELATED_CREDITS,
        "specialty-related subject",
    )


def advanced_specialty_credits_rule():
    return credit_threshold_rule(
        "Advanced program specialty subjects",
        all_of(_advanced, by_subject_kind(SUBJECT_KIND_SPECIALTY)),
        ADVANCED_SPECIALTY_CREDITS,
        "specialty subject",
    )
