"""
Requirement evaluation engine.

This package contains the generic building blocks of every graduation rule:
course predicates, the threshold rule factories, the required-set and
enrollment rules, and the aggregator that runs a rule list.
"""

from .predicates import (
    CoursePredicate,
    status_of,
    counts_toward_requirement,
    is_enrolled,
    filter_counted,
    filter_not_counted,
    partition_counted,
    by_program,
    by_category1,
    by_category2,
    by_subject_kind,
    by_department,
    by_name,
    by_names,
    is_mandatory_enrollment,
    all_of,
)
from .factories import RuleEvaluator, credit_threshold_rule, count_threshold_rule, total_credits
from .required_set import required_set_rule, selected_set_rule, missing_names
from .enrollment import enrollment_count_rule
from .aggregator import RequirementAggregator, evaluate_all

__all__ = [
    # Predicates
    "CoursePredicate",
    "status_of",
    "counts_toward_requirement",
    "is_enrolled",
    "filter_counted",
    "filter_not_counted",
    "partition_counted",
    "by_program",
    "by_category1",
    "by_category2",
    "by_subject_kind",
    "by_department",
    "by_name",
    "by_names",
    "is_mandatory_enrollment",
    "all_of",
    # Rule builders
    "RuleEvaluator",
    "credit_threshold_rule",
    "count_threshold_rule",
    "total_credits",
    "required_set_rule",
    "selected_set_rule",
    "missing_names",
    "enrollment_count_rule",
    # Aggregation
    "RequirementAggregator",
    "evaluate_all",
]
