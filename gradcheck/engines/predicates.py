"""
Course predicates.

Stateless helpers used by every requirement rule: status lookups, the
counted / not-counted partition, and field filters that select the courses
a rule is about.
"""

from typing import Callable, Iterable

from ..config import COUNTED_STATUSES, ENROLLED_STATUSES, MANDATORY_ENROLLMENT
from ..models import CourseRecord, CourseStatus, StatusLedger

CoursePredicate = Callable[[CourseRecord], bool]


# =============================================================================
# STATUS PREDICATES
# =============================================================================

def status_of(course: CourseRecord, ledger: StatusLedger) -> CourseStatus:
    """Ledger status of a course; codes absent from the ledger are NOT_TAKEN."""
    return ledger.get(course.code, CourseStatus.NOT_TAKEN)


def counts_toward_requirement(course: CourseRecord, ledger: StatusLedger) -> bool:
    """True if the course is CREDIT_EARNED or PLANNED_ENROLLMENT."""
    return status_of(course, ledger) in COUNTED_STATUSES


def is_enrolled(course: CourseRecord, ledger: StatusLedger) -> bool:
    """True if the student took, takes or plans to take the course."""
    return status_of(course, ledger) in ENROLLED_STATUSES


def filter_counted(courses: Iterable[CourseRecord], ledger: StatusLedger) -> list:
    """Courses that count toward a requirement, in input order."""
    return [c for c in courses if counts_toward_requirement(c, ledger)]


def filter_not_counted(courses: Iterable[CourseRecord], ledger: StatusLedger) -> list:
    """Courses that do not count (yet), in input order."""
    return [c for c in courses if not counts_toward_requirement(c, ledger)]


def partition_counted(courses: Iterable[CourseRecord], ledger: StatusLedger) -> tuple:
    """
    Split courses into (counted, not_counted) in a single pass.

    Every input course lands in exactly one of the two lists and relative
    order is preserved in both.
    """
    counted = []
    not_counted = []
    for c in courses:
        if counts_toward_requirement(c, ledger):
            counted.append(c)
        else:
            not_counted.append(c)
    return counted, not_counted


# =============================================================================
# FIELD FILTERS
# =============================================================================
# Each function returns a predicate so rules can be declared as data:
#     credit_threshold_rule("...", by_subject_kind("一般科目"), 6, "...")

def by_program(program: str) -> CoursePredicate:
    """Courses of one program level ("本科" or "専攻科")."""
    return lambda course: course.program == program


def by_category1(category: str) -> CoursePredicate:
    return lambda course: course.category1 == category


def by_category2(category: str) -> CoursePredicate:
    return lambda course: course.category2 == category


def by_subject_kind(kind: str) -> CoursePredicate:
    return lambda course: course.subject_kind == kind


def by_department(department: str) -> CoursePredicate:
    return lambda course: course.department == department


def by_name(name: str) -> CoursePredicate:
    return lambda course: course.name == name


def by_names(names: Iterable[str]) -> CoursePredicate:
    """Courses whose name is in a fixed list of course names."""
    name_set = frozenset(names)
    return lambda course: course.name in name_set


def is_mandatory_enrollment(course: CourseRecord) -> bool:
    """True for courses flagged 必履修 (mandatory enrollment)."""
    return course.enrollment_type == MANDATORY_ENROLLMENT


def all_of(*predicates: CoursePredicate) -> CoursePredicate:
    """Combine predicates; a course must match every one of them."""
    return lambda course: all(p(course) for p in predicates)
