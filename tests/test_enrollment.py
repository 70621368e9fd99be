import pytest

from gradcheck.engines import enrollment_count_rule
from gradcheck.models import CourseStatus

E = CourseStatus.CREDIT_EARNED
P = CourseStatus.PLANNED_ENROLLMENT
X = CourseStatus.PLANNED_ENROLLMENT_EXPECTED_FAIL
F = CourseStatus.FAILED_NO_CREDIT

RULE = enrollment_count_rule("Core", ["A", "B", "C"], 2, "core")


@pytest.fixture
def courses(make_course):
    return [make_course(name=n) for n in ("A", "B", "C")]


def _ledger(courses, statuses):
    return {c.code: s for c, s in zip(courses, statuses)}


def test_missing_course_fails_before_anything_else(make_course):
    catalog = [make_course(name="A"), make_course(name="B")]
    result = RULE(catalog, {c.code: E for c in catalog})

    assert not result.satisfied
    assert result.message == "Required core courses missing from the catalog: C"
    assert result.details.total == 2
    assert result.details.completed == 0


def test_not_enrolled_in_every_course(courses):
    result = RULE(courses, _ledger(courses, [E, E]))

    assert not result.satisfied
    assert result.message == "Not yet enrolled in core courses: C"


def test_failed_course_is_not_enrolled(courses):
    result = RULE(courses, _ledger(courses, [E, E, F]))
    assert not result.satisfied
    assert "Not yet enrolled" in result.message


def test_expected_fail_counts_as_enrolled_only(courses):
    result = RULE(courses, _ledger(courses, [E, P, X]))

    assert result.satisfied
    assert result.details.completed == 2
    assert result.details.incomplete_items == (courses[2],)


def test_enrolled_but_too_few_counted(courses):
    result = RULE(courses, _ledger(courses, [E, X, X]))

    assert not result.satisfied
    assert result.message == "Enrolled in all core courses but only 1 completed (required: 2 or more)"


def test_duplicate_rows_of_one_course_count_once(make_course):
    a1, a2, b, c = (make_course(name=n) for n in ("A", "A", "B", "C"))
    ledger = {a1.code: E, a2.code: E, b.code: X, c.code: X}

    result = RULE([a1, a2, b, c], ledger)

    assert not result.satisfied
    assert result.details.completed == 1
    assert result.message == "Enrolled in all core courses but only 1 completed (required: 2 or more)"
