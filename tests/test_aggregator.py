import time

import pytest

from gradcheck.engines import RequirementAggregator, evaluate_all
from gradcheck.models import CourseStatus, RequirementResult


def _fixed(name, satisfied, calls=None, delay=0.0):
    def check(catalog, ledger):
        if delay:
            time.sleep(delay)
        if calls is not None:
            calls.append(name)
        return RequirementResult(name=name, satisfied=satisfied, message="")
    return check


def test_empty_rule_list_is_satisfied():
    result = evaluate_all([], [], {})
    assert result.all_satisfied
    assert result.results == ()


def test_verdict_is_and_of_all_rules():
    assert evaluate_all([_fixed("a", True), _fixed("b", True)], [], {}).all_satisfied
    assert not evaluate_all([_fixed("a", True), _fixed("b", False)], [], {}).all_satisfied


def test_every_rule_runs_after_a_failure():
    calls = []
    rules = [_fixed("a", False, calls), _fixed("b", True, calls), _fixed("c", False, calls)]

    result = evaluate_all(rules, [], {})

    assert calls == ["a", "b", "c"]
    assert [r.name for r in result.failed] == ["a", "c"]


def test_thread_pool_keeps_rule_order():
    # Earlier rules finish last
    rules = [_fixed(f"r{i}", True, delay=0.01 * (5 - i)) for i in range(5)]

    result = RequirementAggregator(rules, max_workers=5).evaluate([], {})

    assert [r.name for r in result.results] == ["r0", "r1", "r2", "r3", "r4"]


def test_rules_cannot_modify_the_ledger(make_course):
    course = make_course()
    ledger = {course.code: CourseStatus.NOT_TAKEN}

    def sneaky(catalog, ledger):
        ledger[course.code] = CourseStatus.CREDIT_EARNED
        return RequirementResult(name="sneaky", satisfied=True, message="")

    with pytest.raises(TypeError):
        evaluate_all([sneaky], [course], ledger)
    assert ledger[course.code] is CourseStatus.NOT_TAKEN


def test_rules_receive_catalog_as_tuple(make_course):
    seen = []

    def capture(catalog, ledger):
        seen.append(catalog)
        return RequirementResult(name="capture", satisfied=True, message="")

    evaluate_all([capture], [make_course()], {})

    assert isinstance(seen[0], tuple)


def test_same_input_gives_same_result(make_course):
    from gradcheck.rules import default_rules

    catalog = [make_course(name="英語Ⅰ"), make_course(name="卒業研究")]
    ledger = {catalog[0].code: CourseStatus.CREDIT_EARNED}
    rules = default_rules()

    assert evaluate_all(rules, catalog, ledger) == evaluate_all(rules, catalog, ledger)
