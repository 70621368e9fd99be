from gradcheck.engines import is_mandatory_enrollment, missing_names, required_set_rule, selected_set_rule
from gradcheck.models import CourseStatus

E = CourseStatus.CREDIT_EARNED

RULE = required_set_rule("Experiments", ["実験A", "実験B", "実験C"], "experiment")


def test_all_required_courses_completed(make_course):
    catalog = [make_course(name=n) for n in ("実験A", "実験B", "実験C", "その他")]
    ledger = {c.code: E for c in catalog}

    result = RULE(catalog, ledger)

    assert result.satisfied
    assert result.message == "All required experiment courses completed (3 courses)"
    assert result.details.total == 3
    assert result.details.completed == 3
    assert all(c.name != "その他" for c in result.details.completed_items)


def test_missing_course_is_reported_as_missing(make_course):
    catalog = [make_course(name="実験B"), make_course(name="実験C")]
    ledger = {c.code: E for c in catalog}

    result = RULE(catalog, ledger)

    assert not result.satisfied
    assert result.message == "Required experiment courses missing from the catalog: 実験A"


def test_several_missing_courses_listed_in_order(make_course):
    result = RULE([make_course(name="関係ない科目")], {})

    assert not result.satisfied
    assert "実験A, 実験B, 実験C" in result.message


def test_incomplete_course_is_reported_as_shortfall(make_course):
    a, b, c = (make_course(name=n) for n in ("実験A", "実験B", "実験C"))
    ledger = {a.code: E, b.code: CourseStatus.PLANNED_ENROLLMENT,
              c.code: CourseStatus.FAILED_NO_CREDIT}

    result = RULE([a, b, c], ledger)

    assert not result.satisfied
    assert result.message == "Not all required experiment courses completed (current: 2, required: 3)"
    assert result.details.incomplete_items == (c,)


def test_duplicate_catalog_rows_complete_a_name_once(make_course):
    catalog = [make_course(name=n) for n in ("実験A", "実験A", "実験B", "実験C")]
    ledger = {c.code: E for c in catalog[1:]}

    result = RULE(catalog, ledger)

    assert result.satisfied
    assert result.details.completed == 3


def test_missing_names_keeps_list_order(make_course):
    catalog = [make_course(name="B")]
    assert missing_names(["C", "B", "A"], catalog) == ["C", "A"]


def test_selected_set_rule(make_course):
    rule = selected_set_rule("Mandatory", is_mandatory_enrollment, "mandatory enrollment")
    flagged = [make_course(enrollment_type="必履修") for _ in range(2)]
    catalog = flagged + [make_course()]

    result = rule(catalog, {flagged[0].code: E})

    assert not result.satisfied
    assert result.details.total == 2
    assert result.details.completed == 1

    assert rule(catalog, {c.code: E for c in flagged}).satisfied


def test_selected_set_rule_with_empty_selection(make_course):
    rule = selected_set_rule("Mandatory", is_mandatory_enrollment, "mandatory enrollment")
    result = rule([make_course()], {})

    assert result.satisfied
    assert result.details.total == 0


def test_completed_name_is_not_listed_as_incomplete(make_course):
    catalog = [make_course(name=n) for n in ("実験A", "実験A", "実験B", "実験C")]
    ledger = {c.code: E for c in catalog[1:]}

    result = RULE(catalog, ledger)

    assert result.satisfied
    assert result.details.incomplete_items == ()
