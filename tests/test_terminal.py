from gradcheck.models import AggregateResult, CourseStatus, RequirementDetails, RequirementResult
from gradcheck.ui import TerminalDisplay


def test_requirement_shows_progress_and_courses(make_course, capsys):
    done = make_course(name="技術者倫理", credits="2")
    todo = make_course(name="歴史学", credits="4")
    result = RequirementResult(
        name="General subjects",
        satisfied=False,
        message="Not enough general subject credits (current: 2, required: 6)",
        details=RequirementDetails(total=6, completed=2,
                                   completed_items=(done,), incomplete_items=(todo,)),
    )

    TerminalDisplay.print_requirement(3, result)

    out = capsys.readouterr().out
    assert "3. General subjects" in out
    assert "(2/6)" in out
    assert "current: 2, required: 6" in out
    assert "技術者倫理 (2)" in out
    assert "歴史学 (4)" in out


def test_long_course_lists_are_truncated(make_course, capsys):
    courses = tuple(make_course(name=f"科目{i}") for i in range(13))
    result = RequirementResult(
        name="Many", satisfied=True, message="",
        details=RequirementDetails(total=1, completed=13, completed_items=courses),
    )

    TerminalDisplay.print_requirement(1, result)

    out = capsys.readouterr().out
    assert "科目9 (2)" in out
    assert "科目10" not in out
    assert "and 3 more" in out


def test_report_verdict_and_failed_only(capsys):
    ok = RequirementResult(name="Passing rule", satisfied=True, message="fine")
    ng = RequirementResult(name="Failing rule", satisfied=False, message="short")
    aggregate = AggregateResult(results=(ok, ng), all_satisfied=False)

    TerminalDisplay.print_report(aggregate, failed_only=True)

    out = capsys.readouterr().out
    assert "FAIL" in out
    assert "1/2" in out
    assert "2. Failing rule" in out
    assert "Passing rule" not in out


def test_course_summary_counts_statuses(make_course, capsys):
    a, b, c = make_course(), make_course(), make_course()
    ledger = {a.code: CourseStatus.CREDIT_EARNED, b.code: CourseStatus.FAILED_NO_CREDIT}

    TerminalDisplay.print_course_summary((a, b, c), ledger)

    out = capsys.readouterr().out
    assert "Courses in catalog:" in out
    assert "Failed (no credit):" in out
