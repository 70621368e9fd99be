"""
Course data models.

Contains the CourseRecord dataclass and CourseStatus enum that represent
the syllabus catalog and the student's per-course status.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from ..errors import InvalidCreditValue


class CourseStatus(Enum):
    """
    Possible states for a course in the student's status ledger.

    NOT_TAKEN: Course has not been taken (default when absent from the ledger)
    CREDIT_EARNED: Student passed the course and earned the credit
    FAILED_NO_CREDIT: Student took the course and received no credit (F)
    PLANNED_ENROLLMENT: Student plans to take the course (assumed passed)
    PLANNED_ENROLLMENT_EXPECTED_FAIL: Student takes the course but expects an F

    Only CREDIT_EARNED and PLANNED_ENROLLMENT count toward a requirement.
    """
    NOT_TAKEN = "not-taken"
    CREDIT_EARNED = "credit-earned"
    FAILED_NO_CREDIT = "failed-no-credit"
    PLANNED_ENROLLMENT = "planned-enrollment"
    PLANNED_ENROLLMENT_EXPECTED_FAIL = "planned-enrollment-expected-fail"


# Course code -> status. Codes missing from the ledger are NOT_TAKEN.
StatusLedger = Mapping[str, CourseStatus]


@dataclass(frozen=True)
class CourseRecord:
    """
    Represents a single row of the syllabus catalog.

    Field order matches the CSV column order (see config.CSV_COLUMNS), so a
    row can be turned into a record with CourseRecord(*row).

    Attributes:
        program: Program level, "本科" (main) or "専攻科" (advanced)
        category1: Subject classification tier 1 (e.g. "一般", "専門")
        category2: Subject classification tier 2 (e.g. "必修", "選択")
        name: Human-readable course name, used as a matching key by rules
        code: Unique course code, the key of the status ledger
        credit_type: Credit kind (e.g. "学修単位")
        credits: Credit value as it appears in the CSV (e.g. "2")
        department: Department or major offering the course
        grade_year: School year the course is offered in
        term: Term (e.g. "前期")
        instructor: Instructor name(s)
        enrollment_type: Enrollment requirement flag ("必履修" = mandatory)
        subject_kind: Departmental subject kind (e.g. "一般科目")
    """
    program: str
    category1: str
    category2: str
    name: str
    code: str
    credit_type: str
    credits: str
    department: str
    grade_year: str
    term: str
    instructor: str
    enrollment_type: str
    subject_kind: str

    @property
    def credit_value(self) -> int:
        """
        Credits as an integer.

        The CSV stores credits as text. Only plain decimal digits are
        accepted; anything else raises InvalidCreditValue.
        """
        text = self.credits.strip()
        if not text.isdecimal():
            raise InvalidCreditValue(self.code, self.credits)
        return int(text)
