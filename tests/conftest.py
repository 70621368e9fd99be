import csv
import dataclasses
import itertools

import pytest

from gradcheck.config import CSV_COLUMNS
from gradcheck.models import CourseRecord, CourseStatus
from gradcheck.requirement_lists import (
    COMPUTER_APPLICATION_COURSES,
    COMPUTER_SYSTEM_COURSES,
    ENGLISH_COURSES,
    EXPERIMENT_PRACTICE_REQUIRED_COURSES,
    HUMANITIES_SOCIAL_SCIENCE_COURSES,
    INFORMATION_COMMUNICATION_COURSES,
    INFORMATION_SCIENCE_REQUIRED_COURSES,
    INFORMATION_TECHNOLOGY_COURSES,
    MATH_SCIENCE_COURSES,
    MATHEMATICAL_SCIENCE_COURSES_FULL,
    SYSTEM_PROGRAMMING_COURSES_FULL,
)

_codes = itertools.count(1)


def _make_course(name="科目", code=None, credits="2", program="専攻科",
                 category1="専門", category2="選択", subject_kind="専門科目",
                 enrollment_type="", department="情報科学専攻", grade_year="1",
                 term="前期", instructor="山田", credit_type="学修単位"):
    if code is None:
        code = f"T{next(_codes):04d}"
    return CourseRecord(
        program=program,
        category1=category1,
        category2=category2,
        name=name,
        code=code,
        credit_type=credit_type,
        credits=credits,
        department=department,
        grade_year=grade_year,
        term=term,
        instructor=instructor,
        enrollment_type=enrollment_type,
        subject_kind=subject_kind,
    )


@pytest.fixture
def make_course():
    """Factory for CourseRecord with sensible advanced-program defaults."""
    return _make_course


@pytest.fixture
def complete_catalog():
    """
    A catalog on which every default rule can be satisfied.

    Every JABEE and information science course name appears once as a main
    program course. The advanced program has 8 general, 14 specialty-related
    and 40 specialty credits (62 in total).
    """
    names = dict.fromkeys(itertools.chain(
        HUMANITIES_SOCIAL_SCIENCE_COURSES,
        ENGLISH_COURSES,
        MATH_SCIENCE_COURSES,
        INFORMATION_TECHNOLOGY_COURSES,
        COMPUTER_SYSTEM_COURSES,
        SYSTEM_PROGRAMMING_COURSES_FULL,
        INFORMATION_COMMUNICATION_COURSES,
        COMPUTER_APPLICATION_COURSES,
        MATHEMATICAL_SCIENCE_COURSES_FULL,
        EXPERIMENT_PRACTICE_REQUIRED_COURSES,
        INFORMATION_SCIENCE_REQUIRED_COURSES,
    ))
    catalog = [
        _make_course(name=name, code=f"M{i:03d}", program="本科", subject_kind="")
        for i, name in enumerate(names, 1)
    ]
    for kind, count, prefix in (("一般科目", 4, "G"), ("専門関連科目", 7, "R"), ("専門科目", 20, "S")):
        catalog.extend(
            _make_course(name=f"{kind}{i}", code=f"{prefix}{i:03d}", subject_kind=kind)
            for i in range(1, count + 1)
        )
    return catalog


@pytest.fixture
def all_earned():
    """Ledger builder marking every course of a catalog CREDIT_EARNED."""
    return lambda catalog: {c.code: CourseStatus.CREDIT_EARNED for c in catalog}


@pytest.fixture
def write_csv():
    """Write CourseRecords to a syllabus CSV file with a header line."""
    def write(path, records):
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_COLUMNS)
            for record in records:
                writer.writerow(dataclasses.astuple(record))
        return path
    return write
