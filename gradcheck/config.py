"""
Configuration constants for the graduation checker.

This module contains all configuration values and constants used throughout
the checker. Centralizing these makes it easy to adjust behavior when the
syllabus format or the program rules change.
"""

from pathlib import Path

from .models.course import CourseStatus

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

# Syllabus CSV files loaded by default (main program i4/i5 + advanced program)
CSV_FILES = [
    DATA_DIR / "syllabus_i4_r4.csv",
    DATA_DIR / "syllabus_i5_r5.csv",
    DATA_DIR / "syllabus_j.csv",
]

# Where the user's course statuses are kept between runs
STATUS_FILE = DATA_DIR / "course_statuses.json"


# =============================================================================
# CATALOG SCHEMA
# =============================================================================
# Column order of the syllabus CSV files. The first line of every file is a
# header and is discarded; rows are mapped onto these columns by position.

CSV_COLUMNS = [
    "本科または専攻科",   # program level
    "科目区分1",          # subject classification tier 1
    "科目区分2",          # subject classification tier 2
    "授業科目",           # course name
    "科目番号",           # course code
    "単位種別",           # credit type
    "単位数",             # credits
    "学科",               # department
    "学年",               # school year
    "学期",               # term
    "担当教員",           # instructor
    "履修上の区分",       # enrollment requirement flag
    "科における科目種",   # departmental subject kind
]


# =============================================================================
# CATALOG FIELD VALUES
# =============================================================================

# Program level (本科または専攻科)
PROGRAM_MAIN = "本科"
PROGRAM_ADVANCED = "専攻科"

# Enrollment requirement flag (履修上の区分)
MANDATORY_ENROLLMENT = "必履修"

# Subject classification tier 2 (科目区分2)
CATEGORY_REQUIRED = "必修"
CATEGORY_ELECTIVE = "選択"

# Departmental subject kind (科における科目種)
SUBJECT_KIND_GENERAL = "一般科目"
SUBJECT_KIND_SPECIALTY_RELATED = "専門関連科目"
SUBJECT_KIND_SPECIALTY = "専門科目"


# =============================================================================
# STATUS DEFINITIONS
# =============================================================================

# Statuses that count toward a requirement. This is the single rule every
# evaluator applies: a planned enrollment counts as if the credit was earned.
COUNTED_STATUSES = frozenset({
    CourseStatus.CREDIT_EARNED,
    CourseStatus.PLANNED_ENROLLMENT,
})

# Statuses that mean the student is (or was) enrolled in the course.
# PLANNED_ENROLLMENT_EXPECTED_FAIL is enrollment without a credit, which is
# what the system-programming rule calls "currently enrolled".
ENROLLED_STATUSES = frozenset({
    CourseStatus.CREDIT_EARNED,
    CourseStatus.PLANNED_ENROLLMENT,
    CourseStatus.PLANNED_ENROLLMENT_EXPECTED_FAIL,
})

# Status labels used in saved data of the browser version of the checker.
# The status store accepts these on load so old exports keep working.
LEGACY_STATUS_LABELS = {
    "未履修": CourseStatus.NOT_TAKEN,
    "単位取得済み": CourseStatus.CREDIT_EARNED,
    "単位なし（F）": CourseStatus.FAILED_NO_CREDIT,
    "履修予定": CourseStatus.PLANNED_ENROLLMENT,
    "履修かつF予定": CourseStatus.PLANNED_ENROLLMENT_EXPECTED_FAIL,
}


# =============================================================================
# REMOTE CATALOGS
# =============================================================================
# Catalog sources starting with http:// or https:// are fetched with requests.

HTTP_TIMEOUT = 15
HTTP_RETRIES = 3
HTTP_BACKOFF = 1


# =============================================================================
# ADVANCED PROGRAM CREDIT REQUIREMENTS
# =============================================================================
# Completion requirements of the advanced program (専攻科), in credits.

ADVANCED_COMPLETION_CREDITS = 62
ADVANCED_GENERAL_CREDITS = 6
ADVANCED_SPECIALTY_RELATED_CREDITS = 12
ADVANCED_SPECIALTY_CREDITS = 31
