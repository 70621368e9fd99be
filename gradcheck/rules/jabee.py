"""
JABEE accreditation requirements.

JABEE (Japan Accreditation Board for Engineering Education) defines its
requirements over named course groups. Most are "N or more courses from
this list"; the specialty groups add a few stricter shapes:

    1. Computer architecture must be taken
    3. Enroll in all three system programming courses, earn two or more
    9. Every experiment/practice course is required

The course name lists live in gradcheck.requirement_lists.
"""

from ..engines import by_names, count_threshold_rule, enrollment_count_rule, required_set_rule
from ..requirement_lists import (
    COMPUTER_APPLICATION_COURSES,
    COMPUTER_ARCHITECTURE_COURSE,
    COMPUTER_SYSTEM_COURSES,
    ENGLISH_COURSES,
    EXPERIMENT_PRACTICE_REQUIRED_COURSES,
    HUMANITIES_SOCIAL_SCIENCE_COURSES,
    INFORMATION_COMMUNICATION_COURSES,
    INFORMATION_TECHNOLOGY_COURSES,
    MATH_SCIENCE_COURSES,
    MATHEMATICAL_SCIENCE_COURSES,
    MATHEMATICAL_SCIENCE_COURSES_FULL,
    SYSTEM_PROGRAMMING_COURSES,
    SYSTEM_PROGRAMMING_COURSES_FULL,
)

# =============================================================================
# GENERAL EDUCATION
# =============================================================================

check_humanities_social_science = count_threshold_rule(
    "JABEE humanities and social sciences",
    by_names(HUMANITIES_SOCIAL_SCIENCE_COURSES),
    6,
    "humanities and social science",
)

check_english = count_threshold_rule(
    "JABEE English",
    by_names(ENGLISH_COURSES),
    6,
    "English",
)

check_math_science = count_threshold_rule(
    "JABEE mathematics and natural sciences",
    by_names(MATH_SCIENCE_COURSES),
    10,
    "mathematics and natural science",
)

check_information_technology = count_threshold_rule(
    "JABEE information technology",
    by_names(INFORMATION_TECHNOLOGY_COURSES),
    2,
    "information technology",
)


# =============================================================================
# SPECIALTY COURSE GROUPS
# =============================================================================

check_computer_architecture = required_set_rule(
    "JABEE specialty 1: computer architecture taken",
    [COMPUTER_ARCHITECTURE_COURSE],
    "computer architecture",
)

check_computer_systems = count_threshold_rule(
    "JABEE specialty 2: 5 or more computer system courses",
    by_names(COMPUTER_SYSTEM_COURSES),
    5,
    "computer system",
)

check_system_programming = enrollment_count_rule(
    "JABEE specialty 3: all core system programming courses taken, 2 or more earned",
    SYSTEM_PROGRAMMING_COURSES,
    2,
    "core system programming",
)

check_system_programming_full = count_threshold_rule(
    "JABEE specialty 4: 5 or more system programming courses",
    by_names(SYSTEM_PROGRAMMING_COURSES_FULL),
    5,
    "system programming",
)

check_information_communication = count_threshold_rule(
    "JABEE specialty 5: 4 or more information communication and signal processing courses",
    by_names(INFORMATION_COMMUNICATION_COURSES),
    4,
    "information communication and signal processing",
)

check_computer_application = count_threshold_rule(
    "JABEE specialty 6: 3 or more computer application courses",
    by_names(COMPUTER_APPLICATION_COURSES),
    3,
    "computer application",
)

check_mathematical_science = count_threshold_rule(
    "JABEE specialty 7: 情報数学Ⅰ or 情報数学Ⅱ",
    by_names(MATHEMATICAL_SCIENCE_COURSES),
    1,
    "information mathematics",
)

check_mathematical_science_full = count_threshold_rule(
    "JABEE specialty 8: 4 or more mathematical science courses",
    by_names(MATHEMATICAL_SCIENCE_COURSES_FULL),
    4,
    "mathematical science",
)

check_experiment_practice = required_set_rule(
    "JABEE specialty 9: all experiment and practice courses",
    EXPERIMENT_PRACTICE_REQUIRED_COURSES,
    "experiment and practice",
)


def jabee_rules() -> list:
    """JABEE rules in display order."""
    return [
        check_humanities_social_science,
        check_english,
        check_math_science,
        check_information_technology,
        check_computer_architecture,
        check_computer_systems,
        check_system_programming,
        check_system_programming_full,
        check_information_communication,
        check_computer_application,
        check_mathematical_science,
        check_mathematical_science_full,
        check_experiment_practice,
    ]
