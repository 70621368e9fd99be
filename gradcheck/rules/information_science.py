"""
"情報科学" (information science) education program requirements.

The program requires the credit of every one of its 19 required courses.
"""

from ..engines import required_set_rule
from ..requirement_lists import INFORMATION_SCIENCE_REQUIRED_COURSES

check_information_science_required = required_set_rule(
    "Information science program required courses",
    INFORMATION_SCIENCE_REQUIRED_COURSES,
    "information science program",
)
