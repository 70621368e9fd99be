"""
Data models for the graduation checker.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the loader, the engine and the display.
"""

from .course import CourseRecord, CourseStatus, StatusLedger
from .result import RequirementDetails, RequirementResult, AggregateResult

__all__ = [
    # Course models
    "CourseRecord",
    "CourseStatus",
    "StatusLedger",
    # Results
    "RequirementDetails",
    "RequirementResult",
    "AggregateResult",
]
