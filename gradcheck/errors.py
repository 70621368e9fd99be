"""
Exceptions raised by the graduation checker.

Requirement evaluation itself never raises on well-formed input: a missing
course or a credit shortfall is reported as an unsatisfied result. The
exceptions below are for malformed input data, which is rejected loudly
instead of being silently miscounted.
"""


class GradcheckError(Exception):
    """Base class for all errors raised by this package."""


class InvalidCreditValue(GradcheckError, ValueError):
    """
    A course's credit field is not a plain non-negative base-10 integer.

    Raised by CourseRecord.credit_value. Values like "2.5", "", "abc" or
    "3単位" are rejected rather than coerced to zero.
    """

    def __init__(self, code: str, value: str):
        self.code = code
        self.value = value
        super().__init__(f"Invalid credit value {value!r} for course {code!r}")


class CatalogError(GradcheckError):
    """A syllabus file could not be fetched or contains a malformed row."""


class StatusStoreError(GradcheckError):
    """The saved status file contains a status value that is not recognized."""
