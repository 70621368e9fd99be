"""
Requirement result data models.

Contains dataclasses for representing the results of requirement checks.
All of them are frozen: a result is created fresh on every evaluation and
never modified afterwards.
"""

from dataclasses import dataclass
from typing import Optional

from .course import CourseRecord


@dataclass(frozen=True)
class RequirementDetails:
    """
    Quantitative detail behind a requirement verdict.

    For credit rules `total` and `completed` are credits; for every other
    rule they are course counts.

    Example for "Advanced program general subjects (6 credits)":
        total: 6
        completed: 4
        completed_items: (技術者倫理, 総合英語Ⅰ)
        incomplete_items: (歴史学, 技術史, ...)
    """
    total: int                                       # Required amount
    completed: int                                   # Achieved amount
    completed_items: tuple = ()                      # Courses that count
    incomplete_items: tuple = ()                     # Courses that do not count yet


@dataclass(frozen=True)
class RequirementResult:
    """
    Result of evaluating a single graduation requirement.

    `message` is the human-readable explanation shown next to the verdict.
    It distinguishes a course missing from the catalog (data problem) from
    a course the student has not completed yet (completion shortfall).
    """
    name: str
    satisfied: bool
    message: str
    details: Optional[RequirementDetails] = None


@dataclass(frozen=True)
class AggregateResult:
    """
    Results of every requirement in the registry, in registry order.

    `all_satisfied` is the logical AND over every result. An empty registry
    is vacuously satisfied.
    """
    results: tuple
    all_satisfied: bool

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.satisfied)

    @property
    def failed(self) -> list:
        """Results that are not satisfied, in registry order."""
        return [r for r in self.results if not r.satisfied]

    def get(self, name: str) -> Optional[RequirementResult]:
        """Look up a result by requirement name."""
        for r in self.results:
            if r.name == name:
                return r
        return None
