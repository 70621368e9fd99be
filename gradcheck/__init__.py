"""
Graduation Requirement Checker Package
======================================

Checks a student's course statuses against the graduation, advanced
program and JABEE requirements of a technical college (KOSEN) syllabus.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                          ENGINE LAYER                                   │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────┐  ┌──────────────────┐  ┌───────────────────────────┐  │
│  │  predicates  │  │  rule factories  │  │  RequirementAggregator    │  │
│  │ (filtering)  │  │ (credit / count) │  │  (AND over all rules)     │  │
│  └──────────────┘  └──────────────────┘  └───────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │   rules/ (registry)     │  │  data/ (CatalogLoader, StatusStore) │  │
│  │  default_rules()        │  │  CSV files, URLs, saved statuses    │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│           (UI only - can be swapped without touching the engine)        │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Formats and prints the verdict and each requirement          │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     GraduationChecker                                   │
│          (Orchestrator - connects engine to presentation)               │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gradcheck/
├── __init__.py            # This file - main exports
├── config.py              # Configuration constants
├── errors.py              # Exception hierarchy
├── requirement_lists.py   # Named course groups
├── checker.py             # GraduationChecker orchestrator
├── cli.py                 # Command-line interface
│
├── models/                # Data classes and enums
│   ├── course.py          # CourseRecord, CourseStatus
│   └── result.py          # RequirementResult, AggregateResult
│
├── data/                  # Data loading and persistence
│   ├── loader.py          # CatalogLoader
│   └── ledger.py          # StatusStore
│
├── engines/               # Generic rule building blocks
│   ├── predicates.py      # Course filters
│   ├── factories.py       # credit_threshold_rule, count_threshold_rule
│   ├── required_set.py    # required_set_rule
│   ├── enrollment.py      # enrollment_count_rule
│   └── aggregator.py      # RequirementAggregator, evaluate_all
│
├── rules/                 # Concrete requirements
│   ├── required_courses.py
│   ├── credit_rules.py
│   ├── jabee.py
│   └── information_science.py
│
└── ui/                    # User interface implementations
    └── terminal.py        # TerminalDisplay

USAGE
-----

    from gradcheck import GraduationChecker, evaluate_all, default_rules

    # Full check with terminal output
    GraduationChecker().run(sources=["syllabus_j.csv"])

    # Pure evaluation
    result = evaluate_all(default_rules(), catalog, ledger)
    result.all_satisfied

Running from command line:

    python -m gradcheck

"""

# Version
__version__ = "1.0.0"

# Main exports
from .checker import GraduationChecker
from .cli import main

# Model exports
from .models import (
    CourseRecord,
    CourseStatus,
    StatusLedger,
    RequirementDetails,
    RequirementResult,
    AggregateResult,
)

# Engine exports
from .engines import (
    RequirementAggregator,
    evaluate_all,
    credit_threshold_rule,
    count_threshold_rule,
    required_set_rule,
    enrollment_count_rule,
)

# Rule registry
from .rules import default_rules

# Data exports
from .data import CatalogLoader, StatusStore

# UI exports
from .ui import TerminalDisplay

# Errors
from .errors import GradcheckError, CatalogError, InvalidCreditValue, StatusStoreError

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GraduationChecker",
    "main",
    # Models
    "CourseRecord",
    "CourseStatus",
    "StatusLedger",
    "RequirementDetails",
    "RequirementResult",
    "AggregateResult",
    # Engines
    "RequirementAggregator",
    "evaluate_all",
    "credit_threshold_rule",
    "count_threshold_rule",
    "required_set_rule",
    "enrollment_count_rule",
    "default_rules",
    # Data
    "CatalogLoader",
    "StatusStore",
    # UI
    "TerminalDisplay",
    # Errors
    "GradcheckError",
    "CatalogError",
    "InvalidCreditValue",
    "StatusStoreError",
]
