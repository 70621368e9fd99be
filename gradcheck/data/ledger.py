"""
Status store.

This module keeps the user's per-course statuses between runs in a small
JSON file:

    {"J1001": "credit-earned", "J1002": "planned-enrollment", ...}

The engine only reads a status ledger; everything about where the ledger
comes from and how it is saved lives here.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional

from ..config import LEGACY_STATUS_LABELS, STATUS_FILE
from ..errors import StatusStoreError
from ..models import CourseRecord, CourseStatus, StatusLedger

logger = logging.getLogger(__name__)


def parse_status(value: str) -> CourseStatus:
    """
    Convert a saved status string into a CourseStatus.

    Accepts the canonical values ("credit-earned", ...) and the Japanese
    labels of the browser version ("単位取得済み", ...).
    """
    if not isinstance(value, str):
        raise StatusStoreError(f"Course status must be a string, got {value!r}")
    if value in LEGACY_STATUS_LABELS:
        return LEGACY_STATUS_LABELS[value]
    try:
        return CourseStatus(value)
    except ValueError:
        raise StatusStoreError(f"Unknown course status: {value!r}") from None


def with_defaults(ledger: StatusLedger, catalog: Iterable[CourseRecord]) -> dict:
    """
    Return a new ledger with an entry for every catalog course.

    Courses without a saved status become NOT_TAKEN. Entries for codes no
    longer in the catalog are kept so that switching catalogs loses nothing.
    """
    filled = dict(ledger)
    for course in catalog:
        filled.setdefault(course.code, CourseStatus.NOT_TAKEN)
    return filled


def update(ledger: StatusLedger, code: str, status: CourseStatus) -> dict:
    """Return a new ledger with one course status changed."""
    updated = dict(ledger)
    updated[code] = status
    return updated


class StatusStore:
    """
    Loads and saves the status ledger as JSON.

    A missing file means "nothing recorded yet" and loads as an empty
    ledger. An unreadable file is logged and also loads empty, so a broken
    save never blocks the checker. An unknown status value is different:
    it raises StatusStoreError because guessing would change verdicts.

    No durability guarantees: save() simply rewrites the file.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else STATUS_FILE

    def load(self) -> dict:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Could not restore course statuses from %s: %s", self.path, exc)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object of course statuses", self.path)
            return {}

        ledger = {str(code): parse_status(value) for code, value in data.items()}
        logger.info("Restored %d course statuses from %s", len(ledger), self.path)
        return ledger

    def save(self, ledger: Mapping[str, CourseStatus]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {code: status.value for code, status in sorted(ledger.items())}
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Saved %d course statuses to %s", len(payload), self.path)
