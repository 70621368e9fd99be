"""
Syllabus catalog loading and caching.

This module handles loading the syllabus CSV files into CourseRecord tuples,
from local files or over HTTP, with caching to prevent repeated I/O when
the checker is re-run.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import CSV_COLUMNS, CSV_FILES, HTTP_BACKOFF, HTTP_RETRIES, HTTP_TIMEOUT
from ..errors import CatalogError, InvalidCreditValue
from ..models import CourseRecord

logger = logging.getLogger(__name__)


def create_retry_session() -> requests.Session:
    """HTTP session that retries transient server errors on GET."""
    session = requests.Session()
    retries = Retry(
        total=HTTP_RETRIES,
        backoff_factor=HTTP_BACKOFF,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def is_url(source) -> bool:
    return str(source).startswith(("http://", "https://"))


class CatalogLoader:
    """
    Loads and caches syllabus catalogs.

    FILE FORMAT:
    ------------
    Each syllabus file is a UTF-8 CSV. The first line is a header and is
    discarded; every following row has exactly 13 columns in the order of
    config.CSV_COLUMNS and becomes one CourseRecord.

    VALIDATION:
    -----------
    Rows are checked when loaded, not when a rule runs. A row with the wrong
    number of columns or a credit value that is not an integer raises
    CatalogError naming the file, line and course code. A bad row is never
    skipped or counted as zero credits.

    Usage:
        loader = CatalogLoader()
        catalog = loader.load()                       # default CSV_FILES
        catalog = loader.load(["syllabus_j.csv"])     # specific files
        catalog = loader.load(["https://example.org/syllabus_j.csv"])
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session
        self._cache = {}  # Keyed by source (path or URL) as a string

    @property
    def session(self) -> requests.Session:
        """HTTP session, created on first remote load."""
        if self._session is None:
            self._session = create_retry_session()
        return self._session

    def load(self, sources: Optional[Iterable] = None) -> tuple:
        """
        Load several sources in order and concatenate their records.

        Args:
            sources: File paths and/or http(s) URLs (default: config.CSV_FILES)

        Returns:
            Tuple of CourseRecord, in file order then row order
        """
        sources = list(CSV_FILES if sources is None else sources)

        records = []
        for source in sources:
            if is_url(source):
                records.extend(self.load_url(str(source)))
            else:
                records.extend(self.load_file(source))

        logger.info("Loaded %d courses from %d source(s)", len(records), len(sources))
        return tuple(records)

    def load_file(self, path) -> tuple:
        """Load one local syllabus CSV file."""
        path = Path(path)
        key = str(path)
        if key not in self._cache:
            if not path.exists():
                raise FileNotFoundError(f"Syllabus file not found: {path}")
            # utf-8-sig drops the BOM spreadsheet exports tend to add
            try:
                with open(path, "r", encoding="utf-8-sig", newline="") as f:
                    text = f.read()
            except UnicodeDecodeError as exc:
                raise CatalogError(f"{path}: not a UTF-8 syllabus file ({exc})") from exc
            self._cache[key] = self.parse_text(text, source=key)
            logger.debug("Read %d courses from %s", len(self._cache[key]), path)
        return self._cache[key]

    def load_url(self, url: str) -> tuple:
        """Fetch and load one syllabus CSV over HTTP."""
        if url not in self._cache:
            try:
                resp = self.session.get(url, timeout=HTTP_TIMEOUT)
                resp.raise_for_status()
            except requests.RequestException as exc:
                raise CatalogError(f"Could not fetch syllabus {url}: {exc}") from exc
            try:
                text = resp.content.decode("utf-8-sig")
            except UnicodeDecodeError as exc:
                raise CatalogError(f"{url}: not a UTF-8 syllabus file ({exc})") from exc
            self._cache[url] = self.parse_text(text, source=url)
            logger.debug("Fetched %d courses from %s", len(self._cache[url]), url)
        return self._cache[url]

    def parse_text(self, text: str, source: str = "<string>") -> tuple:
        """
        Parse CSV text into CourseRecords.

        The first record is the header and is skipped. Blank lines are
        ignored. Cell values are stripped of surrounding whitespace.
        """
        reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
        next(reader, None)  # header

        records = []
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue

            if len(row) != len(CSV_COLUMNS):
                raise CatalogError(
                    f"{source}, line {reader.line_num}: expected {len(CSV_COLUMNS)} "
                    f"columns, got {len(row)}"
                )

            record = CourseRecord(*(cell.strip() for cell in row))
            try:
                record.credit_value
            except InvalidCreditValue as exc:
                raise CatalogError(f"{source}, line {reader.line_num}: {exc}") from exc

            records.append(record)

        return tuple(records)

    def clear_cache(self):
        """Forget loaded sources so the next load re-reads them."""
        self._cache.clear()
