"""
Data loading and persistence modules.
"""

from .loader import CatalogLoader, create_retry_session
from .ledger import StatusStore, parse_status, update, with_defaults

__all__ = [
    "CatalogLoader",
    "create_retry_session",
    "StatusStore",
    "parse_status",
    "update",
    "with_defaults",
]
