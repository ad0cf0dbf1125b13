"""Domain package exports for user records and the pure directory engines."""

from .entities import Address, Company, UserId, UserRecord
from .filtering import filter_records
from .pagination import PAGE_GAP, PageResult, page_window, paginate, total_pages
from .record_store import DuplicateUserIdError, RecordStore
from .sorting import DEFAULT_SORT_KEY, SORT_OPTIONS, sort_records
from .stats import DirectoryStats

__all__ = [
    "Address",
    "Company",
    "DEFAULT_SORT_KEY",
    "DirectoryStats",
    "DuplicateUserIdError",
    "PAGE_GAP",
    "PageResult",
    "RecordStore",
    "SORT_OPTIONS",
    "UserId",
    "UserRecord",
    "filter_records",
    "page_window",
    "paginate",
    "sort_records",
    "total_pages",
]
