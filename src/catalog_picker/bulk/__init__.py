"""
Module: bulk

Purpose:
    Bulk "select the first N items" operation over a paginated source.

Key Functions:
    - select_first_n(): Walk pages until N unique ids are collected
    - parse_count(): Validate user-entered counts

Key Classes:
    - BulkSelectConfig: Page size / page cap
    - BulkSelectResult: Outcome of a run
    - CancelToken: Cooperative cancellation
    - BulkSelectError, BulkSelectCancelled: Failure types
"""

from .config import BulkSelectConfig, DEFAULT_BULK_PAGE_SIZE
from .cancellation import CancelToken, BulkSelectError, BulkSelectCancelled
from .selector import select_first_n, parse_count, BulkSelectResult

__all__ = [
    "BulkSelectConfig",
    "DEFAULT_BULK_PAGE_SIZE",
    "CancelToken",
    "BulkSelectError",
    "BulkSelectCancelled",
    "select_first_n",
    "parse_count",
    "BulkSelectResult",
]
