"""
Module: source

Purpose:
    Paginated data sources for the catalog.

Key Classes:
    - PaginatedSource: Abstract interface
    - ArticSource: Remote collection API over httpx
    - MemorySource: Fixed in-memory list
    - SourceError: Fetch failure
"""

from .base import PaginatedSource, SourceError
from .artic import ArticSource, parse_page
from .memory import MemorySource

__all__ = [
    "PaginatedSource",
    "SourceError",
    "ArticSource",
    "parse_page",
    "MemorySource",
]
