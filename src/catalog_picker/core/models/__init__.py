"""
Core Models Package

Immutable data models shared by the source, bulk and GUI layers.
All models are frozen dataclasses, so they are safe to hand from a
worker thread to the GUI thread.
"""

from .items import Item, ITEM_FIELDS
from .pages import PaginationMeta, PageResult, PageWindow

__all__ = [
    "Item",
    "ITEM_FIELDS",
    "PaginationMeta",
    "PageResult",
    "PageWindow",
]
