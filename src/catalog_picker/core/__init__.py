"""
Catalog Picker Core Package

Data models and the cross-page selection tracker. Nothing in this
package imports Qt or performs I/O, so it can be unit tested on its own.
"""

from .models import Item, ITEM_FIELDS, PaginationMeta, PageResult, PageWindow
from .selection import SelectionTracker

__all__ = [
    "Item",
    "ITEM_FIELDS",
    "PaginationMeta",
    "PageResult",
    "PageWindow",
    "SelectionTracker",
]
