"""Widgets for the catalog window."""

from .paginator import PaginatorBar
from .select_count_popup import SelectCountPopup

__all__ = ["PaginatorBar", "SelectCountPopup"]
