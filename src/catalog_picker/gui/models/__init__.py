"""Qt item models for the GUI."""

from .catalog_table_model import CatalogTableModel, COLUMNS, SORT_ROLE

__all__ = ["CatalogTableModel", "COLUMNS", "SORT_ROLE"]
