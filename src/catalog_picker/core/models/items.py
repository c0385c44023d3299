"""
Module: items

Purpose:
    Item record displayed in the catalog table. Only the identifier
    matters to selection; the remaining attributes are display-only.

Key Classes:
    - Item: Immutable catalog record

Dependencies:
    - dataclasses (std)

Used By:
    - catalog_picker.source: Builds Items from API records
    - catalog_picker.gui.models.catalog_table_model: Renders rows
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

# Attribute names requested from the collection API (also the "fields" param)
ITEM_FIELDS: Tuple[str, ...] = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)


@dataclass(frozen=True)
class Item:
    """
    A catalog record (immutable).

    Attributes:
        id: Unique identifier, stable across fetches
        title: Display title
        place_of_origin: Origin text, if known
        artist_display: Creator text, if known
        inscriptions: Free-text annotation, if any
        date_start: Start of the date range
        date_end: End of the date range

    Example:
        >>> item = Item.from_api({"id": 7, "title": "Nighthawks"})
        >>> item.id
        7
    """

    id: int
    title: str = ""
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate identifier on construction."""
        # bool is an int subclass but never a valid id
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"Item id must be an integer: {self.id!r}")

    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "Item":
        """
        Build an Item from a collection API record.

        Missing or null descriptive attributes are tolerated; a missing
        or non-integer id is not.

        Args:
            record: One entry of the response's "data" list

        Returns:
            New Item

        Raises:
            ValueError: If the record is not a mapping or has no integer id
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"Item record must be an object, got {type(record).__name__}")
        if "id" not in record:
            raise ValueError("Item record has no 'id'")

        return cls(
            id=record["id"],
            title=record.get("title") or "",
            place_of_origin=record.get("place_of_origin"),
            artist_display=record.get("artist_display"),
            inscriptions=record.get("inscriptions"),
            date_start=_optional_int(record.get("date_start")),
            date_end=_optional_int(record.get("date_end")),
        )


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
