import os
import sys
from pathlib import Path

import pytest

# Headless Qt for CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import catalog_picker
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from catalog_picker.core.models import Item
from catalog_picker.source import MemorySource


# Common test fixtures
@pytest.fixture
def make_item():
    """Factory for Items with a readable default title."""
    def _create(item_id: int, **attrs) -> Item:
        attrs.setdefault("title", f"Item {item_id}")
        return Item(id=item_id, **attrs)
    return _create


@pytest.fixture
def source_30() -> MemorySource:
    """30-item collection with ids 1..30."""
    return MemorySource.numbered(30)


@pytest.fixture
def api_record():
    """One artwork record as returned by the collection API."""
    return {
        "id": 27992,
        "title": "A Sunday on La Grande Jatte - 1884",
        "place_of_origin": "France",
        "artist_display": "Georges Seurat\nFrench, 1859-1891",
        "inscriptions": None,
        "date_start": 1884,
        "date_end": 1886,
    }
