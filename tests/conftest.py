import pytest

from osrs_items.builder import build_items
from osrs_items.catalog import Catalog

SAMPLE_ROWS = [
    ("Abyssal bludgeon", "13263"),
    ("Amulet of glory#1", "1706"),
    ("Amulet of glory#2", "1708"),
    ("Amulet of glory#Uncharged", "1704"),
    ("Abyssal dagger#(p)", "13267, 13269"),
    ("Dragon dagger", "1215"),
    ("Dragon dagger#(p++)", "5698"),
    ("'24-carat' sword", "12954"),
    ("Rune arrow", "892"),
    ("Bronze arrow", "882-883"),
]


@pytest.fixture
def sample_items():
    return build_items(SAMPLE_ROWS)


@pytest.fixture
def catalog(sample_items):
    return Catalog(sample_items)
