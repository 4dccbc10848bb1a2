"""Tests for Catalog queries."""

import json

import pytest

from osrs_items.catalog import Catalog
from osrs_items.models import ImageUrlOptions, ItemFilter


class TestLookupById:
    """get_by_id / get_all_by_id."""

    def test_single_id(self, catalog):
        item = catalog.get_by_id(13263)
        assert item is not None
        assert item.name == "Abyssal bludgeon"
        assert item.id == 13263

    def test_id_inside_list(self, catalog):
        assert catalog.get_by_id(13269).name == "Abyssal dagger#(p)"

    def test_id_inside_range(self, catalog):
        assert catalog.get_by_id(883).name == "Bronze arrow"

    def test_missing_id(self, catalog):
        assert catalog.get_by_id(99999999) is None
        assert catalog.get_all_by_id(99999999) == []

    @pytest.mark.parametrize("bad", [-1, "13263", 13263.5, None, True])
    def test_bad_id_is_not_found(self, catalog, bad):
        assert catalog.get_by_id(bad) is None
        assert catalog.get_all_by_id(bad) == []

    def test_all_matches_in_order(self, sample_items):
        first = sample_items[0]
        cat = Catalog(sample_items + [first])
        assert cat.get_all_by_id(13263) == [first, first]


class TestLookupByName:
    """Exact and substring name lookups."""

    def test_exact(self, catalog):
        assert catalog.get_by_exact_name("Abyssal bludgeon").id == 13263

    def test_exact_is_case_sensitive(self, catalog):
        assert catalog.get_by_exact_name("abyssal bludgeon") is None

    def test_exact_missing(self, catalog):
        assert catalog.get_by_exact_name("Non-existent item 123456") is None

    def test_search_case_insensitive(self, catalog):
        items = catalog.search_by_name("DRAGON")
        assert [it.name for it in items] == ["Dragon dagger", "Dragon dagger#(p++)"]

    def test_search_limit(self, catalog):
        assert len(catalog.search_by_name("a", 2)) == 2

    @pytest.mark.parametrize("limit", [None, 0, -3])
    def test_search_non_positive_limit_is_unlimited(self, catalog, limit):
        assert len(catalog.search_by_name("arrow", limit)) == 2

    def test_search_no_match(self, catalog):
        assert catalog.search_by_name("nonexistentxyz123") == []


class TestGetFiltered:
    """get_filtered combines criteria with AND."""

    def test_no_filter_returns_everything(self, catalog, sample_items):
        assert catalog.get_filtered() == sample_items

    def test_has_variant_false(self, catalog):
        items = catalog.get_filtered(ItemFilter(has_variant=False))
        assert items
        assert all(it.variant is None for it in items)

    def test_has_variant_true(self, catalog):
        items = catalog.get_filtered(ItemFilter(has_variant=True))
        assert len(items) == 5
        assert all(it.variant is not None for it in items)

    def test_limit_after_filters(self, catalog):
        items = catalog.get_filtered(ItemFilter(name_contains="glory", has_variant=True, limit=2))
        assert [it.variant for it in items] == ["1", "2"]

    def test_combined(self, catalog):
        items = catalog.get_filtered(ItemFilter(name_contains="dagger", has_variant=False))
        assert [it.name for it in items] == ["Dragon dagger"]


class TestAggregates:
    """count, unique_base_names, variants_of."""

    def test_count(self, catalog, sample_items):
        assert catalog.count() == len(sample_items) == len(catalog)

    def test_unique_base_names_sorted_and_unique(self, catalog):
        names = catalog.unique_base_names()
        assert names == sorted(set(names))
        assert names.count("Amulet of glory") == 1

    def test_variants_of(self, catalog):
        variants = catalog.variants_of("Amulet of glory")
        assert len(variants) == 3
        assert all(it.base_name == "Amulet of glory" for it in variants)

    def test_variants_of_missing(self, catalog):
        assert catalog.variants_of("Non-existent item xyz123") == []

    def test_image_url_for(self, catalog):
        assert catalog.image_url_for("Abyssal bludgeon", ImageUrlOptions(use_thumb=False)) == (
            "https://oldschool.runescape.wiki/images/Abyssal_bludgeon_detail.png"
        )

    def test_queries_do_not_mutate(self, catalog):
        before = catalog.items
        catalog.get_filtered(ItemFilter(limit=1)).clear()
        catalog.search_by_name("a").clear()
        assert catalog.items is before
        assert catalog.count() == 10


class TestLoad:
    """Catalog.load degrades to an empty catalog."""

    def test_missing_file(self, tmp_path):
        cat = Catalog.load(tmp_path / "missing.json")
        assert cat.count() == 0
        assert cat.get_by_id(13263) is None
        assert cat.search_by_name("dragon") == []
        assert cat.unique_base_names() == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text("{not json", encoding="utf-8")
        assert Catalog.load(path).count() == 0

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_bytes(b'[{"id": 1, "name": "\xff\xfe"}]')
        cat = Catalog.load(path)
        assert cat.count() == 0
        assert cat.get_by_id(1) is None

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps({"items": []}), encoding="utf-8")
        assert Catalog.load(path).count() == 0

    def test_loads_dataset(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(
            json.dumps([
                {
                    "id": 13263,
                    "name": "Abyssal bludgeon",
                    "baseName": "Abyssal bludgeon",
                    "imageUrl": "https://example.invalid/bludgeon.png",
                },
                {"id": [1704, 1705], "name": "Amulet of glory#1"},
            ]),
            encoding="utf-8",
        )
        cat = Catalog.load(path)
        assert cat.count() == 2
        assert cat.get_by_id(1705).variant == "1"
        assert cat.get_by_id(13263).image_url == "https://example.invalid/bludgeon.png"
