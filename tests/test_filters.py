from casebook.data.filters import (
    CatalogFilters,
    apply_catalog_filters,
    category_counts,
    filter_by_category,
    serialize_filters,
)


def test_each_category_returns_only_its_entries(catalog):
    for key in catalog.category_keys:
        if key == "all":
            continue
        result = filter_by_category(catalog.entries, key)
        assert all(e.category == key for e in result)
        assert len(result) == sum(1 for e in catalog.entries if e.category == key)


def test_all_returns_full_catalog_in_order(catalog):
    result = filter_by_category(catalog.entries, "all")
    assert result == list(catalog.entries)
    assert len(result) == 15
    assert len(set(result)) == 15


def test_joins_scenario(catalog):
    titles = [e.title for e in filter_by_category(catalog.entries, "joins")]
    assert titles == ["Conditional Aggregation", "Complex Joins", "Self-Joins"]


def test_filter_is_idempotent(catalog):
    once = filter_by_category(catalog.entries, "ctes")
    twice = filter_by_category(once, "ctes")
    assert once == twice


def test_search_applies_within_category(catalog):
    filters = CatalogFilters(category="window_functions", search="  TREND ")
    titles = [e.title for e in apply_catalog_filters(catalog.entries, filters)]
    assert titles == ["LAG & LEAD", "Moving Averages"]


def test_blank_search_is_ignored(catalog):
    filters = CatalogFilters(category="all", search="   ")
    assert apply_catalog_filters(catalog.entries, filters) == list(catalog.entries)


def test_category_counts(catalog):
    counts = category_counts(catalog.entries, catalog.category_keys)
    assert list(counts) == catalog.category_keys
    assert counts["all"] == 15
    assert all(counts[k] == 3 for k in catalog.category_keys if k != "all")


def test_serialize_filters():
    assert serialize_filters(CatalogFilters(category="joins", search=" self ")) == {
        "category": "joins",
        "search": "self",
    }
    assert serialize_filters(CatalogFilters()) == {"category": "all", "search": None}
