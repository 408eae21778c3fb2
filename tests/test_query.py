"""
==============================================================================
Query Engine Tests
==============================================================================

Tests for filtering, pagination and query parameter parsing.

==============================================================================
"""

import math

import pytest

from product_catalog.catalog.query import (
    ListingParams,
    compute_listing,
    filter_by_name,
    paginate,
    parse_listing_params,
)

from conftest import make_product


@pytest.fixture
def catalog():
    names = ["Alpha Pass", "Beta Pass", "alphabet soup", "Gamma", "ALPHA Card"]
    return [make_product(i + 1, name) for i, name in enumerate(names)]


class TestFilterByName:
    """Tests for name search."""

    def test_empty_search_keeps_all(self, catalog):
        assert filter_by_name(catalog, "") == catalog

    def test_case_insensitive_substring(self, catalog):
        names = [p.name for p in filter_by_name(catalog, "aLpHa")]
        assert names == ["Alpha Pass", "alphabet soup", "ALPHA Card"]

    def test_every_product_classified(self, catalog):
        matched = {p.id for p in filter_by_name(catalog, "pass")}
        for product in catalog:
            assert (product.id in matched) == ("pass" in product.name.lower())

    def test_non_string_names_are_searchable(self):
        numbered = make_product(1, "x", name=12345)
        assert filter_by_name([numbered], "234") == [numbered]

    def test_unnamed_products_never_match(self):
        unnamed = make_product(1, "x", name=None)
        assert filter_by_name([unnamed], "x") == []


class TestPaginate:

    def test_slices(self, catalog):
        assert [p.id for p in paginate(catalog, 2, 2)] == [3, 4]

    def test_out_of_range(self, catalog):
        assert paginate(catalog, 4, 2) == []


class TestComputeListing:
    """Tests for the listing envelope."""

    @pytest.mark.parametrize("page", [1, 2, 3, 7])
    @pytest.mark.parametrize("limit", [1, 2, 3, 5, 10])
    def test_page_bounds(self, catalog, page, limit):
        listing = compute_listing(catalog, page, limit)
        assert len(listing.data) <= limit
        assert listing.pagination.total == len(catalog)
        assert listing.pagination.total_pages == math.ceil(len(catalog) / limit)

    def test_filtered_totals(self, catalog):
        listing = compute_listing(catalog, 1, 2, "alpha")
        assert [p.name for p in listing.data] == ["Alpha Pass", "alphabet soup"]
        assert listing.pagination.total == 3
        assert listing.pagination.total_pages == 2

    def test_to_dict_uses_camel_case(self, catalog):
        body = compute_listing(catalog, 1, 1).to_dict()
        assert body["pagination"] == {"total": 5, "page": 1, "limit": 1, "totalPages": 5}
        assert body["data"][0]["productTagline"] == "Alpha Pass tagline"

    def test_does_not_mutate_input(self, catalog):
        before = list(catalog)
        compute_listing(catalog, 1, 2, "alpha")
        assert catalog == before

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (-1, -1)])
    def test_rejects_non_positive(self, catalog, page, limit):
        with pytest.raises(ValueError):
            compute_listing(catalog, page, limit)


class TestParseListingParams:
    """Tests for raw parameter parsing."""

    def test_defaults(self):
        assert parse_listing_params() == ListingParams(page=1, limit=10, search="")

    def test_numeric_strings(self):
        assert parse_listing_params("3", "25", "pass") == ListingParams(3, 25, "pass")

    @pytest.mark.parametrize("raw", ["abc", "", "0", "-3", None])
    def test_invalid_values_fall_back(self, raw):
        params = parse_listing_params(raw, raw)
        assert (params.page, params.limit) == (1, 10)

    def test_leading_integer(self):
        assert parse_listing_params("4th", "12abc").limit == 12

    def test_custom_default_limit(self):
        assert parse_listing_params(limit="x", default_limit=20).limit == 20

    def test_max_limit_caps(self):
        assert parse_listing_params(limit="500", max_limit=100).limit == 100
