"""Tests for the Catalog Store against an in-memory products collection."""

from datetime import datetime, timedelta, timezone
import itertools

import pytest

from storefront.apis.Db import Db
from storefront.exceptions import CatalogError, ConflictError, ValidationError
from storefront.services.catalog_service import is_placeholder_asset
from storefront.services.derived_views import product_stats

TEST_PRODUCT = {"name": "Test", "price": 10, "stock": 3, "category": "Oils"}


@pytest.fixture(autouse=True)
def ticking_clock(monkeypatch):
    """Each timestamp is one second after the previous one."""
    start = datetime(2025, 6, 1, tzinfo=timezone.utc)
    ticks = itertools.count()
    monkeypatch.setattr(Db, "get_created_at", lambda: start + timedelta(seconds=next(ticks)))


def add(catalog, **overrides):
    return catalog.add({**TEST_PRODUCT, **overrides})


class TestAdd:
    def test_add_creates_active_product(self, catalog):
        product_id = add(catalog)

        products = catalog.list()
        assert [p.id for p in products] == [product_id]
        product = products[0]
        assert product.name == "Test"
        assert product.price == 10
        assert product.stock == 3
        assert product.category == "Oils"
        assert product.status == "active"
        assert product.imageUrl == "/next.svg"
        assert product.createdAt == product.updatedAt

    def test_rejects_unknown_category(self, catalog, products_collection):
        with pytest.raises(ValidationError) as exc_info:
            add(catalog, category="Snacks")
        assert exc_info.value.details["field"] == "category"
        assert products_collection.docs == {}

    def test_store_failure_has_generic_message(self, catalog, products_collection):
        products_collection.error = RuntimeError("deadline exceeded")
        with pytest.raises(CatalogError, match="Failed to add product"):
            add(catalog)


class TestQueries:
    def test_list_is_newest_first(self, catalog):
        first = add(catalog, name="First")
        second = add(catalog, name="Second")
        assert [p.id for p in catalog.list()] == [second, first]

    def test_toggled_product_leaves_active_list(self, catalog):
        keep = add(catalog, name="Keep")
        hide = add(catalog, name="Hide")

        assert catalog.toggle_status(hide, "active") == "inactive"

        assert [p.id for p in catalog.list_active()] == [keep]
        assert {p.id for p in catalog.list()} == {keep, hide}

    def test_filters_run_as_store_queries(self, catalog, products_collection):
        add(catalog)
        catalog.list_by_category("Oils")
        assert products_collection.queries[-1] == [("category", "Oils"), ("status", "active")]

    def test_list_by_category_only_returns_active(self, catalog):
        oil = add(catalog, name="Oil")
        add(catalog, name="Gummies", category="Edibles")
        hidden = add(catalog, name="Hidden Oil", status="inactive")

        ids = [p.id for p in catalog.list_by_category("Oils")]
        assert ids == [oil]
        assert hidden not in ids

    def test_featured_takes_first_three_active(self, catalog):
        ids = [add(catalog, name=f"P{i}") for i in range(5)]
        assert [p.id for p in catalog.featured()] == list(reversed(ids))[:3]

    def test_list_failure(self, catalog, products_collection):
        products_collection.error = RuntimeError("unavailable")
        with pytest.raises(CatalogError, match="Failed to fetch products"):
            catalog.list()
        with pytest.raises(CatalogError, match="Failed to fetch active products"):
            catalog.list_active()
        with pytest.raises(CatalogError, match="Failed to fetch products by category"):
            catalog.list_by_category("Oils")


STATUS_MIXES = [
    [],
    ["active"],
    ["inactive"],
    ["active", "inactive"],
    ["inactive", "inactive", "active"],
    ["active", "active", "inactive", "active", "inactive"],
]


class TestQueryProperties:
    @pytest.mark.parametrize("statuses", STATUS_MIXES)
    def test_active_list_is_subset_of_full_list(self, catalog, statuses):
        for i, status in enumerate(statuses):
            add(catalog, name=f"P{i}", status=status, category="Oils" if i % 2 else "Edibles")

        everything = [p.id for p in catalog.list()]
        active = [p.id for p in catalog.list_active()]

        assert set(active) <= set(everything)
        assert active == [product_id for product_id in everything if product_id in active]
        assert len(active) == statuses.count("active")
        assert all(p.status == "active" for p in catalog.list_active())

    @pytest.mark.parametrize("statuses", STATUS_MIXES)
    def test_category_list_is_subset_of_active_list(self, catalog, statuses):
        for i, status in enumerate(statuses):
            add(catalog, name=f"P{i}", status=status, category="Oils" if i % 2 else "Edibles")

        active = {p.id for p in catalog.list_active()}
        for category in ("Oils", "Edibles"):
            assert {p.id for p in catalog.list_by_category(category)} <= active


class TestUpdate:
    def test_stock_to_zero_counts_as_low_stock(self, catalog):
        product_id = add(catalog, stock=10)
        assert product_stats(catalog.list()).lowStock == 0

        catalog.update(product_id, {"stock": 0})

        assert product_stats(catalog.list()).lowStock == 1

    def test_update_refreshes_updated_at_only(self, catalog):
        product_id = add(catalog)
        before = catalog.list()[0]

        catalog.update(product_id, {"price": 12.5})

        after = catalog.list()[0]
        assert after.price == 12.5
        assert after.createdAt == before.createdAt
        assert after.updatedAt > before.updatedAt

    def test_unset_fields_are_left_untouched(self, catalog, products_collection):
        product_id = add(catalog, description="Keep me")
        catalog.update(product_id, {"name": "Renamed", "description": None})

        assert products_collection.docs[product_id]["description"] == "Keep me"
        assert set(products_collection.updates[-1][1]) == {"name", "updatedAt"}

    def test_missing_product(self, catalog):
        with pytest.raises(CatalogError, match="Failed to update product"):
            catalog.update("missing", {"stock": 1})

    def test_conditional_update_with_current_timestamp(self, catalog):
        product_id = add(catalog)
        current = catalog.list()[0].updatedAt

        catalog.update(product_id, {"stock": 7}, expected_updated_at=current)

        assert catalog.list()[0].stock == 7

    def test_conditional_update_detects_concurrent_change(self, catalog):
        product_id = add(catalog)
        seen = catalog.list()[0].updatedAt
        catalog.update(product_id, {"stock": 8})

        with pytest.raises(ConflictError):
            catalog.update(product_id, {"stock": 7}, expected_updated_at=seen)
        assert catalog.list()[0].stock == 8


class TestDelete:
    def test_placeholder_image_is_never_deleted(self, catalog, bucket):
        product_id = add(catalog)

        catalog.delete(product_id, "/next.svg")

        assert catalog.list() == []
        assert bucket.deleted == []

    def test_uploaded_image_is_deleted_once(self, catalog, uploader, bucket):
        image_url = uploader.upload("oil.png", b"png-bytes", "image/png")
        product_id = add(catalog, imageUrl=image_url)
        (path,) = bucket.objects

        catalog.delete(product_id, image_url)

        assert catalog.list() == []
        assert bucket.deleted == [path]
        assert bucket.objects == {}

    def test_image_failure_does_not_fail_delete(self, catalog, bucket):
        product_id = add(catalog)
        bucket.error = RuntimeError("permission denied")

        catalog.delete(product_id, "gs://test-project.appspot.com/products/abc_oil.png")

        assert catalog.list() == []

    def test_record_failure_skips_image(self, catalog, products_collection, bucket):
        product_id = add(catalog)
        products_collection.error = RuntimeError("unavailable")

        with pytest.raises(CatalogError, match="Failed to delete product"):
            catalog.delete(product_id, "gs://test-project.appspot.com/products/abc_oil.png")
        assert bucket.deleted == []


class TestToggle:
    def test_toggle_back_and_forth(self, catalog):
        product_id = add(catalog)
        assert catalog.toggle_status(product_id, "active") == "inactive"
        assert catalog.toggle_status(product_id, "inactive") == "active"
        assert catalog.list_active()[0].id == product_id

    def test_toggle_failure(self, catalog):
        with pytest.raises(CatalogError, match="Failed to toggle product status"):
            catalog.toggle_status("missing", "active")


def test_placeholder_detection():
    assert is_placeholder_asset("/next.svg")
    assert is_placeholder_asset("https://shop.example.com/vercel.svg")
    assert not is_placeholder_asset("gs://bucket/products/abc_oil.png")
    assert not is_placeholder_asset(None)
