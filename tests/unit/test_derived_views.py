"""Tests for dashboard stats, filters and cart totals."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from storefront.models.firestore_types import ProductDoc
from storefront.models.order_types import SAMPLE_ORDERS
from storefront.models.view_types import CartItem
from storefront.services.derived_views import (
    cart_totals,
    filter_orders,
    filter_products,
    format_money,
    order_stats,
    product_stats,
)

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def make_product(product_id, name, price, stock, status="active", category="Oils", description=""):
    return ProductDoc(
        id=product_id,
        name=name,
        description=description,
        price=price,
        category=category,
        stock=stock,
        status=status,
        createdAt=NOW,
        updatedAt=NOW,
    )


@pytest.fixture
def products():
    return [
        make_product("p1", "Premium CBD Oil", 10.0, 3, category="Oils", description="Full spectrum"),
        make_product("p2", "Cannabis Gummies", 20.0, 10, status="inactive", category="Edibles"),
        make_product("p3", "Hybrid Flower", 5.0, 5, category="Flowers", description="Balanced OIL-free bud"),
    ]


class TestProductStats:
    def test_counts_and_inventory_value(self, products):
        stats = product_stats(products)

        assert stats.total == 3
        assert stats.activeCount == 2
        assert stats.inactiveCount == 1
        assert stats.inventoryValue == pytest.approx(255.0)

    def test_low_stock_includes_threshold(self, products):
        # stock 3 and stock 5 are low, stock 10 is not
        assert product_stats(products).lowStock == 2

    def test_empty_catalog(self):
        stats = product_stats([])
        assert stats.total == 0
        assert stats.lowStock == 0
        assert stats.inventoryValue == 0


class TestFilterProducts:
    def test_all_category_keeps_everything(self, products):
        assert len(filter_products(products, "All", "")) == 3

    def test_category_is_exact_match(self, products):
        assert [p.id for p in filter_products(products, "Edibles")] == ["p2"]
        assert filter_products(products, "edibles") == []

    def test_search_is_case_insensitive_over_name_and_description(self, products):
        ids = [p.id for p in filter_products(products, "All", "oil")]
        assert ids == ["p1", "p3"]

    def test_category_and_search_combine(self, products):
        assert [p.id for p in filter_products(products, "Flowers", "bud")] == ["p3"]
        assert filter_products(products, "Oils", "bud") == []

    def test_missing_description_is_treated_as_empty(self):
        product = SimpleNamespace(name="Rolling Papers", description=None, category="Accessories")
        assert filter_products([product], "All", "papers") == [product]
        assert filter_products([product], "All", "hemp") == []


class TestOrderStats:
    def test_sample_orders(self):
        stats = order_stats(SAMPLE_ORDERS)

        assert stats.total == 3
        assert stats.byStatus == {
            "pending": 1,
            "confirmed": 0,
            "shipped": 1,
            "delivered": 1,
            "cancelled": 0,
        }
        # Only delivered orders count as revenue
        assert stats.revenue == pytest.approx(79.98)

    def test_filter_orders_by_status(self):
        assert [o.id for o in filter_orders(SAMPLE_ORDERS, "shipped")] == ["ORD-002"]
        assert len(filter_orders(SAMPLE_ORDERS, "all")) == 3


class TestCartTotals:
    def test_subtotal_tax_and_total(self):
        items = [
            CartItem(id="a", name="Premium CBD Oil", price=49.99, quantity=1),
            CartItem(id="b", name="Cannabis Gummies", price=29.99, quantity=2),
        ]

        totals = cart_totals(items)

        assert totals.subtotal == pytest.approx(109.97)
        assert totals.tax == pytest.approx(10.997)
        assert totals.total == pytest.approx(120.967)
        assert format_money(totals.total) == "$120.97"

    def test_empty_cart(self):
        totals = cart_totals([])
        assert (totals.subtotal, totals.tax, totals.total) == (0, 0, 0)
        assert format_money(totals.total) == "$0.00"


def mixed_catalog():
    """Catalog covering every category, both statuses and odd descriptions."""
    categories = ["Flowers", "Edibles", "Concentrates", "Vapes", "Pre-rolls", "Oils", "Topicals", "Accessories"]
    names = ["Premium CBD Oil", "Cannabis Gummies", "Hybrid Flower", "THC Vape", "Rolling Papers"]
    descriptions = ["", "Full spectrum oil", "BALANCED bud", "vape-ready", "Hemp papers"]
    return [
        make_product(
            f"p{i}",
            names[i % len(names)],
            price=round(1.25 * i, 2),
            stock=i % 9,
            status="inactive" if i % 3 == 0 else "active",
            category=categories[i % len(categories)],
            description=descriptions[i % len(descriptions)],
        )
        for i in range(24)
    ]


FILTER_CASES = [
    ("All", ""),
    ("All", "oil"),
    ("All", "OIL"),
    ("Oils", ""),
    ("Oils", "spectrum"),
    ("Flowers", "bud"),
    ("Vapes", "vape"),
    ("Accessories", "papers"),
    ("Edibles", "no such product"),
    ("Unknown", ""),
    ("All", " "),
]


class TestFilterProperties:
    @pytest.mark.parametrize("category,search_term", FILTER_CASES)
    def test_filter_is_idempotent(self, category, search_term):
        once = filter_products(mixed_catalog(), category, search_term)
        assert filter_products(once, category, search_term) == once

    @pytest.mark.parametrize("category,search_term", FILTER_CASES)
    def test_filter_returns_a_subset_in_order(self, category, search_term):
        catalog = mixed_catalog()
        ids = [p.id for p in catalog]

        result = [p.id for p in filter_products(catalog, category, search_term)]

        assert set(result) <= set(ids)
        assert result == [product_id for product_id in ids if product_id in result]

    @pytest.mark.parametrize("category,search_term", FILTER_CASES)
    def test_every_match_satisfies_both_predicates(self, category, search_term):
        for product in filter_products(mixed_catalog(), category, search_term):
            assert category == "All" or product.category == category
            term = search_term.lower()
            assert term in product.name.lower() or term in product.description.lower()


class TestStatsProperties:
    @pytest.mark.parametrize("count", [0, 1, 2, 5, 13, 24])
    def test_active_and_inactive_partition_total(self, count):
        stats = product_stats(mixed_catalog()[:count])
        assert stats.activeCount + stats.inactiveCount == stats.total == count

    @pytest.mark.parametrize("count", [0, 1, 7, 24])
    def test_low_stock_and_value_bounds(self, count):
        products = mixed_catalog()[:count]
        stats = product_stats(products)

        assert 0 <= stats.lowStock <= stats.total
        assert stats.inventoryValue == pytest.approx(sum(p.price * p.stock for p in products))


CART_CASES = [
    [],
    [(0.0, 1)],
    [(49.99, 1), (29.99, 2)],
    [(0.01, 99)],
    [(1234.56, 3), (0.99, 0), (19.95, 7)],
    [(5.0, 1), (5.0, 1), (5.0, 1), (5.0, 1)],
]


def make_cart(lines):
    return [
        CartItem(id=f"line-{i}", name=f"Item {i}", price=price, quantity=quantity)
        for i, (price, quantity) in enumerate(lines)
    ]


class TestCartProperties:
    @pytest.mark.parametrize("lines", CART_CASES)
    def test_total_is_subtotal_plus_ten_percent(self, lines):
        totals = cart_totals(make_cart(lines))

        assert totals.subtotal == pytest.approx(sum(price * quantity for price, quantity in lines))
        assert totals.tax == pytest.approx(totals.subtotal * 0.10)
        assert totals.total == pytest.approx(totals.subtotal * 1.10)

    @pytest.mark.parametrize("lines", [case for case in CART_CASES if case])
    def test_total_never_decreases_as_quantity_grows(self, lines):
        previous = None
        for quantity in range(0, 6):
            cart = make_cart([(lines[0][0], quantity)] + lines[1:])
            total = cart_totals(cart).total
            if previous is not None:
                assert total >= previous
            previous = total
