"""Performance regression tests: constant query count (N+1 prevention).

Verifies that the list and retrieve endpoints execute a bounded number of
SQL queries regardless of the number of products, proving that
``select_related("category")`` is applied on every read.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Category, Product


@pytest.fixture()
def categorised_products():
    categories = [Category.objects.create(name=f"Category {i}") for i in range(3)]
    return [
        Product.objects.create(
            name=f"Product {i}",
            price=Decimal("10.00"),
            category=categories[i % len(categories)],
        )
        for i in range(12)
    ]


class TestQueryCount:
    def test_list_uses_single_query(
        self, api_client, categorised_products, django_assert_num_queries
    ):
        with django_assert_num_queries(1):
            response = api_client.get("/products")
        assert response.status_code == 200
        assert len(response.json()) == len(categorised_products)
        assert all(item["category"] is not None for item in response.json())

    def test_retrieve_uses_single_query(
        self, api_client, categorised_products, django_assert_num_queries
    ):
        product = categorised_products[0]
        with django_assert_num_queries(1):
            response = api_client.get(f"/products/{product.id}")
        assert response.status_code == 200
        assert response.json()["category"]["name"] == "Category 0"
