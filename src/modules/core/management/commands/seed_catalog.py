from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Category, Product

CATALOG = {
    "Electronics": [
        ("Monitor 27\"", Decimal("1299.90")),
        ("Mechanical Keyboard", Decimal("399.90")),
        ("Gaming Mouse", Decimal("249.90")),
    ],
    "Furniture": [
        ("Office Desk", Decimal("899.00")),
        ("Ergonomic Chair", Decimal("1499.00")),
    ],
    "Stationery": [
        ("A4 Paper", Decimal("29.90")),
        ("Blue Pen", Decimal("4.90")),
        ("Notebook", Decimal("19.90")),
    ],
}

UNCATEGORISED = [
    ("Gift Card", Decimal("50.00")),
]


class Command(BaseCommand):
    help = "Seed the catalog with categories and products for local development."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog...")

        categories_created = 0
        products_created = 0

        for category_name, items in CATALOG.items():
            category, created = Category.objects.get_or_create(name=category_name)
            categories_created += int(created)
            for name, price in items:
                products_created += self._ensure_product(name, price, category)

        for name, price in UNCATEGORISED:
            products_created += self._ensure_product(name, price, None)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={categories_created}, "
                f"products={products_created}"
            )
        )

    def _ensure_product(self, name: str, price: Decimal, category) -> int:
        _, created = Product.objects.get_or_create(
            name=name,
            defaults={"price": price, "category": category},
        )
        return int(created)
