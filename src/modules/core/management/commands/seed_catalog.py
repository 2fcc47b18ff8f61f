from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.products.models import Product, ProductStatus

SEED_CATEGORIES = [
    ("Electronics", "Phones, laptops and accessories"),
    ("Books", "Printed and digital books"),
    ("Home", "Kitchen and household goods"),
]

SEED_PRODUCTS = [
    ("ELEC-001", "Laptop 14", "Electronics", Decimal("999.99"), 15),
    ("ELEC-002", "Wireless Mouse", "Electronics", Decimal("29.99"), 120),
    ("ELEC-003", "USB-C Charger", "Electronics", Decimal("19.90"), 80),
    ("BOOK-001", "Practical Django", "Books", Decimal("39.50"), 40),
    ("BOOK-002", "Data Pipelines", "Books", Decimal("45.00"), 25),
    ("HOME-001", "Chef Knife", "Home", Decimal("59.00"), 30),
    ("HOME-002", "French Press", "Home", Decimal("24.90"), 0),
]


class Command(BaseCommand):
    help = "Seed the catalog with development categories and products."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog data...")

        categories = self._seed_categories()
        products_created = self._seed_products(categories)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={len(categories)}, "
                f"products_created={products_created}"
            )
        )

    def _seed_categories(self) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for name, description in SEED_CATEGORIES:
            category, _ = Category.objects.get_or_create(
                name=name,
                defaults={"description": description},
            )
            categories[name] = category
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> int:
        created = 0
        for sku, name, category_name, price, stock in SEED_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                sku=sku,
                defaults={
                    "name": name,
                    "price": price,
                    "stock_quantity": stock,
                    "category": categories[category_name],
                    "status": ProductStatus.ACTIVE if stock else ProductStatus.INACTIVE,
                },
            )
            created += int(was_created)
        return created
