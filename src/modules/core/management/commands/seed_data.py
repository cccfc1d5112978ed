from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.models import ProductCategory

BASELINE_CATEGORIES = [
    "Electronics",
    "Clothing",
    "Food & Beverages",
    "Books",
    "Furniture",
]


class Command(BaseCommand):
    help = "Seed the catalog with the baseline product categories."

    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog data...")

        categories_created = self._seed_categories()

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: categories={categories_created}")
        )

    def _seed_categories(self) -> int:
        self.stdout.write("Creating categories...")
        created = 0
        for name in BASELINE_CATEGORIES:
            _, was_created = ProductCategory.objects.get_or_create(
                name=name,
                defaults={"active": True},
            )
            if was_created:
                created += 1
        self.stdout.write(self.style.SUCCESS("Creating categories... Done!"))
        return created
