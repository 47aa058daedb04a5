from decimal import Decimal

from django.core.management.base import BaseCommand

from catalog.models import CatalogItem, ColorOption
from catalog.services.catalog_store import public_catalog


class Command(BaseCommand):
    help = "Seed the default color palette and a few sample catalog items"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding colors and catalog..."))

        # -------------------------------
        # COLORS
        # -------------------------------
        colors = [
            ("pink", "Pink", "#ff69b4", True),
            ("purple", "Purple", "#9b59b6", True),
            ("sky-blue", "Sky Blue", "#5dade2", True),
            ("mint", "Mint", "#58d68d", True),
            ("sunshine", "Sunshine Yellow", "#f4d03f", True),
            ("white", "White", "#ffffff", True),
            ("glow", "Glow in the Dark", "#c8f7c5", False),
            (
                "rainbow",
                "Rainbow Silk",
                "linear-gradient(90deg, #ff0000, #ff9900, #ffee00, #33cc33, #3399ff, #9933ff)",
                True,
            ),
        ]

        created_colors = 0
        for color_id, name, hex_value, in_stock in colors:
            _, created = ColorOption.objects.get_or_create(
                id=color_id,
                defaults={"name": name, "hex": hex_value, "in_stock": in_stock},
            )
            created_colors += int(created)

        # -------------------------------
        # CATALOG ITEMS
        # -------------------------------
        items = [
            (
                "star-bear",
                "Star Bear",
                "Chubby bear holding a star. Prints without supports.",
                ["animals", "gift"],
                CatalogItem.Difficulty.EASY,
                "1.5",
                CatalogItem.LicenseStatus.ORIGINAL,
            ),
            (
                "flexi-dragon",
                "Flexi Dragon",
                "Articulated dragon printed in place.",
                ["articulated", "dragons"],
                CatalogItem.Difficulty.MEDIUM,
                "4.0",
                CatalogItem.LicenseStatus.LICENSED,
            ),
            (
                "fidget-gear",
                "Fidget Gear Cube",
                "Spinning gear cube fidget toy.",
                ["fidget"],
                CatalogItem.Difficulty.HARD,
                "6.5",
                CatalogItem.LicenseStatus.UNKNOWN,
            ),
        ]

        created_items = 0
        for item_id, name, description, tags, difficulty, hours, license_status in items:
            _, created = CatalogItem.objects.get_or_create(
                id=item_id,
                defaults={
                    "name": name,
                    "description": description,
                    "tags": tags,
                    "difficulty": difficulty,
                    "print_time_hours": Decimal(hours),
                    "license_status": license_status,
                },
            )
            created_items += int(created)

        public_catalog.invalidate()

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {created_colors} color(s) and {created_items} item(s)."
            )
        )
