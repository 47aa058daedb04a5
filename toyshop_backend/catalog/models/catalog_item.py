# catalog/models/catalog_item.py

from decimal import Decimal

from django.db import models


class CatalogItem(models.Model):
    """
    A made-to-order item shown in the storefront.

    VISIBILITY RULE (IMPORTANT):
    - license_status == IP_RISK hides the item from the public catalog.
    - The admin catalog always lists every item.

    Identity:
    - id is a stable slug chosen at creation (or generated from the clock)
      and never rewritten afterwards.
    """

    class Difficulty(models.TextChoices):
        EASY = "easy", "Easy"
        MEDIUM = "medium", "Medium"
        HARD = "hard", "Hard"

    class LicenseStatus(models.TextChoices):
        ORIGINAL = "original", "Original design"
        LICENSED = "licensed", "Licensed for sale"
        UNKNOWN = "unknown", "Unknown"
        IP_RISK = "ip-risk", "IP risk (hidden)"

    RESTRICTED_LICENSE_STATUSES = (LicenseStatus.IP_RISK,)

    DEFAULT_DIFFICULTY = Difficulty.EASY
    DEFAULT_PRINT_TIME_HOURS = Decimal("1.0")
    DEFAULT_LICENSE_STATUS = LicenseStatus.UNKNOWN

    id = models.CharField(primary_key=True, max_length=128, editable=False)

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(null=True, blank=True)

    image_url = models.CharField(max_length=1024, null=True, blank=True)
    source_url = models.URLField(max_length=1024, null=True, blank=True)

    tags = models.JSONField(default=list, blank=True)

    difficulty = models.CharField(
        max_length=16,
        choices=Difficulty.choices,
        default=DEFAULT_DIFFICULTY,
    )

    print_time_hours = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        default=DEFAULT_PRINT_TIME_HOURS,
        help_text="Estimated build time in hours.",
    )

    license_status = models.CharField(
        max_length=16,
        choices=LicenseStatus.choices,
        default=DEFAULT_LICENSE_STATUS,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.id})"

    @property
    def is_public(self) -> bool:
        return self.license_status not in self.RESTRICTED_LICENSE_STATUSES
