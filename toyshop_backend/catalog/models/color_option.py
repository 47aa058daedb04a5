# catalog/models/color_option.py

from django.db import models


class ColorOption(models.Model):
    """
    A selectable finish/color for made-to-order items.

    Notes:
    - hex holds any CSS color value: "#ff69b4" or a gradient expression
      for multi-color filaments.
    - Orders snapshot the color NAME, never this row.
    - The admin save path replaces the whole registry (see color_registry).
    """

    id = models.CharField(primary_key=True, max_length=128)
    name = models.CharField(max_length=120)
    hex = models.CharField(max_length=255)
    in_stock = models.BooleanField(default=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        state = "in stock" if self.in_stock else "out of stock"
        return f"{self.name} ({state})"
