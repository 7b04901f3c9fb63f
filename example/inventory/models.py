from django.core.validators import MinValueValidator
from django.db import models


class Item(models.Model):
    """
    Stored stock item read by DjangoDatabaseReader.

    The default table name (`inventory_item`) matches the
    WAREHOUSE_STOCK_TABLE default.
    """

    brand = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )

    def __str__(self) -> str:
        return f"{self.brand} ({self.price})"
