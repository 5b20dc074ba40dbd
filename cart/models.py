from django.conf import settings
from django.db import models
from django.utils import timezone

from item.models import Item

User = settings.AUTH_USER_MODEL


class CartItem(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="cart_items")
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name="cart_items")
    quantity = models.PositiveIntegerField(default=1)
    added_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ("user", "item")
        ordering = ("-added_at",)

    def __str__(self):
        return f"{self.user_id} - {self.item_id} x{self.quantity}"

    @property
    def line_total(self):
        return self.item.price * self.quantity
