from django.conf import settings
from django.db import models

User = settings.AUTH_USER_MODEL


class Order(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="orders")
    # smallest currency unit, as charged
    total = models.PositiveIntegerField()
    # Razorpay payment id of the captured charge
    charge = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Order #{self.id} - {self.user_id}"


class OrderItem(models.Model):
    """Copy of an item as it was when bought; no link back to the Item row."""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="order_items")
    title = models.CharField(max_length=255)
    description = models.TextField()
    image = models.URLField(max_length=500, blank=True, default="")
    large_image = models.URLField(max_length=500, blank=True, default="")
    price = models.PositiveIntegerField()  # price at time of purchase
    quantity = models.PositiveIntegerField(default=1)

    def __str__(self):
        return f"{self.title} x {self.quantity}"
