from django.conf import settings
from django.db import models

User = settings.AUTH_USER_MODEL


class Item(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="items")
    title = models.CharField(max_length=255)
    description = models.TextField()
    image = models.URLField(max_length=500, blank=True, default="")
    large_image = models.URLField(max_length=500, blank=True, default="")
    # smallest currency unit (paise / cents)
    price = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title
