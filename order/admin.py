from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("title", "description", "image", "large_image", "price", "quantity", "user")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "total", "charge", "created_at")
    search_fields = ("user__email", "charge")
    readonly_fields = ("user", "total", "charge", "created_at")
    inlines = [OrderItemInline]
