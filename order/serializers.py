from rest_framework import serializers

from .models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderItem
        fields = ["id", "title", "description", "image", "large_image", "price", "quantity"]


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = ["id", "user", "total", "charge", "items", "created_at"]
        read_only_fields = fields  # all are read-only for output only


class CreateOrderSerializer(serializers.Serializer):
    # Razorpay payment id authorized by the storefront checkout widget
    token = serializers.CharField()
