from rest_framework import serializers

from item.models import Item

from .models import CartItem


class ItemBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Item
        fields = ("id", "title", "description", "price", "image")


class CartItemSerializer(serializers.ModelSerializer):
    item = ItemBriefSerializer(read_only=True)

    class Meta:
        model = CartItem
        fields = ("id", "item", "quantity", "added_at")
        read_only_fields = fields


class AddToCartSerializer(serializers.Serializer):
    item = serializers.IntegerField()
