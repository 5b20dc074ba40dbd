from rest_framework import serializers

from .models import Item


class ItemSerializer(serializers.ModelSerializer):
    user = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Item
        fields = (
            "id", "title", "description", "image", "large_image",
            "price", "user", "created_at", "updated_at",
        )
        read_only_fields = ("id", "user", "created_at", "updated_at")


class ItemSearchResultSerializer(serializers.ModelSerializer):
    # minimal shape for the search dropdown
    class Meta:
        model = Item
        fields = ("id", "image", "title")
