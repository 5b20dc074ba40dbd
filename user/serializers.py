# user/serializers.py
from rest_framework import serializers

from .models import Permission, User


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField()
    name = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, min_length=1)

    def validate_email(self, value):
        value = User.objects.normalize_email(value)
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("Email already exists")
        return value


class SigninSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()


class RequestResetSerializer(serializers.Serializer):
    email = serializers.EmailField()


class ResetPasswordSerializer(serializers.Serializer):
    resetToken = serializers.CharField()
    password = serializers.CharField()
    confirmPassword = serializers.CharField()


class PermissionsSerializer(serializers.Serializer):
    permissions = serializers.ListField(
        child=serializers.ChoiceField(choices=Permission.choices), allow_empty=True
    )


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "name", "permissions"]
        read_only_fields = fields
