# user/admin.py
from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "email", "name", "permissions", "is_staff")
    search_fields = ("email", "name")
    exclude = ("password", "reset_token", "reset_token_expiry")
