# user/models.py
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class Permission(models.TextChoices):
    ADMIN = "ADMIN", "Admin"
    USER = "USER", "User"
    ITEMCREATE = "ITEMCREATE", "Item create"
    ITEMUPDATE = "ITEMUPDATE", "Item update"
    ITEMDELETE = "ITEMDELETE", "Item delete"
    PERMISSIONUPDATE = "PERMISSIONUPDATE", "Permission update"


def default_permissions():
    return [Permission.USER.value]


class UserManager(BaseUserManager):
    use_in_migrations = True

    def normalize_email(self, email):
        # the whole address is case-insensitive here, not just the domain
        return (email or "").strip().lower()

    def create_user(self, email, name, password=None, **extra_fields):
        if not email:
            raise ValueError("Users must have an email address")
        email = self.normalize_email(email)
        user = self.model(email=email, name=name, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)
        extra_fields.setdefault("permissions", [Permission.ADMIN.value, Permission.USER.value])

        name = extra_fields.pop("name", "Admin")

        return self.create_user(email=email, name=name, password=password, **extra_fields)


class User(AbstractUser):
    username = None
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    permissions = models.JSONField(default=default_permissions, blank=True)
    reset_token = models.CharField(max_length=64, blank=True, null=True)
    reset_token_expiry = models.DateTimeField(blank=True, null=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects = UserManager()

    def __str__(self):
        return self.email
