import pytest
from django.conf import settings
from rest_framework.test import APIClient

from item.models import Item
from sick_fits.context import SessionContext, issue_session_token
from user.models import Permission, User


@pytest.fixture(autouse=True)
def fast_password_hashing(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(email=None, name="Wes", password="dogs", permissions=None):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        user = User.objects.create_user(email=email, name=name, password=password)
        if permissions is not None:
            user.permissions = [str(p) for p in permissions]
            user.save(update_fields=["permissions"])
        return user

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user(email="wes@example.com")


@pytest.fixture
def admin_user(make_user):
    return make_user(email="admin@example.com", permissions=[Permission.ADMIN, Permission.USER])


@pytest.fixture
def make_item(db):
    def _make_item(owner, title="Shoes", description="Nice shoes", price=5000, **extra):
        return Item.objects.create(user=owner, title=title, description=description, price=price, **extra)

    return _make_item


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client_for(user):
        client = APIClient()
        client.cookies[settings.SESSION_TOKEN_COOKIE] = issue_session_token(user)
        return client

    return _client_for


@pytest.fixture
def ctx_for():
    def _ctx_for(user=None):
        return SessionContext(user_id=user.pk if user else None)

    return _ctx_for
