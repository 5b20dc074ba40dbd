"""Tests for item create/update/delete, listing and search."""
import pytest

from item import services
from item.models import Item
from sick_fits.exceptions import AuthenticationRequired, AuthorizationDenied, NotFound
from user.models import Permission

ITEMS_URL = "/api/v1/items/"


def _detail(item_id):
    return f"{ITEMS_URL}{item_id}/"


@pytest.mark.django_db
class TestCreateItem:
    def test_requires_login(self, api_client):
        response = api_client.post(ITEMS_URL, {"title": "Hat", "description": "A hat", "price": 100}, format="json")
        assert response.status_code == 401
        assert Item.objects.count() == 0

    def test_attaches_owner(self, client_for, user):
        response = client_for(user).post(
            ITEMS_URL,
            {"title": "Hat", "description": "A hat", "price": 100, "image": "https://img.example.com/hat.jpg"},
            format="json",
        )
        assert response.status_code == 201
        assert response.data["user"] == user.pk
        assert Item.objects.get(pk=response.data["id"]).user == user

    def test_owner_in_payload_is_ignored(self, client_for, user, make_user):
        other = make_user()
        response = client_for(user).post(
            ITEMS_URL, {"title": "Hat", "description": "A hat", "price": 100, "user": other.pk}, format="json"
        )
        assert response.data["user"] == user.pk

    def test_deleted_account_token_is_rejected(self, client_for, user):
        client = client_for(user)
        user.delete()

        response = client.post(ITEMS_URL, {"title": "Hat", "description": "A hat", "price": 100}, format="json")

        assert response.status_code == 401
        assert Item.objects.count() == 0

    def test_service_requires_identity(self, ctx_for):
        with pytest.raises(AuthenticationRequired):
            services.create_item(ctx_for(), title="Hat", description="A hat", price=1)


@pytest.mark.django_db
class TestUpdateItem:
    def test_owner_updates(self, client_for, user, make_item):
        item = make_item(user)
        response = client_for(user).patch(_detail(item.pk), {"title": "Boots", "price": 9000}, format="json")
        assert response.status_code == 200
        item.refresh_from_db()
        assert (item.title, item.price) == ("Boots", 9000)

    def test_id_cannot_be_changed(self, ctx_for, user, make_item):
        item = make_item(user)
        updated = services.update_item(ctx_for(user), item.pk, id=item.pk + 100, title="Boots")
        assert updated.pk == item.pk
        assert not Item.objects.filter(pk=item.pk + 100).exists()

    def test_other_user_cannot_update(self, client_for, user, make_user, make_item):
        item = make_item(user)
        response = client_for(make_user()).patch(_detail(item.pk), {"title": "Mine now"}, format="json")
        assert response.status_code == 403
        item.refresh_from_db()
        assert item.title == "Shoes"

    def test_even_admin_cannot_update_others(self, ctx_for, user, admin_user, make_item):
        item = make_item(user)
        with pytest.raises(AuthorizationDenied):
            services.update_item(ctx_for(admin_user), item.pk, title="Admin edit")

    def test_missing_item(self, ctx_for, user):
        with pytest.raises(NotFound):
            services.update_item(ctx_for(user), 999, title="x")


@pytest.mark.django_db
class TestDeleteItem:
    def test_owner_with_itemdelete_deletes(self, client_for, make_user, make_item):
        owner = make_user(permissions=[Permission.USER, Permission.ITEMDELETE])
        item = make_item(owner)
        response = client_for(owner).delete(_detail(item.pk))
        assert response.status_code == 200
        assert response.data == {"id": item.pk, "title": "Shoes"}
        assert not Item.objects.filter(pk=item.pk).exists()

    def test_owner_without_permission_denied(self, client_for, user, make_item):
        item = make_item(user)
        response = client_for(user).delete(_detail(item.pk))
        assert response.status_code == 403
        assert Item.objects.filter(pk=item.pk).exists()

    def test_admin_who_does_not_own_denied(self, ctx_for, make_user, make_item):
        owner = make_user(permissions=[Permission.USER])
        admin = make_user(permissions=[Permission.ADMIN])
        item = make_item(owner)
        with pytest.raises(AuthorizationDenied):
            services.delete_item(ctx_for(admin), item.pk)
        assert Item.objects.filter(pk=item.pk).exists()

    def test_missing_item(self, client_for, admin_user):
        assert client_for(admin_user).delete(_detail(12345)).status_code == 404

    def test_anonymous(self, api_client, user, make_item):
        item = make_item(user)
        assert api_client.delete(_detail(item.pk)).status_code == 401


@pytest.mark.django_db
class TestListItems:
    def test_paginated_newest_first(self, api_client, user, make_item):
        for i in range(6):
            make_item(user, title=f"Item {i}")
        response = api_client.get(ITEMS_URL)
        assert response.status_code == 200
        assert response.data["count"] == 6
        assert [r["title"] for r in response.data["results"]] == ["Item 5", "Item 4", "Item 3", "Item 2"]

        page2 = api_client.get(ITEMS_URL, {"page": 2})
        assert [r["title"] for r in page2.data["results"]] == ["Item 1", "Item 0"]

    def test_single_item(self, api_client, user, make_item):
        item = make_item(user)
        response = api_client.get(_detail(item.pk))
        assert response.data["title"] == "Shoes"


@pytest.mark.django_db
class TestSearch:
    def test_matches_title_or_description(self, api_client, user, make_item):
        hat = make_item(user, title="Red Hat", description="warm", image="https://img.example.com/h.jpg")
        make_item(user, title="Scarf", description="goes with a hat")
        make_item(user, title="Boots", description="leather")

        response = api_client.get(f"{ITEMS_URL}search/", {"searchTerm": "hat"})
        assert response.status_code == 200
        assert {r["title"] for r in response.data} == {"Red Hat", "Scarf"}
        first = next(r for r in response.data if r["id"] == hat.pk)
        assert set(first) == {"id", "image", "title"}
        assert first["image"] == "https://img.example.com/h.jpg"

    def test_blank_term_finds_nothing(self, user, make_item):
        make_item(user)
        assert list(services.search_items("  ")) == []
