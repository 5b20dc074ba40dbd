"""Tests for the checkout saga and order queries."""
from unittest import mock

import pytest
import razorpay
from django.db import DatabaseError

from cart import services as cart_services
from cart.models import CartItem
from order import payments
from order.checkout import CheckoutSaga
from order.models import Order, OrderItem
from sick_fits.exceptions import (
    AuthenticationRequired,
    AuthorizationDenied,
    OrderNotPlaced,
    UpstreamFailure,
    ValidationMismatch,
)

ORDERS_URL = "/api/v1/orders/"


@pytest.fixture
def gateway(monkeypatch):
    client = mock.MagicMock()
    client.payment.capture.return_value = {"id": "pay_123", "status": "captured"}
    client.payment.refund.return_value = {"id": "rfnd_1"}
    monkeypatch.setattr(payments, "razorpay_client", client)
    return client


@pytest.fixture
def filled_cart(user, make_item):
    shoes = make_item(user, title="Shoes", price=5000, image="https://img.example.com/s.jpg")
    hat = make_item(user, title="Hat", description="Warm hat", price=1250)
    CartItem.objects.create(user=user, item=shoes, quantity=1)
    CartItem.objects.create(user=user, item=hat, quantity=3)
    return [shoes, hat]


@pytest.mark.django_db
class TestCreateOrder:
    def test_charges_cart_total(self, client_for, user, filled_cart, gateway):
        response = client_for(user).post(ORDERS_URL, {"token": "pay_123"}, format="json")

        assert response.status_code == 201
        gateway.payment.capture.assert_called_once_with("pay_123", 5000 + 3 * 1250, {"currency": "INR"})
        assert response.data["total"] == 8750
        assert response.data["charge"] == "pay_123"

    def test_snapshots_items_and_clears_cart(self, ctx_for, user, filled_cart, gateway):
        order = CheckoutSaga(ctx_for(user), "pay_123").run()

        lines = {oi.title: oi for oi in OrderItem.objects.filter(order=order)}
        assert set(lines) == {"Shoes", "Hat"}
        assert lines["Hat"].quantity == 3
        assert lines["Hat"].price == 1250
        assert lines["Hat"].description == "Warm hat"
        assert lines["Shoes"].image == "https://img.example.com/s.jpg"
        assert all(oi.user == user for oi in lines.values())
        assert not CartItem.objects.filter(user=user).exists()

    def test_snapshot_survives_item_changes(self, ctx_for, user, filled_cart, gateway):
        order = CheckoutSaga(ctx_for(user), "pay_123").run()
        shoes = filled_cart[0]
        shoes.price = 1
        shoes.save()
        shoes.delete()
        assert OrderItem.objects.get(order=order, title="Shoes").price == 5000

    def test_only_this_users_cart_is_cleared(self, ctx_for, user, make_user, filled_cart, gateway):
        other = make_user()
        CartItem.objects.create(user=other, item=filled_cart[0])
        CheckoutSaga(ctx_for(user), "pay_123").run()
        assert CartItem.objects.filter(user=other).count() == 1

    def test_add_during_capture_stays_in_cart(self, ctx_for, user, filled_cart, gateway):
        hat = filled_cart[1]

        def capture_while_shopping(payment_id, amount, data):
            cart_services.add_to_cart(ctx_for(user), item_id=hat.pk)
            return {"id": payment_id, "status": "captured"}

        gateway.payment.capture.side_effect = capture_while_shopping
        order = CheckoutSaga(ctx_for(user), "pay_123").run()

        assert OrderItem.objects.get(order=order, title="Hat").quantity == 3
        remaining = list(CartItem.objects.filter(user=user))
        assert [(ci.item_id, ci.quantity) for ci in remaining] == [(hat.pk, 1)]

    def test_saga_status_completed(self, ctx_for, user, filled_cart, gateway):
        saga = CheckoutSaga(ctx_for(user), "pay_123")
        saga.run()
        assert saga.status == "completed"
        gateway.payment.refund.assert_not_called()

    def test_requires_login(self, ctx_for, gateway, db):
        with pytest.raises(AuthenticationRequired):
            CheckoutSaga(ctx_for(), "pay_123").run()
        gateway.payment.capture.assert_not_called()

    def test_empty_cart(self, ctx_for, user, gateway):
        with pytest.raises(ValidationMismatch):
            CheckoutSaga(ctx_for(user), "pay_123").run()
        gateway.payment.capture.assert_not_called()

    def test_failed_charge_leaves_cart_alone(self, client_for, user, filled_cart, gateway):
        gateway.payment.capture.side_effect = razorpay.errors.BadRequestError("card declined")

        response = client_for(user).post(ORDERS_URL, {"token": "pay_bad"}, format="json")

        assert response.status_code == 502
        assert "card declined" in response.data["detail"]
        assert not Order.objects.exists()
        assert CartItem.objects.filter(user=user).count() == 2

    def test_failed_persistence_refunds(self, ctx_for, user, filled_cart, gateway, monkeypatch):
        def broken_bulk_create(*args, **kwargs):
            raise DatabaseError("disk full")

        monkeypatch.setattr(OrderItem.objects, "bulk_create", broken_bulk_create)
        saga = CheckoutSaga(ctx_for(user), "pay_123")

        with pytest.raises(OrderNotPlaced):
            saga.run()

        gateway.payment.refund.assert_called_once_with("pay_123", {"amount": 8750})
        assert saga.status == "compensated"
        assert not Order.objects.exists()
        assert CartItem.objects.filter(user=user).count() == 2

    def test_failed_refund_surfaces(self, ctx_for, user, filled_cart, gateway, monkeypatch):
        def broken_bulk_create(*args, **kwargs):
            raise DatabaseError("disk full")

        monkeypatch.setattr(OrderItem.objects, "bulk_create", broken_bulk_create)
        gateway.payment.refund.side_effect = razorpay.errors.GatewayError("gateway timeout")
        saga = CheckoutSaga(ctx_for(user), "pay_123")

        with pytest.raises(UpstreamFailure) as excinfo:
            saga.run()

        assert not isinstance(excinfo.value, OrderNotPlaced)
        assert saga.status == "failed"


@pytest.mark.django_db
class TestOrderQueries:
    def _place(self, ctx_for, user, make_item, gateway):
        CartItem.objects.create(user=user, item=make_item(user))
        return CheckoutSaga(ctx_for(user), "pay_123").run()

    def test_lists_own_orders(self, client_for, ctx_for, user, make_user, make_item, gateway):
        mine = self._place(ctx_for, user, make_item, gateway)
        self._place(ctx_for, make_user(), make_item, gateway)

        response = client_for(user).get(ORDERS_URL)
        assert [o["id"] for o in response.data] == [mine.pk]
        assert response.data[0]["items"][0]["title"] == "Shoes"

    def test_owner_reads_order(self, client_for, ctx_for, user, make_item, gateway):
        order = self._place(ctx_for, user, make_item, gateway)
        response = client_for(user).get(f"{ORDERS_URL}{order.pk}/")
        assert response.status_code == 200
        assert response.data["total"] == 5000

    def test_admin_reads_any_order(self, client_for, ctx_for, user, admin_user, make_item, gateway):
        order = self._place(ctx_for, user, make_item, gateway)
        assert client_for(admin_user).get(f"{ORDERS_URL}{order.pk}/").status_code == 200

    def test_stranger_cannot_read(self, ctx_for, user, make_user, make_item, gateway):
        from order import services

        order = self._place(ctx_for, user, make_item, gateway)
        with pytest.raises(AuthorizationDenied):
            services.get_order(ctx_for(make_user()), order.pk)

    def test_deleted_account_token_is_rejected(self, client_for, user):
        client = client_for(user)
        user.delete()
        assert client.get(ORDERS_URL).status_code == 401

    def test_missing_order(self, client_for, user):
        assert client_for(user).get(f"{ORDERS_URL}999/").status_code == 404
