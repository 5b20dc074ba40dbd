"""Checkout saga: charge the cart, record the order, empty the cart.

Flow:
    1. load the acting user's cart and total it
    2. capture the charge                      -> status "charged"
    3. in one transaction: create the Order and its OrderItem snapshots,
       take the charged quantities out of the cart -> status "completed"
    3b. if step 3 fails, refund the charge     -> status "compensated"
        (or "failed" when the refund fails too)

A failed charge propagates as-is: no order is written and the cart is left
alone.
"""
import logging

from django.db import DatabaseError, transaction
from django.db.models import F

from cart.models import CartItem
from cart.services import cart_total
from sick_fits.exceptions import OrderNotPlaced, UpstreamFailure, ValidationMismatch
from user.services import get_acting_user

from . import payments
from .models import Order, OrderItem

logger = logging.getLogger(__name__)


class CheckoutSaga:
    def __init__(self, ctx, payment_token):
        self.ctx = ctx
        self.payment_token = payment_token
        self.status = "new"
        self.user = None
        self.cart_items = []
        self.amount = 0
        self.charge_id = None
        self.order = None

    def run(self):
        self.user = get_acting_user(self.ctx)
        self.cart_items = list(
            CartItem.objects.filter(user=self.user).select_related("item")
        )
        if not self.cart_items:
            raise ValidationMismatch("Your cart is empty")
        self.amount = cart_total(self.cart_items)

        self.charge_id = payments.capture_charge(self.payment_token, self.amount)
        self.status = "charged"

        try:
            self.order = self._persist()
        except DatabaseError:
            logger.exception(
                "Saving order failed after capturing %s for user_id=%s", self.charge_id, self.user.pk
            )
            self._compensate()
            raise OrderNotPlaced()

        self.status = "completed"
        logger.info("Order #%s placed by user_id=%s for %s", self.order.pk, self.user.pk, self.amount)
        return self.order

    def _snapshots(self, order):
        return [
            OrderItem(
                order=order,
                user=self.user,
                title=ci.item.title,
                description=ci.item.description,
                image=ci.item.image,
                large_image=ci.item.large_image,
                price=ci.item.price,
                quantity=ci.quantity,
            )
            for ci in self.cart_items
        ]

    @transaction.atomic
    def _persist(self):
        order = Order.objects.create(user=self.user, total=self.amount, charge=self.charge_id)
        OrderItem.objects.bulk_create(self._snapshots(order))
        self._release_cart()
        return order

    def _release_cart(self):
        """Take the charged quantities out of the cart; units added since stay."""
        pks = [ci.pk for ci in self.cart_items]
        list(CartItem.objects.select_for_update().filter(pk__in=pks))
        for ci in self.cart_items:
            CartItem.objects.filter(pk=ci.pk).update(quantity=F("quantity") - ci.quantity)
        CartItem.objects.filter(pk__in=pks, quantity__lte=0).delete()

    def _compensate(self):
        try:
            payments.refund_charge(self.charge_id, self.amount)
        except UpstreamFailure:
            self.status = "failed"
            logger.error(
                "Refund of %s (%s) for user_id=%s failed; needs manual refund",
                self.charge_id, self.amount, self.user.pk,
            )
            raise
        self.status = "compensated"
