from sick_fits.exceptions import AuthorizationDenied, NotFound
from user.models import Permission
from user.permissions import has_permission
from user.services import get_acting_user

from .checkout import CheckoutSaga
from .models import Order


def create_order(ctx, *, token):
    return CheckoutSaga(ctx, token).run()


def list_orders(ctx):
    user = get_acting_user(ctx)
    return Order.objects.filter(user=user).prefetch_related("items")


def get_order(ctx, order_id):
    user = get_acting_user(ctx)
    try:
        order = Order.objects.prefetch_related("items").get(pk=order_id)
    except Order.DoesNotExist:
        raise NotFound("Order not found")

    owns_order = order.user_id == user.pk
    if not owns_order and not has_permission(user.permissions, [Permission.ADMIN]):
        raise AuthorizationDenied("You can't see this buddy")
    return order
