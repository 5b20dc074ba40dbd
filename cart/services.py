from django.db.models import F

from sick_fits.exceptions import AuthorizationDenied, NotFound
from item.services import get_item
from user.services import get_acting_user

from .models import CartItem


def get_cart(ctx):
    user = get_acting_user(ctx)
    return CartItem.objects.filter(user=user).select_related("item")


def cart_total(cart_items):
    return sum(ci.item.price * ci.quantity for ci in cart_items)


def add_to_cart(ctx, *, item_id):
    user = get_acting_user(ctx)
    item = get_item(item_id)

    cart_item, created = CartItem.objects.get_or_create(
        user=user,
        item=item,
        defaults={"quantity": 1},
    )
    if not created:
        # bump in the database so two quick adds both count
        CartItem.objects.filter(pk=cart_item.pk).update(quantity=F("quantity") + 1)
        cart_item.refresh_from_db()
    return cart_item, created


def remove_from_cart(ctx, *, cart_item_id):
    user = get_acting_user(ctx)
    cart_item = CartItem.objects.filter(pk=cart_item_id).first()
    if cart_item is None:
        raise NotFound("No CartItem Found!")
    if cart_item.user_id != user.pk:
        raise AuthorizationDenied("Cheatin huhhhh")
    cart_item.delete()
    return cart_item
