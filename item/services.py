import logging

from django.db.models import Q

from sick_fits.exceptions import AuthorizationDenied, NotFound
from user.services import get_acting_user

from .models import Item
from .policies import can_delete_item, can_update_item

logger = logging.getLogger(__name__)


def get_item(item_id):
    try:
        return Item.objects.get(pk=item_id)
    except Item.DoesNotExist:
        raise NotFound(f"No item found for id {item_id}")


def create_item(ctx, **fields):
    user = get_acting_user(ctx)
    item = Item.objects.create(user=user, **fields)
    logger.info("user_id=%s created item_id=%s", user.pk, item.pk)
    return item


def update_item(ctx, item_id, **updates):
    user = get_acting_user(ctx)
    updates.pop("id", None)

    item = get_item(item_id)
    if not can_update_item(user, item):
        raise AuthorizationDenied("You can only update items you own!")

    for name, value in updates.items():
        setattr(item, name, value)
    item.save()
    return item


def delete_item(ctx, item_id):
    user = get_acting_user(ctx)
    item = get_item(item_id)
    if not can_delete_item(user, item):
        raise AuthorizationDenied("You don't have permission to do that!")

    deleted = {"id": item.pk, "title": item.title}
    item.delete()
    logger.info("user_id=%s deleted item_id=%s", user.pk, deleted["id"])
    return deleted


def search_items(term):
    term = (term or "").strip()
    if not term:
        return Item.objects.none()
    return Item.objects.filter(Q(title__icontains=term) | Q(description__icontains=term))
