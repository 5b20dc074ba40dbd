"""Who may change or remove an item."""
from user.models import Permission
from user.permissions import has_permission

ITEM_DELETE_PERMISSIONS = (Permission.ADMIN, Permission.ITEMDELETE)


def owns_item(user, item):
    return item.user_id == user.pk


def can_update_item(user, item):
    return owns_item(user, item)


def can_delete_item(user, item):
    # ownership AND an elevated permission; an ADMIN cannot delete someone else's item
    return owns_item(user, item) and has_permission(user.permissions, ITEM_DELETE_PERMISSIONS)
