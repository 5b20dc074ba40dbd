from sick_fits.exceptions import AuthorizationDenied


def has_permission(user_permissions, required):
    """True when the user holds at least one of the ``required`` permissions."""
    return bool(set(user_permissions or ()) & set(required))


def check_permission(user, required):
    if not has_permission(user.permissions, required):
        raise AuthorizationDenied(
            "You do not have sufficient permissions: {}. You have: {}".format(
                ", ".join(required), ", ".join(user.permissions or ()) or "none"
            )
        )
