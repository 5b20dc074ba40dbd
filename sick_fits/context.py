from dataclasses import dataclass, field
from datetime import timedelta

from django.conf import settings
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from .exceptions import AuthenticationRequired


def issue_session_token(user):
    """Signed token for ``user``, valid for SESSION_TOKEN_LIFETIME_DAYS."""
    token = AccessToken.for_user(user)
    token.set_exp(lifetime=timedelta(days=settings.SESSION_TOKEN_LIFETIME_DAYS))
    return str(token)


def read_session_token(raw):
    """
    Return the user id embedded in ``raw`` or None when the token is
    missing, badly signed or expired.
    """
    if not raw:
        return None
    try:
        token = AccessToken(raw)
    except TokenError:
        return None
    return token.get(settings.SIMPLE_JWT["USER_ID_CLAIM"])


@dataclass
class SessionContext:
    """
    Per-request identity plus the cookie changes a handler asks for.

    Views build one per request (see SessionTokenMiddleware), hand it to the
    service functions and call ``apply_cookies`` on the outgoing response.
    """

    user_id: int | None = None
    cookie_ops: list = field(default_factory=list)

    @property
    def is_authenticated(self):
        return self.user_id is not None

    def require_user_id(self):
        if self.user_id is None:
            raise AuthenticationRequired()
        return self.user_id

    def issue_token(self, user):
        self.user_id = user.pk
        self.cookie_ops.append(("set", issue_session_token(user)))

    def clear_token(self):
        self.user_id = None
        self.cookie_ops.append(("clear", None))

    def apply_cookies(self, response):
        name = settings.SESSION_TOKEN_COOKIE
        for op, value in self.cookie_ops:
            if op == "set":
                response.set_cookie(
                    key=name,
                    value=value,
                    httponly=True,
                    secure=settings.SESSION_COOKIE_SECURE,
                    samesite="Lax",
                    max_age=settings.SESSION_TOKEN_LIFETIME_DAYS * 24 * 60 * 60,
                )
            else:
                response.delete_cookie(name, samesite="Lax")
        self.cookie_ops.clear()
        return response
