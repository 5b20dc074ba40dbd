from http.cookies import SimpleCookie

from django.conf import settings

from sick_fits.context import SessionContext, read_session_token


# Take the session token from cookies, verify it, attach the context to the socket
class JWTAuthMiddleware:
    def __init__(self, inner):
        self.inner = inner

    async def __call__(self, scope, receive, send):
        headers = dict(scope.get("headers", []))  # Get headers from scope
        cookies = SimpleCookie(headers.get(b"cookie", b"").decode("latin-1"))

        morsel = cookies.get(settings.SESSION_TOKEN_COOKIE)
        user_id = read_session_token(morsel.value if morsel else None)

        scope = dict(scope, session_context=SessionContext(user_id=user_id))
        return await self.inner(scope, receive, send)
