from rest_framework.authentication import BaseAuthentication

from .models import User


class SessionTokenAuthentication(BaseAuthentication):
    """
    Expose the user behind ``request.session_context`` as ``request.user``.

    The token itself is verified by SessionTokenMiddleware; this class only
    loads the row, and lets DRF answer 401 (not 403) for anonymous callers.
    """

    def authenticate(self, request):
        ctx = getattr(request._request, "session_context", None)
        if ctx is None or ctx.user_id is None:
            return None
        user = User.objects.filter(pk=ctx.user_id).first()
        if user is None:
            return None
        return (user, None)

    def authenticate_header(self, request):
        return 'Token realm="api"'
