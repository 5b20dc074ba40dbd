import logging

from django.conf import settings
from django.utils.deprecation import MiddlewareMixin

from sick_fits.context import SessionContext, read_session_token

logger = logging.getLogger(__name__)


class SessionTokenMiddleware(MiddlewareMixin):
    """
    Decode the session cookie so every view gets the user id with the request.
    A missing or bad token leaves the request anonymous.
    """

    def process_request(self, request):
        token = request.COOKIES.get(settings.SESSION_TOKEN_COOKIE)
        user_id = read_session_token(token)
        if token and user_id is None:
            logger.debug("Ignoring invalid session token on %s", request.path)
        request.session_context = SessionContext(user_id=user_id)
        return None
