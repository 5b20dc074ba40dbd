import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class AuthenticationRequired(exceptions.NotAuthenticated):
    default_detail = "You must be logged in to do that!"
    default_code = "authentication_required"


class AuthorizationDenied(exceptions.PermissionDenied):
    default_detail = "You don't have permission to do that!"
    default_code = "authorization_denied"


class NotFound(exceptions.NotFound):
    default_code = "not_found"


class ValidationMismatch(exceptions.ValidationError):
    default_detail = "Values do not match."
    default_code = "validation_mismatch"

    def __init__(self, detail=None, code=None):
        super().__init__(detail, code)
        # keep the flat {"detail": ...} body the other errors use
        if isinstance(self.detail, list) and len(self.detail) == 1:
            self.detail = self.detail[0]


class UpstreamFailure(exceptions.APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "An upstream service failed."
    default_code = "upstream_failure"


class OrderNotPlaced(UpstreamFailure):
    default_detail = "Your order could not be saved. The charge has been refunded."
    default_code = "order_not_placed"


def exception_handler(exc, context):
    response = drf_exception_handler(exc, context)
    if isinstance(exc, UpstreamFailure):
        view = context.get("view")
        logger.error("%s in %s: %s", type(exc).__name__, type(view).__name__, exc.detail)
    return response
