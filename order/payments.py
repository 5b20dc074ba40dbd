"""Thin wrapper around the Razorpay client used by checkout."""
import logging

import razorpay
from django.conf import settings

from sick_fits.exceptions import UpstreamFailure

logger = logging.getLogger(__name__)

GATEWAY_ERRORS = (
    razorpay.errors.BadRequestError,
    razorpay.errors.GatewayError,
    razorpay.errors.ServerError,
)

# simple client (uses keys from settings.py)
razorpay_client = razorpay.Client(
    auth=(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET)
)


def capture_charge(payment_token, amount):
    """
    Capture ``amount`` (smallest currency unit) on the payment the storefront
    authorized. Returns the captured payment id.
    """
    try:
        payment = razorpay_client.payment.capture(
            payment_token, amount, {"currency": settings.PAYMENT_CURRENCY}
        )
    except GATEWAY_ERRORS as exc:
        raise UpstreamFailure(f"Payment failed: {exc}")
    logger.info("Captured %s %s on payment %s", amount, settings.PAYMENT_CURRENCY, payment["id"])
    return payment["id"]


def refund_charge(charge_id, amount):
    try:
        refund = razorpay_client.payment.refund(charge_id, {"amount": amount})
    except GATEWAY_ERRORS as exc:
        raise UpstreamFailure(f"Refund of {charge_id} failed: {exc}")
    logger.info("Refunded %s on payment %s (refund %s)", amount, charge_id, refund.get("id"))
    return refund
