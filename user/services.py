"""
Account mutations: signup, signin, signout, password reset and permission
management. Every function takes the request's SessionContext first.
"""
import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.core.mail import send_mail
from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from sick_fits.exceptions import AuthenticationRequired, NotFound, ValidationMismatch

from .models import Permission, User
from .permissions import check_permission

logger = logging.getLogger(__name__)

USER_ADMIN_PERMISSIONS = (Permission.ADMIN, Permission.PERMISSIONUPDATE)


def get_acting_user(ctx):
    user_id = ctx.require_user_id()
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        # signed token for a deleted account
        raise AuthenticationRequired()


def current_user(ctx):
    if not ctx.is_authenticated:
        return None
    return User.objects.filter(pk=ctx.user_id).first()


def signup(ctx, *, email, name, password):
    try:
        with transaction.atomic():
            user = User.objects.create_user(email=email, name=name, password=password)
    except IntegrityError:
        # lost a race with another signup for the same address
        raise serializers.ValidationError({"email": ["Email already exists"]})
    ctx.issue_token(user)
    logger.info("New signup user_id=%s", user.pk)
    return user


def signin(ctx, *, email, password):
    email = User.objects.normalize_email(email)
    user = User.objects.filter(email=email).first()
    if user is None:
        raise NotFound(f"No such user found for email {email}")
    if not user.check_password(password):
        raise AuthenticationFailed("Invalid Password!")
    ctx.issue_token(user)
    logger.info("Signin user_id=%s", user.pk)
    return user


def signout(ctx):
    ctx.clear_token()
    return {"message": "Goodbye!"}


def _reset_email(user, reset_token):
    link = f"{settings.FRONTEND_URL}/reset?resetToken={reset_token}"
    subject = "Your Password Reset Token"
    message = (
        f"Hello {user.name},\n\n"
        f"Your password reset link is here:\n{link}\n\n"
        f"It expires in {settings.RESET_TOKEN_LIFETIME_MINUTES} minutes.\n\n"
        "Sick Fits"
    )
    html_message = (
        "<div>"
        "<h2>Hello There!</h2>"
        f"<p>Your Password Reset Token is here!</p>"
        f'<p><a href="{link}">Click Here to Reset</a></p>'
        "<p>Sick Fits</p>"
        "</div>"
    )
    return subject, message, html_message


def request_reset(ctx, *, email):
    email = User.objects.normalize_email(email)
    user = User.objects.filter(email=email).first()
    if user is None:
        raise NotFound(f"No such user found for email {email}")

    user.reset_token = secrets.token_hex(20)
    user.reset_token_expiry = timezone.now() + timedelta(minutes=settings.RESET_TOKEN_LIFETIME_MINUTES)
    user.save(update_fields=["reset_token", "reset_token_expiry"])

    subject, message, html_message = _reset_email(user, user.reset_token)
    try:
        sent = send_mail(
            subject,
            message,
            settings.DEFAULT_FROM_EMAIL,
            [user.email],
            fail_silently=False,
            html_message=html_message,
        )
        if sent < 1:
            logger.error("send_mail returned 0 while sending reset token to user_id=%s", user.pk)
    except Exception:
        # the caller always gets the same acknowledgement
        logger.exception("Error sending reset token to user_id=%s", user.pk)

    return {"message": "Thanks!"}


def reset_password(ctx, *, reset_token, password, confirm_password):
    if password != confirm_password:
        raise ValidationMismatch("Your Passwords don't match!")

    user = User.objects.filter(
        reset_token=reset_token,
        reset_token_expiry__gt=timezone.now(),
    ).first()
    if user is None:
        raise NotFound("This token is either invalid or expired!")

    user.set_password(password)
    user.reset_token = None
    user.reset_token_expiry = None
    user.save(update_fields=["password", "reset_token", "reset_token_expiry"])

    ctx.issue_token(user)
    return user


def list_users(ctx):
    actor = get_acting_user(ctx)
    check_permission(actor, USER_ADMIN_PERMISSIONS)
    return User.objects.order_by("id")


def update_permissions(ctx, *, user_id, permissions):
    actor = get_acting_user(ctx)
    check_permission(actor, USER_ADMIN_PERMISSIONS)

    try:
        target = User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise NotFound(f"No user with id {user_id}")

    target.permissions = list(dict.fromkeys(permissions))
    target.save(update_fields=["permissions"])
    logger.info("user_id=%s set permissions of user_id=%s to %s", actor.pk, target.pk, target.permissions)
    return target
