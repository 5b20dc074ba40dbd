# user/views.py
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import (
    PermissionsSerializer,
    RequestResetSerializer,
    ResetPasswordSerializer,
    SigninSerializer,
    SignupSerializer,
    UserSerializer,
)


class SignupView(APIView):
    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ctx = request.session_context
        user = services.signup(ctx, **serializer.validated_data)

        response = Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)
        return ctx.apply_cookies(response)


class SigninView(APIView):
    def post(self, request):
        serializer = SigninSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ctx = request.session_context
        user = services.signin(ctx, **serializer.validated_data)

        response = Response(UserSerializer(user).data, status=status.HTTP_200_OK)
        return ctx.apply_cookies(response)


class SignoutView(APIView):
    def post(self, request):
        ctx = request.session_context
        response = Response(services.signout(ctx), status=status.HTTP_200_OK)
        return ctx.apply_cookies(response)


class MeView(APIView):
    def get(self, request):
        user = services.current_user(request.session_context)
        return Response(UserSerializer(user).data if user else None)


class RequestResetView(APIView):
    def post(self, request):
        serializer = RequestResetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = services.request_reset(request.session_context, **serializer.validated_data)
        return Response(result, status=status.HTTP_200_OK)


class ResetPasswordView(APIView):
    def post(self, request):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        ctx = request.session_context
        user = services.reset_password(
            ctx,
            reset_token=data["resetToken"],
            password=data["password"],
            confirm_password=data["confirmPassword"],
        )
        response = Response(UserSerializer(user).data, status=status.HTTP_200_OK)
        return ctx.apply_cookies(response)


class UserListView(APIView):
    """
    GET: every user with their permissions.
    Needs ADMIN or PERMISSIONUPDATE.
    """

    def get(self, request):
        users = services.list_users(request.session_context)
        return Response(UserSerializer(users, many=True).data)


class UpdatePermissionsView(APIView):
    """
    PATCH /user/users/{pk}/permissions/
    Body: { "permissions": ["USER", "ITEMDELETE"] }
    Replaces the target user's permissions with exactly this list.
    """

    def patch(self, request, pk):
        serializer = PermissionsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.update_permissions(
            request.session_context,
            user_id=pk,
            permissions=serializer.validated_data["permissions"],
        )
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
