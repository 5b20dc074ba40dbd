from django.urls import path

from .views import (
    MeView,
    RequestResetView,
    ResetPasswordView,
    SigninView,
    SignoutView,
    SignupView,
    UpdatePermissionsView,
    UserListView,
)

urlpatterns = [
    path("signup/", SignupView.as_view(), name="signup"),
    path("signin/", SigninView.as_view(), name="signin"),
    path("signout/", SignoutView.as_view(), name="signout"),
    path("me/", MeView.as_view(), name="me"),
    path("request-reset/", RequestResetView.as_view(), name="request-reset"),
    path("reset-password/", ResetPasswordView.as_view(), name="reset-password"),
    path("users/", UserListView.as_view(), name="user-list"),
    path("users/<int:pk>/permissions/", UpdatePermissionsView.as_view(), name="user-permissions"),
]
