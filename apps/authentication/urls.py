from django.urls import path

from .views import (
    ApproveStaffView,
    ForgotPasswordView,
    LoginView,
    MeView,
    PasswordChangeView,
    PendingStaffView,
    ProfileUpdateView,
    RegisterStaffView,
    RegisterView,
    ResetPasswordView,
    SendCodeView,
    StaffLoginView,
    StaffStatsView,
    VerifyCodeView,
)

app_name = "authentication"

urlpatterns = [
    path("register", RegisterView.as_view(), name="register"),
    path("register-staff", RegisterStaffView.as_view(), name="register_staff"),
    path("login", LoginView.as_view(), name="login"),
    path("login-staff", StaffLoginView.as_view(), name="login_staff"),
    path("send-code", SendCodeView.as_view(), name="send_code"),
    path("verify-code", VerifyCodeView.as_view(), name="verify_code"),
    path("forgot", ForgotPasswordView.as_view(), name="password_forgot"),
    path("reset/<str:token>", ResetPasswordView.as_view(), name="password_reset"),
    # Authenticated
    path("me", MeView.as_view(), name="me"),
    path("update", ProfileUpdateView.as_view(), name="profile_update"),
    path("change-password", PasswordChangeView.as_view(), name="password_change"),
    # Admin
    path("pending-staff", PendingStaffView.as_view(), name="pending_staff"),
    path("approve-staff/<uuid:pk>", ApproveStaffView.as_view(), name="approve_staff"),
    path("staff-stats", StaffStatsView.as_view(), name="staff_stats"),
]
