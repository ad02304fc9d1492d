from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.authentication import services
from apps.authentication.serializers import (
    EmailSerializer,
    LoginSerializer,
    PasswordChangeSerializer,
    PasswordResetConfirmSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    StaffStatsSerializer,
    TokenResponseSerializer,
    VerifyCodeSerializer,
)
from apps.common.constants import ALL_ROLES, UserRole
from apps.common.mixins import PermissionMixin
from apps.users.serializers import UserSerializer

User = get_user_model()


class _PublicView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []


@extend_schema(summary="Register a student account", request=RegisterSerializer, responses={201: TokenResponseSerializer})
class RegisterView(_PublicView):
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = services.register_user(role=UserRole.STUDENT, **serializer.validated_data)
        return Response(TokenResponseSerializer(services.issue_login(user)).data, status=status.HTTP_201_CREATED)


@extend_schema(summary="Register a staff account (requires admin approval)", request=RegisterSerializer)
class RegisterStaffView(_PublicView):
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = services.register_user(role=UserRole.STAFF, **serializer.validated_data)
        return Response(
            {
                "message": "Staff account created. An administrator must approve it before you can log in.",
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(summary="Log in", request=LoginSerializer, responses={200: TokenResponseSerializer})
class LoginView(_PublicView):
    staff_only = False

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = services.authenticate_credentials(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
            staff_only=self.staff_only,
        )
        return Response(TokenResponseSerializer(services.issue_login(user)).data)


@extend_schema(summary="Staff/admin log in", request=LoginSerializer, responses={200: TokenResponseSerializer})
class StaffLoginView(LoginView):
    staff_only = True


@extend_schema(summary="Send a new email verification code", request=EmailSerializer)
class SendCodeView(_PublicView):
    def post(self, request):
        serializer = EmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        services.resend_verification_code(serializer.validated_data["email"])
        return Response({"message": "Verification code sent if the account exists."})


@extend_schema(summary="Verify email with the 4-digit code", request=VerifyCodeSerializer)
class VerifyCodeView(_PublicView):
    def post(self, request):
        serializer = VerifyCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        services.verify_email_code(serializer.validated_data["email"], serializer.validated_data["code"])
        return Response({"message": "Email verified successfully."})


@extend_schema(summary="Request a password reset link", request=EmailSerializer)
class ForgotPasswordView(_PublicView):
    def post(self, request):
        serializer = EmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        services.request_password_reset(serializer.validated_data["email"])
        return Response({"message": "Password reset email sent if account exists."})


@extend_schema(summary="Reset password with a reset token", request=PasswordResetConfirmSerializer)
class ResetPasswordView(_PublicView):
    def post(self, request, token):
        serializer = PasswordResetConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        services.reset_password(token, serializer.validated_data["password"])
        return Response({"message": "Password reset successfully."})


class _CurrentUserMixin(PermissionMixin):
    required_roles = ALL_ROLES

    def get_current_user(self):
        return get_object_or_404(User, pk=self.request.user.id)


@extend_schema(summary="Current user profile", responses={200: UserSerializer})
class MeView(_CurrentUserMixin, APIView):
    def get(self, request):
        return Response(UserSerializer(self.get_current_user()).data)


@extend_schema(summary="Update own profile", request=ProfileUpdateSerializer, responses={200: UserSerializer})
class ProfileUpdateView(_CurrentUserMixin, APIView):
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = services.update_profile(self.get_current_user(), **serializer.validated_data)
        return Response(UserSerializer(user).data)


@extend_schema(summary="Change own password", request=PasswordChangeSerializer)
class PasswordChangeView(_CurrentUserMixin, APIView):
    def patch(self, request):
        serializer = PasswordChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        services.change_password(
            self.get_current_user(),
            serializer.validated_data["current_password"],
            serializer.validated_data["new_password"],
        )
        return Response({"message": "Password changed successfully."})


@extend_schema(summary="Admin: staff accounts waiting for approval")
class PendingStaffView(PermissionMixin, generics.ListAPIView):
    required_roles = (UserRole.ADMIN,)
    serializer_class = UserSerializer

    def get_queryset(self):
        return User.objects.filter(role=UserRole.STAFF, approved=False).order_by("created_at")


@extend_schema(summary="Admin: approve a staff account", request=None, responses={200: UserSerializer})
class ApproveStaffView(PermissionMixin, APIView):
    required_roles = (UserRole.ADMIN,)

    def post(self, request, pk):
        user = services.approve_staff(get_object_or_404(User, pk=pk))
        return Response(UserSerializer(user).data)


@extend_schema(summary="Admin: staff account counts", responses={200: StaffStatsSerializer})
class StaffStatsView(PermissionMixin, APIView):
    required_roles = (UserRole.ADMIN,)

    def get(self, request):
        return Response(StaffStatsSerializer(services.staff_stats()).data)
