from django.contrib.auth import get_user_model, password_validation
from rest_framework import serializers

from apps.users.serializers import UserSerializer

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    contact = serializers.CharField(max_length=50, required=False, allow_blank=True)
    student_id = serializers.CharField(max_length=50, required=False, allow_blank=True)

    def validate_email(self, value):
        return value.lower()

    def validate_password(self, value):
        password_validation.validate_password(value)
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class TokenResponseSerializer(serializers.Serializer):
    token = serializers.CharField(read_only=True)
    user = UserSerializer(read_only=True)


class EmailSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)


class VerifyCodeSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)
    code = serializers.RegexField(r"^\d{4}$", required=True)


class PasswordResetConfirmSerializer(serializers.Serializer):
    password = serializers.CharField(required=True, min_length=6, write_only=True)

    def validate_password(self, value):
        password_validation.validate_password(value)
        return value


class PasswordChangeSerializer(serializers.Serializer):
    current_password = serializers.CharField(required=True, write_only=True)
    new_password = serializers.CharField(required=True, min_length=6, write_only=True)

    def validate_new_password(self, value):
        password_validation.validate_password(value)
        return value


class ProfileUpdateSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=150, required=False)
    email = serializers.EmailField(required=False)
    contact = serializers.CharField(max_length=50, required=False, allow_blank=True)
    student_id = serializers.CharField(max_length=50, required=False, allow_blank=True)

    def validate_email(self, value):
        return value.lower()


class StaffStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField(read_only=True)
    approved = serializers.IntegerField(read_only=True)
    pending = serializers.IntegerField(read_only=True)
