from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "full_name",
            "contact",
            "student_id",
            "role",
            "approved",
            "email_verified",
            "created_at",
        ]
        read_only_fields = fields

