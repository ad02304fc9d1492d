from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models

from apps.common.constants import UserRole
from apps.common.models import BaseModel


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("The Email field must be set")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_staff(self, email, password=None, **extra_fields):
        extra_fields.setdefault("role", UserRole.STAFF)
        extra_fields.setdefault("approved", False)
        return self.create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("role", UserRole.ADMIN)
        extra_fields.setdefault("approved", True)
        extra_fields.setdefault("email_verified", True)

        if extra_fields.get("role") != UserRole.ADMIN:
            raise ValueError("Superuser must have role=admin.")

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, BaseModel):
    email = models.EmailField(unique=True)
    full_name = models.CharField(max_length=150)
    contact = models.CharField(max_length=50, blank=True)
    student_id = models.CharField(max_length=50, blank=True)
    role = models.CharField(max_length=20, choices=UserRole.choices, default=UserRole.STUDENT)
    is_active = models.BooleanField(default=True)

    # Staff accounts stay locked until an admin approves them
    approved = models.BooleanField(default=True)

    email_verified = models.BooleanField(default=False)
    verification_code = models.CharField(max_length=4, blank=True, null=True)

    reset_token = models.CharField(max_length=64, blank=True, null=True, unique=True)
    reset_token_expires_at = models.DateTimeField(blank=True, null=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["full_name"]

    class Meta:
        db_table = "user"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["role", "approved"]),
        ]

    @property
    def can_log_in(self) -> bool:
        return self.is_active and (self.role != UserRole.STAFF or self.approved)

    def __str__(self):
        return f"{self.email} ({self.role})"
