import logging
import uuid
from dataclasses import dataclass

from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.settings import api_settings

from apps.common.constants import UserRole

logger = logging.getLogger(__name__)

ROLE_CLAIM = "role"


@dataclass(frozen=True)
class Identity:
    """
    The caller as carried by a verified bearer token.

    Built from the token claims alone, so checking access never touches the database.
    Views that need the full account load it with ``User.objects.get(pk=identity.id)``.
    """

    id: uuid.UUID
    role: UserRole

    is_authenticated = True
    is_anonymous = False

    @property
    def pk(self):
        return self.id

    def __str__(self):
        return f"{self.role}:{self.id}"


class BearerIdentityAuthentication(JWTStatelessUserAuthentication):
    """
    Validates ``Authorization: Bearer <token>`` and exposes ``request.user`` as an ``Identity``.

    No header means the request is anonymous (401 on protected views); a bad signature,
    an expired token or missing claims raise ``InvalidToken`` (401).
    """

    def get_user(self, validated_token):
        try:
            user_id = uuid.UUID(str(validated_token[api_settings.USER_ID_CLAIM]))
            role = UserRole(validated_token[ROLE_CLAIM])
        except (KeyError, ValueError) as err:
            logger.info("Rejected token with malformed identity claims: %s", err)
            raise InvalidToken("Token contained no recognizable user identification") from err

        return Identity(id=user_id, role=role)
