import secrets

from rest_framework_simplejwt.tokens import AccessToken

from apps.authentication.authentication import ROLE_CLAIM

VERIFICATION_CODE_DIGITS = 4


def generate_verification_code() -> str:
    """4-digit numeric email verification code. Collisions between users are harmless."""
    return f"{secrets.randbelow(10**VERIFICATION_CODE_DIGITS):0{VERIFICATION_CODE_DIGITS}d}"


def generate_password_reset_token() -> str:
    # 32 random bytes = 256 bits
    return secrets.token_hex(32)


def get_custom_token(user) -> AccessToken:
    """
    Return an access token carrying the subject id and role.
    """
    token = AccessToken.for_user(user)
    token[ROLE_CLAIM] = user.role
    return token


def generate_token_for_user(user) -> str:
    return str(get_custom_token(user))
