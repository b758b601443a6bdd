"""Signed session tokens."""

from datetime import datetime, timedelta, timezone
from typing import Iterable

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from discuss.config import AuthSettings

DEFAULT_TOKEN_LIFETIME = timedelta(days=30)


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: int
    roles: list[str] = []
    exp: datetime


class JWTError(Exception):
    """Session token could not be verified."""


def create_token(
    user_id: int,
    roles: Iterable[str],
    settings: AuthSettings,
    lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
) -> str:
    """Issue a session token.

    Args:
        user_id: User the token identifies
        roles: Roles the user holds
        settings: Signing secret and algorithm
        lifetime: Time until the token expires

    Returns:
        Encoded token
    """
    claims = {
        "user_id": user_id,
        "roles": list(roles),
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a session token's signature and expiry.

    Raises:
        JWTError: If the token is expired, forged or carries malformed claims
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except PydanticValidationError as e:
        raise JWTError("Token claims are malformed") from e
