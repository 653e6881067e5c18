"""JWT token utilities.

Identity tokens are minted by the external identity provider. The service
shares the signing secret and only needs the caller's email from them;
``create_token`` exists for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from civicfix.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    email: str
    name: str | None = None
    exp: datetime


class TokenError(Exception):
    """Token verification error."""

    pass


def create_token(email: str, settings: AuthSettings, name: str | None = None) -> str:
    """Create a signed identity token.

    Args:
        email: Email claim
        settings: Authentication settings
        name: Optional display name claim

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {"email": email, "exp": expiry}
    if name:
        payload["name"] = name

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an identity token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        TokenError: If token is invalid, expired or has no email claim
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.leeway_seconds,
            options={"require": ["exp", "email"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise TokenError("Invalid token")

    return TokenPayload(**payload)
