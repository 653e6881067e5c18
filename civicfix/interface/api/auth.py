"""Bearer-token authentication and role checks for API routes.

The core is role-agnostic; routes call these helpers before invoking a
use case.
"""

from fastapi import HTTPException, status

from civicfix.domain.model import User
from civicfix.domain.service import TokenService, UserService
from civicfix.domain.value import UserRole
from civicfix.util.jwt import TokenError, TokenPayload

BEARER_PREFIX = "bearer "


def extract_bearer(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        HTTPException: 401 if the header is missing or malformed
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token


def authenticate(authorization: str | None, token_service: TokenService) -> TokenPayload:
    """Verify the bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = extract_bearer(authorization)
    try:
        return token_service.verify(token)
    except TokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


async def require_user(
    authorization: str | None,
    token_service: TokenService,
    user_service: UserService,
    *roles: UserRole,
) -> User:
    """Authenticate and load the registered caller, optionally checking role.

    Args:
        authorization: Raw Authorization header
        token_service: Token verification service
        user_service: User service
        roles: Accepted roles; any role if empty

    Raises:
        HTTPException: 401 on token failure, 403 if unregistered or wrong role
    """
    payload = authenticate(authorization, token_service)
    user = await user_service.find_by_email(payload.email)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is not registered",
        )
    if roles and user.role not in roles:
        allowed = ", ".join(r.value for r in roles)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"This action requires role: {allowed}",
        )
    return user
