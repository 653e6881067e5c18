"""Identity token domain service."""

import logfire

from civicfix.config import AuthSettings
from civicfix.util.jwt import TokenPayload, verify_token

from .base import Service


class TokenService(Service):
    """Domain service verifying identity-provider tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify(self, token: str) -> TokenPayload:
        """Verify a token and extract its payload.

        Raises:
            TokenError: If token is invalid or expired
        """
        with logfire.span("token_service.verify"):
            try:
                payload = verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("Token verification failed", error=str(e))
                raise
            logfire.debug("Token verified", email=payload.email)
            return payload
