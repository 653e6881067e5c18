"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from civicfix.config import AuthSettings, IssueSettings, PaymentSettings, Settings
from civicfix.util.error import ConfigurationError

from civicfix.util.di.base import ProviderBase

PLACEHOLDER_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_secrets(settings: Settings) -> None:
    """Refuse to run production with the placeholder secrets.

    Raises:
        ConfigurationError: Naming the first secret still set to the placeholder
    """
    if settings.environment != "production":
        return
    secrets = {
        "AUTH__JWT_SECRET": settings.auth.jwt_secret,
        "PAYMENTS__WEBHOOK_SECRET": settings.payments.webhook_secret,
    }
    for name, value in secrets.items():
        if not value or value == PLACEHOLDER_SECRET:
            raise ConfigurationError(name, "must be set in production")


class ProdConfigProvider(ProviderBase):
    """Settings and their sections, loaded once per container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment and ``.env``."""
        settings = Settings()
        check_secrets(settings)
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_issue_settings(self, settings: Settings) -> IssueSettings:
        return settings.issues

    @provide(scope=Scope.APP)
    def provide_payment_settings(self, settings: Settings) -> PaymentSettings:
        return settings.payments
