"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from discuss.config import (
    DEFAULT_JWT_SECRET,
    AuthSettings,
    BadgeSettings,
    CommentSettings,
    FileSettings,
    Settings,
)
from discuss.util.di.base import ProviderBase
from discuss.util.error import ConfigurationError


def check_settings(settings: Settings) -> Settings:
    """Reject settings that must not reach production.

    Raises:
        ConfigurationError: If production runs with the placeholder JWT secret
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    return settings


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return check_settings(Settings())

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_file_settings(self, settings: Settings) -> FileSettings:
        """Provide file settings."""
        return settings.files

    @provide(scope=Scope.APP)
    def provide_badge_settings(self, settings: Settings) -> BadgeSettings:
        """Provide badge settings."""
        return settings.badges
