"""Adapter DI providers."""

from dishka import Scope, provide

from discuss.adapter.badges import StaticBadgeCatalog
from discuss.adapter.files import PublicFileUrlGenerator
from discuss.adapter.session import JWTSessionResolver
from discuss.config import AuthSettings, BadgeSettings, FileSettings
from discuss.domain.service import BadgeCatalog, FileUrlGenerator, SessionResolver
from discuss.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Collaborator implementations shared across requests."""

    scope = Scope.APP

    @provide
    def get_badge_catalog(self, settings: BadgeSettings) -> BadgeCatalog:
        """Provide the configured badge catalog."""
        return StaticBadgeCatalog(settings)

    @provide
    def get_file_url_generator(self, settings: FileSettings) -> FileUrlGenerator:
        """Provide public file URL generation."""
        return PublicFileUrlGenerator(settings)

    @provide
    def get_session_resolver(self, settings: AuthSettings) -> SessionResolver:
        """Provide JWT session resolution."""
        return JWTSessionResolver(settings)
