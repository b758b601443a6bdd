"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import CommentSettings
from discuss.domain.repository import (
    CommentRepository,
    FileRepository,
    TrackerRepository,
    UserRepository,
)
from discuss.domain.service import (
    BadgeCatalog,
    CommentService,
    FileUrlGenerator,
    ProfileService,
    TrackerService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_tracker_service(
        self, tracker_repository: TrackerRepository, settings: CommentSettings
    ) -> TrackerService:
        """Provide tracker domain service."""
        return TrackerService(
            tracker_repository=tracker_repository, tracker_kind=settings.tracker_kind
        )

    @provide
    def get_profile_service(
        self,
        user_repository: UserRepository,
        file_repository: FileRepository,
        badge_catalog: BadgeCatalog,
        file_url_generator: FileUrlGenerator,
    ) -> ProfileService:
        """Provide profile enrichment service."""
        return ProfileService(
            user_repository=user_repository,
            file_repository=file_repository,
            badge_catalog=badge_catalog,
            file_url_generator=file_url_generator,
        )
