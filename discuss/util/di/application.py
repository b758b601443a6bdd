"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetThreadUseCase,
    PublishCommentUseCase,
    UpdateCommentUseCase,
)
from discuss.application.usecase.tracker import CreateTrackerUseCase
from discuss.config import Settings
from discuss.domain.service import (
    BadgeCatalog,
    CommentService,
    ProfileService,
    TrackerService,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        tracker_service: TrackerService,
        comment_service: CommentService,
        profile_service: ProfileService,
        badge_catalog: BadgeCatalog,
        settings: Settings,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            tracker_service=tracker_service,
            comment_service=comment_service,
            profile_service=profile_service,
            badge_catalog=badge_catalog,
            page_size=settings.comments.page_size,
            admin_role=settings.auth.admin_role,
            timeout_seconds=settings.comments.request_timeout_seconds,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        tracker_service: TrackerService,
        settings: Settings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            tracker_service=tracker_service,
            comment_settings=settings.comments,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_publish_comment_use_case(
        self, comment_service: CommentService
    ) -> PublishCommentUseCase:
        """Provide publish comment use case."""
        return PublishCommentUseCase(comment_service=comment_service)

    # Tracker use cases
    @provide(scope=Scope.REQUEST)
    def get_create_tracker_use_case(
        self, tracker_service: TrackerService
    ) -> CreateTrackerUseCase:
        """Provide create tracker use case."""
        return CreateTrackerUseCase(tracker_service=tracker_service)
