"""Get comment thread use case."""

import asyncio
import secrets

import logfire
from pydantic import BaseModel, Field, SkipValidation

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import DeadlineExceededError
from discuss.domain.model import Badge, CommentView, UserProfileView
from discuss.domain.service import (
    BadgeCatalog,
    CommentService,
    CommentTree,
    ProfileService,
    TrackerService,
    build_comment_tree,
    transform_comment,
)
from discuss.domain.value import RequestContext, UserId
from discuss.util.codec import decode_source_text


def render_forest_json(tree: CommentTree) -> str:
    """Render the thread as a JSON array of nested comments.

    Each comment is its view plus a ``children`` array of its replies in
    ascending cid order. Rendering walks the tree with an explicit stack
    so reply chains of any depth are handled.

    Args:
        tree: Assembled comment tree

    Returns:
        JSON array text
    """
    parts = ["["]
    stack = [iter(tree.root_views())]
    first = [True]
    while stack:
        view = next(stack[-1], None)
        if view is None:
            stack.pop()
            first.pop()
            parts.append("]}" if stack else "]")
            continue
        if not first[-1]:
            parts.append(",")
        first[-1] = False
        # Reopen the flat view object to append its replies
        parts.append(view.model_dump_json()[:-1] + ',"children":[')
        stack.append(iter(tree.children_of(view.cid)))
        first.append(True)
    return "".join(parts)


class RequesterInfo(BaseModel):
    """The requesting user's section of the thread response."""

    uid: UserId
    badges: list[Badge]
    profile: UserProfileView
    admin: int
    token: str  # Fresh per response; not a credential


class GetThreadRequest(BaseModel):
    """Get thread request."""

    source_token: str  # Encoded source identifier from the path
    context: RequestContext


class GetThreadResponse(BaseModel):
    """Thread envelope.

    ``page`` and ``page_size`` are declared for clients but the whole
    thread is always returned. Comments stay in the flat ``tree`` and are
    nested only when the envelope is rendered by ``to_json``.
    """

    page: int = 0
    page_size: int
    nid: str
    comment_count: int
    tree: SkipValidation[CommentTree] = Field(exclude=True)
    profiles: dict[UserId, UserProfileView]
    badges: list[Badge]
    best_reply: None = None
    requester: RequesterInfo

    @property
    def comments(self) -> list[CommentView]:
        """Top-level comments of the thread."""
        return self.tree.root_views()

    def to_json(self) -> str:
        """Render the envelope with its comments nested under ``comments``."""
        envelope = self.model_dump_json()
        return envelope[:-1] + ',"comments":' + render_forest_json(self.tree) + "}"


class GetThreadUseCase(BaseUseCase):
    """Use case for fetching a tracker's comment thread with author profiles."""

    def __init__(
        self,
        tracker_service: TrackerService,
        comment_service: CommentService,
        profile_service: ProfileService,
        badge_catalog: BadgeCatalog,
        page_size: int,
        admin_role: str,
        timeout_seconds: float,
    ) -> None:
        """Initialize get thread use case.

        Args:
            tracker_service: Tracker resolution
            comment_service: Comment domain service
            profile_service: Profile enrichment
            badge_catalog: Badge catalog
            page_size: Page size declared in the envelope
            admin_role: Role that marks the requester as administrator
            timeout_seconds: Deadline for assembling the response
        """
        self.tracker_service = tracker_service
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.badge_catalog = badge_catalog
        self.page_size = page_size
        self.admin_role = admin_role
        self.timeout_seconds = timeout_seconds

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow under the request deadline.

        Raises:
            DeadlineExceededError: If the thread is not assembled in time
            LookupUnavailableError: If storage cannot be reached
        """
        try:
            return await asyncio.wait_for(
                self._assemble(request), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError as e:
            logfire.error(
                "Thread assembly timed out",
                nid=request.source_token,
                timeout_seconds=self.timeout_seconds,
            )
            raise DeadlineExceededError("Request timed out") from e

    async def _assemble(self, request: GetThreadRequest) -> GetThreadResponse:
        """Build the thread envelope.

        Steps:
        1. Decode the source token and resolve its tracker
        2. Load the tracker's comments and transform them into views
        3. Collect author ids from the flat views, then assemble the tree
        4. Join author and requester profiles
        """
        with logfire.span("get_thread", nid=request.source_token):
            source_id = decode_source_text(request.source_token)
            if source_id is None:
                logfire.warn("Undecodable source token", nid=request.source_token)

            tracker_id = await self.tracker_service.resolve_content_id(source_id)
            comments = await self.comment_service.get_comments_for_tracker(tracker_id)

            views = [transform_comment(comment) for comment in comments]
            author_ids = {view.uid for view in views}

            tree = build_comment_tree(views)
            if tree.orphans:
                logfire.warn(
                    "Dropped replies to missing comments",
                    tracker_id=tracker_id,
                    comment_ids=tree.orphans,
                )

            requester_id = request.context.user_id
            profiles = await self.profile_service.build_profiles(
                author_ids, requester_id
            )
            badges = self.badge_catalog.all_badges()

            return GetThreadResponse(
                page=0,
                page_size=self.page_size,
                nid=request.source_token,
                comment_count=len(tree.roots),
                tree=tree,
                profiles=profiles,
                badges=badges,
                best_reply=None,
                requester=RequesterInfo(
                    uid=requester_id,
                    badges=badges,
                    profile=profiles[requester_id],
                    admin=1 if request.context.has_role(self.admin_role) else 0,
                    token=secrets.token_urlsafe(16),
                ),
            )
