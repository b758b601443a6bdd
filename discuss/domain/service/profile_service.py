"""Author profile enrichment for comment threads."""

import html
import re
from collections.abc import Iterable

import logfire

from discuss.domain.model.badge import Badge
from discuss.domain.model.file import StoredFile
from discuss.domain.model.user import UserAccount
from discuss.domain.model.view import UserProfileView
from discuss.domain.repository import FileRepository, UserRepository
from discuss.domain.value import BadgeId, FileId, UserId

from .base import Service

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class BadgeCatalog:
    """Points and badge scoring interface."""

    def badge_id_for_points(self, points: int) -> BadgeId:
        """Community badge id earned by a point total.

        Args:
            points: User point total

        Returns:
            Badge id
        """
        raise NotImplementedError

    def all_badges(self) -> list[Badge]:
        """Full badge catalog."""
        raise NotImplementedError


class FileUrlGenerator:
    """Turns stored file records into public URLs."""

    def file_url(self, stored_file: StoredFile) -> str:
        """Public URL of a stored file."""
        raise NotImplementedError


def coerce_points(value: int | str | None) -> int:
    """Read a stored point total as an integer, defaulting to 0.

    Text is read up to its first non-digit, so "12abc" is 12 and "1.5" is 1.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else 0


class ProfileService(Service):
    """Builds the profile map joined into thread responses."""

    def __init__(
        self,
        user_repository: UserRepository,
        file_repository: FileRepository,
        badge_catalog: BadgeCatalog,
        file_url_generator: FileUrlGenerator,
    ) -> None:
        """Initialize profile service.

        Args:
            user_repository: User account repository
            file_repository: Stored file repository
            badge_catalog: Points and badge scoring
            file_url_generator: File URL generation
        """
        self.user_repository = user_repository
        self.file_repository = file_repository
        self.badge_catalog = badge_catalog
        self.file_url_generator = file_url_generator

    async def build_profiles(
        self, author_ids: Iterable[UserId], requester_id: UserId
    ) -> dict[UserId, UserProfileView]:
        """Build profiles for comment authors and the requesting user.

        Accounts and avatar files are each loaded in a single batch. Any
        missing piece (account, avatar, points, badges) degrades to a
        default instead of dropping the profile.

        Args:
            author_ids: Authors referenced by the thread
            requester_id: The requesting user, always included

        Returns:
            Profile for every author id and the requester
        """
        uids = set(author_ids)
        uids.add(requester_id)

        with logfire.span("profile_service.build_profiles", user_count=len(uids)):
            accounts = await self.user_repository.load_many(uids)

            file_ids: set[FileId] = {
                account.profile_image_id
                for account in accounts.values()
                if account.profile_image_id
            }
            files: dict[FileId, StoredFile] = {}
            if file_ids:
                files = await self.file_repository.load_many(file_ids)

            missing = uids - accounts.keys()
            if missing:
                logfire.warn(
                    "Profiles built for unknown accounts", user_ids=sorted(missing)
                )

            return {
                uid: self._build_profile(uid, accounts.get(uid), files)
                for uid in sorted(uids)
            }

    def _build_profile(
        self,
        uid: UserId,
        account: UserAccount | None,
        files: dict[FileId, StoredFile],
    ) -> UserProfileView:
        profile_img = ""
        username = ""
        points = 0
        badges: list[BadgeId] = []

        if account is not None:
            fid = account.profile_image_id
            if fid and fid in files:
                profile_img = self.file_url_generator.file_url(files[fid])
            username = account.name or ""
            points = coerce_points(account.points)
            badges.extend(account.badge_ids)

        badges.append(self.badge_catalog.badge_id_for_points(points))

        return UserProfileView(
            uid=uid,
            profile_img=profile_img,
            points=points,
            username=username,
            # Full name and initials are not collected separately
            full_name=username,
            initials=username,
            alt_img=f'<span class="user-initials">{html.escape(username)}</span>',
            badges=badges,
        )
