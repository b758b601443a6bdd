"""Badge catalog backed by configured point thresholds."""

from discuss.adapter.error import AdapterError
from discuss.config import BadgeSettings
from discuss.domain.model.badge import Badge
from discuss.domain.service import BadgeCatalog
from discuss.domain.value import BadgeId


class StaticBadgeCatalog(BadgeCatalog):
    """Community badges awarded by point thresholds from settings."""

    def __init__(self, settings: BadgeSettings) -> None:
        if not settings.catalog:
            raise AdapterError("Badge catalog cannot be empty")
        self._badges = sorted(
            (
                Badge(id=BadgeId(b.id), name=b.name, min_points=b.min_points)
                for b in settings.catalog
            ),
            key=lambda badge: badge.min_points,
        )

    def badge_id_for_points(self, points: int) -> BadgeId:
        """Highest badge whose threshold the point total reaches.

        Totals below every threshold get the lowest badge.
        """
        earned = self._badges[0]
        for badge in self._badges:
            if points < badge.min_points:
                break
            earned = badge
        return earned.id

    def all_badges(self) -> list[Badge]:
        """Badges ordered by threshold."""
        return list(self._badges)
