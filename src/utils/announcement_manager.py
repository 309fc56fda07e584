"""Announcement and comment management utilities."""

import logging

from models.announcement import AnnouncementCommentModel, AnnouncementModel
from schemas.user import User
from utils.policies import ResourcePolicy, owner_if_role, owner_or_admin
from utils.resource_manager import ResourceManager, utc_now

logger = logging.getLogger(__name__)


class AnnouncementManager(ResourceManager):
    """Manages club announcements; pinned ones list first."""

    policy = ResourcePolicy(
        name="Announcement",
        model=AnnouncementModel,
        id_field="announcement_id",
        creator_roles=frozenset({"club", "admin"}),
        owner_field="club_id",
        can_view=owner_if_role("club", "club_id"),
        can_write=owner_or_admin("club_id"),
        order_by=(AnnouncementModel.pinned.desc(), AnnouncementModel.created_at.desc()),
    )

    def add_comment(self, actor: User, announcement_id: str, text: str) -> AnnouncementModel:
        """Append a comment by any actor who can see the announcement."""
        announcement = self.get(actor, announcement_id)
        announcement.comments.append(
            AnnouncementCommentModel(user_id=actor.user_id, text=text, created_at=utc_now())
        )
        self.db.commit()
        self.db.refresh(announcement)
        logger.info("User %s commented on announcement %s", actor.user_id, announcement_id)
        return announcement
