"""Grievance management utilities.

Grievance status is a free-form enum: the creator or an admin may move a
grievance to any status at any time. The assignee may read and comment but
not update or delete. Every status change made together with a comment, and
every standalone comment, is appended to the ``updates`` log.
"""

import logging
from typing import Any, Dict

from core.exceptions import ForbiddenError
from models.grievance import GrievanceModel, GrievanceUpdateModel
from schemas.user import User
from utils.policies import ResourcePolicy, is_admin, is_grievance_party, owner_or_admin
from utils.resource_manager import ResourceManager, utc_now

logger = logging.getLogger(__name__)


class GrievanceManager(ResourceManager):
    """Manages student grievances."""

    policy = ResourcePolicy(
        name="Grievance",
        model=GrievanceModel,
        id_field="grievance_id",
        creator_roles=frozenset({"student"}),
        owner_field="created_by",
        can_view=is_grievance_party,
        can_write=owner_or_admin("created_by"),
        order_by=(GrievanceModel.created_at.desc(),),
    )

    def _apply_patch(self, model: GrievanceModel, patch: Dict[str, Any], actor: User) -> None:
        comment = patch.pop("comment", None)
        if "assigned_to" in patch and patch["assigned_to"] != model.assigned_to:
            if not is_admin(actor):
                raise ForbiddenError("Only admins can assign grievances")
            if patch["assigned_to"] is not None:
                self.require_user(patch["assigned_to"])
        super()._apply_patch(model, patch, actor)
        if comment:
            self._append_update(model, actor, comment)

    def _append_update(self, model: GrievanceModel, actor: User, comment: str) -> None:
        model.updates.append(
            GrievanceUpdateModel(
                comment=comment,
                updated_by=actor.user_id,
                status=model.status,
                created_at=utc_now(),
            )
        )

    def add_comment(self, actor: User, grievance_id: str, comment: str) -> GrievanceModel:
        """Append a comment carrying the grievance's current status.

        Any party (creator, assignee, admin) may comment.
        """
        grievance = self.get(actor, grievance_id)
        self._append_update(grievance, actor, comment)
        grievance.updated_at = utc_now()
        self.db.commit()
        self.db.refresh(grievance)
        logger.info("User %s commented on grievance %s", actor.user_id, grievance_id)
        return grievance
