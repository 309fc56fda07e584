"""Lost-and-found management utilities."""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Query

from core.exceptions import NotFoundError, ValidationError
from models.lost_found_item import LostFoundItemModel
from schemas.user import User
from utils.policies import ResourcePolicy, everyone, owner_or_admin
from utils.resource_manager import ResourceManager, utc_now

logger = logging.getLogger(__name__)


class LostFoundManager(ResourceManager):
    """Manages lost and found postings, visible to every campus user."""

    policy = ResourcePolicy(
        name="Item",
        model=LostFoundItemModel,
        id_field="item_id",
        creator_roles=frozenset({"student"}),
        owner_field="posted_by",
        can_view=everyone,
        can_write=owner_or_admin("posted_by"),
        order_by=(LostFoundItemModel.created_at.desc(),),
    )

    def _query(
        self,
        item_type: Optional[str] = None,
        status: Optional[str] = None,
        category: Optional[str] = None,
        **filters: Any,
    ) -> Query:
        query = super()._query()
        if status:
            query = query.filter(LostFoundItemModel.status == status)
        else:
            # Closed postings are hidden unless asked for explicitly
            query = query.filter(LostFoundItemModel.status != "closed")
        if item_type:
            query = query.filter(LostFoundItemModel.item_type == item_type)
        if category:
            query = query.filter(LostFoundItemModel.category == category)
        return query

    def list_posted_by(self, actor: User) -> List[LostFoundItemModel]:
        return (
            super()._query()
            .filter(LostFoundItemModel.posted_by == actor.user_id)
            .all()
        )

    def _build(self, actor: User, data: Dict[str, Any]) -> LostFoundItemModel:
        contact = data.pop("contact", None) or {}
        data["contact_email"] = contact.get("email") or actor.email
        data["contact_phone"] = contact.get("phone")
        if not data.get("date_of_incident"):
            data["date_of_incident"] = utc_now()
        return LostFoundItemModel(**data)

    def _apply_patch(self, model: LostFoundItemModel, patch: Dict[str, Any], actor: User) -> None:
        contact = patch.pop("contact", None)
        if contact:
            # Merge, keeping stored values for omitted keys
            if contact.get("email"):
                model.contact_email = contact["email"]
            if contact.get("phone"):
                model.contact_phone = contact["phone"]
        super()._apply_patch(model, patch, actor)

    def match(self, actor: User, item_id: str, matched_item_id: str) -> LostFoundItemModel:
        """Link an item to its counterpart and mark it resolved."""
        item = self.get_writable(actor, item_id)
        if matched_item_id == item_id:
            raise ValidationError("An item cannot be matched with itself")
        matched = (
            self.db.query(LostFoundItemModel)
            .filter(LostFoundItemModel.item_id == matched_item_id)
            .first()
        )
        if matched is None:
            raise NotFoundError("Matched item", matched_item_id)
        item.matched_with = matched_item_id
        item.status = "resolved"
        item.updated_at = utc_now()
        self.db.commit()
        self.db.refresh(item)
        logger.info("Matched item %s with %s", item_id, matched_item_id)
        return item
