"""Generic authorization-scoped resource management.

Every campus resource (courses, events, grievances, ...) is handled by a
subclass of ``ResourceManager`` that only declares its ``ResourcePolicy`` and,
where needed, overrides the build/patch hooks or adds sub-resource actions.
The check-then-act sequence for list/get/create/update/delete lives here once.
"""

import logging
import secrets
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from models.user import UserModel
from schemas.user import User
from utils.policies import ResourcePolicy, is_admin

logger = logging.getLogger(__name__)

# Never written through a patch
_IMMUTABLE_FIELDS = frozenset({"created_at", "updated_at"})


def utc_now() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(pytz.utc).isoformat()


def new_id() -> str:
    return secrets.token_hex(8)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO date or datetime string into an aware UTC datetime."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = pytz.utc.localize(parsed)
    return parsed


class ResourceManager:
    """Authorization-scoped CRUD over one document collection."""

    policy: ResourcePolicy

    def __init__(self, db: Session):
        """Initialize the manager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    # --- Queries ---

    def _query(self, **filters: Any) -> Query:
        """Base query for ``list``; subclasses narrow it with filters."""
        query = self.db.query(self.policy.model)
        if self.policy.order_by:
            query = query.order_by(*self.policy.order_by)
        return query

    def _get_model(self, document_id: str):
        id_column = getattr(self.policy.model, self.policy.id_field)
        model = self.db.query(self.policy.model).filter(id_column == document_id).first()
        if model is None:
            raise NotFoundError(self.policy.name, document_id)
        return model

    def _visible(self, models: Iterable[Any], actor: User) -> List[Any]:
        return [model for model in models if self.policy.can_view(model, actor)]

    def list(self, actor: User, **filters: Any) -> List[Any]:
        """List the documents visible to the actor.

        Args:
            actor: The resolved request user.
            **filters: Resource-specific query filters.

        Returns:
            Models for which the visibility predicate holds.
        """
        return self._visible(self._query(**filters).all(), actor)

    def get(self, actor: User, document_id: str):
        """Get one document.

        Raises:
            NotFoundError: If the id does not resolve.
            ForbiddenError: If the visibility predicate rejects the actor.
        """
        model = self._get_model(document_id)
        if not self.policy.can_view(model, actor):
            raise ForbiddenError()
        return model

    def get_writable(self, actor: User, document_id: str):
        """Get a document the actor may modify (owner or admin)."""
        model = self.get(actor, document_id)
        if not self.policy.can_write(model, actor):
            raise ForbiddenError()
        return model

    # --- Mutations ---

    def _build(self, actor: User, data: Dict[str, Any]):
        """Build a new model instance from validated payload data."""
        return self.policy.model(**data)

    def create(self, actor: User, data: Dict[str, Any]):
        """Create a document owned by the actor.

        The owner field is always taken from the actor, whatever the payload
        says.

        Raises:
            ForbiddenError: If the actor's role may not create this resource.
        """
        if actor.role not in self.policy.creator_roles:
            raise ForbiddenError(
                f"Only {', '.join(sorted(self.policy.creator_roles))} users can create "
                f"{self.policy.name.lower()} records"
            )
        now = utc_now()
        data = dict(data)
        data[self.policy.id_field] = new_id()
        data["created_at"] = now
        data["updated_at"] = now
        if self.policy.owner_field:
            data[self.policy.owner_field] = actor.user_id

        model = self._build(actor, data)
        self.db.add(model)
        self._commit(f"{self.policy.name} already exists")
        self.db.refresh(model)
        logger.info(
            "Created %s %s (owner=%s)",
            self.policy.name, getattr(model, self.policy.id_field), actor.user_id,
        )
        return model

    def _check_owner_change(self, model: Any, patch: Dict[str, Any], actor: User) -> None:
        owner_field = self.policy.owner_field
        if not owner_field or owner_field not in patch:
            return
        new_owner = patch[owner_field]
        if new_owner is None or new_owner == getattr(model, owner_field):
            patch.pop(owner_field)
            return
        if not is_admin(actor):
            raise ForbiddenError("Only admins can reassign ownership")
        owner = self.require_user(new_owner)
        # The new owner must hold a role that could have created the document
        if owner.role not in self.policy.creator_roles:
            raise ValidationError(
                f"User {new_owner} cannot own a {self.policy.name.lower()} record"
            )

    def _apply_patch(self, model: Any, patch: Dict[str, Any], actor: User) -> None:
        """Shallow-merge patch fields onto the stored document."""
        columns = self.policy.model.__table__.columns
        for key, value in patch.items():
            if key in _IMMUTABLE_FIELDS or key == self.policy.id_field:
                continue
            # null never clears a required column
            if value is None and key in columns and not columns[key].nullable:
                continue
            if hasattr(model, key):
                setattr(model, key, value)

    def update(self, actor: User, document_id: str, patch: Dict[str, Any]):
        """Apply a partial update.

        Raises:
            NotFoundError: If the id does not resolve.
            ForbiddenError: If the actor can read but not write the document.
        """
        model = self.get_writable(actor, document_id)
        patch = dict(patch)
        self._check_owner_change(model, patch, actor)
        self._apply_patch(model, patch, actor)
        model.updated_at = utc_now()
        self._commit(f"{self.policy.name} conflicts with an existing record")
        self.db.refresh(model)
        logger.info("Updated %s %s by %s", self.policy.name, document_id, actor.user_id)
        return model

    def delete(self, actor: User, document_id: str) -> None:
        """Hard-delete a document.

        Raises:
            NotFoundError: If the id does not resolve.
            ForbiddenError: If the actor may not delete it.
            ConflictError: If other records still reference it.
        """
        model = self.get(actor, document_id)
        if not self.policy.allows_delete(model, actor):
            raise ForbiddenError()
        self.db.delete(model)
        self._commit(f"{self.policy.name} is still referenced by other records")
        logger.info("Deleted %s %s by %s", self.policy.name, document_id, actor.user_id)

    # --- Helpers shared by sub-resource actions ---

    def _commit(self, conflict_message: str) -> None:
        """Commit, mapping unique and foreign key violations to ConflictError."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Integrity violation on %s: %s", self.policy.name, e.orig)
            raise ConflictError(conflict_message) from e

    def require_role(self, actor: User, roles: Iterable[str], message: str) -> None:
        if actor.role not in roles:
            raise ForbiddenError(message)

    def require_user(self, user_id: str, role: Optional[str] = None) -> UserModel:
        """Load a referenced user, optionally checking their role."""
        user = self.db.query(UserModel).filter(UserModel.user_id == user_id).first()
        if user is None:
            raise NotFoundError("User", user_id)
        if role is not None and user.role != role:
            raise ValidationError(f"User {user_id} is not a {role}")
        return user
