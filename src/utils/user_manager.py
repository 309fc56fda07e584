"""User management utilities.

This module provides user storage and lookup, including the identity lookups
performed by the request identity layer and the bootstrap path used by the
CLI to create the first admin.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

import pytz
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from core.exceptions import ConflictError, ForbiddenError
from models.event import EventModel, EventRegistrationModel
from models.user import UserModel
from schemas.user import User
from utils.policies import ResourcePolicy, admin_only, is_admin, is_self_or_admin
from utils.resource_manager import ResourceManager, new_id, parse_timestamp, utc_now

logger = logging.getLogger(__name__)

# Fields only an admin may change on a user record
ADMIN_ONLY_FIELDS = ("role", "status", "email")


class UserAlreadyExistsError(ConflictError):
    """Exception raised when trying to create a user that already exists."""

    pass


class UserManager(ResourceManager):
    """Manages user data persistence and operations using SQLAlchemy."""

    policy = ResourcePolicy(
        name="User",
        model=UserModel,
        id_field="user_id",
        creator_roles=frozenset({"admin"}),
        owner_field=None,
        can_view=is_self_or_admin,
        can_write=is_self_or_admin,
        can_delete=admin_only,
        order_by=(UserModel.created_at,),
    )

    def create_user(
        self,
        name: str,
        email: str,
        role: str,
        status: str = "active",
        department: Optional[str] = None,
        club_name: Optional[str] = None,
        phone: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> UserModel:
        """Create a new user without an acting user (CLI bootstrap, seeding).

        Args:
            name: Display name.
            email: Unique email address.
            role: One of 'student', 'professor', 'club', 'admin'.
            status: Account status; only 'active' users can authenticate.
            department: Optional department.
            club_name: Optional club name for club organizers.
            phone: Optional phone number.
            user_id: Optional fixed id (defaults to a random hex id).

        Returns:
            Created UserModel.

        Raises:
            UserAlreadyExistsError: If the email is already registered.
        """
        now = utc_now()
        return self._insert(
            UserModel(
                user_id=user_id or new_id(),
                name=name,
                email=email,
                role=role,
                status=status,
                department=department,
                club_name=club_name,
                phone=phone,
                created_at=now,
                updated_at=now,
            )
        )

    def _insert(self, model: UserModel) -> UserModel:
        # Check if user already exists
        if self.get_user_by_email(model.email) is not None:
            raise UserAlreadyExistsError(f"User with email '{model.email}' already exists")

        # Two requests may pass the check at once; the unique index decides
        try:
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError(
                f"User with email '{model.email}' already exists"
            ) from e

        logger.info("Created user: %s (%s)", model.email, model.role)
        return model

    def create(self, actor: User, data: Dict[str, Any]) -> UserModel:
        if actor.role not in self.policy.creator_roles:
            raise ForbiddenError("Only admins can create users")
        now = utc_now()
        return self._insert(
            UserModel(user_id=new_id(), created_at=now, updated_at=now, **data)
        )

    def _apply_patch(self, model: Any, patch: Dict[str, Any], actor: User) -> None:
        if not is_admin(actor):
            for key in ADMIN_ONLY_FIELDS:
                if key in patch and patch[key] != getattr(model, key):
                    raise ForbiddenError(f"Only admins can change '{key}'")
        if "email" in patch and patch["email"] != model.email:
            if self.get_user_by_email(patch["email"]) is not None:
                raise UserAlreadyExistsError(
                    f"User with email '{patch['email']}' already exists"
                )
        super()._apply_patch(model, patch, actor)

    def delete(self, actor: User, document_id: str) -> None:
        """Delete a user along with their event registrations.

        The registration counters of the affected events drop in the same
        transaction. Enrollments, submissions, applications and comments go
        with the user through their cascading foreign keys.

        Raises:
            ConflictError: If the user still owns courses, events or other
                records.
        """
        model = self.get(actor, document_id)
        if not self.policy.allows_delete(model, actor):
            raise ForbiddenError()

        registered_events = select(EventRegistrationModel.event_id).where(
            EventRegistrationModel.student_id == document_id
        )
        self.db.execute(
            update(EventModel)
            .where(EventModel.event_id.in_(registered_events))
            .where(EventModel.registered_count > 0)
            .values(registered_count=EventModel.registered_count - 1, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        self.db.query(EventRegistrationModel).filter(
            EventRegistrationModel.student_id == document_id
        ).delete(synchronize_session=False)
        self.db.delete(model)
        self._commit("User still owns records and cannot be deleted")
        logger.info("Deleted user %s by %s", document_id, actor.user_id)

    def get_user_by_id(self, user_id: str) -> Optional[UserModel]:
        """Get a user by user ID, bypassing visibility checks.

        Args:
            user_id: User ID to look up.

        Returns:
            UserModel if found, None otherwise.
        """
        return self.db.query(UserModel).filter(UserModel.user_id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[UserModel]:
        return self.db.query(UserModel).filter(UserModel.email == email).first()

    def touch_last_active(
        self, model: UserModel, min_interval: timedelta = timedelta(0)
    ) -> None:
        """Record that the user just made an authenticated request.

        Args:
            model: The authenticated user.
            min_interval: Skip the write when the stored value is more recent
                than this.
        """
        now = datetime.now(pytz.utc)
        if model.last_active and now - parse_timestamp(model.last_active) < min_interval:
            return
        model.last_active = now.isoformat()
        self.db.commit()
