"""Event and registration management utilities."""

import logging
from datetime import datetime

import pytz
from sqlalchemy import or_, update

from core.exceptions import CapacityError, ConflictError, InvalidStateError
from models.event import EventModel, EventRegistrationModel
from schemas.user import User
from utils.policies import ResourcePolicy, owner_if_role, owner_or_admin
from utils.resource_manager import ResourceManager, parse_timestamp, utc_now

logger = logging.getLogger(__name__)


class EventManager(ResourceManager):
    """Manages club events and student registrations.

    ``registered_count`` is only ever changed by a conditional UPDATE issued in
    the same transaction as the registration insert/delete, so it always
    equals the number of registration rows.
    """

    policy = ResourcePolicy(
        name="Event",
        model=EventModel,
        id_field="event_id",
        creator_roles=frozenset({"club", "admin"}),
        owner_field="club_id",
        can_view=owner_if_role("club", "club_id"),
        can_write=owner_or_admin("club_id"),
        order_by=(EventModel.date, EventModel.created_at),
    )

    def is_registered(self, actor: User, event_id: str) -> bool:
        self.require_role(actor, ("student",), "Only students can register for events")
        event = self.get(actor, event_id)
        return any(r.student_id == actor.user_id for r in event.registrations)

    def register(self, actor: User, event_id: str) -> EventModel:
        """Register the actor for an event.

        Raises:
            ConflictError: If the actor is already registered.
            CapacityError: If the event is full.
            InvalidStateError: If the registration deadline has passed.
        """
        self.require_role(actor, ("student",), "Only students can register for events")
        event = self.get(actor, event_id)
        if event.register_by and parse_timestamp(event.register_by) < datetime.now(pytz.utc):
            raise InvalidStateError("Registration for this event has closed")
        if any(r.student_id == actor.user_id for r in event.registrations):
            raise ConflictError("You are already registered for this event")

        now = utc_now()
        result = self.db.execute(
            update(EventModel)
            .where(EventModel.event_id == event_id)
            .where(
                or_(
                    EventModel.max_participants.is_(None),
                    EventModel.registered_count < EventModel.max_participants,
                )
            )
            .values(registered_count=EventModel.registered_count + 1, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise CapacityError("Event is full")

        self.db.add(
            EventRegistrationModel(event_id=event_id, student_id=actor.user_id, registered_at=now)
        )
        # A concurrent duplicate fails the unique constraint and rolls back the counter too
        self._commit("You are already registered for this event")
        self.db.refresh(event)
        logger.info(
            "Student %s registered for event %s (%s/%s)",
            actor.user_id, event_id, event.registered_count, event.max_participants,
        )
        return event

    def unregister(self, actor: User, event_id: str) -> EventModel:
        """Remove the actor's registration.

        Raises:
            InvalidStateError: If the actor is not registered.
        """
        self.require_role(actor, ("student",), "Only students can register for events")
        event = self.get(actor, event_id)
        registration = next(
            (r for r in event.registrations if r.student_id == actor.user_id), None
        )
        if registration is None:
            raise InvalidStateError("You are not registered for this event")

        self.db.delete(registration)
        self.db.execute(
            update(EventModel)
            .where(EventModel.event_id == event_id)
            .where(EventModel.registered_count > 0)
            .values(registered_count=EventModel.registered_count - 1, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        self.db.refresh(event)
        logger.info("Student %s unregistered from event %s", actor.user_id, event_id)
        return event
