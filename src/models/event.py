from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class EventModel(Base):
    __tablename__ = "events"

    event_id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    club_id = Column(String, ForeignKey("users.user_id"), index=True, nullable=False)
    description = Column(String, nullable=True)
    date = Column(String, nullable=True)
    time = Column(String, nullable=True)
    location = Column(String, nullable=True)
    # Only changed together with the registrations list, see EventManager.register
    registered_count = Column(Integer, nullable=False, default=0)
    max_participants = Column(Integer, nullable=True)
    register_by = Column(String, nullable=True)
    event_type = Column(String, nullable=True)
    image = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    club = relationship("UserModel", lazy="joined")
    registrations = relationship(
        "EventRegistrationModel",
        back_populates="event",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="EventRegistrationModel.id",
    )


class EventRegistrationModel(Base):
    __tablename__ = "event_registrations"
    __table_args__ = (
        UniqueConstraint("event_id", "student_id", name="uq_event_registrations_event_student"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        String, ForeignKey("events.event_id", ondelete="CASCADE"), index=True, nullable=False
    )
    student_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), index=True, nullable=False)
    registered_at = Column(String, nullable=False)

    event = relationship("EventModel", back_populates="registrations")
    student = relationship("UserModel", lazy="joined")
