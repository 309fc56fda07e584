from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from schemas.common import UserRef


def _check_iso(value: Optional[str]) -> Optional[str]:
    if value is not None:
        try:
            datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError("must be an ISO-8601 date or datetime") from e
    return value


class Registration(BaseModel):
    student: Optional[UserRef] = None
    registered_at: str


class Event(BaseModel):
    event_id: str
    title: str
    club: Optional[UserRef] = None
    description: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    registered_count: int = 0
    max_participants: Optional[int] = None
    register_by: Optional[str] = None
    event_type: Optional[str] = None
    image: Optional[str] = None
    # Organizer and admins see every registration, students only their own
    registered_students: List[Registration] = []
    created_at: str
    updated_at: str


class CreateEventRequest(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    max_participants: Optional[int] = Field(default=None, ge=1)
    register_by: Optional[str] = None
    event_type: Optional[str] = None
    image: Optional[str] = None

    @field_validator("date", "register_by")
    @classmethod
    def check_dates(cls, value: Optional[str]) -> Optional[str]:
        return _check_iso(value)


class UpdateEventRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    max_participants: Optional[int] = Field(default=None, ge=1)
    register_by: Optional[str] = None
    event_type: Optional[str] = None
    image: Optional[str] = None
    club_id: Optional[str] = None

    @field_validator("date", "register_by")
    @classmethod
    def check_dates(cls, value: Optional[str]) -> Optional[str]:
        return _check_iso(value)


class RegistrationStatus(BaseModel):
    is_registered: bool
