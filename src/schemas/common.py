"""Shared schema building blocks.

Reference types expand an id into the display-friendly subset of the
referenced document (id plus name) instead of embedding the full document.
"""

from typing import Literal, Optional

from pydantic import BaseModel

Role = Literal["student", "professor", "club", "admin"]
UserStatus = Literal["active", "inactive", "suspended"]


class UserRef(BaseModel):
    """Display subset of a referenced user."""
    user_id: str
    name: str
    email: Optional[str] = None


class CourseRef(BaseModel):
    """Display subset of a referenced course."""
    course_id: str
    code: str
    name: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str
