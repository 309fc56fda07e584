from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from schemas.common import UserRef

Priority = Literal["Low", "Medium", "High"]


class Comment(BaseModel):
    comment_id: int
    user: Optional[UserRef] = None
    text: str
    created_at: str


class Announcement(BaseModel):
    announcement_id: str
    title: str
    club: Optional[UserRef] = None
    content: Optional[str] = None
    pinned: bool = False
    priority: Priority = "Medium"
    views: int = 0
    comments: List[Comment] = []
    created_at: str
    updated_at: str


class CreateAnnouncementRequest(BaseModel):
    title: str = Field(min_length=1)
    content: Optional[str] = None
    pinned: bool = False
    priority: Priority = "Medium"


class UpdateAnnouncementRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    pinned: Optional[bool] = None
    priority: Optional[Priority] = None
    club_id: Optional[str] = None


class CreateCommentRequest(BaseModel):
    text: str = Field(min_length=1)
