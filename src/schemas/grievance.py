from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from schemas.common import UserRef

Category = Literal["academic", "conduct", "facilities", "hostel", "other"]
Priority = Literal["low", "medium", "high", "critical"]
# Free-form enum: any status may follow any other
Status = Literal["open", "in-progress", "resolved", "closed"]


class GrievanceUpdate(BaseModel):
    comment: str
    updated_by: Optional[UserRef] = None
    status: str
    created_at: str


class Grievance(BaseModel):
    grievance_id: str
    title: str
    description: str
    category: Category
    priority: Priority = "medium"
    status: Status = "open"
    created_by: Optional[UserRef] = None
    assigned_to: Optional[UserRef] = None
    updates: List[GrievanceUpdate] = []
    created_at: str
    updated_at: str


class CreateGrievanceRequest(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: Category
    priority: Priority = "medium"


class UpdateGrievanceRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    assigned_to: Optional[str] = None
    comment: Optional[str] = Field(default=None, min_length=1)


class GrievanceCommentRequest(BaseModel):
    comment: str = Field(min_length=1)
