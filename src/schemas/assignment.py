from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.common import CourseRef, UserRef


class Submission(BaseModel):
    student: Optional[UserRef] = None
    submitted_at: str
    file_url: Optional[str] = None
    marks: Optional[float] = None
    feedback: Optional[str] = None


class Assignment(BaseModel):
    assignment_id: str
    title: str
    description: Optional[str] = None
    course: CourseRef
    due_date: Optional[str] = None
    total_marks: Optional[float] = None
    status: Optional[str] = None
    submission_count: int = 0
    # Course professor and admins see every submission, students only their own
    submissions: List[Submission] = []
    created_at: str
    updated_at: str


class CreateAssignmentRequest(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    course_id: str
    due_date: Optional[str] = None
    total_marks: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = None


class UpdateAssignmentRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[str] = None
    total_marks: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = None


class SubmitAssignmentRequest(BaseModel):
    file_url: Optional[str] = None


class GradeSubmissionRequest(BaseModel):
    marks: Optional[float] = Field(default=None, ge=0)
    feedback: Optional[str] = None
