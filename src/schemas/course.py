from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.common import UserRef


class Course(BaseModel):
    course_id: str
    code: str
    name: str
    semester: Optional[str] = None
    credits: Optional[int] = None
    professor: Optional[UserRef] = None
    students: List[UserRef] = []
    attendance: float = 0.0
    grade: Optional[str] = None
    created_at: str
    updated_at: str


class CreateCourseRequest(BaseModel):
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    semester: Optional[str] = None
    credits: Optional[int] = Field(default=None, ge=0)
    attendance: float = Field(default=0.0, ge=0, le=100)
    grade: Optional[str] = None
    student_ids: List[str] = []


class UpdateCourseRequest(BaseModel):
    code: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    semester: Optional[str] = None
    credits: Optional[int] = Field(default=None, ge=0)
    attendance: Optional[float] = Field(default=None, ge=0, le=100)
    grade: Optional[str] = None
    professor_id: Optional[str] = None
    student_ids: Optional[List[str]] = None


class EnrollStudentRequest(BaseModel):
    student_id: str
