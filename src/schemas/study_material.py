from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import CourseRef, UserRef


class StudyMaterial(BaseModel):
    material_id: str
    title: str
    description: Optional[str] = None
    course: CourseRef
    file_url: Optional[str] = None
    uploaded_by: Optional[UserRef] = None
    created_at: str
    updated_at: str


class CreateStudyMaterialRequest(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    course_id: str
    file_url: Optional[str] = None


class UpdateStudyMaterialRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    file_url: Optional[str] = None
