from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from schemas.common import UserRef

ApplicationStatus = Literal["pending", "accepted", "rejected"]


class Application(BaseModel):
    application_id: str
    student: Optional[UserRef] = None
    status: ApplicationStatus = "pending"
    applied_at: str


class ResearchInternship(BaseModel):
    internship_id: str
    title: str
    description: Optional[str] = None
    professor: Optional[UserRef] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None
    required_skills: List[str] = []
    deadline: Optional[str] = None
    applicant_count: int = 0
    # Owner and admins see every applicant, students only their own entry
    applicants: List[Application] = []
    created_at: str
    updated_at: str


class MyApplication(BaseModel):
    """A student's view of one internship they applied to."""
    internship_id: str
    title: str
    description: Optional[str] = None
    professor: Optional[UserRef] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None
    required_skills: List[str] = []
    deadline: Optional[str] = None
    application: Application


class CreateResearchInternshipRequest(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None
    required_skills: List[str] = []
    deadline: Optional[str] = None


class UpdateResearchInternshipRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None
    required_skills: Optional[List[str]] = None
    deadline: Optional[str] = None
    professor_id: Optional[str] = None


class ApplicantDecisionRequest(BaseModel):
    status: Literal["accepted", "rejected"]
