from .base import Base
from .user import UserModel
from .course import CourseModel, CourseEnrollmentModel
from .study_material import StudyMaterialModel
from .assignment import AssignmentModel, SubmissionModel
from .event import EventModel, EventRegistrationModel
from .announcement import AnnouncementModel, AnnouncementCommentModel
from .grievance import GrievanceModel, GrievanceUpdateModel
from .lost_found_item import LostFoundItemModel
from .research_internship import ResearchInternshipModel, ResearchApplicationModel

__all__ = [
    "Base",
    "UserModel",
    "CourseModel",
    "CourseEnrollmentModel",
    "StudyMaterialModel",
    "AssignmentModel",
    "SubmissionModel",
    "EventModel",
    "EventRegistrationModel",
    "AnnouncementModel",
    "AnnouncementCommentModel",
    "GrievanceModel",
    "GrievanceUpdateModel",
    "LostFoundItemModel",
    "ResearchInternshipModel",
    "ResearchApplicationModel",
]
