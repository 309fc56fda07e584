"""Conversions from ORM models to response schemas.

Referenced documents are expanded to their display subset (id and name).
Sub-lists holding other students' entries (submissions, registrations,
applications) are shown in full only to actors who may manage the parent
document; everyone else sees just their own entry.
"""

from typing import List, Optional

from models.announcement import AnnouncementModel
from models.assignment import AssignmentModel
from models.course import CourseModel
from models.event import EventModel
from models.grievance import GrievanceModel
from models.lost_found_item import LostFoundItemModel
from models.research_internship import ResearchApplicationModel, ResearchInternshipModel
from models.study_material import StudyMaterialModel
from models.user import UserModel
from schemas.announcement import Announcement, Comment
from schemas.assignment import Assignment, Submission
from schemas.common import CourseRef, UserRef
from schemas.course import Course
from schemas.event import Event, Registration
from schemas.grievance import Grievance, GrievanceUpdate
from schemas.lost_found import Contact, LostFoundItem, LostFoundRef
from schemas.research import Application, MyApplication, ResearchInternship
from schemas.study_material import StudyMaterial
from schemas.user import User
from utils.policies import is_admin, is_course_professor_or_admin


def model_to_user(model: UserModel) -> User:
    return User(
        user_id=model.user_id,
        name=model.name,
        email=model.email,
        role=model.role,
        department=model.department,
        club_name=model.club_name,
        phone=model.phone,
        status=model.status,
        last_active=model.last_active,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def user_ref(model: Optional[UserModel], with_email: bool = False) -> Optional[UserRef]:
    if model is None:
        return None
    return UserRef(
        user_id=model.user_id,
        name=model.name,
        email=model.email if with_email else None,
    )


def course_ref(model: CourseModel) -> CourseRef:
    return CourseRef(course_id=model.course_id, code=model.code, name=model.name)


def _own_entries(entries: List, actor: User, manages: bool) -> List:
    if manages:
        return list(entries)
    return [entry for entry in entries if entry.student_id == actor.user_id]


def user_to_schema(model: UserModel, actor: User) -> User:
    return model_to_user(model)


def course_to_schema(model: CourseModel, actor: User) -> Course:
    return Course(
        course_id=model.course_id,
        code=model.code,
        name=model.name,
        semester=model.semester,
        credits=model.credits,
        professor=user_ref(model.professor),
        students=[user_ref(e.student, with_email=True) for e in model.enrollments if e.student],
        attendance=model.attendance or 0.0,
        grade=model.grade,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def study_material_to_schema(model: StudyMaterialModel, actor: User) -> StudyMaterial:
    return StudyMaterial(
        material_id=model.material_id,
        title=model.title,
        description=model.description,
        course=course_ref(model.course),
        file_url=model.file_url,
        uploaded_by=user_ref(model.uploader),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def assignment_to_schema(model: AssignmentModel, actor: User) -> Assignment:
    manages = is_course_professor_or_admin(model.course, actor)
    submissions = [
        Submission(
            student=user_ref(s.student, with_email=True),
            submitted_at=s.submitted_at,
            file_url=s.file_url,
            marks=s.marks,
            feedback=s.feedback,
        )
        for s in _own_entries(model.submissions, actor, manages)
    ]
    return Assignment(
        assignment_id=model.assignment_id,
        title=model.title,
        description=model.description,
        course=course_ref(model.course),
        due_date=model.due_date,
        total_marks=model.total_marks,
        status=model.status,
        submission_count=len(model.submissions),
        submissions=submissions,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def event_to_schema(model: EventModel, actor: User) -> Event:
    manages = is_admin(actor) or model.club_id == actor.user_id
    return Event(
        event_id=model.event_id,
        title=model.title,
        club=user_ref(model.club),
        description=model.description,
        date=model.date,
        time=model.time,
        location=model.location,
        registered_count=model.registered_count,
        max_participants=model.max_participants,
        register_by=model.register_by,
        event_type=model.event_type,
        image=model.image,
        registered_students=[
            Registration(student=user_ref(r.student, with_email=True), registered_at=r.registered_at)
            for r in _own_entries(model.registrations, actor, manages)
        ],
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def comments_to_schema(model: AnnouncementModel) -> List[Comment]:
    return [
        Comment(
            comment_id=c.id,
            user=user_ref(c.user),
            text=c.text,
            created_at=c.created_at,
        )
        for c in model.comments
    ]


def announcement_to_schema(model: AnnouncementModel, actor: User) -> Announcement:
    return Announcement(
        announcement_id=model.announcement_id,
        title=model.title,
        club=user_ref(model.club),
        content=model.content,
        pinned=bool(model.pinned),
        priority=model.priority,
        views=model.views or 0,
        comments=comments_to_schema(model),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def grievance_to_schema(model: GrievanceModel, actor: User) -> Grievance:
    return Grievance(
        grievance_id=model.grievance_id,
        title=model.title,
        description=model.description,
        category=model.category,
        priority=model.priority,
        status=model.status,
        created_by=user_ref(model.creator, with_email=True),
        assigned_to=user_ref(model.assignee),
        updates=[
            GrievanceUpdate(
                comment=u.comment,
                updated_by=user_ref(u.author),
                status=u.status,
                created_at=u.created_at,
            )
            for u in model.updates
        ],
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def lost_found_to_schema(model: LostFoundItemModel, actor: User) -> LostFoundItem:
    matched = model.matched_item
    return LostFoundItem(
        item_id=model.item_id,
        title=model.title,
        description=model.description,
        item_type=model.item_type,
        location=model.location,
        category=model.category,
        contact=Contact(email=model.contact_email, phone=model.contact_phone),
        status=model.status,
        posted_by=user_ref(model.poster, with_email=True),
        image_url=model.image_url,
        date_of_incident=model.date_of_incident,
        matched_with=(
            LostFoundRef(
                item_id=matched.item_id,
                title=matched.title,
                item_type=matched.item_type,
                status=matched.status,
            )
            if matched is not None
            else None
        ),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def application_to_schema(model: ResearchApplicationModel) -> Application:
    return Application(
        application_id=model.application_id,
        student=user_ref(model.student, with_email=True),
        status=model.status,
        applied_at=model.applied_at,
    )


def research_to_schema(model: ResearchInternshipModel, actor: User) -> ResearchInternship:
    manages = is_admin(actor) or model.professor_id == actor.user_id
    return ResearchInternship(
        internship_id=model.internship_id,
        title=model.title,
        description=model.description,
        professor=user_ref(model.professor),
        duration=model.duration,
        stipend=model.stipend,
        required_skills=model.required_skills or [],
        deadline=model.deadline,
        applicant_count=len(model.applications),
        applicants=[
            application_to_schema(a)
            for a in _own_entries(model.applications, actor, manages)
        ],
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def my_application_to_schema(
    internship: ResearchInternshipModel, application: ResearchApplicationModel
) -> MyApplication:
    return MyApplication(
        internship_id=internship.internship_id,
        title=internship.title,
        description=internship.description,
        professor=user_ref(internship.professor, with_email=True),
        duration=internship.duration,
        stipend=internship.stipend,
        required_skills=internship.required_skills or [],
        deadline=internship.deadline,
        application=application_to_schema(application),
    )
